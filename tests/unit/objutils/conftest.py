import pytest
from types import SimpleNamespace

from objutils.commons.types import DEFAULTS

# fixtures

@pytest.fixture(autouse=True)
def fresh_defaults():
    DEFAULTS.reset()
    yield DEFAULTS
    DEFAULTS.reset()


@pytest.fixture
def namespace():
    yield SimpleNamespace(a=1, b=[2, 3])
