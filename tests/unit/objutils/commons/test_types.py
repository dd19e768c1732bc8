import pytest
import warnings
from types import SimpleNamespace
from collections import ChainMap, OrderedDict

from objutils.commons.types import defaults, DEFAULTS, HOST_MARKERS, RECORD_TYPES


def test_defaults_init():
    d = defaults()
    assert d.clone_mode == "shape"
    assert d.host_markers == HOST_MARKERS
    assert d.record_types == (dict, SimpleNamespace, ChainMap)
    assert d.settable


@pytest.mark.parametrize("mode", ["shape", "copy"])
def test_defaults_update_good(mode):
    d = defaults()
    d.update(clone_mode=mode, host_markers=["a"], record_types=[dict])
    assert d.clone_mode == mode
    assert d.host_markers == ("a",)
    assert d.record_types == (dict,)


def test_defaults_update_partial():
    d = defaults()
    d.update(record_types=(OrderedDict,))
    assert d.clone_mode == "shape"
    assert d.host_markers == HOST_MARKERS
    assert d.record_types == (OrderedDict,)


@pytest.mark.parametrize(
    "kwargs,error",
    [
        ({"clone_mode": "deep"}, ValueError),
        ({"clone_mode": 1}, TypeError),
        ({"host_markers": "nodeType"}, TypeError),
        ({"host_markers": (1,)}, TypeError),
        ({"record_types": dict}, TypeError),
        ({"record_types": ({},)}, TypeError),
    ],
)
def test_defaults_update_bad(kwargs, error):
    d = defaults()
    with pytest.raises(error):
        d.update(**kwargs)
    assert d.clone_mode == "shape"
    assert d.record_types == RECORD_TYPES


def test_defaults_update_after_read_warns():
    d = defaults()
    clone_mode, host_markers, record_types = d
    assert not d.settable
    with pytest.warns(UserWarning, match="earlier results used the previous settings"):
        d.update(clone_mode="copy")
    assert d.clone_mode == "copy"


def test_defaults_update_before_read_silent():
    d = defaults()
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        d.update(clone_mode="copy")


def test_defaults_reset():
    d = defaults()
    d.update(clone_mode="copy", host_markers=())
    tuple(d)
    d.reset()
    assert d.settable
    assert d.clone_mode == "shape"
    assert d.host_markers == HOST_MARKERS


def test_defaults_repr():
    assert repr(DEFAULTS) == (
        "Object helper defaults: clone_mode='shape', "
        "host_markers=('nodeType', 'setInterval', '__builtins__'), "
        "record_types=('dict', 'SimpleNamespace', 'ChainMap')"
    )
