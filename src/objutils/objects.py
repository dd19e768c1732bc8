import numpy as np
from collections import ChainMap
from collections.abc import Mapping

from objutils.commons.types import DEFAULTS, CLONE_MODES
from objutils.utils import typing


def is_plain_object(value) -> bool:
    """
    Check whether `value` is a plain record: a dict, SimpleNamespace or ChainMap
    (see DEFAULTS.record_types) carrying no host markers and no inherited keys.

    This is a heuristic, not a type check. Only the *last* enumerated key is
    tested for ownership. Own keys enumerate before inherited ones, so any
    inherited key is caught, but the result still depends on that ordering.
    Never raises: values that fail to classify (a dead weakref proxy, an
    attribute lookup raising something other than AttributeError) are not
    plain.
    """
    _, host_markers, record_types = DEFAULTS
    try:
        return _classify(value, host_markers, record_types)
    except Exception:
        return False


def _classify(value, host_markers, record_types):
    if typing.is_falsy(value) or typing.type_tag(value) != "object":
        return False
    if any(not typing.is_falsy(typing.get_property(value, marker)) for marker in host_markers):
        return False

    if type(value) not in record_types:
        return False

    key = None
    found = False
    for key in typing.enumerable_keys(value):
        found = True

    return not found or typing.has_own_property(value, key)


def clone(value, mode: str = None):
    """
    Shallow clone of `value`.

    Array-likes give a new sequence holding the same elements (numpy arrays
    are copied, anything else becomes a list). Records and other objects give
    a new instance of their own class built with no arguments. With mode
    "shape" (the default) that instance is returned as is, so the source's
    properties are NOT carried over; with mode "copy" the source's own
    properties are copied onto it. Scalars, strings, dates, functions and
    modules give None.

    Args:
        value: object to clone. Never mutated.
        mode (str): "shape" or "copy". Defaults to DEFAULTS.clone_mode.

    Raises:
        TypeError: if `value` is None, or its class needs constructor arguments.
        ValueError: if `mode` is unknown.
    """
    default_mode, _, _ = DEFAULTS
    if mode is None:
        mode = default_mode
    typing.sanitize_type(mode, str, "mode")
    typing.sanitize_value(mode, CLONE_MODES, "mode")

    if value is None:
        raise TypeError("'value' is None and has no constructor to clone from")

    tag = typing.type_tag(value)
    if tag == "array":
        if isinstance(value, np.ndarray):
            return value.copy()
        return list(value)
    if tag != "object":
        return None

    cls = type(value)
    new = cls()
    if mode == "copy":
        _copy_own_properties(value, new)
    return new


def _copy_own_properties(source, target):
    if isinstance(source, ChainMap):
        target.update(source.maps[0])
    elif isinstance(source, Mapping):
        target.update(source)
    else:
        for key in typing.own_keys(source):
            setattr(target, key, getattr(source, key))
