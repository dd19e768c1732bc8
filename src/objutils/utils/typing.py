import numpy as np
import numbers
import datetime
import functools
from types import ModuleType, FunctionType, BuiltinFunctionType, MethodType
from collections import ChainMap
from collections.abc import Mapping


def sanitize_type(obj, dtype, name):
    if isinstance(dtype, (tuple, list)):
        check = any(is_dtype(obj, dt) for dt in dtype)
        if not check:
            raise TypeError(f"'{name}' expected type one of {dtype}. Got: '{type(obj)}'")
    else:
        if not is_dtype(obj, dtype):
            raise TypeError(f"'{name}' expected type: '{dtype}'. Got: '{type(obj)}'")
    return True


def sanitize_value(obj, values, name):
    if obj not in values:
        raise ValueError(f"'{name}' expected one of {tuple(values)}. Got: '{obj}'")
    return True


def is_dtype(obj, dtype):
    if isinstance(dtype, type):
        return isinstance(obj, dtype)
    if dtype not in func_dict.keys():
        raise NotImplementedError(f"string dtype: {dtype} not Implemented. Supported: {tuple(func_dict.keys())}")
    return func_dict[dtype](obj)


def is_none(obj):
    """
    check whether object is None
    """
    return obj is None


def is_numeric(obj):
    """
    check whether object is numeric
    """
    return isinstance(obj, numbers.Number) and not is_boolean(obj)


def is_boolean(obj):
    """
    check whether object is boolean
    """
    return isinstance(obj, (bool, np.bool_))


def is_string(obj):
    """
    check whether object is text or raw bytes
    """
    return isinstance(obj, (str, bytes, bytearray))


def is_date(obj):
    """
    check whether object is a date, time or timestamp
    """
    return isinstance(obj, (datetime.date, datetime.time, np.datetime64))


def is_function(obj):
    """
    check whether object is a function. Classes count as functions: they are
    the constructors of their instances.
    """
    if isinstance(obj, type):
        return True
    return isinstance(obj, (FunctionType, BuiltinFunctionType, MethodType, functools.partial))


def is_module(obj):
    """
    check whether object is a module
    """
    return isinstance(obj, ModuleType)


def is_array_like(obj):
    """
    check whether object is array-like.
    """
    if isinstance(obj, (str, bytes, Mapping)):
        return False
    if not hasattr(obj, "__len__"):
        return False
    if not hasattr(obj, "__iter__"):
        return False
    if not hasattr(obj, "__getitem__"):
        return False
    return True


def is_falsy(obj):
    """
    check whether object is None or a falsy scalar (0, 0.0, "", b"", False).

    Empty containers are not falsy here: an empty record is still a record.
    """
    if obj is None:
        return True
    if is_boolean(obj) or is_numeric(obj) or is_string(obj):
        return not obj
    return False


def type_tag(obj):
    """
    Generic tag for an object's kind. One of "null", "boolean", "number",
    "string", "date", "function", "module", "array" or "object", checked in
    that order.
    """
    for tag, func in tag_order:
        if func(obj):
            return tag
    return "object"


def get_property(obj, name, default=None):
    """
    Read a named property: a key for mappings, an attribute otherwise.
    Missing properties give `default`.
    """
    if isinstance(obj, Mapping):
        try:
            return obj.get(name, default)
        except TypeError:
            return default
    try:
        return getattr(obj, name, default)
    except TypeError:
        # non-str names are not attributes
        return default


def own_keys(obj):
    if isinstance(obj, ChainMap):
        return list(obj.maps[0])
    if isinstance(obj, Mapping):
        return list(obj)
    try:
        return list(vars(obj))
    except TypeError:
        return []


def inherited_keys(obj):
    """
    Keys reachable from `obj` that it does not own, in lookup order.
    """
    if isinstance(obj, ChainMap):
        return [key for mapping in obj.maps[1:] for key in mapping]
    if isinstance(obj, Mapping):
        return []
    keys = []
    for cls in type(obj).__mro__:
        if cls is object:
            continue
        for key, val in vars(cls).items():
            if key.startswith("_") or callable(val) or hasattr(val, "__get__"):
                continue
            keys.append(key)
    return keys


def enumerable_keys(obj):
    """
    Yield every enumerable key of `obj`: own keys first, then inherited keys
    not already seen.
    """
    seen = set()
    for key in own_keys(obj) + inherited_keys(obj):
        if key in seen:
            continue
        seen.add(key)
        yield key


def has_own_property(obj, key):
    if isinstance(obj, ChainMap):
        return key in obj.maps[0]
    if isinstance(obj, Mapping):
        return key in obj
    try:
        return key in vars(obj)
    except TypeError:
        return False


func_dict = {
    "none": is_none,
    "string": is_string,
}

tag_order = (
    ("null", is_none),
    ("boolean", is_boolean),
    ("number", is_numeric),
    ("string", is_string),
    ("date", is_date),
    ("function", is_function),
    ("module", is_module),
    ("array", is_array_like),
)
