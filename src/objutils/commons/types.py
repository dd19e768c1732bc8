import warnings
from types import SimpleNamespace
from collections import ChainMap

CLONE_MODES = ("shape", "copy")
HOST_MARKERS = ("nodeType", "setInterval", "__builtins__")
RECORD_TYPES = (dict, SimpleNamespace, ChainMap)


class defaults:
    def __init__(self, clone_mode="shape", host_markers=HOST_MARKERS, record_types=RECORD_TYPES):
        self._set(clone_mode, host_markers, record_types)
        self.settable = True

    def _set(self, clone_mode, host_markers, record_types):
        if not isinstance(clone_mode, str):
            raise TypeError(f"'clone_mode' must be a str. Got: '{type(clone_mode)}'")
        if clone_mode not in CLONE_MODES:
            raise ValueError(f"'clone_mode' must be one of {CLONE_MODES}. Got: '{clone_mode}'")
        if not isinstance(host_markers, (tuple, list)) or not all(isinstance(m, str) for m in host_markers):
            raise TypeError("'host_markers' must be a tuple of str")
        if not isinstance(record_types, (tuple, list)) or not all(isinstance(t, type) for t in record_types):
            raise TypeError("'record_types' must be a tuple of types")
        self.clone_mode = clone_mode
        self.host_markers = tuple(host_markers)
        self.record_types = tuple(record_types)

    def update(self, clone_mode=None, host_markers=None, record_types=None):
        if not self.settable:
            warnings.warn("Defaults were already read by objutils.objects. "
                    "The update applies from the next call on; earlier results used the previous settings.", UserWarning)

        self._set(
            self.clone_mode if clone_mode is None else clone_mode,
            self.host_markers if host_markers is None else host_markers,
            self.record_types if record_types is None else record_types,
        )

    def reset(self):
        self._set("shape", HOST_MARKERS, RECORD_TYPES)
        self.settable = True

    def __iter__(self):
        self.settable = False
        return iter((self.clone_mode, self.host_markers, self.record_types))

    def __repr__(self):
        return (f"Object helper defaults: clone_mode={self.clone_mode!r}, "
                f"host_markers={self.host_markers}, record_types={tuple(t.__name__ for t in self.record_types)}")

DEFAULTS = defaults()
