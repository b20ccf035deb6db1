# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Hashable, Self
from enum import Enum
from copy import copy as shallow_copy, deepcopy
import threading

class CopyMode(Enum):
    DEEP = 0
    SHALLOW = 1
    NONE = 2

class AccessOptions:
    """
    Context manager for the access options of the current thread. The copy mode decides how
    by-value reads of grids that store their elements (get on top of index) copy the stored
    object: DEEP uses deepcopy, SHALLOW uses copy and NONE returns the stored object itself.
    """

    #: Copy mode for by-value reads derived from by-reference reads.
    copy: CopyMode

    key: Hashable

    def __init__(self, *, copy: CopyMode = CopyMode.DEEP) -> None:
        self.copy = copy
        self.key = threading.get_ident()

    def clone[T](self, item: T) -> T:
        if self.copy is CopyMode.DEEP:
            return deepcopy(item)
        elif self.copy is CopyMode.SHALLOW:
            return shallow_copy(item)
        return item

    def __enter__(self) -> Self:
        global _opts
        self.key = threading.get_ident()
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]

    def __repr__(self) -> str:
        return f"AccessOptions(copy={self.copy})"

_DEFAULT = AccessOptions()
_opts: dict[Any, AccessOptions] = {}

def get_options() -> AccessOptions:
    """Access options of the current thread, the defaults if none were set."""
    return _opts.get(threading.get_ident(), _DEFAULT)

def set_options(opts: AccessOptions) -> None:
    global _opts
    opts.key = threading.get_ident()
    _opts[opts.key] = opts
