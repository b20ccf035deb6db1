# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Iterable
import logging

from .grid import Grid, CAPABILITIES, ValueRead, ValueWrite, RefRead, RefWrite, capabilities_of

logger = logging.getLogger(__name__)

#: Accessors a view class may implement, per capability.
_ACCESSORS: dict[type, str] = {
    ValueRead: "get",
    ValueWrite: "set",
    RefRead: "index",
    RefWrite: "mutable_index",
}

class _Unsupported:
    """Hides an accessor of a view whose inner grid lacks the capability."""

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        owner = type(obj) if obj is not None else objtype
        name = owner.__name__ if owner is not None else "view"
        raise AttributeError(f"'{name}' grid does not support '{self._name}'")

_specialized: dict[tuple[type, frozenset[type]], type] = {}

def specialize(cls: type, capabilities: Iterable[type]) -> type:
    """
    Subclass of the view class cls which derives from exactly the given capabilities.
    Accessors the view class implements for other capabilities are hidden.
    """
    caps = frozenset(capabilities)
    key = (cls, caps)
    if key in _specialized:
        return _specialized[key]

    leaves = [c for c in CAPABILITIES
              if c in caps and not any(o is not c and issubclass(o, c) for o in caps)]
    namespace: dict[str, Any] = {
        "__qualname__": cls.__qualname__,
        "__module__": cls.__module__,
        "_is_specialized": True,
    }
    for cap, name in _ACCESSORS.items():
        if cap not in caps and hasattr(cls, name):
            namespace[name] = _Unsupported()
    sub = type(cls.__name__, (cls, *leaves), namespace)
    _specialized[key] = sub
    logger.debug("specialized %s for %s", cls.__name__, ", ".join(c.__name__ for c in leaves) or "bounds only")
    return sub

class View[T](Grid[T]):
    """
    Base of all grid views. A view holds its inner grid and re-exposes it with transformed
    coordinates, elements or access policy. On construction the view class is specialized
    so that it only claims the capabilities it can provide on top of the inner grid.
    """

    #: The wrapped grid.
    inner: Grid

    _is_specialized = False

    def __new__(cls, *args: Any, **kwargs: Any) -> "View[T]":
        # copy and deepcopy recreate instances without constructor arguments
        if cls._is_specialized or not (args or kwargs):
            return object.__new__(cls)
        return object.__new__(specialize(cls, cls._capabilities(*args, **kwargs)))

    @classmethod
    def _capabilities(cls, inner: Grid, *args: Any, **kwargs: Any) -> set[type]:
        """Capabilities of the view over inner. Mirrors inner unless overridden."""
        return capabilities_of(inner)
