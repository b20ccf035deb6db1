# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""
Slots stand for a single writable storage location. They are what the mutable accessors
of a grid hand out, since Python has no references to list or array cells.
"""

from typing import Any, Hashable, Protocol

class Slot[T](Protocol):

    @property
    def value(self) -> T: ...
    @value.setter
    def value(self, item: T) -> None: ...

class ItemSlot[T]:
    """Slot addressing container[key] of any container supporting item assignment."""

    __slots__ = ("_container", "_key")

    def __init__(self, container: Any, key: Hashable) -> None:
        self._container = container
        self._key = key

    @property
    def value(self) -> T:
        return self._container[self._key]
    @value.setter
    def value(self, item: T) -> None:
        self._container[self._key] = item

    def __repr__(self) -> str:
        return f"ItemSlot({self._key!r}, value={self.value!r})"

class Cell[T]:
    """Standalone slot owning its value."""

    __slots__ = ("value",)

    value: T

    def __init__(self, value: T) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Cell) and self.value == other.value

    def __repr__(self) -> str:
        return f"Cell({self.value!r})"
