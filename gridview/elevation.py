# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""
Handles on a grid that is owned elsewhere. Views take over the grid they wrap, a handle lets
the same grid take part in several view chains. The handles forward every capability of the
grid they point to, SharedGrid only the reading ones.
"""

from typing import Any

from .axisbound import AxisBound
from .grid import Grid, FixedSize, capabilities_of, CAPABILITIES, READ
from .slot import Slot
from .view import View

class SharedGrid[T](View[T]):
    """Read-only handle on a grid."""

    def __init__(self, inner: Grid[T]) -> None:
        self.inner = inner

    @classmethod
    def _capabilities(cls, inner: Grid, *args: Any, **kwargs: Any) -> set[type]:
        return capabilities_of(inner, (*READ, FixedSize))

    @property
    def bounds(self) -> tuple[AxisBound, ...]:
        return self.inner.bounds

    def get(self, coord: Any) -> T:
        return self.inner.get(coord)

    def index(self, coord: Any) -> T:
        return self.inner.index(coord)

class ExclusiveGrid[T](SharedGrid[T]):
    """Read-write handle on a grid."""

    @classmethod
    def _capabilities(cls, inner: Grid, *args: Any, **kwargs: Any) -> set[type]:
        return capabilities_of(inner, CAPABILITIES)

    def set(self, coord: Any, item: T) -> None:
        self.inner.set(coord, item)

    def mutable_index(self, coord: Any) -> Slot[T]:
        return self.inner.mutable_index(coord)
