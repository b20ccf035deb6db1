# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any

from .axisbound import AxisBound
from .coord import Coord, as_coord, to_vec
from .grid import Grid, capabilities_of, ACCESS
from .slot import Slot
from .view import View

class NewOrigin[T](View[T]):
    """The zero coordinate of the inner grid is found at origin in this grid."""

    #: Position of the inner grid's zero coordinate.
    origin: Coord

    _bounds: tuple[AxisBound, ...]

    def __init__(self, inner: Grid, origin: Any) -> None:
        origin = as_coord(origin, inner.ndims)
        self.inner = inner
        self.origin = to_vec(origin)
        self._bounds = tuple(b.plus(o) for b, o in zip(inner.bounds, origin))

    @classmethod
    def _capabilities(cls, inner: Grid, *args: Any, **kwargs: Any) -> set[type]:
        # translated zero based bounds are general intervals
        return capabilities_of(inner, ACCESS)

    @property
    def bounds(self) -> tuple[AxisBound, ...]:
        return self._bounds

    #-------------------------------------------------------------------------
    #methods

    def adjust_coord(self, coord: Any) -> Coord:
        """Translate a coordinate of this grid into the inner grid."""
        coord = as_coord(coord, self.ndims)
        return to_vec(tuple(v - o for v, o in zip(coord, self.origin)))

    def get(self, coord: Any) -> T:
        return self.inner.get(self.adjust_coord(coord))

    def set(self, coord: Any, item: T) -> None:
        self.inner.set(self.adjust_coord(coord), item)

    def index(self, coord: Any) -> T:
        return self.inner.index(self.adjust_coord(coord))

    def mutable_index(self, coord: Any) -> Slot[T]:
        return self.inner.mutable_index(self.adjust_coord(coord))
