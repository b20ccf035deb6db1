# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any

from .axisbound import AxisBound, FiniteBound, UNBOUNDED, format_bounds
from .coord import Coord, as_coord, to_vec
from .grid import Grid, capabilities_of, ACCESS
from .slot import Slot
from .view import View

class Wrapping[T](View[T]):
    """
    Grid which wraps around the edges of the inner grid. The inner grid must be bounded
    on both ends of every axis, this grid is unbounded.
    """

    _lower: Coord
    _lens: Coord

    def __init__(self, inner: Grid) -> None:
        self._check_bounds(inner)
        self.inner = inner
        self._lower = tuple(b.lower_inclusive() for b in inner.bounds)
        self._lens = tuple(b.upper_exclusive() - b.lower_inclusive() for b in inner.bounds)

    @classmethod
    def _capabilities(cls, inner: Grid, *args: Any, **kwargs: Any) -> set[type]:
        cls._check_bounds(inner)
        return capabilities_of(inner, ACCESS)

    @staticmethod
    def _check_bounds(inner: Grid) -> None:
        if not all(isinstance(b, FiniteBound) for b in inner.bounds):
            raise TypeError(f"Only grids bounded on both ends can wrap, got {format_bounds(inner.bounds)}")
        if any(b.length() == 0 for b in inner.bounds):
            raise ValueError(f"Cannot wrap around an empty axis, got {format_bounds(inner.bounds)}")

    @property
    def bounds(self) -> tuple[AxisBound, ...]:
        return (UNBOUNDED,) * self.inner.ndims

    #-------------------------------------------------------------------------
    #methods

    def wrap_coord(self, coord: Any) -> Coord:
        """Fold a coordinate into the bounds of the inner grid."""
        coord = as_coord(coord, self.ndims)
        return to_vec(tuple((((v - lo) % n) + n) % n + lo
                            for v, lo, n in zip(coord, self._lower, self._lens)))

    def get(self, coord: Any) -> T:
        return self.inner.get(self.wrap_coord(coord))

    def set(self, coord: Any, item: T) -> None:
        self.inner.set(self.wrap_coord(coord), item)

    def index(self, coord: Any) -> T:
        return self.inner.index(self.wrap_coord(coord))

    def mutable_index(self, coord: Any) -> Slot[T]:
        return self.inner.mutable_index(self.wrap_coord(coord))
