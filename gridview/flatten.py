# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any

from .axisbound import AxisBound
from .coord import Coord, as_coord, to_vec
from .grid import Grid, ValueRead, ValueWrite, RefRead, RefWrite, fixed_size
from .slot import Slot
from .view import View

class Flatten[T](View[T]):
    """
    Flattened grid of grids. Every element of the inner grid is itself a grid covering
    stride cells per axis, a coordinate of the flattened grid is split into the coordinate
    of the element grid (floor division by the stride) and the coordinate within it
    (remainder). Element grids shorter than the stride cannot be detected ahead of time,
    accessing the missing cells raises from the element grid.
    """

    #: Number of cells per element grid along each axis.
    stride: Coord

    _bounds: tuple[AxisBound, ...]

    def __init__(self, inner: Grid, stride: Any) -> None:
        stride = self._check_stride(inner, stride)
        self.inner = inner
        self.stride = to_vec(stride)
        self._bounds = tuple(b.times(s) for b, s in zip(inner.bounds, stride))

    @classmethod
    def _capabilities(cls, inner: Grid, stride: Any = None, *args: Any, **kwargs: Any) -> set[type]:
        caps = fixed_size(inner.bounds)
        if isinstance(inner, RefRead):
            caps |= {ValueRead, RefRead}
        if isinstance(inner, RefWrite):
            caps |= {ValueWrite, RefWrite}
        return caps

    @staticmethod
    def _check_stride(inner: Grid, stride: Any) -> Coord:
        stride = as_coord(stride, inner.ndims)
        if any(s < 1 for s in stride):
            raise ValueError(f"Stride must be positive on every axis, but got {tuple(stride)}")
        return stride

    @property
    def bounds(self) -> tuple[AxisBound, ...]:
        return self._bounds

    #-------------------------------------------------------------------------
    #methods

    def outer_inner_coord(self, coord: Any) -> tuple[Coord, Coord]:
        """
        Split a coordinate into the element grid coordinate and the coordinate within it.
        Raises OutOfBoundsError outside the bounds of this grid.
        """
        coord = self._checked(coord)
        rem = tuple(((v % s) + s) % s for v, s in zip(coord, self.stride))
        div = tuple((v - r) // s for v, r, s in zip(coord, rem, self.stride))
        return to_vec(div), to_vec(rem)

    def get(self, coord: Any) -> T:
        outer, inner = self.outer_inner_coord(coord)
        return self.inner.index(outer).get(inner)

    def index(self, coord: Any) -> T:
        outer, inner = self.outer_inner_coord(coord)
        return self.inner.index(outer).index(inner)

    def set(self, coord: Any, item: T) -> None:
        outer, inner = self.outer_inner_coord(coord)
        self.inner.mutable_index(outer).value.set(inner, item)

    def mutable_index(self, coord: Any) -> Slot[T]:
        outer, inner = self.outer_inner_coord(coord)
        return self.inner.mutable_index(outer).value.mutable_index(inner)
