# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable

from .axisbound import AxisBound
from .coord import Coord, as_coord, to_vec
from .grid import Grid, ValueRead, FixedSize, capabilities_of
from .view import View

class Map[T](View[T]):
    """
    By-value mapping of the elements of a grid. The mapped values have no storage of their
    own, so only by-value reads are provided.
    """

    #: Function applied to every element read.
    func: Callable[[Any], T]

    def __init__(self, inner: Grid, func: Callable[[Any], T]) -> None:
        self.inner = inner
        self.func = func

    @classmethod
    def _capabilities(cls, inner: Grid, *args: Any, **kwargs: Any) -> set[type]:
        return capabilities_of(inner, (ValueRead, FixedSize))

    @property
    def bounds(self) -> tuple[AxisBound, ...]:
        return self.inner.bounds

    def get(self, coord: Any) -> T:
        return self.func(self.inner.get(coord))

class EnumerateMap[T](View[T]):
    """By-value mapping of the elements of a grid, the function also receives the coordinate."""

    func: Callable[[Coord, Any], T]

    def __init__(self, inner: Grid, func: Callable[[Coord, Any], T]) -> None:
        self.inner = inner
        self.func = func

    @classmethod
    def _capabilities(cls, inner: Grid, *args: Any, **kwargs: Any) -> set[type]:
        return capabilities_of(inner, (ValueRead, FixedSize))

    @property
    def bounds(self) -> tuple[AxisBound, ...]:
        return self.inner.bounds

    def get(self, coord: Any) -> T:
        coord = as_coord(coord, self.ndims)
        return self.func(to_vec(coord), self.inner.get(coord))
