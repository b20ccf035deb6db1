# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable

from .axisbound import AxisBound, UNBOUNDED
from .coord import Coord, as_coord, to_vec
from .grid import Grid, ValueRead, capabilities_of
from .view import View

class OobHandler[T](View[T]):
    """Unbounded grid, elements outside of the inner grid are supplied by a function."""

    #: Produces the element for coordinates outside of the inner grid.
    fallback: Callable[[Coord], T]

    def __init__(self, inner: Grid, fallback: Callable[[Coord], T]) -> None:
        self.inner = inner
        self.fallback = fallback

    @classmethod
    def _capabilities(cls, inner: Grid, *args: Any, **kwargs: Any) -> set[type]:
        return capabilities_of(inner, (ValueRead,))

    @property
    def bounds(self) -> tuple[AxisBound, ...]:
        return (UNBOUNDED,) * self.inner.ndims

    def get(self, coord: Any) -> T:
        coord = as_coord(coord, self.ndims)
        if self.inner.in_bounds(coord):
            return self.inner.get(coord)
        return self.fallback(to_vec(coord))
