# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Self, Sequence
from copy import deepcopy

from .arraygrid import ArrayGrid
from .coord import Coord, coords

class FixedGrid[T](ArrayGrid[T]):
    """
    Small grid with a fixed extent of three cells along every axis (3x3 or 3x3x3). The
    cells live in a list allocated once at construction.
    """

    #: Extent along every axis.
    SIZE = 3

    def __init__(self, generator: Callable[[Coord], T], ndims: int = 2) -> None:
        """Populate the grid with generator, invoked once per cell in row-major order."""
        if ndims < 1:
            raise ValueError(f"A grid needs at least one axis, but got ndims={ndims}")
        lens = (self.SIZE,) * ndims
        self._init_storage(lens, [generator(coord) for coord in coords(lens)])

    @classmethod
    def broadcast(cls, value: T, ndims: int = 2) -> Self:
        """Grid with every cell set to a copy of value."""
        return cls(lambda _: deepcopy(value), ndims)

    @classmethod
    def from_nested(cls, nested: Sequence[Any], ndims: int = 2) -> Self:
        """Grid from nested rows, indexed nested[y][x] (nested[z][y][x] in three dimensions)."""
        cls._check_nested(nested, ndims)
        return cls(lambda coord: _lookup(nested, coord), ndims)

    @classmethod
    def _check_nested(cls, nested: Any, depth: int) -> None:
        if len(nested) != cls.SIZE:
            raise ValueError(f"Expected {cls.SIZE} entries per level, got {len(nested)}")
        if depth > 1:
            for sub in nested:
                cls._check_nested(sub, depth - 1)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FixedGrid)\
           and self._lens == other._lens\
           and self._data == other._data

def _lookup(nested: Any, coord: Coord) -> Any:
    for v in reversed(coord):
        nested = nested[v]
    return nested
