# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Sequence
from itertools import accumulate
from operator import index, mul

from .axisbound import AxisBound, ZeroTo
from .grid import FixedSize, RefRead, RefWrite
from .slot import ItemSlot, Slot

class ArrayGrid[T](FixedSize[T], RefRead[T], RefWrite[T]):
    """
    Grid storing its elements in one flat, row-major sequence. The element at (x, y, z) is
    found at x + y*x_len + z*x_len*y_len.
    """

    _lens: tuple[int, ...]
    _strides: tuple[int, ...]
    _bounds: tuple[ZeroTo, ...]
    _data: Any

    def _init_storage(self, lens: Sequence[int], data: Any) -> None:
        self._lens = tuple(lens)
        self._strides = tuple(accumulate((1, *self._lens[:-1]), mul))
        self._bounds = tuple(ZeroTo(n) for n in self._lens)
        self._data = data

    @property
    def bounds(self) -> tuple[AxisBound, ...]:
        return self._bounds

    def lens(self) -> tuple[int, ...]:
        return self._lens

    #-------------------------------------------------------------------------
    #methods

    def linear_index(self, coord: Any) -> int:
        """Position of coord in the flat storage. Raises OutOfBoundsError outside the bounds."""
        coord = self._checked(coord)
        return sum(v * s for v, s in zip(coord, self._strides))

    def index(self, coord: Any) -> T:
        return self._data[self.linear_index(coord)]

    def mutable_index(self, coord: Any) -> Slot[T]:
        return ItemSlot(self._data, self.linear_index(coord))

    def set(self, coord: Any, item: T) -> None:
        self._data[self.linear_index(coord)] = item

def check_lens(lens: Sequence[int]) -> tuple[int, ...]:
    lens = tuple(index(n) for n in lens)
    if len(lens) == 0:
        raise ValueError("A grid needs at least one axis")
    if any(n < 0 for n in lens):
        raise ValueError(f"Grid lengths must be non-negative, but got {lens}")
    return lens
