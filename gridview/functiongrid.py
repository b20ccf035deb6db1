# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""
Virtual grids whose elements are computed by functions on every access. None of them store
elements, and all of them are unbounded.
"""

from typing import Any, Callable

from .axisbound import AxisBound, UNBOUNDED
from .coord import Coord, as_coord, to_vec
from .grid import Grid, ValueRead, RefRead, RefWrite
from .slot import Slot

class _Unbounded[T](Grid[T]):

    _ndims: int

    def __init__(self, ndims: int) -> None:
        if ndims < 1:
            raise ValueError(f"A grid needs at least one axis, but got ndims={ndims}")
        self._ndims = ndims

    @property
    def bounds(self) -> tuple[AxisBound, ...]:
        return (UNBOUNDED,) * self._ndims

    def _vec(self, coord: Any) -> Coord:
        return to_vec(as_coord(coord, self._ndims))

class FunctionGrid[T](_Unbounded[T], ValueRead[T]):
    """Grid read by value from a function of the coordinate."""

    func: Callable[[Coord], T]

    def __init__(self, func: Callable[[Coord], T], ndims: int = 2) -> None:
        super().__init__(ndims)
        self.func = func

    def get(self, coord: Any) -> T:
        return self.func(self._vec(coord))

class RefFunctionGrid[T](_Unbounded[T], RefRead[T]):
    """
    Grid read by reference from a function returning stored objects. By-value reads copy
    the returned object according to the active AccessOptions.
    """

    func: Callable[[Coord], T]

    def __init__(self, func: Callable[[Coord], T], ndims: int = 2) -> None:
        super().__init__(ndims)
        self.func = func

    def index(self, coord: Any) -> T:
        return self.func(self._vec(coord))

class MutFunctionGrid[T](_Unbounded[T], RefWrite[T]):
    """Grid written through the slots returned by a function of the coordinate."""

    func: Callable[[Coord], Slot[T]]

    def __init__(self, func: Callable[[Coord], Slot[T]], ndims: int = 2) -> None:
        super().__init__(ndims)
        self.func = func

    def mutable_index(self, coord: Any) -> Slot[T]:
        return self.func(self._vec(coord))

class ReaderWriterGrid[T, R](_Unbounded[T], RefRead[T], RefWrite[T]):
    """
    Grid over a shared referent, read through reader(coord, referent) and written through
    the slot returned by writer(coord, referent). Both functions have to address the
    same element for the same coordinate.
    """

    #: State shared by reader and writer.
    referent: R
    reader: Callable[[Coord, R], T]
    writer: Callable[[Coord, R], Slot[T]]

    def __init__(
            self,
            referent: R,
            reader: Callable[[Coord, R], T],
            writer: Callable[[Coord, R], Slot[T]],
            ndims: int = 2) -> None:
        super().__init__(ndims)
        self.referent = referent
        self.reader = reader
        self.writer = writer

    def index(self, coord: Any) -> T:
        return self.reader(self._vec(coord), self.referent)

    def mutable_index(self, coord: Any) -> Slot[T]:
        return self.writer(self._vec(coord), self.referent)
