# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Constructors of two dimensional grids. Coordinates are (x, y), callbacks receive a Vec2."""

from typing import Any, Callable

from .coord import Vec2
from .densegrid import DenseGrid
from .fixedgrid import FixedGrid
from .functiongrid import FunctionGrid, RefFunctionGrid, MutFunctionGrid, ReaderWriterGrid
from .slot import Slot

NDIMS = 2

def alloc[T](x_len: int, y_len: int, value: T, dtype: Any = object) -> DenseGrid[T]:
    """Heap allocated x_len by y_len grid, every cell holding a copy of value."""
    return DenseGrid.broadcast((x_len, y_len), value, dtype)

def alloc_gen[T](
        x_len: int,
        y_len: int,
        generator: Callable[[Vec2], T],
        dtype: Any = object) -> DenseGrid[T]:
    """Heap allocated x_len by y_len grid, cells populated with generator in row-major order."""
    return DenseGrid((x_len, y_len), generator, dtype)

def array3x3[T](value: T) -> FixedGrid[T]:
    return FixedGrid.broadcast(value, NDIMS)

def array3x3_gen[T](generator: Callable[[Vec2], T]) -> FixedGrid[T]:
    return FixedGrid(generator, NDIMS)

def value_fn[T](func: Callable[[Vec2], T]) -> FunctionGrid[T]:
    """Unbounded grid read by value from func."""
    return FunctionGrid(func, NDIMS)

def ref_fn[T](func: Callable[[Vec2], T]) -> RefFunctionGrid[T]:
    """Unbounded grid read by reference from func."""
    return RefFunctionGrid(func, NDIMS)

def mut_fn[T](func: Callable[[Vec2], Slot[T]]) -> MutFunctionGrid[T]:
    """Unbounded grid written through the slots returned by func."""
    return MutFunctionGrid(func, NDIMS)

def reader_writer[T, R](
        referent: R,
        reader: Callable[[Vec2, R], T],
        writer: Callable[[Vec2, R], Slot[T]]) -> ReaderWriterGrid[T, R]:
    """
    Unbounded grid over referent. Reads call reader(coord, referent), writes go through the
    slot returned by writer(coord, referent).
    """
    return ReaderWriterGrid(referent, reader, writer, NDIMS)
