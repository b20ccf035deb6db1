# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Constructors of three dimensional grids. Coordinates are (x, y, z), callbacks receive a Vec3."""

from typing import Any, Callable

from .coord import Vec3
from .densegrid import DenseGrid
from .fixedgrid import FixedGrid
from .functiongrid import FunctionGrid, RefFunctionGrid, MutFunctionGrid, ReaderWriterGrid
from .slot import Slot

NDIMS = 3

def alloc[T](x_len: int, y_len: int, z_len: int, value: T, dtype: Any = object) -> DenseGrid[T]:
    """Heap allocated x_len by y_len by z_len grid, every cell holding a copy of value."""
    return DenseGrid.broadcast((x_len, y_len, z_len), value, dtype)

def alloc_gen[T](
        x_len: int,
        y_len: int,
        z_len: int,
        generator: Callable[[Vec3], T],
        dtype: Any = object) -> DenseGrid[T]:
    return DenseGrid((x_len, y_len, z_len), generator, dtype)

def array3x3x3[T](value: T) -> FixedGrid[T]:
    return FixedGrid.broadcast(value, NDIMS)

def array3x3x3_gen[T](generator: Callable[[Vec3], T]) -> FixedGrid[T]:
    return FixedGrid(generator, NDIMS)

def value_fn[T](func: Callable[[Vec3], T]) -> FunctionGrid[T]:
    return FunctionGrid(func, NDIMS)

def ref_fn[T](func: Callable[[Vec3], T]) -> RefFunctionGrid[T]:
    return RefFunctionGrid(func, NDIMS)

def mut_fn[T](func: Callable[[Vec3], Slot[T]]) -> MutFunctionGrid[T]:
    return MutFunctionGrid(func, NDIMS)

def reader_writer[T, R](
        referent: R,
        reader: Callable[[Vec3, R], T],
        writer: Callable[[Vec3, R], Slot[T]]) -> ReaderWriterGrid[T, R]:
    return ReaderWriterGrid(referent, reader, writer, NDIMS)
