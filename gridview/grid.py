# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from __future__ import annotations
from typing import Any, Callable, Optional, Sequence, TYPE_CHECKING
from abc import abstractmethod

from .axisbound import AxisBound, ZeroTo, to_bound, format_bounds
from .coord import Coord, as_coord
from .errors import OutOfBoundsError
from .options import get_options
from .slot import Slot

if TYPE_CHECKING:
    from .map import Map, EnumerateMap
    from .flatten import Flatten
    from .neworigin import NewOrigin
    from .oobhandler import OobHandler
    from .gridslice import Slice, SubviewResult
    from .wrapping import Wrapping
    from .elevation import SharedGrid, ExclusiveGrid
    from .densegrid import DenseGrid

class Grid[T]:
    """
    Integer indexed grid with an arbitrary number of axes. Every grid reports one axis bound
    per axis, the valid coordinates are the cartesian product of these bounds. Reading and
    writing is provided by the capability classes ValueRead, ValueWrite, RefRead and RefWrite,
    a grid only derives from the ones it can honour.
    """

    @property
    @abstractmethod
    def bounds(self) -> tuple[AxisBound, ...]:
        """The axis bounds, indexed by axis number."""

    #-------------------------------------------------------------------------
    #bounds

    @property
    def ndims(self) -> int:
        return len(self.bounds)

    def bound(self, axis: int) -> AxisBound:
        return self.bounds[axis]

    def x_bound(self) -> AxisBound:
        return self.bounds[0]

    def y_bound(self) -> AxisBound:
        return self.bounds[1]

    def z_bound(self) -> AxisBound:
        return self.bounds[2]

    def in_bounds(self, coord: Any) -> bool:
        coord = as_coord(coord, self.ndims)
        return all(b.contains(v) for b, v in zip(self.bounds, coord))

    def _checked(self, coord: Any) -> Coord:
        coord = as_coord(coord, self.ndims)
        if not all(b.contains(v) for b, v in zip(self.bounds, coord)):
            raise OutOfBoundsError(coord, self.bounds)
        return coord

    #-------------------------------------------------------------------------
    #combinators

    def map[U](self, func: Callable[[T], U]) -> Map[U]:
        """Element by-value mapping."""
        from .map import Map
        return Map(self, func)

    def enumerate_map[U](self, func: Callable[[Coord, T], U]) -> EnumerateMap[U]:
        """Element by-value mapping, the function also receives the coordinate."""
        from .map import EnumerateMap
        return EnumerateMap(self, func)

    def flatten(self, stride: Any) -> Flatten:
        """
        View a grid of grids as one grid, every element grid covering stride cells per axis.
        The element grids must be at least stride long on every axis, this is not checked.
        """
        from .flatten import Flatten
        return Flatten(self, stride)

    def new_origin(self, origin: Any) -> NewOrigin[T]:
        """The zero coordinate of this grid becomes origin in the resulting grid."""
        from .neworigin import NewOrigin
        return NewOrigin(self, origin)

    def oob_handler(self, fallback: Callable[[Coord], T]) -> OobHandler[T]:
        """Unbounded grid, coordinates outside this grid are supplied by fallback."""
        from .oobhandler import OobHandler
        return OobHandler(self, fallback)

    def subview(self, *bounds: AxisBound | range) -> Slice[T]:
        """
        View a sub-box of this grid. Raises InvalidSubviewError if the new bounds are not
        a subset of the current bounds.
        """
        from .gridslice import Slice
        return Slice(self, *bounds)

    def try_subview(self, *bounds: AxisBound | range) -> SubviewResult[T]:
        """
        View a sub-box of this grid. If the new bounds are not a subset of the current bounds
        the result is rejected and carries this grid unchanged.
        """
        from .gridslice import try_slice
        return try_slice(self, *bounds)

    def subview_from_zero(self, *lens: int) -> Slice[T]:
        """View a sub-box of this grid beginning at the origin."""
        return self.subview(*(ZeroTo(n) for n in lens))

    def try_subview_from_zero(self, *lens: int) -> SubviewResult[T]:
        """View a sub-box of this grid beginning at the origin. Negative lengths give an empty axis."""
        return self.try_subview(*(ZeroTo(max(n, 0)) for n in lens))

    def wrapping(self) -> Wrapping[T]:
        """
        View of this grid which wraps around the edges. This grid has to be bounded
        on both ends of every axis, the resulting grid is unbounded.
        """
        from .wrapping import Wrapping
        return Wrapping(self)

    def collect(self) -> DenseGrid[T]:
        """Read every element into a new dense grid. The grid has to be bounded from zero."""
        from .densegrid import DenseGrid
        if not isinstance(self, ValueRead):
            raise TypeError(f"{type(self).__name__} cannot be read by value.")
        if not all(isinstance(b, ZeroTo) for b in self.bounds):
            raise TypeError(f"Only grids bounded from zero can be collected, got {format_bounds(self.bounds)}.")
        return DenseGrid([b.end for b in self.bounds], self.get)

    def shared(self) -> SharedGrid[T]:
        """Read-only handle on this grid, which can be chained independently."""
        from .elevation import SharedGrid
        return SharedGrid(self)

    def exclusive(self) -> ExclusiveGrid[T]:
        """Read-write handle on this grid, which can be chained independently."""
        from .elevation import ExclusiveGrid
        return ExclusiveGrid(self)

    #-------------------------------------------------------------------------
    #some magic

    def __repr__(self) -> str:
        return f"{type(self).__name__}({format_bounds(self.bounds)})"

class FixedSize[T](Grid[T]):
    """Grid bounded from zero to a finite length on every axis."""

    def lens(self) -> tuple[int, ...]:
        return tuple(b.upper for b in self.bounds)

    def x_len(self) -> int:
        return self.bounds[0].upper

    def y_len(self) -> int:
        return self.bounds[1].upper

    def z_len(self) -> int:
        return self.bounds[2].upper

class ValueRead[T](Grid[T]):
    """Grid read by value."""

    @abstractmethod
    def get(self, coord: Any) -> T:
        """Element at coord. Raises OutOfBoundsError outside the bounds."""

    def try_get(self, coord: Any, default: Optional[T] = None) -> Optional[T]:
        """Element at coord, or default outside the bounds."""
        coord = as_coord(coord, self.ndims)
        if self.in_bounds(coord):
            return self.get(coord)
        return default

    def __getitem__(self, coord: Any) -> T:
        return self.get(coord)

class ValueWrite[T](Grid[T]):
    """Grid written by value."""

    @abstractmethod
    def set(self, coord: Any, item: T) -> None:
        """Replace the element at coord. Raises OutOfBoundsError outside the bounds."""

    def try_set(self, coord: Any, item: T) -> bool:
        """Replace the element at coord, returns False and changes nothing outside the bounds."""
        coord = as_coord(coord, self.ndims)
        if self.in_bounds(coord):
            self.set(coord, item)
            return True
        return False

    def __setitem__(self, coord: Any, item: T) -> None:
        self.set(coord, item)

class RefRead[T](ValueRead[T]):
    """
    Grid read by reference. index returns the stored object itself, get returns a copy of
    it as configured by the active AccessOptions.
    """

    @abstractmethod
    def index(self, coord: Any) -> T:
        """Stored element at coord. Raises OutOfBoundsError outside the bounds."""

    def try_index(self, coord: Any, default: Optional[T] = None) -> Optional[T]:
        coord = as_coord(coord, self.ndims)
        if self.in_bounds(coord):
            return self.index(coord)
        return default

    def get(self, coord: Any) -> T:
        return get_options().clone(self.index(coord))

class RefWrite[T](ValueWrite[T]):
    """Grid written by reference. mutable_index returns a slot for the storage location."""

    @abstractmethod
    def mutable_index(self, coord: Any) -> Slot[T]:
        """Slot of the element at coord. Raises OutOfBoundsError outside the bounds."""

    def try_mutable_index(self, coord: Any) -> Optional[Slot[T]]:
        coord = as_coord(coord, self.ndims)
        if self.in_bounds(coord):
            return self.mutable_index(coord)
        return None

    def set(self, coord: Any, item: T) -> None:
        self.mutable_index(coord).value = item

#: Capabilities in the order used to build specialized view classes.
CAPABILITIES: tuple[type, ...] = (RefRead, RefWrite, ValueRead, ValueWrite, FixedSize)
ACCESS: tuple[type, ...] = (RefRead, RefWrite, ValueRead, ValueWrite)
READ: tuple[type, ...] = (RefRead, ValueRead)

def capabilities_of(grid: Grid, among: Sequence[type] = CAPABILITIES) -> set[type]:
    return {cap for cap in among if isinstance(grid, cap)}

def fixed_size(bounds: Sequence[AxisBound]) -> set[type]:
    return {FixedSize} if all(isinstance(b, ZeroTo) for b in bounds) else set()

def as_bounds(ndims: int, bounds: Sequence[AxisBound | range]) -> tuple[AxisBound, ...]:
    if len(bounds) != ndims:
        raise ValueError(f"Expected {ndims} bounds, got {len(bounds)}.")
    return tuple(to_bound(b) for b in bounds)
