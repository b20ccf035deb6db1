# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
from dataclasses import dataclass
import logging

from .axisbound import AxisBound, format_bounds
from .errors import InvalidSubviewError
from .grid import Grid, capabilities_of, fixed_size, as_bounds, ACCESS
from .slot import Slot
from .view import View

logger = logging.getLogger(__name__)

class Slice[T](View[T]):
    """
    Sub-box of a grid. The valid coordinates of the slice are a subset of the valid
    coordinates of the inner grid, which is verified once at construction. Every access is
    checked against the narrower bounds before it is delegated.
    """

    _bounds: tuple[AxisBound, ...]

    def __init__(self, inner: Grid, *bounds: AxisBound | range) -> None:
        new_bounds = as_bounds(inner.ndims, bounds)
        if not is_subset(new_bounds, inner.bounds):
            raise InvalidSubviewError(new_bounds, inner.bounds)
        self.inner = inner
        self._bounds = new_bounds
        logger.debug("slice %s of %s", format_bounds(new_bounds), format_bounds(inner.bounds))

    @classmethod
    def _capabilities(cls, inner: Grid, *bounds: AxisBound | range, **kwargs: Any) -> set[type]:
        return capabilities_of(inner, ACCESS) | fixed_size(as_bounds(inner.ndims, bounds))

    @property
    def bounds(self) -> tuple[AxisBound, ...]:
        return self._bounds

    #-------------------------------------------------------------------------
    #methods

    def get(self, coord: Any) -> T:
        return self.inner.get(self._checked(coord))

    def set(self, coord: Any, item: T) -> None:
        self.inner.set(self._checked(coord), item)

    def index(self, coord: Any) -> T:
        return self.inner.index(self._checked(coord))

    def mutable_index(self, coord: Any) -> Slot[T]:
        return self.inner.mutable_index(self._checked(coord))

@dataclass(kw_only=True, frozen=True)
class SubviewResult[T]:
    """
    Result of a fallible subview. If the requested bounds were rejected, grid is the
    original grid, unchanged.
    """

    #: Whether the requested bounds were a subset of the grid bounds.
    accepted: bool
    #: The slice if accepted, otherwise the original grid.
    grid: Grid[T]
    #: The requested bounds.
    requested: tuple[AxisBound, ...]

    def unwrap(self) -> Slice[T]:
        """The slice, raises InvalidSubviewError if the subview was rejected."""
        if not self.accepted:
            raise InvalidSubviewError(self.requested, self.grid.bounds)
        return self.grid  # type: ignore

def is_subset(bounds: tuple[AxisBound, ...], other: tuple[AxisBound, ...]) -> bool:
    return all(b.is_within(o) for b, o in zip(bounds, other))

def try_slice[T](inner: Grid[T], *bounds: AxisBound | range) -> SubviewResult[T]:
    new_bounds = as_bounds(inner.ndims, bounds)
    if not is_subset(new_bounds, inner.bounds):
        logger.debug("rejected slice %s of %s", format_bounds(new_bounds), format_bounds(inner.bounds))
        return SubviewResult(accepted=False, grid=inner, requested=new_bounds)
    return SubviewResult(accepted=True, grid=Slice(inner, *new_bounds), requested=new_bounds)
