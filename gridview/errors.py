# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Sequence

from .axisbound import AxisBound, format_bounds

class GridError(Exception):
    """Base class of all errors raised by gridview."""

class OutOfBoundsError(GridError, IndexError):
    """
    Raised by the unchecked accessors (get, set, index, mutable_index) for a coordinate
    outside the bounds of the grid. Signals a programming error at the call site, use the
    try_ variants where out of range coordinates are expected.
    """

    coord: Any
    bounds: tuple[AxisBound, ...]

    def __init__(self, coord: Any, bounds: Sequence[AxisBound]) -> None:
        self.coord = coord
        self.bounds = tuple(bounds)
        super().__init__(f"invalid index {tuple(coord)} for bounds {format_bounds(self.bounds)}")

class InvalidSubviewError(GridError, ValueError):
    """Raised if the bounds requested for a subview are not a subset of the grid bounds."""

    requested: tuple[AxisBound, ...]
    available: tuple[AxisBound, ...]

    def __init__(self, requested: Sequence[AxisBound], available: Sequence[AxisBound]) -> None:
        self.requested = tuple(requested)
        self.available = tuple(available)
        super().__init__("new bounds are not a subset of old bounds, "\
                         f"new={format_bounds(self.requested)}, old={format_bounds(self.available)}")
