# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Optional
from abc import abstractmethod
from dataclasses import dataclass

class AxisBound:
    """
    Set of legal coordinate values along one axis of a grid. Every bound is described by
    an inclusive lower limit and an exclusive upper limit, where None means the axis is
    unconstrained on that side.
    """

    @property
    @abstractmethod
    def lower(self) -> Optional[int]:
        """Smallest legal value, None if unconstrained."""

    @property
    @abstractmethod
    def upper(self) -> Optional[int]:
        """First value past the largest legal one, None if unconstrained."""

    @abstractmethod
    def times(self, factor: int) -> "AxisBound":
        """Scale the bound by a stride factor."""

    @abstractmethod
    def plus(self, offset: int) -> "AxisBound":
        """Translate the bound by an offset."""

    #-------------------------------------------------------------------------
    #methods

    def contains(self, value: int) -> bool:
        lower, upper = self.lower, self.upper
        return (lower is None or value >= lower)\
           and (upper is None or value < upper)

    def __contains__(self, value: int) -> bool:
        return self.contains(value)

    def is_within(self, other: "AxisBound") -> bool:
        """True if this bound is at least as restrictive as other on both ends."""
        if other.lower is not None and (self.lower is None or self.lower < other.lower):
            return False
        if other.upper is not None and (self.upper is None or self.upper > other.upper):
            return False
        return True

    def is_empty(self) -> bool:
        return self.lower is not None and self.upper is not None and self.upper <= self.lower

class FiniteBound(AxisBound):
    """A bound with a concrete limit on both ends. Only these can be wrapped."""

    @property
    @abstractmethod
    def lower(self) -> int: ...

    @property
    @abstractmethod
    def upper(self) -> int: ...

    def lower_inclusive(self) -> int:
        return self.lower

    def upper_exclusive(self) -> int:
        return self.upper

    def length(self) -> int:
        return max(self.upper - self.lower, 0)

@dataclass(frozen=True, init=False)
class ZeroTo(FiniteBound):
    """Bound from zero (inclusive) to end (exclusive)."""

    #: The exclusive end, equal to the length of the axis.
    end: int

    def __init__(self, end: int) -> None:
        if end < 0:
            raise ValueError(f"End of a zero based bound must be non-negative, but got {end}")
        object.__setattr__(self, "end", end)

    @property
    def lower(self) -> int:
        return 0

    @property
    def upper(self) -> int:
        return self.end

    def times(self, factor: int) -> "ZeroTo":
        return ZeroTo(self.end * factor)

    def plus(self, offset: int) -> "Interval":
        return Interval(offset, self.end + offset)

    def __str__(self) -> str:
        return f"[0, {self.end})"

@dataclass(frozen=True, init=False)
class Interval(FiniteBound):
    """Bound from start (inclusive) to end (exclusive, or inclusive if requested)."""

    start: int
    end: int
    inclusive: bool

    def __init__(self, start: int, end: int, inclusive: bool = False) -> None:
        if (end + 1 if inclusive else end) < start:
            raise ValueError(f"Interval end {end} lies before its start {start}")
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)
        object.__setattr__(self, "inclusive", inclusive)

    @property
    def lower(self) -> int:
        return self.start

    @property
    def upper(self) -> int:
        return self.end + 1 if self.inclusive else self.end

    def times(self, factor: int) -> "Interval":
        return Interval(self.lower * factor, self.upper * factor)

    def plus(self, offset: int) -> "Interval":
        return Interval(self.start + offset, self.end + offset, self.inclusive)

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}{']' if self.inclusive else ')'}"

@dataclass(frozen=True, init=False)
class LowerBounded(AxisBound):
    """All values from start (inclusive) upwards."""

    start: int

    def __init__(self, start: int) -> None:
        object.__setattr__(self, "start", start)

    @property
    def lower(self) -> int:
        return self.start

    @property
    def upper(self) -> None:
        return None

    def times(self, factor: int) -> "LowerBounded":
        return LowerBounded(self.start * factor)

    def plus(self, offset: int) -> "LowerBounded":
        return LowerBounded(self.start + offset)

    def __str__(self) -> str:
        return f"[{self.start}, ..)"

@dataclass(frozen=True, init=False)
class UpperBounded(AxisBound):
    """All values below end (or up to end, if inclusive)."""

    end: int
    inclusive: bool

    def __init__(self, end: int, inclusive: bool = False) -> None:
        object.__setattr__(self, "end", end)
        object.__setattr__(self, "inclusive", inclusive)

    @property
    def lower(self) -> None:
        return None

    @property
    def upper(self) -> int:
        return self.end + 1 if self.inclusive else self.end

    def times(self, factor: int) -> "UpperBounded":
        return UpperBounded(self.upper * factor)

    def plus(self, offset: int) -> "UpperBounded":
        return UpperBounded(self.end + offset, self.inclusive)

    def __str__(self) -> str:
        return f"(.., {self.end}{']' if self.inclusive else ')'}"

@dataclass(frozen=True)
class Unbounded(AxisBound):
    """Every integer is legal."""

    @property
    def lower(self) -> None:
        return None

    @property
    def upper(self) -> None:
        return None

    def times(self, factor: int) -> "Unbounded":
        return self

    def plus(self, offset: int) -> "Unbounded":
        return self

    def __str__(self) -> str:
        return "(.., ..)"

UNBOUNDED = Unbounded()

def to_bound(bound: AxisBound | range) -> AxisBound:
    """Accept python ranges with unit step wherever an axis bound is expected."""
    if isinstance(bound, AxisBound):
        return bound
    if isinstance(bound, range):
        if bound.step != 1:
            raise ValueError(f"Only ranges with step 1 can be used as bounds, got {bound}")
        if bound.start == 0:
            return ZeroTo(max(bound.stop, 0))
        return Interval(bound.start, max(bound.stop, bound.start))
    raise TypeError(f"Expected an AxisBound or range, got {type(bound).__name__}")

def format_bounds(bounds: tuple[AxisBound, ...]) -> str:
    return " x ".join(str(b) for b in bounds)
