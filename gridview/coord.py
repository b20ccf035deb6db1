# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Conversion between caller coordinates and the internal integer tuples."""

from typing import Any, Iterator, NamedTuple, Sequence
from itertools import product
from operator import index

class Vec2(NamedTuple):
    x: int
    y: int

class Vec3(NamedTuple):
    x: int
    y: int
    z: int

Coord = tuple[int, ...]

_AXIS_NAMES = ("x", "y", "z")

def as_coord(coord: Any, ndims: int) -> Coord:
    """
    Convert a coordinate to a tuple of ints. Accepts any sequence or array of integers
    as well as objects with x, y (and z) attributes.
    """
    if hasattr(coord, "__len__") and hasattr(coord, "__getitem__"):
        values = [coord[i] for i in range(len(coord))]
    elif ndims <= len(_AXIS_NAMES) and all(hasattr(coord, name) for name in _AXIS_NAMES[:ndims]):
        values = [getattr(coord, name) for name in _AXIS_NAMES[:ndims]]
    else:
        raise TypeError(f"Cannot interpret {coord!r} as a coordinate.")
    if len(values) != ndims:
        raise ValueError(f"Expected a coordinate with {ndims} components, got {len(values)}.")
    return tuple(index(v) for v in values)

def to_vec(coord: Coord) -> Coord:
    """Named tuple view of a coordinate, as handed to user callbacks."""
    if len(coord) == 2:
        return Vec2(*coord)
    if len(coord) == 3:
        return Vec3(*coord)
    return coord

def coords(lens: Sequence[int]) -> Iterator[Coord]:
    """All coordinates of a zero-based box in row-major order, x fastest."""
    for rev in product(*(range(n) for n in reversed(lens))):
        yield to_vec(tuple(reversed(rev)))
