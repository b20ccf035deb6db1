from typing import Any, Callable, Sequence
from itertools import product
import numpy as np
import array_api_compat as api

from gridview import grid2, grid3
from gridview.coord import coords

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#backends.append(api.array_namespace(tr.zeros(1)))

#: Axis counts every generic test runs with.
dims = [2, 3]

#: Lengths per axis count, including degenerate axes.
lens = {
    2: [(1, 1), (4, 3), (5, 1), (0, 3)],
    3: [(1, 1, 1), (4, 3, 2), (2, 0, 2)],
}

facades = {2: grid2, 3: grid3}

def encode(coord: Sequence[int]) -> int:
    """Injective coordinate tag used as generator output."""
    return sum(v * 100**i for i, v in enumerate(coord))

def alloc_gen(ls: Sequence[int], generator: Callable[[Any], Any]) -> Any:
    """Dense grid of the given lengths through the facade matching their count."""
    return facades[len(ls)].alloc_gen(*ls, generator)

def box(lower: Sequence[int], upper: Sequence[int]):
    """All coordinates with lower <= v < upper on every axis."""
    return product(*(range(lo, up) for lo, up in zip(lower, upper)))

def all_coords(ls: Sequence[int]):
    return list(coords(ls))
