# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Optional, Self, Sequence
from copy import deepcopy
from math import prod
import logging
import numpy as np

from .arraygrid import ArrayGrid, check_lens
from .backend import ArrayLike, ArrayNamespace, get_namespace, to_numpy, from_numpy, shape
from .coord import Coord, coords

logger = logging.getLogger(__name__)

class DenseGrid[T](ArrayGrid[T]):
    """
    Heap allocated grid backed by a single flat numpy array of x_len*y_len(*z_len) cells.
    Elements are stored with dtype=object unless a numpy dtype is requested.
    """

    #-------------------------------------------------------------------------
    #constructor

    def __init__(
            self,
            lens: Sequence[int],
            generator: Callable[[Coord], T],
            dtype: Any = object) -> None:
        """
        Allocate a grid of the given lengths and populate it with generator, which is
        invoked once per cell in row-major order (x fastest).
        """
        lens = check_lens(lens)
        data = np.empty(prod(lens), dtype=dtype)
        for i, coord in enumerate(coords(lens)):
            data[i] = generator(coord)
        self._init_storage(lens, data)
        logger.debug("allocated dense grid %s, dtype=%s", lens, data.dtype)

    @classmethod
    def broadcast(cls, lens: Sequence[int], value: T, dtype: Any = object) -> Self:
        """Allocate a grid with every cell set to a copy of value."""
        if np.dtype(dtype) != np.dtype(object):
            lens = check_lens(lens)
            return cls._from_storage(lens, np.full(prod(lens), value, dtype=dtype))
        return cls(lens, lambda _: deepcopy(value), dtype)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Self:
        """
        Copy an array of any array-API library into a grid. The array axes are in
        row-major order, i.e. (y, x) for a two dimensional grid.
        """
        data = np.array(to_numpy(array), copy=True)
        lens = check_lens(tuple(reversed(shape(data))))
        return cls._from_storage(lens, data.reshape(-1))

    @classmethod
    def _from_storage(cls, lens: tuple[int, ...], data: np.ndarray) -> Self:
        grid = cls.__new__(cls)
        grid._init_storage(lens, data)
        logger.debug("allocated dense grid %s, dtype=%s", lens, data.dtype)
        return grid

    #-------------------------------------------------------------------------
    #methods

    @property
    def dtype(self) -> Any:
        return self._data.dtype

    def to_array(self, namespace: Optional[ArrayNamespace] = None) -> ArrayLike:
        """
        Copy of the elements with row-major axes, (y, x) for a two dimensional grid. Returns
        a numpy array, or an array of the given array namespace.
        """
        array = self._data.reshape(tuple(reversed(self._lens))).copy()
        if namespace is None:
            return array
        return from_numpy(get_namespace(namespace), array)

    #-------------------------------------------------------------------------
    #some magic

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DenseGrid)\
           and self._lens == other._lens\
           and all(_item_equal(a, b) for a, b in zip(self._data, other._data))

    def __repr__(self) -> str:
        return f"DenseGrid({'x'.join(str(n) for n in self._lens)}, dtype={self.dtype})"

def _item_equal(a: Any, b: Any) -> bool:
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    return bool(a == b)
