# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
import numpy as np
import array_api_compat as api
from array_api_compat import to_device

ArrayLike = Any
ArrayNamespace = Any


def get_namespace(obj: Any) -> ArrayNamespace:
    if not api.is_array_api_obj(obj):
        if not hasattr(obj, "zeros"):
            raise TypeError("Provided object is not a recognized array or namespace.")
        obj = obj.zeros(1)
    return api.array_namespace(obj)

def shape(array: ArrayLike) -> tuple[int, ...]:
    shp = array.shape
    if any(s is None for s in shp):
        raise ValueError("Array shape contains None dimension(s).")
    return tuple(int(s) for s in shp)

def to_numpy(array: ArrayLike) -> np.ndarray:
    """Host copy of an array from any array-API library."""
    if isinstance(array, np.ndarray):
        return array
    if not api.is_array_api_obj(array):
        raise TypeError(f"Expected an array, got {type(array).__name__}.")
    return np.asarray(to_device(array, "cpu"))

def from_numpy(xp: ArrayNamespace, array: np.ndarray) -> ArrayLike:
    if array.dtype == object:
        raise TypeError("Arrays with dtype=object cannot be moved to another array namespace.")
    if api.is_numpy_namespace(xp):
        return array
    return xp.asarray(array)
