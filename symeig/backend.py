# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Protocol
import array_api_compat as api
from array_api_compat import device

class ArrayLike(Protocol):
    """Minimal protocol of the array objects passed through symeig."""

    @property
    def shape(self) -> tuple[int | None, ...]: ...
    @property
    def ndim(self) -> int: ...
    @property
    def dtype(self) -> Any: ...

    def __getitem__(self, key: Any, /) -> Any: ...
    def __setitem__(self, key: Any, value: Any, /) -> None: ...

type ArrayNamespace = Any

def get_namespace(obj: Any) -> ArrayNamespace:
    if not api.is_array_api_obj(obj):
        try:
            obj = obj.zeros(1)
        except AttributeError:
            raise TypeError("Provided object is not a recognized array or namespace.")
    return api.array_namespace(obj)

def namespace_of_arrays[T: ArrayLike](*arrays: T) -> ArrayNamespace:
    return api.array_namespace(*arrays)

def shape(array: ArrayLike) -> tuple[int, ...]:
    shp = array.shape
    if any(s is None for s in shp):
        raise ValueError("Array shape contains None dimension(s).")
    return shp  # type: ignore

def float_dtype(xp: ArrayNamespace, array: ArrayLike) -> Any:
    """Keep real floating dtypes, promote everything else to float64."""
    if xp.isdtype(array.dtype, "real floating"):
        return array.dtype
    return xp.float64

def machine_epsilon(xp: ArrayNamespace, dtype: Any) -> float:
    return float(xp.finfo(dtype).eps)

def eye_like[T: ArrayLike](xp: ArrayNamespace, n: int, ref: T) -> T:
    return xp.eye(n, dtype=ref.dtype, device=device(ref))
