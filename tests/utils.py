import numpy as np
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#tr.set_default_dtype(tr.float64)
#backends.append(api.array_namespace(tr.zeros(1)))

#import cupy as cp
#backends.append(api.array_namespace(cp.zeros(1)))

def rand_data(xp, *shape: int):
    data = np.random.rand(*shape)
    if api.is_cupy_namespace(xp):
        return xp.asarray(data)
    elif api.is_torch_namespace(xp):
        return xp.asarray(data)
    else:
        return data

def rand_symmetric(xp, size: int, scale: float = 1.0):
    data = rand_data(xp, size, size) - 0.5
    return scale * (data + data.T)

def tridiagonal(xp, diag, off_diag):
    n = len(diag)
    mat = xp.zeros((n, n), dtype=xp.float64)
    for i in range(n):
        mat[i, i] = diag[i]
    for i in range(n - 1):
        mat[i + 1, i] = off_diag[i]
        mat[i, i + 1] = off_diag[i]
    return mat

def max_abs(xp, mat) -> float:
    return float(xp.max(xp.abs(mat)))
