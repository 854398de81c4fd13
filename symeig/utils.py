# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import ArrayLike, shape

def check_pos(msg: str, value: int | float):
    if value <= 0:
        raise ValueError(f"{msg} must be above zero, got {value}")

def check_non_neg(msg: str, value: int | float):
    if value < 0:
        raise ValueError(f"{msg} must be non-negative, got {value}")

def check_square(mat: ArrayLike) -> int:
    if mat.ndim != 2:
        raise ValueError(f"Expected a matrix, got an array with {mat.ndim} dimension(s).")
    rows, cols = shape(mat)
    if rows != cols:
        raise ValueError(f"Unable to decompose a non-square matrix of shape ({rows}, {cols}).")
    return rows

def sign(value: float) -> float:
    # sign(0) is +1
    return -1.0 if value < 0.0 else 1.0
