# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Optional, Self
from dataclasses import dataclass
from math import hypot

from .backend import ArrayLike

@dataclass(frozen=True)
class GivensRotation:
    """
    Two dimensional rotation with the matrix :math:`[[c, -s], [s, c]]`. Used to cancel single
    entries of a vector and to accumulate similarity transforms on pairs of matrix columns.
    """

    #: Cosine of the rotation angle.
    cos: float
    #: Sine of the rotation angle.
    sin: float

    @classmethod
    def cancel_y(cls, x: float, y: float) -> Optional[tuple[Self, float]]:
        """
        Rotation mapping :math:`(x, y)` onto :math:`(r, 0)` together with :math:`r`.
        Returns None if :math:`y` is already zero.
        """
        if y == 0.0:
            return None
        norm = hypot(x, y)
        return cls(x / norm, -y / norm), norm

    @classmethod
    def from_vector(cls, x: float, y: float, eps: float) -> Optional[Self]:
        """Rotation whose first column is the normalized :math:`(x, y)`, None if its norm is at most eps."""
        norm = hypot(x, y)
        if norm <= eps:
            return None
        return cls(x / norm, y / norm)

    def inverse(self) -> Self:
        return type(self)(self.cos, -self.sin)

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return self.cos * x - self.sin * y, self.sin * x + self.cos * y

    def rotate_columns(self, mat: ArrayLike, i: int, j: int) -> None:
        """Multiply the columns i and j of mat in place with the rotation matrix from the right."""
        col_i = mat[:, i]
        col_j = mat[:, j]
        mat[:, i], mat[:, j] = self.cos * col_i + self.sin * col_j, self.cos * col_j - self.sin * col_i

    def __repr__(self) -> str:
        return f"GivensRotation(cos={self.cos}, sin={self.sin})"
