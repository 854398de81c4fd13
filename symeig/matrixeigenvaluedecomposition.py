# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Protocol, runtime_checkable
from .backend import ArrayLike

@runtime_checkable
class MatrixEigenvalueDecomposition[T: ArrayLike](Protocol):
    """
    Protocol for the eigenvalue decomposition of a dense symmetric matrix. Only the lower
    triangular part and the diagonal of the input are read.
    """

    def __call__(self, mat: T, /) -> tuple[T, T]:
        """
        Return the unsorted eigenvalues and a matrix whose columns are the corresponding
        eigenvectors, the i-th column belonging to the i-th eigenvalue.
        """
        ...
