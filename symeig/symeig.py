# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional

from .backend import ArrayNamespace, get_namespace
from .options import EigenOptions, get_options as _get_options, set_options as _set_options
from .symmetriceigen import (
    SymmetricEigenResult,
    SymmetricEigenSolver,
    NotConvergedError,
    try_decompose as _try_decompose,
)
from .symmetrictridiagonal import SymmetricTridiagonal, SymmetricTridiagonalResult
from .wilkinsonshift import wilkinson_shift as _wilkinson_shift

class SymEig[NDArray: Any]:
    """
    Eigendecomposition of dense real symmetric matrices by implicit QR iteration with
    Wilkinson shifts, bound to one array namespace.
    """

    #: Array namespace for the underlying array library.
    namespace: ArrayNamespace

    def __init__(self, namespace: Any) -> None:
        object.__setattr__(self, "namespace", get_namespace(namespace))
        _set_options(self.options())

    #-------------------------------------------------------------------------------------------------
    # decompositions

    def decompose(
            self,
            mat: NDArray,
            eps: Optional[float] = None,
            max_iterations: Optional[int] = None) -> SymmetricEigenResult[NDArray]:
        """
        Eigendecomposition of a symmetric matrix. Only the lower triangular part and the diagonal
        are read. Arguments that are not provided are taken from the active options. Raises
        NotConvergedError if the iteration cap is exhausted.
        """
        opts = self.get_options()
        eps = opts.eps if eps is None else eps
        max_iterations = opts.max_iterations if max_iterations is None else max_iterations
        res = _try_decompose(self.namespace.asarray(mat), eps=eps, max_iterations=max_iterations)
        if res is None:
            raise NotConvergedError(
                f"Eigendecomposition did not converge within {max_iterations} iterations.")
        return res

    def try_decompose(
            self,
            mat: NDArray,
            eps: float,
            max_iterations: int) -> Optional[SymmetricEigenResult[NDArray]]:
        """
        Eigendecomposition with explicit tolerance and iteration cap, zero means no cap.
        Returns None if the cap is exhausted.
        """
        return _try_decompose(self.namespace.asarray(mat), eps=eps, max_iterations=max_iterations)

    def recompose(self, res: SymmetricEigenResult[NDArray]) -> NDArray:
        """
        Rebuild the matrix :math:`U \\Lambda U^T` from a decomposition.
        """
        return res.recompose()

    def eigenvalues(self, mat: NDArray) -> NDArray:
        """
        Unsorted eigenvalues of a symmetric matrix.
        """
        return self.decompose(mat).eigenvalues

    def tridiagonalize(self, mat: NDArray) -> SymmetricTridiagonalResult[NDArray]:
        """
        Householder reduction of a symmetric matrix to tridiagonal form :math:`M=QTQ^T`.
        """
        return SymmetricTridiagonal()(self.namespace.asarray(mat))

    def wilkinson_shift(self, tmm: float, tnn: float, tmn: float) -> float:
        """
        Eigenvalue of the symmetric 2x2 matrix :math:`[[t_{mm}, t_{mn}], [t_{mn}, t_{nn}]]`
        closest to :math:`t_{nn}`.
        """
        return _wilkinson_shift(tmm, tnn, tmn)

    def solver(self, eps: Optional[float] = None, max_iterations: int = 0) -> SymmetricEigenSolver:
        """
        Eigenvalue solver usable wherever a matrix eigenvalue decomposition is expected.
        """
        return SymmetricEigenSolver(eps=eps, max_iterations=max_iterations)

    #-------------------------------------------------------------------------------------------------
    # options

    def options(self, eps: Optional[float] = None, max_iterations: int = 0) -> EigenOptions:
        """
        Convergence parameters used by decompose.
        """
        return EigenOptions(namespace=self.namespace, eps=eps, max_iterations=max_iterations)

    def get_options(self) -> EigenOptions:
        """
        Options active in the current thread.
        """
        try:
            return _get_options(self.namespace)
        except KeyError:
            opts = self.options()
            _set_options(opts)
            return opts

    def set_options(self, opts: EigenOptions) -> None:
        """
        Replace the options of the current thread.
        """
        _set_options(opts)
