# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional
from dataclasses import dataclass
import logging

from .backend import ArrayLike, namespace_of_arrays, float_dtype, machine_epsilon, device
from .utils import check_square, check_pos, check_non_neg
from .givensrotation import GivensRotation
from .symmetrictridiagonal import SymmetricTridiagonal
from .wilkinsonshift import wilkinson_shift, symmetric_eigenvalues_2x2

logger = logging.getLogger(__name__)

class NotConvergedError(RuntimeError):
    """Raised when the iteration cap is exhausted before all eigenvalues converged."""

@dataclass(kw_only=True, frozen=True)
class SymmetricEigenResult[T: ArrayLike]:
    #: Orthogonal matrix whose columns are the eigenvectors.
    eigenvectors: T
    #: Unsorted eigenvalues, paired with the columns of eigenvectors.
    eigenvalues: T
    #: Number of QR iterations performed over the whole matrix.
    iterations: int = 0

    def recompose(self) -> T:
        """
        Rebuild the decomposed matrix :math:`U \\Lambda U^T`. Useful if eigenvalues have been
        modified after the decomposition.
        """
        scaled = self.eigenvectors * self.eigenvalues[None, :]
        return self.eigenvectors @ scaled.T

def delimit_subproblem(
        diag: list[float],
        off_diag: list[float],
        end: int,
        eps: float) -> tuple[int, int]:
    """
    Find the trailing unconverged block :math:`[start, end]` of the tridiagonal matrix. Negligible
    off-diagonal entries in front of that block are set to zero. Returns (0, 0) if everything up to
    end has converged.
    """
    n = end
    while n > 0:
        m = n - 1
        if abs(off_diag[m]) > eps * (abs(diag[n]) + abs(diag[m])):
            break
        n -= 1

    if n == 0:
        return 0, 0

    start = n - 1
    while start > 0:
        m = start - 1
        if off_diag[m] == 0.0 or abs(off_diag[m]) <= eps * (abs(diag[start]) + abs(diag[m])):
            off_diag[m] = 0.0
            break
        start -= 1

    return start, n

def qr_sweep(
        q: ArrayLike,
        diag: list[float],
        off_diag: list[float],
        start: int,
        end: int) -> bool:
    """
    One implicit QR step with Wilkinson shift on the block :math:`[start, end]`, chasing the bulge
    down to the end of the block. The rotations are accumulated into the columns of q.
    Returns False if the sweep stopped early on a degenerate rotation.
    """
    m, n = end - 1, end
    x = diag[start] - wilkinson_shift(diag[m], diag[n], off_diag[m])
    y = off_diag[start]

    for i in range(start, n):
        j = i + 1
        cancel = GivensRotation.cancel_y(x, y)
        if cancel is None:
            return False
        rot, norm = cancel

        if i > start:
            off_diag[i - 1] = norm

        mii, mjj, mij = diag[i], diag[j], off_diag[i]
        cc = rot.cos * rot.cos
        ss = rot.sin * rot.sin
        cs = rot.cos * rot.sin
        b = cs * 2.0 * mij

        diag[i] = (cc * mii + ss * mjj) - b
        diag[j] = (ss * mii + cc * mjj) + b
        off_diag[i] = cs * (mii - mjj) + mij * (cc - ss)

        if i != n - 1:
            x = off_diag[i]
            y = -rot.sin * off_diag[i + 1]
            off_diag[i + 1] *= rot.cos

        rot.inverse().rotate_columns(q, i, j)

    return True

def solve_2x2(
        q: ArrayLike,
        diag: list[float],
        off_diag: list[float],
        start: int,
        eps: float) -> None:
    """Exact eigendecomposition of the block :math:`[start, start+1]`."""
    a, b, c = diag[start], off_diag[start], diag[start + 1]
    l0, l1 = symmetric_eigenvalues_2x2(a, b, c)
    diag[start] = l0
    diag[start + 1] = l1

    rot = GivensRotation.from_vector(l0 - c, b, eps)
    if rot is not None:
        rot.rotate_columns(q, start, start + 1)

def try_decompose[T: ArrayLike](
        mat: T,
        eps: Optional[float] = None,
        max_iterations: int = 0) -> Optional[SymmetricEigenResult[T]]:
    """
    Eigendecomposition of a symmetric matrix, of which only the lower triangular part and the
    diagonal are read. eps is the tolerance below which off-diagonal entries count as zero,
    relative to their neighbouring diagonal entries, and defaults to the machine epsilon of the
    input dtype. max_iterations caps the total number of QR iterations over the whole matrix,
    zero means no cap. Returns None if the cap is exhausted.
    """
    n = check_square(mat)
    xp = namespace_of_arrays(mat)
    dtype = float_dtype(xp, mat)
    if eps is None:
        eps = machine_epsilon(xp, dtype)
    check_pos("eps", eps)
    check_non_neg("max_iterations", max_iterations)

    m = xp.tril(xp.astype(mat, dtype, copy=True))
    amax = float(xp.max(xp.abs(m))) if n > 0 else 0.0
    scale = amax if amax != 0.0 else 1.0
    if scale != 1.0:
        m = m / scale
    logger.debug("Decomposing %dx%d matrix, scale %g, eps %g", n, n, scale, eps)

    q, tdiag, toff = SymmetricTridiagonal()(m).unpack()
    diag = [float(tdiag[i]) for i in range(n)]
    off_diag = [float(toff[i]) for i in range(n - 1)]

    niter = 0
    if n > 1:
        start, end = delimit_subproblem(diag, off_diag, n - 1, eps)
        while end != start:
            if end - start + 1 > 2:
                qr_sweep(q, diag, off_diag, start, end)
                k = end - 1
                if abs(off_diag[k]) <= eps * (abs(diag[k]) + abs(diag[end])):
                    end -= 1
            else:
                solve_2x2(q, diag, off_diag, start, eps)
                end -= 1

            prev = start
            start, end = delimit_subproblem(diag, off_diag, end, eps)
            if start > prev:
                logger.debug("Split off block [%d, %d]", start, end)

            niter += 1
            if end != start and niter == max_iterations:
                logger.warning("No convergence after %d iterations, block [%d, %d] still active",
                               niter, start, end)
                return None

    logger.debug("Converged after %d iterations", niter)
    eigenvalues = xp.asarray(diag, dtype=dtype, device=device(q)) * scale
    return SymmetricEigenResult(eigenvectors=q, eigenvalues=eigenvalues, iterations=niter)

def decompose[T: ArrayLike](mat: T) -> SymmetricEigenResult[T]:
    """Eigendecomposition with machine epsilon tolerance and no iteration cap."""
    res = try_decompose(mat)
    if res is None:
        raise RuntimeError("Result cannot be None without an iteration cap.")
    return res

def recompose[T: ArrayLike](res: SymmetricEigenResult[T]) -> T:
    return res.recompose()

@dataclass(kw_only=True)
class SymmetricEigenSolver:
    """
    Implicit QR eigenvalue solver for dense symmetric matrices. Returns the unsorted eigenvalues
    and the eigenvectors as columns, raising NotConvergedError if max_iterations is exhausted.
    """

    #: Convergence tolerance, None for the machine epsilon of the input dtype.
    eps: Optional[float] = None
    #: Maximum number of QR iterations, zero for no limit.
    max_iterations: int = 0

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "eps" and value is not None:
            check_pos(name, value)
        elif name == "max_iterations":
            check_non_neg(name, value)
        super().__setattr__(name, value)

    def __call__[T: ArrayLike](self, mat: T) -> tuple[T, T]:
        res = self.decompose(mat)
        return res.eigenvalues, res.eigenvectors

    def decompose[T: ArrayLike](self, mat: T) -> SymmetricEigenResult[T]:
        res = try_decompose(mat, eps=self.eps, max_iterations=self.max_iterations)
        if res is None:
            raise NotConvergedError(
                f"Eigendecomposition did not converge within {self.max_iterations} iterations.")
        return res

    def __repr__(self) -> str:
        return f"SymmetricEigenSolver(eps={self.eps}, max_iterations={self.max_iterations})"
