# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from dataclasses import dataclass
from math import sqrt

from .backend import ArrayLike, namespace_of_arrays, float_dtype, eye_like
from .utils import check_square

@dataclass(kw_only=True, frozen=True)
class SymmetricTridiagonalResult[T: ArrayLike]:
    #: Orthogonal basis of the similarity transform.
    q: T
    #: Main diagonal of the tridiagonal matrix.
    diag: T
    #: Sub- and superdiagonal of the tridiagonal matrix.
    off_diag: T

    def tridiagonal(self) -> T:
        """Dense tridiagonal matrix built from diag and off_diag."""
        xp = namespace_of_arrays(self.diag)
        n = self.diag.shape[0]
        mat = xp.zeros((n, n), dtype=self.diag.dtype)
        for i in range(n):
            mat[i, i] = self.diag[i]
        for i in range(n - 1):
            mat[i + 1, i] = self.off_diag[i]
            mat[i, i + 1] = self.off_diag[i]
        return mat

    def recompose(self) -> T:
        """Calculate :math:`QTQ^T`."""
        return self.q @ self.tridiagonal() @ self.q.T

    def unpack(self) -> tuple[T, T, T]:
        return self.q, self.diag, self.off_diag

@dataclass
class SymmetricTridiagonal:
    """
    Householder reduction of a symmetric matrix to tridiagonal form. Only the lower triangular
    part and the diagonal of the input are read.
    """

    def __call__[T: ArrayLike](self, mat: T) -> SymmetricTridiagonalResult[T]:
        n = check_square(mat)
        xp = namespace_of_arrays(mat)
        if not hasattr(xp, "linalg"):
            raise NotImplementedError(
                f"Extension linalg is missing from namespace {xp}.")
        m = xp.astype(mat, float_dtype(xp, mat), copy=True)
        m = xp.tril(m) + xp.tril(m, k=-1).T

        q = eye_like(xp, n, m)
        for i in range(n - 2):
            w = self._reflector(xp, m[i+1:, i])
            if w is None:
                continue
            # m <- H m H with H = I - 2ww^T on the trailing block
            sub = m[i+1:, i+1:]
            p = sub @ w
            k = float(xp.sum(w * p))
            p = 2.0 * (p - k * w)
            m[i+1:, i+1:] = sub - w[:, None] * p[None, :] - p[:, None] * w[None, :]

            col = m[i+1:, i] - 2.0 * float(xp.sum(w * m[i+1:, i])) * w
            m[i+1:, i] = col
            m[i, i+1:] = col

            qs = q[:, i+1:]
            q[:, i+1:] = qs - 2.0 * (qs @ w)[:, None] * w[None, :]

        diag = xp.asarray(xp.linalg.diagonal(m), copy=True)
        off_diag = xp.asarray(xp.linalg.diagonal(m, offset=-1), copy=True)
        return SymmetricTridiagonalResult(q=q, diag=diag, off_diag=off_diag)

    def _reflector[T: ArrayLike](self, xp, x: T) -> T | None:
        """Unit Householder vector mapping x onto a multiple of the first unit vector."""
        tail = float(xp.sum(x[1:] * x[1:]))
        if tail == 0.0:
            return None
        x0 = float(x[0])
        norm = sqrt(x0 * x0 + tail)
        alpha = -norm if x0 >= 0.0 else norm
        v = xp.asarray(x, copy=True)
        v[0] = x0 - alpha
        return v / sqrt(float(xp.sum(v * v)))

    def __repr__(self) -> str:
        return "SymmetricTridiagonal()"
