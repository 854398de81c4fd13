# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of symeig."""

from .backend import ArrayLike, ArrayNamespace
from .givensrotation import GivensRotation
from .symmetrictridiagonal import SymmetricTridiagonal, SymmetricTridiagonalResult
from .symmetriceigen import SymmetricEigenResult, SymmetricEigenSolver, NotConvergedError
from .matrixeigenvaluedecomposition import MatrixEigenvalueDecomposition
from .options import EigenOptions

from .symeig import SymEig
