# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import logging

from .symeig import SymEig
from .symmetriceigen import (
    SymmetricEigenResult,
    SymmetricEigenSolver,
    NotConvergedError,
    decompose,
    try_decompose,
    recompose,
)
from .wilkinsonshift import wilkinson_shift
from .symmetrictridiagonal import SymmetricTridiagonal

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SymEig",
    "SymmetricEigenResult",
    "SymmetricEigenSolver",
    "NotConvergedError",
    "SymmetricTridiagonal",
    "decompose",
    "try_decompose",
    "recompose",
    "wilkinson_shift",
]
