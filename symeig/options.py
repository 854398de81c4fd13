# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Any, Optional, Self
import threading

from .backend import ArrayNamespace
from .utils import check_pos, check_non_neg

class EigenOptions:
    """
    Context manager for the convergence parameters of the symmetric eigendecomposition.
    Options are stored per array namespace and thread, nested contexts restore the
    enclosing options on exit.
    """

    key: Hashable
    #: Convergence tolerance, None for the machine epsilon of the input dtype.
    eps: Optional[float]
    #: Maximum number of QR iterations, zero for no limit.
    max_iterations: int

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            eps: Optional[float] = None,
            max_iterations: int = 0):
        self.eps = eps
        self.max_iterations = max_iterations
        self.key = (namespace, threading.get_ident())

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "eps" and value is not None:
            check_pos(name, value)
        elif name == "max_iterations":
            check_non_neg(name, value)
        super().__setattr__(name, value)

    def __enter__(self) -> Self:
        global _opts
        self._tmp = _opts.get(self.key)
        _opts[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]

    def __repr__(self) -> str:
        return f"EigenOptions(eps={self.eps}, max_iterations={self.max_iterations})"

_opts: dict[Any, EigenOptions] = {}

def get_options(namespace: ArrayNamespace) -> EigenOptions:
    global _opts
    key = (namespace, threading.get_ident())
    if key in _opts:
        return _opts[key]
    else:
        raise KeyError("No options set for the current thread.")

def set_options(opts: EigenOptions) -> None:
    global _opts
    _opts[opts.key] = opts
