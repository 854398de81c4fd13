# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from math import sqrt, hypot

from .utils import sign

def wilkinson_shift(tmm: float, tnn: float, tmn: float) -> float:
    """
    Eigenvalue of the symmetric matrix :math:`[[t_{mm}, t_{mn}], [t_{mn}, t_{nn}]]` closest to
    its trailing entry :math:`t_{nn}`. The denominator never vanishes, as :math:`d^2 + t_{mn}^2 > 0`
    whenever the off-diagonal entry is non-zero.
    """
    sq_tmn = tmn * tmn
    if sq_tmn == 0.0:
        return tnn
    d = (tmm - tnn) * 0.5
    return tnn - sq_tmn / (d + sign(d) * sqrt(d * d + sq_tmn))

def symmetric_eigenvalues_2x2(a: float, b: float, c: float) -> tuple[float, float]:
    """
    Closed form eigenvalues of :math:`[[a, b], [b, c]]`. The first value is the one paired with
    the leading diagonal entry, so that :math:`(\\lambda_0 - c, b)` is a well conditioned
    eigenvector direction.
    """
    d = (a - c) * 0.5
    mean = (a + c) * 0.5
    radius = hypot(d, b)
    s = sign(d)
    return mean + s * radius, mean - s * radius
