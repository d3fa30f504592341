from __future__ import annotations
import math
import numpy as np

from geologm._constants import EXPM_ORDER, EXPM_TARGET
from geologm.kernels.algebra import as_complex, ensure_square, frobenius, identity

EXPM_METHODS = ("taylor", "pade")


def _scaling_exponent(norm: float) -> int:
    """Smallest k >= 0 with norm / 2^k <= 0.5."""
    if norm <= 0.0:
        return 0
    return max(0, math.ceil(math.log2(norm / EXPM_TARGET)))


def _taylor(A: np.ndarray, order: int = EXPM_ORDER) -> np.ndarray:
    """I + A + A^2/2! + ... + A^order/order!"""
    result = identity(A.shape[0])
    term = identity(A.shape[0])
    for k in range(1, order + 1):
        term = term @ A / k
        result = result + term
    return result


def _pade(A: np.ndarray, q: int = EXPM_ORDER) -> np.ndarray:
    """[q/q] Pade approximant D(A)^{-1} N(A)."""
    I = identity(A.shape[0])
    N = I.copy()
    D = I.copy()
    power = I.copy()
    c = 1.0
    for k in range(1, q + 1):
        c *= (q - k + 1) / (k * (2 * q - k + 1))
        power = power @ A
        N = N + c * power
        D = D + ((-1) ** k) * c * power
    return np.linalg.solve(D, N)


def expm(M: np.ndarray, method: str = "taylor") -> np.ndarray:
    """
    Matrix exponential by scaling and squaring.

    M is scaled by 2^-k so that ||M||_F / 2^k <= 0.5, the scaled matrix is
    exponentiated, and the result is squared k times.

    method:
      - 'taylor' : order-6 truncated Taylor series (default)
      - 'pade'   : [6/6] Pade rational approximant, more accurate at the
                   same scaling but needs a linear solve
    """
    if method not in EXPM_METHODS:
        raise ValueError(f"Unknown expm method '{method}'. Available: {list(EXPM_METHODS)}")

    M = as_complex(ensure_square(M))
    k = _scaling_exponent(frobenius(M))
    A = M * (2.0 ** -k)

    result = _taylor(A) if method == "taylor" else _pade(A)
    for _ in range(k):
        result = result @ result
    return result
