from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Protocol

import numpy as np
import scipy.linalg

from geologm._constants import (
    BLOCK_TOL,
    DENOM_TOL,
    LOG_ZERO_SUBSTITUTE,
    NON_DIAGONAL_WARN,
    OFFDIAG_TOL,
    SCHUR_TOL,
    SQRT_MAX_STEPS,
    SQRT_TARGET,
    TAYLOR_MAX_TERMS,
    TAYLOR_TOL,
)
from geologm.kernels.algebra import as_complex, ctranspose, ensure_square, frobenius, identity
from geologm.kernels.sqrtm import sqrtm_db

LOG = logging.getLogger("glm.logm")

Notify = Callable[[str], None]


def _emit(notify: Notify | None, msg: str) -> None:
    if notify is None:
        LOG.warning(msg)
    else:
        notify(msg)


# ---------- inverse scaling-and-squaring ----------

def log_near_identity(A: np.ndarray) -> np.ndarray:
    """
    log(A) from the series log(I + X) = X - X^2/2 + X^3/3 - ..., X = A - I.

    Summed up to X^20, stopping once a term's Frobenius norm drops below
    1e-15. Only meaningful when A is close to I; nothing checks that.
    """
    A = as_complex(A)
    X = A - identity(A.shape[0])

    result = X.copy()
    power = X.copy()
    for k in range(2, TAYLOR_MAX_TERMS + 1):
        power = power @ X
        sign = -1.0 if k % 2 == 0 else 1.0
        term = (sign / k) * power
        result += term
        if frobenius(term) < TAYLOR_TOL:
            break
    return result


def logm_scaling_squaring(M: np.ndarray) -> np.ndarray:
    """
    General matrix logarithm by inverse scaling-and-squaring.

    Square roots are taken until ||A - I||_F < 0.5 (at most 20 of them),
    the series is applied, and the result is scaled back by 2^k since
    log(M) = 2^k log(M^(1/2^k)).

    Each square root runs at most 10 Denman-Beavers steps. For rotations
    with an eigen-angle close to pi (within about 0.01) the first root has
    not converged by then and the result drifts from the Schur log by O(1).
    Use the schur strategy for such input.
    """
    M = ensure_square(M)
    A = as_complex(M)
    I = identity(A.shape[0])

    k = 0
    while k < SQRT_MAX_STEPS:
        if frobenius(A - I) < SQRT_TARGET:
            break
        A = sqrtm_db(A)
        k += 1

    return log_near_identity(A) * float(1 << k)


# ---------- Schur-based logarithm ----------

def _log_scalar(lam: float) -> complex:
    """Principal log of a real eigenvalue, with a finite stand-in for log(0)."""
    if lam > 0.0:
        return complex(math.log(lam), 0.0)
    if lam < 0.0:
        return complex(math.log(-lam), math.pi)
    return complex(LOG_ZERO_SUBSTITUTE, 0.0)


def _log_block_2x2(B: np.ndarray) -> np.ndarray:
    """
    Log of a 2x2 diagonal block [[a, b], [c, d]] of a real Schur form.

    Complex pair mu +- i nu = r e^{+-i theta}: B = mu I + N with N^2 = -nu^2 I,
    so log(B) = ln(r) I + (theta / nu) N. For a rotation block
    [[cos, -sin], [sin, cos]] this is [[0, -theta], [theta, 0]].

    Real pair: only the diagonal is filled, with the principal logs of
    (trace +- sqrt(disc)) / 2.
    """
    a, b = B[0, 0], B[0, 1]
    c, d = B[1, 0], B[1, 1]
    trace = a + d
    det = a * d - b * c
    disc = trace * trace - 4.0 * det

    L = np.zeros((2, 2), dtype=complex)
    if disc < 0.0:
        mu = trace / 2.0
        nu = math.sqrt(-disc) / 2.0
        r = math.hypot(mu, nu)
        theta = math.atan2(nu, mu)
        N = np.array([[a - mu, b], [c, d - mu]], dtype=float)
        L[:, :] = math.log(r) * np.eye(2) + (theta / nu) * N
    else:
        sq = math.sqrt(disc)
        L[0, 0] = _log_scalar((trace + sq) / 2.0)
        L[1, 1] = _log_scalar((trace - sq) / 2.0)
    return L


def log_quasi_triangular(T: np.ndarray) -> np.ndarray:
    """
    Log of a real quasi-upper-triangular Schur factor T.

    Diagonal 1x1 and 2x2 blocks get closed-form logs. Entries above the
    blocks use the first-order divided difference
        L[i, j] = T[i, j] / (L[i, i] - L[j, j]),
    which is only accurate when the off-diagonal part of T is small (T of
    an orthogonal matrix is block diagonal). It is not Parlett's recurrence.
    The general strategy has its own limit near eigen-angle pi, see
    logm_scaling_squaring.
    """
    T = np.asarray(T, dtype=float)
    n = T.shape[0]
    L = np.zeros((n, n), dtype=complex)
    in_block = np.zeros(n, dtype=bool)

    i = 0
    while i < n:
        if i + 1 < n and abs(T[i + 1, i]) > BLOCK_TOL:
            L[i:i + 2, i:i + 2] = _log_block_2x2(T[i:i + 2, i:i + 2])
            in_block[i] = in_block[i + 1] = True
            i += 2
        else:
            L[i, i] = _log_scalar(T[i, i])
            i += 1

    for col in range(1, n):
        for row in range(col):
            if in_block[row] or in_block[col]:
                continue
            t_ij = T[row, col]
            if abs(t_ij) <= OFFDIAG_TOL:
                continue
            denom = L[row, row] - L[col, col]
            if abs(denom) > DENOM_TOL:
                L[row, col] = t_ij / denom
    return L


def log_diagonal(T: np.ndarray, notify: Notify | None = None) -> np.ndarray:
    """
    Log of a complex Schur factor T treated as exactly diagonal.

    Valid when the input is unitary/orthogonal. If the strictly upper part
    of T is larger than 1e-6 a diagnostic is emitted and it is ignored anyway.
    """
    T = np.asarray(T, dtype=complex)
    off = frobenius(np.triu(T, k=1))
    if off > NON_DIAGONAL_WARN:
        _emit(notify, f"Schur factor is not diagonal (off-diagonal norm {off:.3e}); input is not orthogonal")

    diag = np.diag(T)
    logs = np.empty_like(diag)
    for k, lam in enumerate(diag):
        logs[k] = complex(LOG_ZERO_SUBSTITUTE, 0.0) if lam == 0 else np.log(lam)
    return np.diag(logs)


def schur_decompose(M: np.ndarray, output: str = "real") -> tuple[np.ndarray, np.ndarray] | None:
    """
    (Q, T) with M = Q T Q^H, or None if LAPACK fails to converge, the
    input is not finite, or the reconstruction residual is too large.
    """
    try:
        T, Q = scipy.linalg.schur(M, output=output)
    except (np.linalg.LinAlgError, ValueError):
        return None

    residual = frobenius(Q @ T @ ctranspose(Q) - M)
    if not residual <= SCHUR_TOL * max(1.0, frobenius(M)):
        return None
    return Q, T


def logm_schur(M: np.ndarray, notify: Notify | None = None) -> np.ndarray:
    """
    Log of a (near-)orthogonal real matrix via its real Schur form.

    log(M) = Q log(T) Q^T with log(T) from `log_quasi_triangular`.
    Falls back to `logm_scaling_squaring` if the decomposition fails.
    """
    M = np.asarray(ensure_square(M), dtype=float)
    qt = schur_decompose(M, output="real")
    if qt is None:
        _emit(notify, "Schur decomposition failed, falling back to scaling and squaring")
        return logm_scaling_squaring(M)

    Q, T = qt
    Qc = as_complex(Q)
    return Qc @ log_quasi_triangular(T) @ ctranspose(Qc)


def logm_schur_complex(M: np.ndarray, notify: Notify | None = None) -> np.ndarray:
    """Log of an orthogonal real matrix via its complex (diagonal) Schur form."""
    M = np.asarray(ensure_square(M), dtype=float)
    qt = schur_decompose(M, output="complex")
    if qt is None:
        _emit(notify, "Complex Schur decomposition failed, falling back to scaling and squaring")
        return logm_scaling_squaring(M)

    Q, T = qt
    return Q @ log_diagonal(T, notify=notify) @ ctranspose(Q)


# ---------- strategies ----------

class LogStrategy(Protocol):
    name: str
    def logm(self, M: np.ndarray, notify: Notify | None = None) -> np.ndarray: ...


_STRATEGIES: Dict[str, LogStrategy] = {}


def register_strategy(name: str):
    """Class decorator to register a logarithm strategy under a given name."""
    def deco(cls):
        cls.name = name
        _STRATEGIES[name] = cls()
        return cls
    return deco


@register_strategy("general")
class GeneralScalingSquaring:
    """Inverse scaling-and-squaring; any real square matrix with a convergent root chain."""

    def logm(self, M: np.ndarray, notify: Notify | None = None) -> np.ndarray:
        return logm_scaling_squaring(M)


@register_strategy("schur")
class SchurOrthogonal:
    """Real Schur form with 2x2 block handling; retries with `general` on failure."""

    def logm(self, M: np.ndarray, notify: Notify | None = None) -> np.ndarray:
        return logm_schur(M, notify=notify)


@register_strategy("schur-complex")
class SchurDiagonal:
    """Complex Schur form treated as diagonal; retries with `general` on failure."""

    def logm(self, M: np.ndarray, notify: Notify | None = None) -> np.ndarray:
        return logm_schur_complex(M, notify=notify)


def available_strategies() -> list[str]:
    return sorted(_STRATEGIES)


def get_strategy(strategy: str | LogStrategy) -> LogStrategy:
    if not isinstance(strategy, str):
        return strategy
    try:
        return _STRATEGIES[strategy]
    except KeyError as exc:
        raise ValueError(
            f"Unknown logarithm strategy '{strategy}'. Available: {available_strategies()}"
        ) from exc


def logm(M: np.ndarray, strategy: str | LogStrategy = "general", notify: Notify | None = None) -> np.ndarray:
    """Principal matrix logarithm of M using the selected strategy."""
    return get_strategy(strategy).logm(M, notify=notify)
