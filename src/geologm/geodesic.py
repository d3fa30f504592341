from __future__ import annotations
from typing import Iterable

import numpy as np

from geologm.kernels.algebra import as_complex, ensure_square, frobenius, real_part
from geologm.kernels.expm import expm
from geologm.kernels.logm import LogStrategy, Notify, logm


def _pair(A: np.ndarray, B: np.ndarray, names: tuple[str, str]) -> tuple[np.ndarray, np.ndarray]:
    A = np.asarray(ensure_square(A, names[0]), dtype=float)
    B = np.asarray(ensure_square(B, names[1]), dtype=float)
    if A.shape != B.shape:
        raise ValueError(f"{names[0]} and {names[1]} differ in shape: {A.shape} vs {B.shape}.")
    return A, B


def relative_log(
    A: np.ndarray,
    B: np.ndarray,
    strategy: str | LogStrategy = "general",
    notify: Notify | None = None,
) -> np.ndarray:
    """log(A^T B), the tangent vector at A pointing to B."""
    A, B = _pair(A, B, ("A", "B"))
    return logm(A.T @ B, strategy=strategy, notify=notify)


def geodesic_distance(
    R: np.ndarray,
    T: np.ndarray,
    strategy: str | LogStrategy = "general",
    notify: Notify | None = None,
) -> float:
    """
    d(R, T) = || log(R^T T) ||_F

    Zero (up to rounding) for R = T. Symmetric in R, T for rotations, since
    log(T^T R) = -log(R^T T) on the principal branch away from angle pi.
    """
    R, T = _pair(R, T, ("R", "T"))
    return frobenius(logm(R.T @ T, strategy=strategy, notify=notify))


def geodesic_interp(
    A: np.ndarray,
    B: np.ndarray,
    t: float,
    strategy: str | LogStrategy = "general",
    notify: Notify | None = None,
    expm_method: str = "taylor",
) -> np.ndarray:
    """
    C(t) = A exp(t log(A^T B)), real part only.

    C(0) = A and C(1) = B up to rounding. t is not clamped; values outside
    [0, 1] extrapolate along the same geodesic.
    """
    A, B = _pair(A, B, ("A", "B"))
    L = logm(A.T @ B, strategy=strategy, notify=notify)
    R_interp = expm(float(t) * L, method=expm_method)
    return real_part(as_complex(A) @ R_interp)


def geodesic_path(
    A: np.ndarray,
    B: np.ndarray,
    ts: Iterable[float],
    strategy: str | LogStrategy = "general",
    notify: Notify | None = None,
    expm_method: str = "taylor",
) -> np.ndarray:
    """Stack of geodesic_interp(A, B, t) for every t, shape (len(ts), n, n)."""
    A, B = _pair(A, B, ("A", "B"))
    L = logm(A.T @ B, strategy=strategy, notify=notify)
    Ac = as_complex(A)
    frames = [real_part(Ac @ expm(float(t) * L, method=expm_method)) for t in ts]
    if not frames:
        return np.zeros((0,) + A.shape)
    return np.stack(frames)


def perturb(R: np.ndarray, K: np.ndarray, eps: float, expm_method: str = "taylor") -> np.ndarray:
    """H(eps) = R exp(eps K); K is usually skew-symmetric (a swivel generator)."""
    R, K = _pair(R, K, ("R", "K"))
    return real_part(as_complex(R) @ expm(float(eps) * K, method=expm_method))


def distance_derivative(
    R: np.ndarray,
    T: np.ndarray,
    K: np.ndarray,
    h: float = 1e-6,
    strategy: str | LogStrategy = "general",
    notify: Notify | None = None,
) -> float:
    """
    d/d(eps) of d(R exp(eps K), T) at eps = 0, by central difference:
      [d(H(h), T) - d(H(-h), T)] / (2h)
    """
    if h <= 0.0:
        raise ValueError(f"Step h must be positive, got {h}.")
    R, T = _pair(R, T, ("R", "T"))
    d_plus = geodesic_distance(perturb(R, K, h), T, strategy=strategy, notify=notify)
    d_minus = geodesic_distance(perturb(R, K, -h), T, strategy=strategy, notify=notify)
    return (d_plus - d_minus) / (2.0 * h)
