from __future__ import annotations
import numpy as np


def identity(n: int) -> np.ndarray:
    """Complex n x n identity."""
    return np.eye(n, dtype=complex)


def as_complex(M: np.ndarray) -> np.ndarray:
    """Copy of M as a complex128 array."""
    return np.array(M, dtype=complex)


def ensure_square(M: np.ndarray, name: str = "matrix") -> np.ndarray:
    """Return M as an ndarray, or raise if it is not a non-empty square 2D array."""
    M = np.asarray(M)
    if M.ndim != 2 or M.shape[0] != M.shape[1] or M.shape[0] == 0:
        raise ValueError(f"{name} must be a non-empty square matrix, got shape {M.shape}.")
    return M


def frobenius(M: np.ndarray) -> float:
    return float(np.sqrt(np.sum(np.abs(M) ** 2)))


def ctranspose(M: np.ndarray) -> np.ndarray:
    """Conjugate (Hermitian) transpose."""
    return np.conj(M).T


def try_inverse(M: np.ndarray) -> np.ndarray | None:
    """
    Inverse of M, or None when LAPACK reports M as singular.

    Only exact singularity (a zero pivot) is detected; ill-conditioned
    matrices are inverted as-is.
    """
    try:
        return np.linalg.inv(M)
    except np.linalg.LinAlgError:
        return None


def is_orthogonal(M: np.ndarray, tol: float = 1e-8) -> bool:
    """True if M^H M = I within tol (Frobenius norm)."""
    M = ensure_square(M)
    n = M.shape[0]
    return frobenius(ctranspose(M) @ M - np.eye(n)) < tol


def real_part(M: np.ndarray) -> np.ndarray:
    """Real part as float64, discarding any imaginary residue."""
    return np.ascontiguousarray(np.real(M), dtype=float)
