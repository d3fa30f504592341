from __future__ import annotations
from typing import Sequence
import numpy as np


def _check_dim(n) -> int:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"Dimension n must be an integer, got {n!r}.")
    if n < 1:
        raise ValueError(f"Dimension n must be >= 1, got {n}.")
    return int(n)


def flat_to_matrix(arr: Sequence[float], n: int) -> np.ndarray:
    """
    Row-major flat array of length n*n -> n x n float matrix (arr[i*n+j] = M[i,j]).
    """
    n = _check_dim(n)
    a = np.asarray(arr, dtype=float).ravel()
    if a.size != n * n:
        raise ValueError(f"Flat matrix of dimension n={n} needs {n * n} values, got {a.size}.")
    return a.reshape(n, n).copy()


def flat_complex_to_matrix(arr: Sequence[float], n: int) -> np.ndarray:
    """
    Row-major interleaved (re, im) flat array of length 2*n*n -> n x n complex matrix.
    """
    n = _check_dim(n)
    a = np.asarray(arr, dtype=float).ravel()
    if a.size != 2 * n * n:
        raise ValueError(
            f"Interleaved complex matrix of dimension n={n} needs {2 * n * n} values, got {a.size}."
        )
    return (a[0::2] + 1j * a[1::2]).reshape(n, n)


def matrix_to_flat_real(M: np.ndarray) -> list[float]:
    """Row-major flat list of the real parts of M."""
    return [float(x) for x in np.real(np.asarray(M)).ravel()]


def matrix_to_flat_complex(M: np.ndarray) -> list[float]:
    """Row-major flat list [re00, im00, re01, im01, ...]."""
    M = np.asarray(M, dtype=complex).ravel()
    out = np.empty(2 * M.size, dtype=float)
    out[0::2] = M.real
    out[1::2] = M.imag
    return out.tolist()
