from __future__ import annotations
import math
import numpy as np


def parse_matrix(text: str, n: int | None = None) -> np.ndarray:
    """
    Parse a square matrix from whitespace-separated numbers, rows optionally
    separated by ';'. If n is None it is inferred from the number count,
    which must then be a perfect square. With ';' present every row must
    hold exactly n numbers.
    """
    rows = [r.replace(",", " ").split() for r in text.split(";")]
    rows = [r for r in rows if r]
    vals = [float(x) for r in rows for x in r]
    if not vals:
        raise ValueError("Empty matrix input.")
    if n is None:
        n = math.isqrt(len(vals))
    if n * n != len(vals):
        raise ValueError(f"Square matrix input needs n*n numbers; got {len(vals)}.")
    if ";" in text and (len(rows) != n or any(len(r) != n for r in rows)):
        raise ValueError(
            f"Rows separated by ';' must each hold {n} numbers; got {[len(r) for r in rows]}."
        )
    return np.array(vals, float).reshape(n, n)


def matrix_from_value(value, name: str = "matrix") -> np.ndarray:
    """Matrix from text ('a b; c d') or nested lists, as found in YAML configs."""
    if isinstance(value, str):
        return parse_matrix(value)
    M = np.array(value, float)
    if M.ndim != 2 or M.shape[0] != M.shape[1]:
        raise ValueError(f"'{name}' must be a square matrix, got shape {M.shape}.")
    return M


def format_matrix(M: np.ndarray, precision: int = 12) -> str:
    """
    Format a real matrix as: 'M11 M12 ...; M21 M22 ...; ...'
    """
    M = np.array(M, float)
    M = np.round(M, precision)
    rows = [" ".join(f"{x:.{precision}g}" for x in row) for row in M]
    return "; ".join(rows)


def format_complex_matrix(M: np.ndarray, precision: int = 12) -> str:
    """
    Format a complex matrix with entries written as 're+imj'.
    """
    M = np.array(M, complex)
    re = np.round(M.real, precision)
    im = np.round(M.imag, precision)
    rows = [
        " ".join(f"{a:.{precision}g}{b:+.{precision}g}j" for a, b in zip(ra, rb))
        for ra, rb in zip(re, im)
    ]
    return "; ".join(rows)
