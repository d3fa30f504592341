from __future__ import annotations
import numpy as np

_AXES = {"x": (1, 2), "y": (2, 0), "z": (0, 1)}


def plane_rotation(n: int, i: int, j: int, theta: float) -> np.ndarray:
    """
    n x n rotation by theta in the (i, j) coordinate plane (0-based):
      R[i,i] = cos, R[i,j] = -sin, R[j,i] = sin, R[j,j] = cos.
    """
    if n < 2:
        raise ValueError(f"Plane rotation needs n >= 2, got {n}.")
    if not (0 <= i < n and 0 <= j < n) or i == j:
        raise ValueError(f"Invalid plane ({i}, {j}) for n={n}.")
    R = np.eye(n)
    c, s = np.cos(theta), np.sin(theta)
    R[i, i] = c
    R[i, j] = -s
    R[j, i] = s
    R[j, j] = c
    return R


def axis_rotation_3d(axis: str, theta: float) -> np.ndarray:
    """3x3 right-handed rotation about 'x', 'y' or 'z'."""
    key = axis.strip().lower()
    if key not in _AXES:
        raise ValueError(f"Unknown axis '{axis}' (use x, y, z)")
    i, j = _AXES[key]
    return plane_rotation(3, i, j, theta)


def random_rotation(n: int, rng: np.random.Generator | None = None) -> np.ndarray:
    """
    Random n x n rotation (det = +1) from the QR decomposition of a
    Gaussian matrix.
    """
    rng = np.random.default_rng() if rng is None else rng
    q, r = np.linalg.qr(rng.standard_normal((n, n)))
    # make the factorization unique so q is Haar distributed
    q = q * np.sign(np.diag(r))
    if np.linalg.det(q) < 0:
        q[:, -1] *= -1.0
    return q
