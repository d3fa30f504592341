from __future__ import annotations
import numpy as np
import pytest
import scipy.linalg

from geologm.kernels.expm import _scaling_exponent, expm
from geologm.kernels.logm import logm
from geologm.rotations import axis_rotation_3d, plane_rotation


def _approx(A, B, r=1e-10, a=1e-10):
    assert np.array(A).shape == np.array(B).shape
    assert np.allclose(A, B, rtol=r, atol=a), f"\nA=\n{A}\nB=\n{B}"


@pytest.mark.parametrize(
    "norm, k",
    [(0.0, 0), (0.25, 0), (0.5, 0), (0.51, 1), (1.0, 1), (2.0, 2), (3.0, 3)],
)
def test_scaling_exponent(norm: float, k: int):
    assert _scaling_exponent(norm) == k


@pytest.mark.parametrize("method", ["taylor", "pade"])
def test_expm_zero_is_identity(method: str):
    _approx(expm(np.zeros((3, 3)), method=method), np.eye(3), r=0, a=0)


def test_expm_taylor_diagonal():
    E = expm(np.diag([1.0, 2.0, -1.0]))
    _approx(E, np.diag(np.exp([1.0, 2.0, -1.0])), r=1e-6, a=1e-8)


@pytest.mark.parametrize("method, tol", [("taylor", 1e-5), ("pade", 1e-11)])
def test_expm_matches_scipy(method: str, tol: float, rng):
    X = 0.3 * rng.standard_normal((4, 4))
    _approx(expm(X, method=method), scipy.linalg.expm(X), r=tol, a=tol)


def test_expm_small_input_is_plain_series():
    # no scaling: I + A + ... + A^6/720
    A = np.array([[0.0, 0.1], [0.2, 0.0]])
    expected = np.eye(2)
    term = np.eye(2)
    for k in range(1, 7):
        term = term @ A / k
        expected = expected + term
    _approx(expm(A), expected, r=1e-15, a=1e-15)


def test_expm_of_skew_is_rotation():
    theta = 1.3
    K = np.array([[0.0, -theta], [theta, 0.0]])
    _approx(expm(K).real, plane_rotation(2, 0, 1, theta), r=1e-6, a=1e-6)


@pytest.mark.parametrize("strategy", ["general", "schur", "schur-complex"])
def test_expm_inverts_logm(strategy: str):
    R = axis_rotation_3d("x", 0.3) @ axis_rotation_3d("y", 1.4)
    _approx(expm(logm(R, strategy=strategy)).real, R, r=1e-6, a=1e-6)


def test_expm_complex_input():
    M = np.diag([1j * np.pi, -1j * np.pi])
    _approx(expm(M, method="pade"), -np.eye(2), a=1e-10)


def test_expm_unknown_method():
    with pytest.raises(ValueError, match="Unknown expm method"):
        expm(np.eye(2), method="nope")
