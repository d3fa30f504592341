from __future__ import annotations
import numpy as np
import pytest
import scipy.linalg

from geologm.kernels.algebra import frobenius
from geologm.kernels.logm import logm, logm_scaling_squaring
from geologm.rotations import axis_rotation_3d, plane_rotation


def _approx(A, B, r=1e-10, a=1e-10):
    assert np.array(A).shape == np.array(B).shape
    assert np.allclose(A, B, rtol=r, atol=a), f"\nA=\n{A}\nB=\n{B}"


@pytest.mark.parametrize("n", [1, 2, 3, 5])
def test_log_identity_is_zero(n: int):
    assert frobenius(logm_scaling_squaring(np.eye(n))) < 1e-10


def test_log_positive_diagonal():
    d = np.array([2.0, 5.0, 0.5])
    L = logm_scaling_squaring(np.diag(d))
    _approx(L, np.diag(np.log(d)))


def test_log_2d_rotation_45deg():
    theta = np.pi / 4
    R = plane_rotation(2, 0, 1, theta)
    L = logm_scaling_squaring(R)

    expected = np.array([[0.0, -theta], [theta, 0.0]])
    _approx(L.real, expected)
    assert np.max(np.abs(L.imag)) < 1e-10


@pytest.mark.parametrize("theta", [0.1, 1.0, 2.0, 3.0])
def test_log_2d_rotation_is_skew(theta: float):
    L = logm_scaling_squaring(plane_rotation(2, 0, 1, theta))
    assert abs(L[0, 0].real) < 1e-10
    assert abs(L[1, 1].real) < 1e-10
    assert abs(abs(L[0, 1]) - theta) < 1e-8
    assert abs(abs(L[1, 0]) - theta) < 1e-8
    _approx(L, -L.T, a=1e-8)


def test_log_3d_rotation_keeps_axis():
    L = logm_scaling_squaring(axis_rotation_3d("z", np.pi / 6))
    assert abs(L[2, 2]) < 1e-10
    assert np.max(np.abs(L[2, :])) < 1e-10
    assert np.max(np.abs(L[:, 2])) < 1e-10


def test_log_matches_scipy_on_exponential(rng):
    X = 0.3 * rng.standard_normal((4, 4))
    M = scipy.linalg.expm(X)
    L = logm_scaling_squaring(M)
    _approx(L, X, r=1e-8, a=1e-8)


def test_logm_default_strategy_is_general():
    R = axis_rotation_3d("x", 0.7)
    _approx(logm(R), logm_scaling_squaring(R), r=0, a=0)


def test_logm_rejects_non_square():
    with pytest.raises(ValueError):
        logm_scaling_squaring(np.zeros((2, 3)))


def test_logm_unknown_strategy():
    with pytest.raises(ValueError, match="Unknown logarithm strategy"):
        logm(np.eye(2), strategy="nope")
