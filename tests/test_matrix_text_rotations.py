from __future__ import annotations
import numpy as np
import pytest

from geologm.io.matrix_text import (
    format_complex_matrix,
    format_matrix,
    matrix_from_value,
    parse_matrix,
)
from geologm.kernels.algebra import is_orthogonal
from geologm.rotations import axis_rotation_3d, plane_rotation, random_rotation


# --- text matrices ---


@pytest.mark.parametrize("text", ["1 2; 3 4", "1 2 3 4", "1,2;3,4", "  1 2 ;\n 3 4 \n"])
def test_parse_matrix_formats(text: str):
    assert np.array_equal(parse_matrix(text), [[1.0, 2.0], [3.0, 4.0]])


def test_parse_matrix_explicit_n():
    M = parse_matrix("1 0 0 0 1 0 0 0 1", n=3)
    assert np.array_equal(M, np.eye(3))


@pytest.mark.parametrize("text", ["", "1 2 3", "1 2 3 4 5"])
def test_parse_matrix_rejects_bad_count(text: str):
    with pytest.raises(ValueError):
        parse_matrix(text)


@pytest.mark.parametrize("text", ["1 2 3; 4", "1; 2 3 4", "1 2; 3 4 5 6 7 8 9"])
def test_parse_matrix_rejects_ragged_rows(text: str):
    with pytest.raises(ValueError, match="Rows separated"):
        parse_matrix(text)


def test_format_matrix():
    assert format_matrix(np.array([[1.0, 0.5], [-2.0, 0.0]]), precision=6) == "1 0.5; -2 0"


def test_format_complex_matrix():
    out = format_complex_matrix(np.array([[1 + 2j, 0.5j]]), precision=6)
    assert out == "1+2j 0+0.5j"


def test_matrix_from_value_lists_and_text():
    assert np.array_equal(matrix_from_value([[1, 0], [0, 1]]), np.eye(2))
    assert np.array_equal(matrix_from_value("1 0; 0 1"), np.eye(2))
    with pytest.raises(ValueError, match="square"):
        matrix_from_value([[1, 2, 3]], "start")


# --- rotations ---


@pytest.mark.parametrize("n, i, j", [(2, 0, 1), (4, 1, 3), (5, 4, 0)])
def test_plane_rotation_is_rotation(n: int, i: int, j: int):
    R = plane_rotation(n, i, j, 0.7)
    assert is_orthogonal(R, tol=1e-12)
    assert np.linalg.det(R) == pytest.approx(1.0)
    assert R[j, i] == pytest.approx(np.sin(0.7))


@pytest.mark.parametrize("n, i, j", [(1, 0, 0), (3, 1, 1), (3, 0, 3)])
def test_plane_rotation_rejects_bad_plane(n: int, i: int, j: int):
    with pytest.raises(ValueError):
        plane_rotation(n, i, j, 0.1)


def test_axis_rotation_3d_z_fixes_axis():
    R = axis_rotation_3d("Z", 0.3)
    assert np.allclose(R @ [0.0, 0.0, 1.0], [0.0, 0.0, 1.0])
    assert np.allclose(R @ [1.0, 0.0, 0.0], [np.cos(0.3), np.sin(0.3), 0.0])


def test_axis_rotation_3d_unknown_axis():
    with pytest.raises(ValueError):
        axis_rotation_3d("w", 0.1)


@pytest.mark.parametrize("n", [2, 3, 4, 6])
def test_random_rotation(n: int, rng):
    R = random_rotation(n, rng)
    assert is_orthogonal(R, tol=1e-10)
    assert np.linalg.det(R) == pytest.approx(1.0)
