"""
Flat-array entry points for host bindings.

Matrices cross this boundary as row-major float sequences of length n*n,
accompanied by n. Complex results come back interleaved (re, im) with
length 2*n*n; real results carry real parts only.

- matrix_logm / matrix_logm_eigen       : complex flat
- matrix_expm                           : real flat
- geodesic_distance(_eigen)             : float
- geodesic_interp(_eigen)               : real flat
"""
from __future__ import annotations

import logging
from typing import Sequence

from geologm import geodesic
from geologm.io.flat import (
    flat_to_matrix,
    matrix_to_flat_complex,
    matrix_to_flat_real,
)
from geologm.kernels.expm import expm
from geologm.kernels.logm import Notify, logm

LOG = logging.getLogger("glm.api")

EIGEN_STRATEGY = "schur"


def init() -> None:
    LOG.info("geologm kernels initialized")


def matrix_logm(matrix: Sequence[float], n: int, notify: Notify | None = None) -> list[float]:
    M = flat_to_matrix(matrix, n)
    return matrix_to_flat_complex(logm(M, strategy="general", notify=notify))


def matrix_logm_eigen(matrix: Sequence[float], n: int, notify: Notify | None = None) -> list[float]:
    M = flat_to_matrix(matrix, n)
    return matrix_to_flat_complex(logm(M, strategy=EIGEN_STRATEGY, notify=notify))


def matrix_expm(matrix: Sequence[float], n: int) -> list[float]:
    M = flat_to_matrix(matrix, n)
    return matrix_to_flat_real(expm(M))


def geodesic_distance(r: Sequence[float], t: Sequence[float], n: int, notify: Notify | None = None) -> float:
    return geodesic.geodesic_distance(
        flat_to_matrix(r, n), flat_to_matrix(t, n), strategy="general", notify=notify
    )


def geodesic_distance_eigen(r: Sequence[float], t: Sequence[float], n: int, notify: Notify | None = None) -> float:
    return geodesic.geodesic_distance(
        flat_to_matrix(r, n), flat_to_matrix(t, n), strategy=EIGEN_STRATEGY, notify=notify
    )


def geodesic_interp(
    a: Sequence[float], b: Sequence[float], t: float, n: int, notify: Notify | None = None
) -> list[float]:
    C = geodesic.geodesic_interp(
        flat_to_matrix(a, n), flat_to_matrix(b, n), t, strategy="general", notify=notify
    )
    return matrix_to_flat_real(C)


def geodesic_interp_eigen(
    a: Sequence[float], b: Sequence[float], t: float, n: int, notify: Notify | None = None
) -> list[float]:
    C = geodesic.geodesic_interp(
        flat_to_matrix(a, n), flat_to_matrix(b, n), t, strategy=EIGEN_STRATEGY, notify=notify
    )
    return matrix_to_flat_real(C)
