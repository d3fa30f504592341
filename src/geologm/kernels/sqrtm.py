from __future__ import annotations
import numpy as np

from geologm._constants import DB_MAX_ITER, DB_TOL
from geologm.kernels.algebra import as_complex, frobenius, identity, try_inverse


def sqrtm_db(M: np.ndarray, max_iter: int = DB_MAX_ITER, tol: float = DB_TOL) -> np.ndarray:
    """
    Complex matrix square root by Denman-Beavers iteration.

      Y_{k+1} = (Y_k + Z_k^{-1}) / 2
      Z_{k+1} = (Z_k + Y_k^{-1}) / 2

    with Y_0 = M, Z_0 = I. Y converges to sqrt(M), Z to its inverse.
    Stops once ||Y_{k+1} - Y_k||_F < tol or after max_iter steps.

    If Y_k or Z_k turns out singular, M itself is returned unchanged.
    Nothing else signals that case; check the residual Y @ Y - M if a
    true square root is required.
    """
    M = as_complex(M)
    Y = M.copy()
    Z = identity(M.shape[0])

    for _ in range(max_iter):
        Y_inv = try_inverse(Y)
        if Y_inv is None:
            return M
        Z_inv = try_inverse(Z)
        if Z_inv is None:
            return M

        Y_new = 0.5 * (Y + Z_inv)
        Z_new = 0.5 * (Z + Y_inv)

        diff = frobenius(Y_new - Y)
        Y, Z = Y_new, Z_new
        if diff < tol:
            break

    return Y
