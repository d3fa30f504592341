#!/usr/bin/env python3

# Denman-Beavers square root
DB_MAX_ITER: int = 10
DB_TOL: float = 1e-12

# log(I + X) series
TAYLOR_MAX_TERMS: int = 20
TAYLOR_TOL: float = 1e-15

# inverse scaling-and-squaring: take square roots until ||A - I||_F < SQRT_TARGET
SQRT_TARGET: float = 0.5
SQRT_MAX_STEPS: int = 20

# Schur path
# a decomposition whose residual ||Q T Q^H - M||_F exceeds SCHUR_TOL * max(1, ||M||_F)
# counts as failed
SCHUR_TOL: float = 1e-12
BLOCK_TOL: float = 1e-10
OFFDIAG_TOL: float = 1e-12
DENOM_TOL: float = 1e-10
NON_DIAGONAL_WARN: float = 1e-6
LOG_ZERO_SUBSTITUTE: float = -1e10

# scaling-and-squaring exponential
EXPM_TARGET: float = 0.5
EXPM_ORDER: int = 6
