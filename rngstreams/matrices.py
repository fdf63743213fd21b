"""
3x3 matrix algebra modulo m for MRG32k3a state transitions and jump-ahead.

Each component recurrence of MRG32k3a is linear in its 3-vector state, so
advancing it by n steps is multiplication by the n-th power of its transition
matrix. The tables below are those powers for n = 1, -1, 2^76 and 2^127.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from rngstreams.modarith import mul_add_mod

__all__ = [
    "A1P0", "A2P0", "INV_A1", "INV_A2",
    "A1P76", "A2P76", "A1P127", "A2P127",
    "identity",
    "mat_vec_mod",
    "mat_mat_mod",
    "mat_pow2_mod",
    "mat_pow_mod",
    "jump_matrix",
]


def _table(rows: Sequence[Sequence[int]]) -> np.ndarray:
    A = np.array(rows, dtype=np.int64)
    A.setflags(write=False)
    return A


# --- Transition matrices (literal; they define the generator) ---

# First component, one step
A1P0 = _table([
    [0, 1, 0],
    [0, 0, 1],
    [-810728, 1403580, 0],
])

# Second component, one step
A2P0 = _table([
    [0, 1, 0],
    [0, 0, 1],
    [-1370589, 0, 527612],
])

# Inverse of A1P0 (one step backward)
INV_A1 = _table([
    [184888585, 0, 1945170933],
    [1, 0, 0],
    [0, 1, 0],
])

# Inverse of A2P0
INV_A2 = _table([
    [0, 360363334, 4225571728],
    [1, 0, 0],
    [0, 1, 0],
])

# 2^76 steps: sub-stream length
A1P76 = _table([
    [82758667, 1871391091, 4127413238],
    [3672831523, 69195019, 1871391091],
    [3672091415, 3528743235, 69195019],
])

A2P76 = _table([
    [1511326704, 3759209742, 1610795712],
    [4292754251, 1511326704, 3889917532],
    [3859662829, 4292754251, 3708466080],
])

# 2^127 steps: stream length
A1P127 = _table([
    [2427906178, 3580155704, 949770784],
    [226153695, 1230515664, 3580155704],
    [1988835001, 986791581, 1230515664],
])

A2P127 = _table([
    [1464411153, 277697599, 1610723613],
    [32183930, 1464411153, 1022607788],
    [2824425944, 32183930, 2093834863],
])


def identity() -> np.ndarray:
    return np.eye(3, dtype=np.int64)


def _as_matrix(A: np.ndarray) -> np.ndarray:
    A = np.asarray(A, dtype=np.int64)
    if A.shape != (3, 3):
        raise ValueError(f"A must be 3x3; got shape {A.shape}")
    return A


def mat_vec_mod(A: np.ndarray, s: Sequence[int], m: int) -> np.ndarray:
    """
    Return v = A @ s mod m.

    Each entry is built with three chained multiply-accumulate steps, so no
    intermediate leaves the exact range. ``s`` is only read; passing the
    same storage for the input and the destination of the result is safe.

    Parameters
    ----------
    A : (3, 3) array of ints
    s : length-3 sequence of ints, each in (-m, m)
    m : modulus

    Returns
    -------
    v : (3,) int64 ndarray with entries in [0, m)
    """
    A = _as_matrix(A)
    s0, s1, s2 = (int(x) for x in s)

    v = np.empty(3, dtype=np.int64)
    for i in range(3):
        x = mul_add_mod(int(A[i, 0]), s0, 0, m)
        x = mul_add_mod(int(A[i, 1]), s1, x, m)
        x = mul_add_mod(int(A[i, 2]), s2, x, m)
        v[i] = x
    return v


def mat_mat_mod(A: np.ndarray, B: np.ndarray, m: int) -> np.ndarray:
    """
    Return C = A @ B mod m, one column of B at a time.

    A fresh array is returned, so A, B and the caller's target may all be
    the same object.
    """
    A = _as_matrix(A)
    B = _as_matrix(B)

    C = np.empty((3, 3), dtype=np.int64)
    for j in range(3):
        C[:, j] = mat_vec_mod(A, B[:, j], m)
    return C


def mat_pow2_mod(A: np.ndarray, m: int, e: int) -> np.ndarray:
    """
    Return A^(2^e) mod m by squaring e times.
    """
    if e < 0:
        raise ValueError(f"e must be non-negative, got {e}")

    B = _as_matrix(A).copy()
    for _ in range(e):
        B = mat_mat_mod(B, B, m)
    return B


def mat_pow_mod(A: np.ndarray, m: int, n: int) -> np.ndarray:
    """
    Return A^n mod m for integer n >= 0 (square-and-multiply).

    A^0 is the identity.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    W = _as_matrix(A).copy()
    B = identity()

    while n > 0:
        if n % 2:
            B = mat_mat_mod(W, B, m)
        W = mat_mat_mod(W, W, m)
        n //= 2
    return B


def jump_matrix(
    A: np.ndarray,
    A_inv: np.ndarray,
    m: int,
    e: int,
    c: int,
) -> np.ndarray:
    """
    Transition matrix for a signed jump of

        n = 2^e + c       if e > 0
        n = -2^(-e) + c   if e < 0
        n = c             if e = 0

    steps, built in O(|e| + log|c|) matrix products. Negative parts use the
    inverse (one-step-backward) matrix ``A_inv``.
    """
    if c >= 0:
        C = mat_pow_mod(A, m, c)
    else:
        C = mat_pow_mod(A_inv, m, -c)

    if e > 0:
        B = mat_pow2_mod(A, m, e)
    elif e < 0:
        B = mat_pow2_mod(A_inv, m, -e)
    else:
        return C

    return mat_mat_mod(B, C, m)
