"""
MRG32k3a recurrence: two order-3 linear recurrences combined into a uniform.

The state is a mutable list of six ints. Entries 0-2 belong to the first
component (mod M1), entries 3-5 to the second (mod M2).
"""

from __future__ import annotations

from typing import List

__all__ = ["M1", "M2", "NORM", "FACT", "step", "u01", "u01d"]

M1 = 4294967087
M2 = 4294944443

A12 = 1403580
A13N = 810728
A21 = 527612
A23N = 1370589

NORM = 2.328306549295727688e-10  # 1 / (M1 + 1)
FACT = 5.9604644775390625e-8     # 2^-24


def step(state: List[int]) -> tuple[int, int]:
    """
    Advance both component recurrences by one step in place.

    Returns the two new values (p1, p2).
    """
    # Component 1
    p1 = (A12 * state[1] - A13N * state[0]) % M1
    state[0] = state[1]
    state[1] = state[2]
    state[2] = p1

    # Component 2
    p2 = (A21 * state[5] - A23N * state[3]) % M2
    state[3] = state[4]
    state[4] = state[5]
    state[5] = p2

    return p1, p2


def u01(state: List[int], antithetic: bool = False) -> float:
    """
    One uniform from the combined generator; 1 - u when ``antithetic``.
    """
    p1, p2 = step(state)

    if p1 > p2:
        u = (p1 - p2) * NORM
    else:
        u = (p1 - p2 + M1) * NORM

    return 1.0 - u if antithetic else u


def u01d(state: List[int], antithetic: bool = False) -> float:
    """
    Increased-precision uniform built from two consecutive draws.

    The second draw adds 24 more bits: u + u2 * 2^-24 (mod 1). In antithetic
    mode both draws already come back as 1 - u, so the second one enters as
    (u2 - 1) * 2^-24 and the sum is wrapped back into [0, 1) from below,
    giving the complement of the non-antithetic value.
    """
    u = u01(state, antithetic)

    if not antithetic:
        u += u01(state, antithetic) * FACT
        return u if u < 1.0 else u - 1.0

    u += (u01(state, antithetic) - 1.0) * FACT
    return u + 1.0 if u < 0.0 else u
