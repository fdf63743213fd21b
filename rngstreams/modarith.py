"""
Exact modular multiply-accumulate used by the MRG32k3a matrix algebra.
"""

__all__ = ["TWO17", "TWO53", "mul_add_mod"]

TWO17 = 131072               # 2^17
TWO53 = 9007199254740992     # 2^53


def mul_add_mod(a: int, s: int, c: int, m: int) -> int:
    """
    Compute (a * s + c) mod m exactly.

    The modulus must be below 2^35. Negative ``s`` and ``c`` are allowed and
    the result is always normalised to [0, m).

    When |a * s + c| reaches 2^53, ``a`` is split as a1 * 2^17 + a0 and the
    product is formed in two stages, reducing a1 * s modulo m in between:

        (a * s + c) mod m = ((a1 * s mod m) * 2^17 + a0 * s + c) mod m

    so every intermediate stays inside the 53-bit exact-integer range of the
    published generator, whatever integer type carries it.
    """
    v = a * s + c

    if v >= TWO53 or v <= -TWO53:
        a1, a0 = divmod(a, TWO17)
        v = (a1 * s) % m
        v = v * TWO17 + a0 * s + c

    return v % m
