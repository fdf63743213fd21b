import itertools

import pytest

from rngstreams.modarith import TWO53, mul_add_mod
from rngstreams.recurrence import M1, M2


def test_small_values():
    assert mul_add_mod(3, 5, 11, 7) == (3 * 5 + 11) % 7


@pytest.mark.parametrize("m", [M1, M2, 7, 2**35 - 31])
def test_matches_exact_reference_over_wide_range(m):
    a_vals = [0, 1, 2**17 - 1, 2**17, 1403580, 4294967086, -810728, -1370589]
    s_vals = [0, 1, m - 1, -(m - 1), 123456789, 2**31 + 7]
    c_vals = [0, 5, m - 1, -(m - 1)]

    for a, s, c in itertools.product(a_vals, s_vals, c_vals):
        assert mul_add_mod(a, s, c, m) == (a * s + c) % m, (a, s, c, m)


def test_result_is_normalised_for_negative_inputs():
    m = M1
    t = mul_add_mod(-810728, 4294967086, -5, m)
    assert 0 <= t < m


def test_split_path_is_taken_and_exact():
    # a * s well above 2^53: the two-stage product must still be exact
    a, s, c, m = 4127413238, 4294967086, 4294967086, M1
    assert abs(a * s + c) >= TWO53
    assert mul_add_mod(a, s, c, m) == (a * s + c) % m
