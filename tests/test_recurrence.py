import pytest

from rngstreams.recurrence import FACT, M1, M2, NORM, step, u01, u01d
from tests.fixtures import SEED_12345


def test_norm_and_fact_constants():
    assert NORM == pytest.approx(1.0 / (M1 + 1), rel=1e-15)
    assert FACT == 2.0**-24


def test_step_shifts_and_inserts():
    s = [1, 2, 3, 4, 5, 6]
    p1, p2 = step(s)
    assert p1 == (1403580 * 2 - 810728 * 1) % M1
    assert p2 == (527612 * 6 - 1370589 * 4) % M2
    assert s == [2, 3, p1, 5, 6, p2]


def test_first_draw_from_reference_seed():
    s = list(SEED_12345)
    assert round(u01(s), 5) == 0.12701
    assert round(u01(s), 5) == 0.31853


def test_antithetic_is_complement():
    s1 = list(SEED_12345)
    s2 = list(SEED_12345)
    for _ in range(50):
        assert u01(s2, antithetic=True) == 1.0 - u01(s1)


def test_u01_stays_in_unit_interval():
    s = list(SEED_12345)
    for _ in range(2000):
        u = u01(s)
        assert 0.0 < u < 1.0


def test_u01d_consumes_two_steps_and_refines_first_draw():
    s_plain = list(SEED_12345)
    s_prec = list(SEED_12345)

    u = u01(s_plain)
    u2 = u01(s_plain)
    d = u01d(s_prec)

    assert s_prec == s_plain
    expected = u + u2 * FACT
    assert d == pytest.approx(expected if expected < 1.0 else expected - 1.0, abs=1e-16)
    assert 0.0 <= d < 1.0


def test_u01d_antithetic_mirrors_plain():
    s1 = list(SEED_12345)
    s2 = list(SEED_12345)
    for _ in range(200):
        d = u01d(s1)
        d_anti = u01d(s2, antithetic=True)
        assert 0.0 <= d_anti < 1.0
        assert d + d_anti == pytest.approx(1.0, abs=1e-12)
