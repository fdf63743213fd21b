# tests/test_factory.py
from __future__ import annotations

import threading

import pytest

from rngstreams import factory as factory_mod
from rngstreams.factory import DEFAULT_SEED, StreamFactory, master_seed_vector
from rngstreams.seeds import InvalidSeed, SeedWarning

from tests.fixtures import SEED_12345, draws, factory_12345, factory_5555


@pytest.fixture
def default_factory():
    """Fresh process-default factory, restored afterwards."""
    saved = factory_mod.default_factory()
    f = factory_mod.reset_default_factory()
    yield f
    factory_mod._default = saved


def test_default_cursor():
    assert StreamFactory().next_seed == DEFAULT_SEED


def test_single_stream_scenario():
    g = factory_12345().create_stream("g")
    assert [round(u, 5) for u in draws(g, 2)] == [0.12701, 0.31853]


def test_two_streams_scenario():
    f = factory_12345()
    g1 = f.create_stream("g1")
    g2 = f.create_stream("g2")
    out = draws(g1, 2) + draws(g2, 2)
    assert [round(u, 5) for u in out] == [0.12701, 0.31853, 0.75958, 0.97831]


def test_same_seed_gives_identical_streams():
    g1 = factory_12345().create_stream("g1")
    g2 = factory_12345().create_stream("g2")
    assert draws(g1, 50) == draws(g2, 50)


def test_master_seed_same_seed_identical_consecutive_different():
    a = factory_5555().create_stream("g1")
    b = factory_5555().create_stream("g2")
    assert draws(a, 2) == draws(b, 2)

    f = factory_5555()
    c = f.create_stream("g1")
    d = f.create_stream("g2")
    assert all(x != y for x, y in zip(draws(c, 2), draws(d, 2)))


def test_master_seed_vector_layout():
    f = StreamFactory()
    f.set_master_seed(5555)
    assert f.next_seed == (5555, 5556, 5557, 5558, 5559, 5560)
    assert master_seed_vector(5555) == f.next_seed


@pytest.mark.parametrize("value", [-1, 4294944443 - 5])
def test_master_seed_out_of_range_raises_without_effect(value):
    f = factory_12345()
    with pytest.raises(InvalidSeed):
        f.set_master_seed(value)
    assert f.next_seed == SEED_12345


def test_set_package_seed():
    f = StreamFactory()
    res = f.set_package_seed([1, 1, 1, 1, 1, 1])
    assert res
    assert f.next_seed == (1, 1, 1, 1, 1, 1)
    assert f.create_stream("x").initial_state == (1, 1, 1, 1, 1, 1)


def test_set_package_seed_invalid_leaves_cursor():
    f = factory_12345()
    f.create_stream()
    before = f.next_seed
    with pytest.warns(SeedWarning):
        res = f.set_package_seed([1, 1, 1, 0, 0, 0])
    assert not res
    assert res.error.constraint == "zero_high"
    assert f.next_seed == before


def test_constructor_rejects_invalid_seed():
    with pytest.raises(InvalidSeed):
        StreamFactory((4294967087, 1, 1, 1, 1, 1))


def test_consecutive_streams_are_2_pow_127_apart():
    f = factory_12345()
    streams = [f.create_stream(f"g{k}") for k in range(4)]

    for prev, nxt in zip(streams, streams[1:]):
        prev.advance_state(127, 0)
        assert prev.get_state() == nxt.initial_state

    # and backwards
    streams[3].advance_state(-127, 0)
    assert streams[3].get_state() == streams[2].initial_state


def test_kth_stream_is_k_jumps_in():
    f = factory_12345()
    for _ in range(3):
        f.create_stream()
    g3 = f.create_stream("g3")

    probe = factory_12345().create_stream("probe")
    for _ in range(3):
        probe.advance_state(127, 0)
    assert probe.get_state() == g3.initial_state


def test_cursor_always_valid_after_many_streams():
    f = StreamFactory((1, 1, 1, 1, 1, 1))
    for _ in range(200):
        f.create_stream()
    low, high = f.next_seed[:3], f.next_seed[3:]
    assert all(0 <= x < 4294967087 for x in low) and any(low)
    assert all(0 <= x < 4294944443 for x in high) and any(high)


def test_concurrent_creation_gives_distinct_streams():
    f = factory_12345()
    created = []
    lock = threading.Lock()

    def worker():
        for _ in range(25):
            g = f.create_stream()
            with lock:
                created.append(g.initial_state)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(created) == 100
    assert len(set(created)) == 100

    serial = factory_12345()
    expected = {serial.create_stream().initial_state for _ in range(100)}
    assert set(created) == expected


def test_non_overlap_of_consecutive_streams():
    f = factory_12345()
    g1 = f.create_stream("g1")
    g2 = f.create_stream("g2")

    n = 5_000
    states1, states2 = set(), set()
    u1, u2 = [], []
    for _ in range(n):
        u1.append(g1.rand_u01())
        states1.add(g1.get_state())
        u2.append(g2.rand_u01())
        states2.add(g2.get_state())

    assert len(states1) == n and len(states2) == n
    assert states1.isdisjoint(states2)
    assert all(a != b for a, b in zip(u1, u2))


# --- process-default API ---

def test_module_level_functions(default_factory):
    assert factory_mod.set_package_seed(SEED_12345)
    g = factory_mod.create_stream("g")
    assert round(g.rand_u01(), 5) == 0.12701
    assert factory_mod.default_factory() is default_factory


def test_module_level_master_seed(default_factory):
    factory_mod.set_master_seed(5555)
    g = factory_mod.create_stream("g1")
    assert [g.rand_int(1, 3) for _ in range(4)] == [3, 3, 1, 2]


def test_module_level_package_seed_rejects(default_factory):
    before = default_factory.next_seed
    with pytest.warns(SeedWarning):
        assert not factory_mod.set_package_seed([0, 0, 0, 0, 0, 0])
    assert default_factory.next_seed == before


def test_reset_default_factory_isolates_runs(default_factory):
    factory_mod.set_master_seed(42)
    factory_mod.create_stream()
    fresh = factory_mod.reset_default_factory()
    assert fresh is not default_factory
    assert fresh.next_seed == DEFAULT_SEED
