# tests/fixtures.py
from rngstreams.factory import StreamFactory
from rngstreams.stream import RngStream

SEED_12345 = (12345, 12345, 12345, 12345, 12345, 12345)
SEED_ONES = (1, 1, 1, 1, 1, 1)
MASTER_5555 = 5555

# Current state of a stream seeded with SEED_12345 after ten draws
STATE_12345_AFTER_10 = (
    2989318136, 3378525425, 1773647758,
    1462200156, 2794459678, 2822254363,
)


def factory_12345() -> StreamFactory:
    return StreamFactory(SEED_12345)


def factory_5555() -> StreamFactory:
    f = StreamFactory()
    f.set_master_seed(MASTER_5555)
    return f


def twin_streams(seed=SEED_12345) -> tuple[RngStream, RngStream]:
    """Two independent stream objects with the same seed."""
    return RngStream(seed, name="a"), RngStream(seed, name="b")


def draws(g: RngStream, n: int) -> list[float]:
    return [g.rand_u01() for _ in range(n)]
