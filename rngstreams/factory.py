"""
Stream factory: owns the seeding cursor from which new streams are cut.

Every created stream starts 2^127 steps after the previous one, so streams
from one factory never overlap for any realistic sequence length.

Module-level functions (``create_stream``, ``set_master_seed``,
``set_package_seed``) act on a process-default factory, for callers that want
the classic single-package API. Prefer an explicit StreamFactory per
experiment so unrelated runs do not share a cursor.
"""

from __future__ import annotations

import threading
from typing import Iterable, Optional

from rngstreams.matrices import A1P127, A2P127, mat_vec_mod
from rngstreams.recurrence import M1, M2
from rngstreams.seeds import Seed, SeedResult, check_seed, validate_seed
from rngstreams.stream import RngStream

__all__ = [
    "DEFAULT_SEED",
    "master_seed_vector",
    "StreamFactory",
    "default_factory",
    "reset_default_factory",
    "create_stream",
    "set_master_seed",
    "set_package_seed",
]

DEFAULT_SEED: Seed = (12345, 23456, 34567, 45678, 56789, 67890)


def master_seed_vector(value: int) -> Seed:
    """The 6-vector installed by ``set_master_seed(value)``."""
    value = int(value)
    return (value, value + 1, value + 2, value + 3, value + 4, value + 5)


class StreamFactory:
    """
    Creates RngStreams from a cursor that advances by 2^127 per stream.

    Parameters
    ----------
    seed : 6 ints, optional
        Initial cursor. Defaults to DEFAULT_SEED. Must pass
        ``validate_seed`` (raises InvalidSeed otherwise).

    Creation and reseeding are serialised by an internal lock, so a factory
    may be shared by threads that create streams. The streams themselves are
    not locked.
    """

    def __init__(self, seed: Optional[Iterable[int]] = None) -> None:
        seed = DEFAULT_SEED if seed is None else validate_seed(seed)
        self._lock = threading.Lock()
        self._low = list(seed[:3])
        self._high = list(seed[3:])

    @property
    def next_seed(self) -> Seed:
        """Seed the next created stream will receive."""
        with self._lock:
            return tuple(self._low + self._high)  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"StreamFactory(next_seed={self.next_seed})"

    def set_master_seed(self, value: int) -> None:
        """
        Reseed the cursor from one integer:
        cursor = [v, v+1, v+2, v+3, v+4, v+5].

        Raises InvalidSeed, leaving the cursor untouched, when the derived
        vector is out of range (v < 0 or v + 5 >= m2).
        """
        seed = validate_seed(master_seed_vector(value))
        with self._lock:
            self._low = list(seed[:3])
            self._high = list(seed[3:])

    def set_package_seed(self, seed: Iterable[int]) -> SeedResult:
        """
        Install an explicit 6-vector as the cursor.

        An invalid seed leaves the cursor untouched and returns a falsy
        result carrying the InvalidSeed error.
        """
        res = check_seed(seed)
        if res:
            with self._lock:
                self._low = list(res.seed[:3])
                self._high = list(res.seed[3:])
        return res

    def create_stream(self, name: str = "") -> RngStream:
        """
        New stream seeded at the cursor; the cursor then jumps 2^127 steps.
        """
        with self._lock:
            g = RngStream(self._low + self._high, name=name)
            self._low = mat_vec_mod(A1P127, self._low, M1).tolist()
            self._high = mat_vec_mod(A2P127, self._high, M2).tolist()
        return g


_default = StreamFactory()


def default_factory() -> StreamFactory:
    return _default


def reset_default_factory(seed: Optional[Iterable[int]] = None) -> StreamFactory:
    """Replace the process-default factory with a fresh one and return it."""
    global _default
    _default = StreamFactory(seed)
    return _default


def create_stream(name: str = "") -> RngStream:
    return _default.create_stream(name)


def set_master_seed(value: int) -> None:
    _default.set_master_seed(value)


def set_package_seed(seed: Iterable[int]) -> SeedResult:
    return _default.set_package_seed(seed)
