"""
RngStream: one MRG32k3a stream with sub-streams, resets and jump-ahead.
"""

from __future__ import annotations

from typing import Iterable, List

from rngstreams.formatting import full_state_string, state_string
from rngstreams.matrices import (
    A1P0,
    A1P76,
    A2P0,
    A2P76,
    INV_A1,
    INV_A2,
    jump_matrix,
    mat_vec_mod,
)
from rngstreams.recurrence import M1, M2, u01, u01d
from rngstreams.seeds import Seed, SeedResult, check_seed, validate_seed

__all__ = ["RngStream"]


class RngStream:
    """
    A single random-number stream.

    Three 6-vectors describe the stream:

    - initial_state (Ig): seed at creation or at the last ``set_seed``
    - substream_start_state (Bg): start of the current sub-stream
    - current_state (Cg): advanced by every draw

    Streams are normally created by ``StreamFactory.create_stream``, which
    spaces them 2^127 steps apart. Each stream is split into sub-streams of
    2^76 steps.

    A stream is not thread-safe; share it between threads only with external
    locking.
    """

    def __init__(self, seed: Iterable[int], name: str = "") -> None:
        seed = validate_seed(seed)
        self._name = name or ""
        self._ig: List[int] = list(seed)
        self._bg: List[int] = list(seed)
        self._cg: List[int] = list(seed)
        self._antithetic = False
        self._increased_precision = False

    # --- read-only views ---

    @property
    def name(self) -> str:
        return self._name

    @property
    def initial_state(self) -> Seed:
        return tuple(self._ig)  # type: ignore[return-value]

    @property
    def substream_start_state(self) -> Seed:
        return tuple(self._bg)  # type: ignore[return-value]

    @property
    def current_state(self) -> Seed:
        return tuple(self._cg)  # type: ignore[return-value]

    @property
    def antithetic(self) -> bool:
        return self._antithetic

    @property
    def increased_precision(self) -> bool:
        return self._increased_precision

    def __repr__(self) -> str:
        return (
            f"RngStream(name={self._name!r}, current_state={self.current_state}, "
            f"antithetic={self._antithetic}, increased_precision={self._increased_precision})"
        )

    # --- resets ---

    def reset_start_stream(self) -> None:
        """Back to the initial state; the first sub-stream becomes current."""
        self._cg = list(self._ig)
        self._bg = list(self._ig)

    def reset_start_substream(self) -> None:
        """Back to the start of the current sub-stream."""
        self._cg = list(self._bg)

    def reset_next_substream(self) -> None:
        """Move to the start of the next sub-stream (2^76 steps further)."""
        low = mat_vec_mod(A1P76, self._bg[:3], M1).tolist()
        high = mat_vec_mod(A2P76, self._bg[3:], M2).tolist()
        self._bg = low + high
        self._cg = list(self._bg)

    # --- seeding / state ---

    def set_seed(self, seed: Iterable[int]) -> SeedResult:
        """
        Reinitialise the stream at ``seed``.

        The initial, sub-stream start and current states all become ``seed``.
        An invalid seed leaves the stream untouched and returns a falsy
        result carrying the InvalidSeed error.
        """
        res = check_seed(seed)
        if res:
            self._ig = list(res.seed)
            self._bg = list(res.seed)
            self._cg = list(res.seed)
        return res

    def get_state(self) -> Seed:
        """Snapshot of the current state, suitable for ``set_seed``."""
        return self.current_state

    def advance_state(self, e: int, c: int) -> None:
        """
        Jump the current state by n steps without generating them, where

            n = 2^e + c       if e > 0
            n = -2^(-e) + c   if e < 0
            n = c             if e = 0

        Negative jumps move backwards. The sub-stream start is not changed.
        """
        C1 = jump_matrix(A1P0, INV_A1, M1, e, c)
        C2 = jump_matrix(A2P0, INV_A2, M2, e, c)

        low = mat_vec_mod(C1, self._cg[:3], M1).tolist()
        high = mat_vec_mod(C2, self._cg[3:], M2).tolist()
        self._cg = low + high

    # --- configuration ---

    def set_antithetic(self, a: bool) -> None:
        """When set, every draw returns 1 - u instead of u."""
        self._antithetic = bool(a)

    def set_increased_precision(self, incp: bool) -> None:
        """When set, every draw consumes two steps for 53 bits of resolution."""
        self._increased_precision = bool(incp)

    # --- generation ---

    def rand_u01(self) -> float:
        """Next uniform in [0, 1)."""
        if self._increased_precision:
            return u01d(self._cg, self._antithetic)
        return u01(self._cg, self._antithetic)

    def rand_int(self, low: int, high: int) -> int:
        """
        Uniform integer in {low, ..., high} from a single ``rand_u01`` draw.
        """
        if high < low:
            raise ValueError(f"high must be >= low; got low={low}, high={high}")
        return low + int((high - low + 1.0) * self.rand_u01())

    # --- diagnostics ---

    def state_string(self) -> str:
        return state_string(self)

    def full_state_string(self) -> str:
        return full_state_string(self)

    def write_state(self) -> None:
        print(state_string(self))

    def write_state_full(self) -> None:
        print(full_state_string(self))
