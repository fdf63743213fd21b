"""
numpy helpers: batch draws and named families of streams.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Optional, Sequence

import numpy as np

from rngstreams.factory import StreamFactory
from rngstreams.stream import RngStream

__all__ = ["rand_u01_array", "rand_int_array", "StreamFamily", "make_streams"]

Size = int | tuple[int, ...]


def _fill(draw, size: Size, dtype) -> np.ndarray:
    shape = (size,) if isinstance(size, (int, np.integer)) else tuple(size)
    if any(int(n) < 0 for n in shape):
        raise ValueError(f"size must be non-negative; got {size}")

    out = np.empty(shape, dtype=dtype)
    flat = out.reshape(-1)
    for i in range(flat.size):
        flat[i] = draw()
    return out


def rand_u01_array(stream: RngStream, size: Size) -> np.ndarray:
    """
    ``size`` consecutive ``rand_u01`` draws as a float64 array (C order).
    """
    return _fill(stream.rand_u01, size, np.float64)


def rand_int_array(stream: RngStream, low: int, high: int, size: Size) -> np.ndarray:
    """
    ``size`` consecutive ``rand_int(low, high)`` draws as an int64 array.
    """
    if high < low:
        raise ValueError(f"high must be >= low; got low={low}, high={high}")
    return _fill(lambda: stream.rand_int(low, high), size, np.int64)


@dataclass(frozen=True)
class StreamFamily:
    """
    Named streams cut from one factory, in creation order.

    Typical use: one stream per model component, and one sub-stream per
    replication (``next_substream`` between replications) so components keep
    common random numbers across scenarios.
    """
    factory: StreamFactory
    streams: Dict[str, RngStream] = field(default_factory=dict)

    def __getitem__(self, name: str) -> RngStream:
        return self.streams[name]

    def __iter__(self) -> Iterator[RngStream]:
        return iter(self.streams.values())

    def __len__(self) -> int:
        return len(self.streams)

    @property
    def names(self) -> list[str]:
        return list(self.streams)

    def next_substream(self) -> None:
        for g in self.streams.values():
            g.reset_next_substream()

    def reset_start_substream(self) -> None:
        for g in self.streams.values():
            g.reset_start_substream()

    def reset_start(self) -> None:
        for g in self.streams.values():
            g.reset_start_stream()

    def states(self) -> Dict[str, tuple]:
        return {name: g.get_state() for name, g in self.streams.items()}


def make_streams(
    names: Iterable[str],
    *,
    master_seed: Optional[int] = None,
    package_seed: Optional[Sequence[int]] = None,
) -> StreamFamily:
    """
    Deterministically create one stream per name from a fresh factory.

    The family depends only on the seed and the order of ``names``; at most
    one of ``master_seed`` / ``package_seed`` may be given (neither means
    the package default seed).
    """
    if master_seed is not None and package_seed is not None:
        raise ValueError("Give at most one of master_seed and package_seed.")

    factory = StreamFactory(package_seed)
    if master_seed is not None:
        factory.set_master_seed(master_seed)

    streams: Dict[str, RngStream] = {}
    for name in names:
        if name in streams:
            raise ValueError(f"Duplicate stream name '{name}'.")
        streams[name] = factory.create_stream(name)

    return StreamFamily(factory=factory, streams=streams)
