from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from rngstreams.arrays import StreamFamily, make_streams


@dataclass(frozen=True)
class StreamSpec:
    """
    One named stream and its configuration.

    substream : number of ``reset_next_substream`` calls applied right after
        creation (0 = first sub-stream).
    """
    name: str
    antithetic: bool = False
    increased_precision: bool = False
    substream: int = 0


@dataclass(frozen=True)
class FamilySpec:
    """
    One place to declare *everything* needed to rebuild a family of streams.

    At most one of master_seed / package_seed; neither means the package
    default seed. Streams are created in declaration order, so reordering
    ``streams`` changes which seed each name receives.
    """
    streams: Sequence[StreamSpec] = ()
    master_seed: Optional[int] = None
    package_seed: Optional[Sequence[int]] = None

    def __post_init__(self) -> None:
        if self.master_seed is not None and self.package_seed is not None:
            raise ValueError("FamilySpec takes at most one of master_seed and package_seed.")
        for s in self.streams:
            if s.substream < 0:
                raise ValueError(f"substream must be >= 0 for '{s.name}', got {s.substream}")


def build_family(spec: FamilySpec) -> StreamFamily:
    family = make_streams(
        [s.name for s in spec.streams],
        master_seed=spec.master_seed,
        package_seed=spec.package_seed,
    )

    for s in spec.streams:
        g = family[s.name]
        for _ in range(s.substream):
            g.reset_next_substream()
        g.set_antithetic(s.antithetic)
        g.set_increased_precision(s.increased_precision)

    return family
