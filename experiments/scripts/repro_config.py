# experiments/scripts/repro_config.py
from __future__ import annotations

from dataclasses import replace

from rngstreams.specs import FamilySpec, StreamSpec

N_DRAWS: int = 1_000  # per stream per replication
N_REPLICATIONS: int = 3

BASE_FAMILY = FamilySpec(
    master_seed=5555,
    streams=(
        StreamSpec(name="arrivals"),
        StreamSpec(name="service", increased_precision=True),
        StreamSpec(name="routing", antithetic=True),
        StreamSpec(name="failures", substream=2),
    ),
)

# Same layout from the package default seed, as a second reference
DEFAULT_SEED_FAMILY = replace(BASE_FAMILY, master_seed=None)
