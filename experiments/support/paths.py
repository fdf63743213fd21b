# experiments/support/paths.py
from __future__ import annotations

import os
from pathlib import Path


def _repo_root() -> Path:
    # repo_root / experiments / support / paths.py  -> parents[2] is repo_root
    return Path(__file__).resolve().parents[2]


REPO_ROOT: Path = _repo_root()

# Allow override for CI / clusters, otherwise default to repo_root/outputs
OUTPUT_ROOT: Path = Path(os.getenv("OUTPUT_ROOT", REPO_ROOT / "outputs"))

REPRO_ROOT: Path = OUTPUT_ROOT / "repro_check"
DEMO_ROOT: Path = OUTPUT_ROOT / "demo"
