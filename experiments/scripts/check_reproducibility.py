# experiments/scripts/check_reproducibility.py
from __future__ import annotations

import argparse
import shutil
from pathlib import Path
from typing import Iterable

import numpy as np

from experiments.runners.draw_plan import run_draw_plan
from experiments.scripts.repro_config import (
    BASE_FAMILY,
    DEFAULT_SEED_FAMILY,
    N_DRAWS,
    N_REPLICATIONS,
)
from experiments.support.io import load_csv, rows_to_csv, save_json, sha256_file
from experiments.support.meta import run_metadata
from experiments.support.paths import REPRO_ROOT


# -----------------------
# helpers
# -----------------------
def compare_csv(a: Path, b: Path, *, sort_cols: Iterable[str]) -> None:
    """
    Compare two CSVs robustly:
      - sort rows by sort_cols
      - compare all numeric columns exactly (draws must be bit-identical)
      - compare all non-numeric columns with exact match
    """
    df1 = load_csv(a)
    df2 = load_csv(b)

    if set(df1.columns) != set(df2.columns):
        raise AssertionError(f"Column mismatch:\n{a}: {list(df1.columns)}\n{b}: {list(df2.columns)}")

    df1 = df1[df2.columns]  # same order
    df1 = df1.sort_values(list(sort_cols)).reset_index(drop=True)
    df2 = df2.sort_values(list(sort_cols)).reset_index(drop=True)

    if len(df1) != len(df2):
        raise AssertionError(f"Row count mismatch: {a} has {len(df1)}, {b} has {len(df2)}")

    for c in df1.columns:
        s1, s2 = df1[c], df2[c]
        if s1.dtype.kind in "fiu" and s2.dtype.kind in "fiu":
            if not np.array_equal(s1.to_numpy(dtype=float), s2.to_numpy(dtype=float), equal_nan=True):
                raise AssertionError(f"Numeric column differs: {c}")
        else:
            if not s1.fillna("").astype(str).equals(s2.fillna("").astype(str)):
                raise AssertionError(f"Non-numeric column differs: {c}")

    print(f"✓ CSVs match (robust compare): {a.name}")


# -----------------------
# main reproducibility run
# -----------------------
def _run_once(out_root: Path, *, n_draws: int, n_replications: int) -> dict[str, Path]:
    """
    Run every reference family once, writing CSVs into out_root.
    Returns a dict of named outputs.
    """
    if out_root.exists():
        shutil.rmtree(out_root)
    out_root.mkdir(parents=True, exist_ok=True)

    outputs: dict[str, Path] = {}
    for key, spec in (("master_seed", BASE_FAMILY), ("default_seed", DEFAULT_SEED_FAMILY)):
        rows = run_draw_plan(spec, n_draws=n_draws, n_replications=n_replications)
        path = out_root / f"draws_{key}.csv"
        rows_to_csv(rows, path)
        save_json(out_root / f"draws_{key}.meta.json", run_metadata(spec))
        outputs[key] = path

    return outputs


def check_reproducibility(
    root: Path,
    *,
    n_draws: int = N_DRAWS,
    n_replications: int = N_REPLICATIONS,
) -> None:
    """
    Run the draw plans twice under ``root`` and require identical output.
    Raises AssertionError on the first mismatch.
    """
    print(f"Running reproducibility check under: {root}")
    outs1 = _run_once(root / "run1", n_draws=n_draws, n_replications=n_replications)
    outs2 = _run_once(root / "run2", n_draws=n_draws, n_replications=n_replications)

    for key in outs1:
        a = outs1[key]
        b = outs2[key]
        h1 = sha256_file(a)
        h2 = sha256_file(b)
        print(f"{key}: sha256 run1={h1[:12]} run2={h2[:12]}")
        if h1 == h2:
            print(f"✓ Hash match: {a.name}")
        else:
            print(f"⚠ Hash differs for {a.name}; running robust compare...")
            compare_csv(a, b, sort_cols=("replication", "stream", "draw"))

    print("\nAll reproducibility checks passed.")


def main() -> None:
    """
    Usage:
        python -m experiments.scripts.check_reproducibility [--out DIR]
    """
    ap = argparse.ArgumentParser()
    ap.add_argument("--out", type=Path, default=REPRO_ROOT)
    ap.add_argument("--n-draws", type=int, default=N_DRAWS)
    ap.add_argument("--n-replications", type=int, default=N_REPLICATIONS)
    args = ap.parse_args()

    try:
        check_reproducibility(args.out, n_draws=args.n_draws, n_replications=args.n_replications)
    except AssertionError as e:
        print(f"✗ Reproducibility check failed: {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
