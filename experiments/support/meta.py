# experiments/support/meta.py
from __future__ import annotations

import datetime
import subprocess
import sys
from dataclasses import asdict, is_dataclass
from typing import Any, Dict


def utc_now_iso() -> str:
    return datetime.datetime.now(datetime.timezone.utc).replace(microsecond=0).isoformat()


def git_info() -> Dict[str, Any]:
    try:
        h = subprocess.check_output(
            ["git", "rev-parse", "HEAD"], text=True, stderr=subprocess.DEVNULL
        ).strip()
        dirty = subprocess.call(["git", "diff", "--quiet"], stderr=subprocess.DEVNULL) != 0
        return {"hash": h, "dirty": bool(dirty)}
    except (OSError, subprocess.CalledProcessError):
        return {"hash": None, "dirty": None}


def python_info() -> str:
    return sys.version


def spec_to_jsonable(spec: Any) -> Dict[str, Any]:
    """
    JSON-safe dump of FamilySpec-like objects (nested dataclasses, tuples).
    """
    def conv(x: Any) -> Any:
        if is_dataclass(x):
            return {k: conv(v) for k, v in asdict(x).items()}
        if isinstance(x, dict):
            return {str(k): conv(v) for k, v in x.items()}
        if isinstance(x, (list, tuple)):
            return [conv(v) for v in x]
        return x

    return conv(spec)


def run_metadata(spec: Any) -> Dict[str, Any]:
    return {
        "created_utc": utc_now_iso(),
        "git": git_info(),
        "python": python_info(),
        "spec": spec_to_jsonable(spec),
    }
