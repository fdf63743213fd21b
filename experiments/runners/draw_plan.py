# experiments/runners/draw_plan.py
from __future__ import annotations

from typing import Any, Dict, List

from rngstreams.specs import FamilySpec, build_family


def run_draw_plan(
    spec: FamilySpec,
    *,
    n_draws: int,
    n_replications: int = 1,
) -> List[Dict[str, Any]]:
    """
    Draw ``n_draws`` uniforms from every stream of ``spec``, once per
    replication, moving all streams to their next sub-stream between
    replications.

    Returns one row per draw:
        {"replication", "stream", "draw", "u", "state_after"}
    where ``state_after`` is the current state once the stream's block of
    draws is finished (repeated on each row of the block).
    """
    if n_draws < 0 or n_replications < 0:
        raise ValueError("n_draws and n_replications must be non-negative.")

    family = build_family(spec)
    rows: List[Dict[str, Any]] = []

    for rep in range(n_replications):
        if rep > 0:
            family.next_substream()

        for g in family:
            block = [g.rand_u01() for _ in range(n_draws)]
            state = ",".join(str(x) for x in g.get_state())
            for k, u in enumerate(block):
                rows.append({
                    "replication": rep,
                    "stream": g.name,
                    "draw": k,
                    "u": u,
                    "state_after": state,
                })

    return rows
