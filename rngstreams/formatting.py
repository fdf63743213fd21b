"""
Text rendering of stream state for diagnostics.
"""

from __future__ import annotations

from typing import Sequence

__all__ = ["state_string", "full_state_string"]


def _vec(values: Sequence[int]) -> str:
    return ",".join(str(int(x)) for x in values)


def _flag(value: bool) -> str:
    return "true" if value else "false"


def state_string(stream) -> str:
    """
    Name and current state, e.g.

        g:
          Cg = {12345,12345,12345,12345,12345,12345 }
    """
    return f"{stream.name}:\n  Cg = {{{_vec(stream.current_state)} }}\n"


def full_state_string(stream) -> str:
    """
    Name, both flags, and the initial, sub-stream start and current states.
    """
    lines = [
        f"{stream.name}:",
        f"  Anti = {_flag(stream.antithetic)}",
        f"  IncPrec = {_flag(stream.increased_precision)}",
        f"  Ig = {{ {_vec(stream.initial_state)} }}",
        f"  Bg = {{ {_vec(stream.substream_start_state)} }}",
        f"  Cg = {{ {_vec(stream.current_state)} }}",
    ]
    return "\n".join(lines) + "\n"
