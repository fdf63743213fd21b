"""
Seed validation for streams and factory cursors.

A seed is six non-negative integers: the first three below M1 and not all
zero, the last three below M2 and not all zero.
"""

from __future__ import annotations

import operator
import warnings
from dataclasses import dataclass
from typing import Iterable, Literal, Optional

from rngstreams.recurrence import M1, M2

__all__ = [
    "SeedConstraint",
    "Seed",
    "InvalidSeed",
    "SeedWarning",
    "SeedResult",
    "validate_seed",
    "check_seed",
]

SeedConstraint = Literal[
    "length",
    "negative",
    "exceeds_m1",
    "exceeds_m2",
    "zero_low",
    "zero_high",
]

Seed = tuple[int, int, int, int, int, int]

_MESSAGES: dict[str, str] = {
    "length": "a seed must have exactly 6 values",
    "negative": "seed values must be non-negative",
    "exceeds_m1": f"the first three seed values must be < m1 = {M1}",
    "exceeds_m2": f"the last three seed values must be < m2 = {M2}",
    "zero_low": "the first three seed values are all zero",
    "zero_high": "the last three seed values are all zero",
}


class InvalidSeed(ValueError):
    """
    A candidate seed violates one of the MRG32k3a state constraints.

    Attributes
    ----------
    constraint : SeedConstraint
        Which rule failed.
    seed : tuple
        The rejected values, as given.
    """

    def __init__(self, constraint: SeedConstraint, seed: tuple) -> None:
        self.constraint = constraint
        self.seed = seed
        super().__init__(f"Seed is not set: {_MESSAGES[constraint]} (got {seed})")


class SeedWarning(UserWarning):
    """Diagnostic emitted when a seeding call is rejected."""


@dataclass(frozen=True)
class SeedResult:
    """
    Outcome of a seeding call: the installed seed, or why it was refused.

    Truthy exactly when the seed was accepted.
    """
    seed: Optional[Seed] = None
    error: Optional[InvalidSeed] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok


def validate_seed(seed: Iterable[int]) -> Seed:
    """
    Return ``seed`` as a 6-tuple of ints, or raise InvalidSeed.

    Non-integer values (floats, strings) raise TypeError.
    """
    values = tuple(operator.index(x) for x in seed)

    if len(values) != 6:
        raise InvalidSeed("length", values)
    if any(x < 0 for x in values):
        raise InvalidSeed("negative", values)
    if any(x >= M1 for x in values[:3]):
        raise InvalidSeed("exceeds_m1", values)
    if any(x >= M2 for x in values[3:]):
        raise InvalidSeed("exceeds_m2", values)
    if not any(values[:3]):
        raise InvalidSeed("zero_low", values)
    if not any(values[3:]):
        raise InvalidSeed("zero_high", values)

    return values  # type: ignore[return-value]


def check_seed(seed: Iterable[int]) -> SeedResult:
    """
    Validate ``seed`` without raising for bad values.

    A rejected seed is reported through a SeedWarning and a falsy
    SeedResult carrying the InvalidSeed error.
    """
    try:
        values = validate_seed(seed)
    except InvalidSeed as err:
        warnings.warn(str(err), SeedWarning, stacklevel=3)
        return SeedResult(error=err)
    return SeedResult(seed=values)
