"""Injectable random source.

Every draw made while generating goes through a ``RandomSource`` so a
seeded ``random.Random`` makes output reproducible.
"""

import random
from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """Anything with the draws we need. ``random.Random`` qualifies as-is."""

    def random(self) -> float: ...
    def choice(self, seq: Sequence[T]) -> T: ...


def make_rng(seed: int | None = None) -> RandomSource:
    return random.Random(seed)


def roll(rng: RandomSource, low: float, high: float) -> float:
    """Uniform float in ``[low, high)``."""
    return rng.random() * (high - low) + low


def pick(rng: RandomSource, items: Sequence[str]) -> str:
    """Uniform pick; an empty list picks the empty string."""
    if not items:
        return ""
    return rng.choice(items)
