"""Weighted-choice and shuffle primitives driven by a seeded stream.

Every function consumes draws from the supplied ``rng`` in a fixed order,
so two streams built from the same seed and used identically produce
identical picks.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

from synthetic_outreach.generation.rng import RNG

T = TypeVar("T")


def pick_weighted(rng: RNG, options: Sequence[tuple[T, float]]) -> T:
    """Pick one item from ``(item, weight)`` pairs proportionally to weight.

    Draws ``target = rng() * sum(weights)`` and walks the options in the
    given order, returning the first whose cumulative weight reaches the
    target.  Zero-weight options are only reachable as the final fallback.
    Callers must pass a non-empty sequence.
    """
    total = sum(weight for _, weight in options)
    target = rng() * total
    cumulative = 0.0
    for item, weight in options:
        cumulative += weight
        if target <= cumulative:
            return item
    return options[-1][0]


def shuffle(rng: RNG, items: Sequence[T]) -> list[T]:
    """Return a Fisher-Yates shuffled copy of *items*."""
    arr = list(items)
    for i in range(len(arr) - 1, 0, -1):
        j = math.floor(rng() * (i + 1))
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def sample(rng: RNG, items: Sequence[T]) -> T:
    """Uniformly pick one element of a non-empty sequence."""
    return items[math.floor(rng() * len(items))]


def random_int(rng: RNG, low: int, high: int) -> int:
    """Uniform integer in the closed range ``[low, high]``."""
    return math.floor(rng() * (high - low + 1)) + low
