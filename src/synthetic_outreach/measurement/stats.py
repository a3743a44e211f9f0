"""Simple summary statistics that return ``None`` for empty input."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def compute_mean(values: Sequence[float]) -> float | None:
    if len(values) == 0:
        return None
    return float(np.mean(values))


def compute_median(values: Sequence[float]) -> float | None:
    """Middle value of the sorted input; the mean of the two middle values
    for even-length input; ``None`` for empty input."""
    if len(values) == 0:
        return None
    return float(np.median(values))
