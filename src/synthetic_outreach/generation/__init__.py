"""Deterministic synthetic dataset generation.

Public API
----------
- :func:`create_rng` -- seed string or number to a uniform ``[0, 1)`` stream
- :func:`pick_weighted`, :func:`shuffle`, :func:`sample`,
  :func:`random_int` -- sampling primitives over that stream
- :func:`generate_dataset` -- a complete :class:`GeneratedDataset` per seed
"""

from synthetic_outreach.generation.generator import generate_dataset, outcome_weights
from synthetic_outreach.generation.rng import RNG, Mulberry32, coerce_seed, create_rng, xmur3
from synthetic_outreach.generation.sampling import pick_weighted, random_int, sample, shuffle

__all__ = [
    # PRNG
    "RNG",
    "Mulberry32",
    "coerce_seed",
    "create_rng",
    "xmur3",
    # Sampling
    "pick_weighted",
    "random_int",
    "sample",
    "shuffle",
    # Generator
    "generate_dataset",
    "outcome_weights",
]
