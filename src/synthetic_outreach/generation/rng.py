"""Deterministic pseudo-random stream seeded from a string.

Two stages: ``xmur3`` folds every UTF-16 code unit of the seed string into
a 32-bit state with avalanche mixing, and ``Mulberry32`` advances that
state with a 32-bit add, mix and multiply per draw.  All arithmetic is
carried out modulo 2**32 so the stream matches the classic JavaScript
implementations bit for bit.

No external entropy is ever consulted: the same seed always yields the
same infinite sequence.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

RNG = Callable[[], float]

_MASK = 0xFFFFFFFF
_TWO_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiply, unsigned result."""
    return (a * b) & _MASK


def coerce_seed(seed: str | int | float) -> str:
    """Render a seed the way it is hashed.

    Integral numbers lose their decimal point so ``42`` and ``42.0`` name
    the same stream.
    """
    if isinstance(seed, float) and seed.is_integer():
        return str(int(seed))
    return str(seed)


def _code_units(text: str) -> Iterator[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def xmur3(text: str) -> Callable[[], int]:
    """Return a generator of 32-bit hashes of *text*."""
    units = list(_code_units(text))
    h = (1779033703 ^ len(units)) & _MASK
    for unit in units:
        h = _imul(h ^ unit, 3432918353)
        h = ((h << 13) | (h >> 19)) & _MASK

    def _next() -> int:
        nonlocal h
        h = _imul(h ^ (h >> 16), 2246822507)
        h = _imul(h ^ (h >> 13), 3266489909)
        h ^= h >> 16
        return h

    return _next


class Mulberry32:
    """Small, fast 32-bit generator producing floats in ``[0, 1)``.

    Parameters
    ----------
    state:
        Initial 32-bit state, normally produced by :func:`xmur3`.
    """

    def __init__(self, state: int) -> None:
        self._state = state & _MASK

    def next_float(self) -> float:
        self._state = (self._state + 0x6D2B79F5) & _MASK
        a = self._state
        t = _imul(a ^ (a >> 15), 1 | a)
        t ^= (t + _imul(t ^ (t >> 7), 61 | t)) & _MASK
        return ((t ^ (t >> 14)) & _MASK) / _TWO_32

    __call__ = next_float


def create_rng(seed: str | int | float = 42) -> RNG:
    """Build the uniform ``[0, 1)`` stream for *seed*.

    The empty string is a valid seed.  Any value is coerced to a string
    rather than rejected.
    """
    return Mulberry32(xmur3(coerce_seed(seed))())
