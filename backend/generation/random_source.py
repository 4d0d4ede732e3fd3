"""Random number sources for the generators.

Generation draws every random number through a ``RandomSource`` so callers can
swap a fresh unseeded source for a reproducible or scripted one.
"""

import random
from typing import Protocol

_FNV_OFFSET_BASIS = 0x811C9DC5
_FNV_PRIME = 0x01000193
_GOLDEN_GAMMA = 0x6D2B79F5
_MASK_32 = 0xFFFFFFFF


class RandomSource(Protocol):
    def random(self) -> float:
        """Return the next float in [0, 1)."""
        ...


def default_source() -> RandomSource:
    """A fresh, unseeded source - every call yields an independent stream."""
    return random.Random()


def uniform(rng: RandomSource, low: float, high: float) -> float:
    return low + rng.random() * (high - low)


def _fnv1a(seed: str) -> int:
    h = _FNV_OFFSET_BASIS
    for ch in seed:
        h ^= ord(ch)
        h = (h * _FNV_PRIME) & _MASK_32
    return h


class DeterministicRandom:
    """Reproducible source seeded from a string such as a building id.

    FNV-1a hashes the seed into 32 bits of state, then each draw advances the
    state by a fixed odd increment and mixes it down to a float in [0, 1).
    """

    def __init__(self, seed: str) -> None:
        self.seed = seed
        self._state = _fnv1a(seed)

    def random(self) -> float:
        self._state = (self._state + _GOLDEN_GAMMA) & _MASK_32
        h = self._state
        t = ((h ^ (h >> 15)) * (1 | h)) & _MASK_32
        t ^= (t + (((t ^ (t >> 7)) * (61 | t)) & _MASK_32)) & _MASK_32
        return (t ^ (t >> 14)) / 4294967296
