#!/usr/bin/env python3
"""
Random Sources
==============
Random number sources for the sampler.

The sampler only needs an object with a ``random()`` method returning a
float in [0.0, 1.0). Two sources are provided:

- TrueRandom: backed by secrets.SystemRandom (os.urandom), the default
- random.Random(seed): a seeded PRNG for reproducible output

A source is created per model rather than shared process-wide, so models
used from different threads never contend on one generator.
"""

import random
import secrets
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything that can draw a uniform float in [0.0, 1.0)."""

    def random(self) -> float:
        ...


class TrueRandom:
    """Cryptographically secure random source using system entropy."""

    def __init__(self):
        self._rng = secrets.SystemRandom()

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng.random()


def get_rng(seed: Optional[int] = None) -> RandomSource:
    """
    Create a new random source.

    Args:
        seed: When given, a seeded ``random.Random`` is returned so that
            generation is reproducible. Otherwise a fresh TrueRandom.
    """
    if seed is not None:
        return random.Random(seed)
    return TrueRandom()
