"""Seedable pseudo-random source shared by all randomized samplers."""

import time
from typing import Optional

import numpy as np

MAX_SEED = 2**32 - 1


class DefaultPRNG:
    """Mersenne Twister backed random source owned by a single sampling run.

    Every randomized operation takes the generator explicitly, so two runs
    built from the same seed draw the same stream in the same order.
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize the random source.

        Args:
            seed: 32-bit seed for reproducible runs. When omitted the generator
                is seeded from system entropy mixed with the wall clock.

        Raises:
            ValueError: If the seed does not fit in 32 bits
        """
        if seed is not None and not 0 <= seed <= MAX_SEED:
            raise ValueError(f"Seed must be in [0, {MAX_SEED}], got {seed}")

        self.seed = seed
        if seed is None:
            seed_sequence = np.random.SeedSequence(
                [np.random.SeedSequence().entropy, time.time_ns()]
            )
        else:
            seed_sequence = np.random.SeedSequence(seed)

        self._seed_sequence = seed_sequence
        self._generator = np.random.Generator(np.random.MT19937(seed_sequence))

    def random_float(self) -> float:
        """Uniform float in [0, 1)."""
        return float(self._generator.random())

    def random_int(self, max_value: int) -> int:
        """Uniform integer in [0, max_value], both ends inclusive."""
        return int(self._generator.integers(0, max_value, endpoint=True))

    def spawn(self) -> "DefaultPRNG":
        """Create an independent generator for a parallel run."""
        child = DefaultPRNG.__new__(DefaultPRNG)
        child.seed = None
        child._seed_sequence = self._seed_sequence.spawn(1)[0]
        child._generator = np.random.Generator(np.random.MT19937(child._seed_sequence))
        return child

    def __repr__(self) -> str:
        return f"DefaultPRNG(seed={self.seed!r})"
