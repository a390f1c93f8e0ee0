"""Hammersley low-discrepancy point set."""

from typing import Optional

import numpy as np

from poissongen.sampling.prng import DefaultPRNG


def radical_inverse(index: int, base: int = 2) -> float:
    """Van der Corput radical inverse: mirror the digits of index about the point.

    Args:
        index: Non-negative integer
        base: Digit base

    Returns:
        Value in [0, 1)
    """
    result = 0.0
    scale = 1.0 / base
    while index > 0:
        index, digit = divmod(index, base)
        result += digit * scale
        scale /= base
    return result


class HammersleySampler:
    """Hammersley points (i / n, radical_inverse(i)) in the unit square."""

    name = "hammersley"

    def __init__(self, num_points: int = 20000, seed: Optional[int] = None):
        self.num_points = num_points
        self.seed = seed

    def sample(self, rng: Optional[DefaultPRNG] = None) -> np.ndarray:
        """Generate exactly num_points points; rng is unused."""
        n = max(self.num_points, 0)
        points = np.empty((n, 2), dtype=np.float64)
        for i in range(n):
            points[i, 0] = i / n
            points[i, 1] = radical_inverse(i)
        return points
