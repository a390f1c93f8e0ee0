"""Vogel (golden angle) spiral sampling."""

import math
from typing import Optional

import numpy as np

from poissongen.sampling.prng import DefaultPRNG

GOLDEN_ANGLE = math.pi * (3.0 - math.sqrt(5.0))


class VogelSampler:
    """Deterministic sunflower spiral filling the inscribed unit circle."""

    name = "vogel"

    def __init__(self, num_points: int = 20000, seed: Optional[int] = None):
        """Initialize Vogel sampler.

        Args:
            num_points: Number of points to generate
            seed: Ignored; accepted so all samplers share a constructor shape
        """
        self.num_points = num_points
        self.seed = seed

    def sample(self, rng: Optional[DefaultPRNG] = None) -> np.ndarray:
        """Place exactly num_points points on the spiral.

        Args:
            rng: Unused

        Returns:
            Array of points (num_points, 2), all inside the circle
        """
        n = max(self.num_points, 0)
        if n == 0:
            return np.empty((0, 2), dtype=np.float64)

        i = np.arange(n, dtype=np.float64)
        radius = 0.5 * np.sqrt((i + 0.5) / n)
        theta = i * GOLDEN_ANGLE

        points = np.empty((n, 2), dtype=np.float64)
        points[:, 0] = 0.5 + radius * np.cos(theta)
        points[:, 1] = 0.5 + radius * np.sin(theta)
        return points
