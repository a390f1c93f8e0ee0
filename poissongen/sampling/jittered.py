"""Jittered grid sampling."""

import math
from typing import Optional

import numpy as np

from poissongen.sampling.base import shuffle_points
from poissongen.sampling.geometry import Shape
from poissongen.sampling.prng import DefaultPRNG


class JitteredGridSampler:
    """One randomly offset point per cell of a near-square lattice."""

    name = "jittered"

    def __init__(
        self,
        num_points: int = 20000,
        shape: Shape | str = Shape.CIRCLE,
        seed: Optional[int] = None,
    ):
        """Initialize jittered grid sampler.

        Args:
            num_points: Number of lattice cells to fill
            shape: Domain to keep ("circle" filters to the inscribed circle)
            seed: Random seed used when sample() is called without a generator
        """
        self.num_points = num_points
        self.shape = Shape(shape)
        self.seed = seed

    def lattice_size(self) -> tuple[int, int]:
        """Columns and rows of the smallest near-square lattice with >= n cells."""
        if self.num_points <= 0:
            return 0, 0
        cols = math.ceil(math.sqrt(self.num_points))
        rows = math.ceil(self.num_points / cols)
        return cols, rows

    def sample(self, rng: Optional[DefaultPRNG] = None) -> np.ndarray:
        """Jitter one point inside each kept cell.

        Surplus cells beyond num_points are left empty at random. In circle
        mode points outside the circle are dropped, so fewer than num_points
        may be returned.

        Args:
            rng: Random source; a new one is built from the seed if omitted

        Returns:
            Array of points (M, 2) in row-major cell order
        """
        cols, rows = self.lattice_size()
        if cols == 0:
            return np.empty((0, 2), dtype=np.float64)

        if rng is None:
            rng = DefaultPRNG(self.seed)

        cells = np.array([(c, r) for r in range(rows) for c in range(cols)], dtype=np.float64)
        surplus = len(cells) - self.num_points
        if surplus > 0:
            order = shuffle_points(np.arange(len(cells)).reshape(-1, 1), rng).ravel()
            keep = np.sort(order[surplus:])
            cells = cells[keep]

        points = np.empty_like(cells)
        for i, (c, r) in enumerate(cells):
            points[i, 0] = (c + rng.random_float()) / cols
            points[i, 1] = (r + rng.random_float()) / rows

        if self.shape is Shape.CIRCLE:
            offsets = points - 0.5
            inside = np.einsum("ij,ij->i", offsets, offsets) <= 0.25
            points = points[inside]

        return points
