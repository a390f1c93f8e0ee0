"""Poisson disk sampling by grid-accelerated dart throwing.

Fast Poisson Disk Sampling in Arbitrary Dimensions, R. Bridson, SIGGRAPH 2007.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

import numpy as np
import structlog

from poissongen.core.exceptions import SamplingError
from poissongen.sampling.base import auto_min_distance, points_to_array
from poissongen.sampling.geometry import Point, Shape, contains
from poissongen.sampling.grid import DEFAULT_SEARCH_RADIUS, SpatialGrid
from poissongen.sampling.prng import DefaultPRNG

logger = structlog.get_logger(__name__)

# Upper bound on draws for the first point; any domain with positive area
# finds one long before this.
MAX_SEED_ATTEMPTS = 100_000


@dataclass
class PoissonRunStats:
    """Bookkeeping from the most recent sampling run."""

    min_distance: float
    cell_size: float
    grid_size: int
    accepted: int = 0
    candidates_tried: int = 0
    candidates_rejected: int = 0
    saturated: bool = False


class PoissonDiskSampler:
    """Blue-noise points with a guaranteed minimum pairwise distance."""

    name = "poisson"

    def __init__(
        self,
        num_points: int = 20000,
        shape: Shape | str = Shape.CIRCLE,
        min_distance: Optional[float] = None,
        k_candidates: int = 30,
        search_radius: int = DEFAULT_SEARCH_RADIUS,
        seed: Optional[int] = None,
    ):
        """Initialize Poisson disk sampler.

        Args:
            num_points: Maximum number of points to generate
            shape: Domain to fill ("circle" or "square")
            min_distance: Minimum distance between points; None or negative
                derives it from num_points
            k_candidates: Number of candidates to try around each active point
            search_radius: Grid neighbourhood half-width in cells
            seed: Random seed used when sample() is called without a generator
        """
        self.num_points = num_points
        self.shape = Shape(shape)
        self.min_distance = min_distance
        self.k_candidates = k_candidates
        self.search_radius = search_radius
        self.seed = seed
        self.last_run: Optional[PoissonRunStats] = None

    def resolve_min_distance(self) -> float:
        """Minimum distance used for a run, deriving it when not given."""
        if self.min_distance is None or self.min_distance < 0:
            return auto_min_distance(self.num_points)
        return self.min_distance

    def sample(self, rng: Optional[DefaultPRNG] = None) -> np.ndarray:
        """Generate points by dart throwing from an active list.

        The result holds accepted points in discovery order. It is shorter
        than num_points when the domain saturates before the target is met.

        Args:
            rng: Random source; a new one is built from the seed if omitted

        Returns:
            Array of points (M, 2) with M <= num_points
        """
        if self.num_points <= 0:
            self.last_run = None
            return np.empty((0, 2), dtype=np.float64)

        if rng is None:
            rng = DefaultPRNG(self.seed)

        min_distance = self.resolve_min_distance()
        if min_distance == 0:
            return self._sample_single(rng)

        grid = SpatialGrid(min_distance, search_radius=self.search_radius)
        stats = PoissonRunStats(
            min_distance=min_distance,
            cell_size=grid.cell_size,
            grid_size=grid.width,
        )
        self.last_run = stats

        first_point = self._seed_point(rng)
        active: List[Point] = [first_point]
        samples: List[Point] = [first_point]
        grid.insert(first_point)

        logger.debug(
            "poisson_seeded",
            x=first_point.x,
            y=first_point.y,
            min_distance=min_distance,
            grid=f"{grid.width}x{grid.height}",
        )

        while active and len(samples) < self.num_points:
            point = self._pop_random(active, rng)

            for _ in range(self.k_candidates):
                candidate = self._random_point_around(point, min_distance, rng)
                stats.candidates_tried += 1

                if contains(self.shape, candidate) and not grid.has_neighbor_within(
                    candidate, min_distance
                ):
                    active.append(candidate)
                    samples.append(candidate)
                    grid.insert(candidate)
                    if len(samples) >= self.num_points:
                        break
                else:
                    stats.candidates_rejected += 1

        stats.accepted = len(samples)
        stats.saturated = len(samples) < self.num_points

        if stats.saturated:
            logger.info(
                "poisson_saturated",
                requested=self.num_points,
                generated=stats.accepted,
                min_distance=min_distance,
            )
        else:
            logger.debug("poisson_completed", generated=stats.accepted)

        return points_to_array(samples)

    def _sample_single(self, rng: DefaultPRNG) -> np.ndarray:
        """Degenerate run for a zero distance: the seed point alone.

        A zero disk cannot size the grid and admits unbounded coincident
        points, so the run stops after seeding and reports saturation.
        """
        point = self._seed_point(rng)
        self.last_run = PoissonRunStats(
            min_distance=0.0,
            cell_size=0.0,
            grid_size=0,
            accepted=1,
            saturated=self.num_points > 1,
        )
        logger.warning("poisson_zero_distance", requested=self.num_points, generated=1)
        return points_to_array([point])

    def _seed_point(self, rng: DefaultPRNG) -> Point:
        """Draw uniform points in the unit square until one is in the domain."""
        for _ in range(MAX_SEED_ATTEMPTS):
            point = Point(rng.random_float(), rng.random_float())
            if contains(self.shape, point):
                return point
        raise SamplingError(
            f"No seed point inside the {self.shape.value} domain after "
            f"{MAX_SEED_ATTEMPTS} attempts",
            {"shape": self.shape.value},
        )

    @staticmethod
    def _pop_random(points: List[Point], rng: DefaultPRNG) -> Point:
        """Remove and return the point at a uniformly random index."""
        index = rng.random_int(len(points) - 1)
        # Order is irrelevant, so swap with the tail and pop in O(1).
        points[index], points[-1] = points[-1], points[index]
        return points.pop()

    @staticmethod
    def _random_point_around(point: Point, min_distance: float, rng: DefaultPRNG) -> Point:
        """Candidate at radius [d, 2d) and a uniform angle around a point.

        Radius is uniform rather than area-uniform, so candidates cluster
        towards the inner edge of the annulus.
        """
        radius = min_distance * (rng.random_float() + 1.0)
        angle = 2.0 * math.pi * rng.random_float()
        return Point(
            point.x + radius * math.cos(angle),
            point.y + radius * math.sin(angle),
        )
