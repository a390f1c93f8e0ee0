"""Shared sampler protocol and helpers for 2-D point sets."""

from typing import Iterable, Optional, Protocol, runtime_checkable

import numpy as np
from scipy.spatial import cKDTree

from poissongen.sampling.geometry import Point
from poissongen.sampling.prng import DefaultPRNG


@runtime_checkable
class PointSampler(Protocol):
    """Anything that produces a finite sequence of normalized 2-D points.

    Implementations return an ``(M, 2)`` float64 array with ``M <= num_points``
    and coordinates in the [0, 1] domain.
    """

    name: str
    num_points: int

    def sample(self, rng: Optional[DefaultPRNG] = None) -> np.ndarray:
        ...


def points_to_array(points: Iterable[Point]) -> np.ndarray:
    """Convert points to an ``(N, 2)`` array.

    Args:
        points: Iterable of Point values

    Returns:
        Array of coordinates (N, 2)
    """
    coords = [(p.x, p.y) for p in points]
    if not coords:
        return np.empty((0, 2), dtype=np.float64)
    return np.asarray(coords, dtype=np.float64)


def shuffle_points(points: np.ndarray, rng: DefaultPRNG) -> np.ndarray:
    """Shuffle point order in place with Fisher-Yates.

    The set of points is unchanged; only the discovery order is lost.

    Args:
        points: Point array (N, 2), modified in place
        rng: Random source

    Returns:
        The same array, shuffled
    """
    for i in range(len(points) - 1, 0, -1):
        j = rng.random_int(i)
        if i != j:
            points[[i, j]] = points[[j, i]]
    return points


def nearest_neighbor_distances(points: np.ndarray) -> np.ndarray:
    """Distance from each point to its nearest other point.

    Args:
        points: Point array (N, 2)

    Returns:
        Array of distances (N,); empty if fewer than two points
    """
    if len(points) < 2:
        return np.empty(0, dtype=np.float64)
    tree = cKDTree(points)
    distances, _ = tree.query(points, k=2)
    return distances[:, 1]


def auto_min_distance(num_points: int) -> float:
    """Separation that roughly balances coverage against the point count."""
    return float(np.sqrt(num_points) / num_points)

