"""Point set sampling strategies for PoissonGen."""

from poissongen.sampling.base import (
    PointSampler,
    auto_min_distance,
    nearest_neighbor_distances,
    points_to_array,
    shuffle_points,
)
from poissongen.sampling.factory import SamplingFactory
from poissongen.sampling.geometry import (
    GridPoint,
    Point,
    Shape,
    contains,
    get_distance,
    is_in_circle,
    is_in_square,
    point_to_grid,
)
from poissongen.sampling.grid import DEFAULT_SEARCH_RADIUS, SpatialGrid
from poissongen.sampling.hammersley import HammersleySampler, radical_inverse
from poissongen.sampling.jittered import JitteredGridSampler
from poissongen.sampling.poisson import PoissonDiskSampler, PoissonRunStats
from poissongen.sampling.prng import DefaultPRNG
from poissongen.sampling.vogel import VogelSampler

__all__ = [
    "PointSampler",
    "SamplingFactory",
    "PoissonDiskSampler",
    "PoissonRunStats",
    "VogelSampler",
    "JitteredGridSampler",
    "HammersleySampler",
    "DefaultPRNG",
    "SpatialGrid",
    "DEFAULT_SEARCH_RADIUS",
    "Point",
    "GridPoint",
    "Shape",
    "contains",
    "get_distance",
    "is_in_circle",
    "is_in_square",
    "point_to_grid",
    "radical_inverse",
    "auto_min_distance",
    "nearest_neighbor_distances",
    "points_to_array",
    "shuffle_points",
]
