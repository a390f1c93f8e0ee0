"""PoissonGen - Blue-noise and low-discrepancy 2-D point set generation."""

__version__ = "0.1.0"

from poissongen.core import Config, GenerationResult, PointSetGenerator
from poissongen.sampling import (
    DefaultPRNG,
    PoissonDiskSampler,
    SamplingFactory,
    Shape,
    shuffle_points,
)

__all__ = [
    "__version__",
    "Config",
    "GenerationResult",
    "PointSetGenerator",
    "DefaultPRNG",
    "PoissonDiskSampler",
    "SamplingFactory",
    "Shape",
    "shuffle_points",
]
