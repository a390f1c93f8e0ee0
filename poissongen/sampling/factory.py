"""Factory for creating point samplers."""

from typing import Any, Dict, Type

from poissongen.sampling.base import PointSampler
from poissongen.sampling.hammersley import HammersleySampler
from poissongen.sampling.jittered import JitteredGridSampler
from poissongen.sampling.poisson import PoissonDiskSampler
from poissongen.sampling.vogel import VogelSampler


class SamplingFactory:
    """Factory for creating point samplers by configured name."""

    _strategies: Dict[str, Type[PointSampler]] = {
        "poisson": PoissonDiskSampler,
        "vogel": VogelSampler,
        "jittered": JitteredGridSampler,
        "hammersley": HammersleySampler,
    }

    @classmethod
    def create(
        cls,
        method: str,
        num_points: int = 20000,
        **kwargs: Any,
    ) -> PointSampler:
        """Create a point sampler.

        Args:
            method: Sampling method name
            num_points: Number of points to generate
            **kwargs: Additional arguments for the sampler

        Returns:
            Sampler instance

        Raises:
            ValueError: If method is unknown
        """
        if method not in cls._strategies:
            available = ", ".join(cls._strategies.keys())
            raise ValueError(
                f"Unknown sampling method: {method}. Available: {available}"
            )

        strategy_class = cls._strategies[method]
        return strategy_class(num_points=num_points, **kwargs)

    @classmethod
    def register(cls, name: str, strategy_class: Type[PointSampler]) -> None:
        """Register a new point sampler.

        Args:
            name: Name for the sampler
            strategy_class: Sampler class
        """
        cls._strategies[name] = strategy_class

    @classmethod
    def available_methods(cls) -> list[str]:
        """Get list of available sampling methods."""
        return list(cls._strategies.keys())
