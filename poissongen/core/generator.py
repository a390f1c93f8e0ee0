"""Generation pipeline: configure a sampler, run it and collect metrics."""

import time
from typing import Any, Dict, Iterator, Optional

import numpy as np

from poissongen.core.config import Config, SamplingConfig
from poissongen.processing.raster import (
    load_density_map,
    rasterize_points,
    render_frames,
)
from poissongen.sampling import (
    DefaultPRNG,
    PointSampler,
    SamplingFactory,
    nearest_neighbor_distances,
    shuffle_points,
)
from poissongen.utils import (
    CacheManager,
    StructuredLogger,
    create_cache_manager,
    get_logger,
    log_generation_result,
    log_performance,
)

logger = get_logger(__name__)


class GenerationResult:
    """Result of a generation run."""

    def __init__(
        self,
        points: np.ndarray,
        method: str,
        requested: int,
        min_distance: Optional[float] = None,
        metrics: Optional[Dict[str, Any]] = None,
        from_cache: bool = False,
    ):
        """Initialize generation result.

        Args:
            points: Generated points (M, 2)
            method: Sampling method name
            requested: Number of points requested
            min_distance: Separation used by Poisson disk runs
            metrics: Timing and quality metrics
            from_cache: Whether the points were served from the cache
        """
        self.points = points
        self.method = method
        self.requested = requested
        self.min_distance = min_distance
        self.metrics = metrics or {}
        self.from_cache = from_cache
        self.timestamp = time.time()

    @property
    def saturated(self) -> bool:
        """True when fewer points than requested were produced."""
        return len(self.points) < self.requested

    def __len__(self) -> int:
        return len(self.points)


class PointSetGenerator:
    """Builds point sets from a configuration."""

    def __init__(
        self,
        config: Optional[Config] = None,
        cache_manager: Optional[CacheManager] = None,
    ):
        """Initialize generator.

        Args:
            config: Configuration object
            cache_manager: Cache manager (will create if not provided and
                caching is enabled)
        """
        self.config = config or Config()
        self.cache_manager = cache_manager or (
            create_cache_manager(self.config.cache) if self.config.cache.enabled else None
        )

    def create_sampler(self, sampling: Optional[SamplingConfig] = None) -> PointSampler:
        """Create the sampler described by a sampling configuration.

        Args:
            sampling: Sampling configuration (defaults to the generator's)

        Returns:
            Sampler instance
        """
        sampling = sampling or self.config.sampling
        params: Dict[str, Any] = {"seed": sampling.seed}

        if sampling.method == "poisson":
            params.update(
                shape=sampling.shape,
                min_distance=sampling.min_distance,
                k_candidates=sampling.k_candidates,
                search_radius=sampling.search_radius,
            )
        elif sampling.method == "jittered":
            params["shape"] = sampling.shape

        return SamplingFactory.create(
            sampling.method,
            num_points=sampling.num_points,
            **params,
        )

    def generate(self, rng: Optional[DefaultPRNG] = None) -> GenerationResult:
        """Generate a point set.

        Seeded runs are reproducible and therefore cached; runs with an
        explicit generator or without a seed are always computed.

        Args:
            rng: Optional random source overriding the configured seed

        Returns:
            GenerationResult with points and metrics
        """
        sampling = self.config.sampling
        cache_key = None

        if self.cache_manager and rng is None and sampling.seed is not None:
            cache_key = self.cache_manager.generate_key(sampling.model_dump())
            cached_points, metadata = self.cache_manager.get_point_set(cache_key)
            if cached_points is not None:
                logger.debug("generation_cache_hit", key=cache_key)
                return GenerationResult(
                    points=cached_points,
                    method=sampling.method,
                    requested=sampling.num_points,
                    min_distance=metadata.get("min_distance"),
                    metrics=metadata.get("metrics", {}),
                    from_cache=True,
                )

        if rng is None:
            rng = DefaultPRNG(sampling.seed)

        sampler = self.create_sampler(sampling)

        with StructuredLogger(
            logger,
            "generation",
            method=sampling.method,
            requested=sampling.num_points,
        ) as ctx:
            start_time = time.perf_counter()
            points = sampler.sample(rng)
            sampling_time = time.perf_counter() - start_time
            log_performance(
                logger, "sampling", sampling_time, method=sampling.method, points=len(points)
            )

            if sampling.shuffle:
                shuffle_points(points, rng)

            min_distance = None
            if sampling.method == "poisson" and sampling.num_points > 0:
                min_distance = sampler.resolve_min_distance()

            metrics = self._compute_metrics(points, sampling.num_points)
            metrics["sampling_time"] = sampling_time
            ctx.update_context(generated=len(points))

        result = GenerationResult(
            points=points,
            method=sampling.method,
            requested=sampling.num_points,
            min_distance=min_distance,
            metrics=metrics,
        )
        log_generation_result(logger, result)

        if cache_key:
            self.cache_manager.cache_point_set(
                cache_key,
                points,
                metadata={"min_distance": min_distance, "metrics": metrics},
            )

        return result

    def render(
        self,
        result: GenerationResult,
        rng: Optional[DefaultPRNG] = None,
    ) -> np.ndarray:
        """Rasterize a result using the raster configuration.

        Args:
            result: Generation result
            rng: Random source for density thinning; derived from the
                sampling seed when omitted, so seeded renders repeat

        Returns:
            Image array (size, size) of uint8
        """
        raster = self.config.raster
        density = None
        if raster.density_map is not None:
            density = load_density_map(raster.density_map, size=raster.image_size)
            if rng is None:
                rng = DefaultPRNG(self.config.sampling.seed).spawn()

        return rasterize_points(
            result.points,
            raster.image_size,
            density_map=density,
            rng=rng,
            value=raster.point_value,
        )

    def frames(self, result: GenerationResult) -> Iterator[np.ndarray]:
        """Replay a result as frames using the animation configuration."""
        animation = self.config.animation
        return render_frames(
            result.points,
            animation.frame_size,
            every=animation.frame_every,
            value=self.config.raster.point_value,
        )

    @staticmethod
    def _compute_metrics(points: np.ndarray, requested: int) -> Dict[str, Any]:
        """Quality metrics for a point set."""
        metrics: Dict[str, Any] = {
            "count": len(points),
            "fill_ratio": len(points) / requested if requested > 0 else 0.0,
        }

        nn = nearest_neighbor_distances(points)
        if len(nn) > 0:
            metrics["nn_distance_min"] = float(nn.min())
            metrics["nn_distance_mean"] = float(nn.mean())

        return metrics
