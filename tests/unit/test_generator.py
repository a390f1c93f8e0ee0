"""Unit tests for the generation pipeline."""

from pathlib import Path

import numpy as np
import pytest

from poissongen.core import Config, DensityMapError, GenerationResult, PointSetGenerator
from poissongen.processing import save_raster
from poissongen.sampling import DefaultPRNG, PoissonDiskSampler, VogelSampler
from poissongen.utils import CacheManager


class TestGenerationResult:
    """Test result container."""

    def test_saturated(self):
        result = GenerationResult(points=np.zeros((5, 2)), method="poisson", requested=10)
        assert result.saturated
        assert len(result) == 5
        assert result.metrics == {}
        assert not result.from_cache

    def test_not_saturated(self):
        result = GenerationResult(points=np.zeros((10, 2)), method="vogel", requested=10)
        assert not result.saturated


class TestPointSetGenerator:
    """Test PointSetGenerator."""

    def test_create_sampler(self, test_config: Config):
        generator = PointSetGenerator(test_config)
        sampler = generator.create_sampler()

        assert isinstance(sampler, PoissonDiskSampler)
        assert sampler.num_points == 200
        assert sampler.seed == 1234
        assert sampler.k_candidates == 30

    def test_create_sampler_for_other_method(self, test_config: Config):
        generator = PointSetGenerator(test_config)
        sampling = test_config.with_overrides("sampling", method="vogel").sampling
        assert isinstance(generator.create_sampler(sampling), VogelSampler)

    def test_generate(self, test_config: Config):
        result = PointSetGenerator(test_config).generate()

        assert result.method == "poisson"
        assert result.requested == 200
        assert 0 < len(result.points) <= 200
        assert result.min_distance == pytest.approx(np.sqrt(200) / 200)
        assert result.metrics["count"] == len(result.points)
        assert result.metrics["nn_distance_min"] >= result.min_distance - 1e-12
        assert "sampling_time" in result.metrics
        assert 0 < result.metrics["fill_ratio"] <= 1.0

    def test_seeded_generation_is_reproducible(self, test_config: Config):
        a = PointSetGenerator(test_config).generate()
        b = PointSetGenerator(test_config).generate()
        assert np.array_equal(a.points, b.points)

    def test_explicit_rng(self, test_config: Config):
        generator = PointSetGenerator(test_config)
        a = generator.generate(DefaultPRNG(5))
        b = generator.generate(DefaultPRNG(5))
        assert np.array_equal(a.points, b.points)

    def test_shuffle_keeps_point_set(self, test_config: Config):
        plain = PointSetGenerator(test_config).generate()
        shuffled = PointSetGenerator(
            test_config.with_overrides("sampling", shuffle=True)
        ).generate()

        assert len(plain.points) == len(shuffled.points)
        assert sorted(map(tuple, plain.points)) == sorted(map(tuple, shuffled.points))
        assert not np.array_equal(plain.points, shuffled.points)

    @pytest.mark.parametrize("method", ["vogel", "hammersley", "jittered"])
    def test_other_methods(self, test_config: Config, method: str):
        config = test_config.with_overrides("sampling", method=method, shape="square")
        result = PointSetGenerator(config).generate()

        assert result.method == method
        assert result.min_distance is None
        assert len(result.points) == 200

    def test_zero_points(self, test_config: Config):
        config = test_config.with_overrides("sampling", num_points=0)
        result = PointSetGenerator(config).generate()

        assert len(result.points) == 0
        assert result.metrics["fill_ratio"] == 0.0
        assert "nn_distance_min" not in result.metrics

    def test_cache_hit(self, test_config: Config, cache_manager: CacheManager):
        generator = PointSetGenerator(test_config, cache_manager=cache_manager)

        first = generator.generate()
        second = generator.generate()

        assert not first.from_cache
        assert second.from_cache
        assert np.array_equal(first.points, second.points)
        assert second.min_distance == first.min_distance

    def test_unseeded_runs_not_cached(self, test_config: Config, cache_manager: CacheManager):
        config = test_config.with_overrides("sampling", num_points=50)
        config = config.model_copy(
            update={"sampling": config.sampling.model_copy(update={"seed": None})}
        )
        generator = PointSetGenerator(config, cache_manager=cache_manager)

        generator.generate()
        result = generator.generate()

        assert not result.from_cache
        assert len(cache_manager.cache) == 0

    def test_explicit_rng_bypasses_cache(self, test_config: Config, cache_manager: CacheManager):
        generator = PointSetGenerator(test_config, cache_manager=cache_manager)
        generator.generate()

        assert not generator.generate(DefaultPRNG(1)).from_cache

    def test_render(self, test_config: Config):
        generator = PointSetGenerator(test_config)
        result = generator.generate()
        image = generator.render(result)

        assert image.shape == (64, 64)
        assert image.dtype == np.uint8
        assert 0 < np.count_nonzero(image) <= len(result.points)
        assert set(np.unique(image)) <= {0, 255}

    def test_render_with_density_map(self, test_config: Config, temp_dir: Path):
        white = save_raster(np.full((64, 64), 255, dtype=np.uint8), temp_dir / "white.png")
        black = save_raster(np.zeros((64, 64), dtype=np.uint8), temp_dir / "black.png")

        plain = PointSetGenerator(test_config)
        result = plain.generate()
        reference = plain.render(result)

        kept = PointSetGenerator(test_config.with_overrides("raster", density_map=white))
        assert np.array_equal(kept.render(result, DefaultPRNG(1)), reference)

        dropped = PointSetGenerator(test_config.with_overrides("raster", density_map=black))
        assert np.count_nonzero(dropped.render(result, DefaultPRNG(1))) == 0

    def test_seeded_density_render_is_reproducible(self, test_config: Config, temp_dir: Path):
        """Thinning without an explicit generator follows the sampling seed."""
        gray = save_raster(np.full((64, 64), 128, dtype=np.uint8), temp_dir / "gray.png")
        config = test_config.with_overrides("raster", density_map=gray)

        first_gen = PointSetGenerator(config)
        first = first_gen.render(first_gen.generate())
        second_gen = PointSetGenerator(config)
        second = second_gen.render(second_gen.generate())

        assert np.array_equal(first, second)
        full = PointSetGenerator(test_config).render(first_gen.generate())
        assert 0 < np.count_nonzero(first) < np.count_nonzero(full)

    def test_render_density_map_wrong_size(self, test_config: Config, temp_dir: Path):
        small = save_raster(np.zeros((16, 16), dtype=np.uint8), temp_dir / "small.png")
        generator = PointSetGenerator(test_config.with_overrides("raster", density_map=small))

        with pytest.raises(DensityMapError):
            generator.render(generator.generate())

    def test_frames(self, test_config: Config):
        generator = PointSetGenerator(test_config)
        result = generator.generate()
        frames = list(generator.frames(result))

        assert len(frames) == -(-len(result.points) // 50)
        assert all(frame.shape == (32, 32) for frame in frames)
        counts = [np.count_nonzero(frame) for frame in frames]
        assert counts == sorted(counts)
