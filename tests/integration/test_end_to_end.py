"""End-to-end generation of the default point set and its outputs."""

from pathlib import Path

import numpy as np
import pytest

from poissongen import PointSetGenerator
from poissongen.core import Config
from poissongen.processing import read_points, save_frames, save_raster, write_points
from poissongen.sampling import nearest_neighbor_distances
from poissongen.utils import CacheManager


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Create temporary output directory."""
    output = tmp_path / "output"
    output.mkdir(exist_ok=True)
    return output


@pytest.mark.integration
@pytest.mark.slow
def test_default_point_set(output_dir: Path):
    """Full default run: 20000 requested points in the circle."""
    config = Config(
        cache={"enabled": False},
        sampling={"seed": 2024},
        raster={"image_size": 512},
    )
    generator = PointSetGenerator(config=config)

    result = generator.generate()
    points = result.points

    assert result.min_distance == pytest.approx(np.sqrt(20000) / 20000)
    assert 0 < len(points) <= 20000
    offsets = points - 0.5
    assert np.all(np.einsum("ij,ij->i", offsets, offsets) <= 0.25)
    assert nearest_neighbor_distances(points).min() >= result.min_distance - 1e-12

    points_path = write_points(points, output_dir / "points.txt")
    assert np.array_equal(read_points(points_path), points)

    image_path = save_raster(generator.render(result), output_dir / "points.png")
    assert image_path.stat().st_size > 0


@pytest.mark.integration
def test_cached_shuffled_animation(output_dir: Path, cache_manager: CacheManager):
    """Shuffled, cached run replayed as frames."""
    config = Config(
        sampling={"num_points": 400, "seed": 3, "shuffle": True, "shape": "square"},
        animation={"frame_every": 100, "frame_size": 64},
    )
    generator = PointSetGenerator(config=config, cache_manager=cache_manager)

    first = generator.generate()
    second = generator.generate()

    assert second.from_cache
    assert np.array_equal(first.points, second.points)

    paths = save_frames(generator.frames(second), output_dir / "frames")
    assert len(paths) == -(-len(second.points) // 100)
