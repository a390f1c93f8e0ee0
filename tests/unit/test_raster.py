"""Unit tests for rasterization and frame sequences."""

from pathlib import Path

import numpy as np
import pytest

from poissongen.core.exceptions import DensityMapError
from poissongen.processing import (
    load_density_map,
    rasterize_points,
    render_frames,
    save_frames,
    save_raster,
)
from poissongen.sampling import DefaultPRNG


class TestRasterize:
    """Test point rasterization."""

    def test_pixel_mapping(self):
        image = rasterize_points(np.array([[0.0, 0.0], [0.5, 0.25], [0.99, 0.99]]), 4)

        assert image[0, 0] == 255
        assert image[1, 2] == 255  # row from y, column from x
        assert image[3, 3] == 255
        assert np.count_nonzero(image) == 3

    def test_out_of_bounds_skipped(self):
        image = rasterize_points(np.array([[1.0, 0.5], [0.5, 1.0], [-0.1, 0.5]]), 8)
        assert np.count_nonzero(image) == 0

    def test_custom_value(self):
        image = rasterize_points(np.array([[0.5, 0.5]]), 2, value=128)
        assert image[1, 1] == 128

    def test_draws_into_existing_image(self):
        image = np.zeros((4, 4), dtype=np.uint8)
        rasterize_points(np.array([[0.1, 0.1]]), 4, image=image)
        rasterize_points(np.array([[0.9, 0.9]]), 4, image=image)
        assert np.count_nonzero(image) == 2

    def test_density_thinning_half(self):
        rng = np.random.default_rng(3)
        points = rng.random((4000, 2))
        density = np.full((256, 256), 0.5)

        image = rasterize_points(points, 256, density_map=density, rng=DefaultPRNG(9))
        full = rasterize_points(points, 256)

        ratio = np.count_nonzero(image) / np.count_nonzero(full)
        assert 0.4 < ratio < 0.6

    def test_density_follows_map(self):
        points = np.random.default_rng(4).random((2000, 2))
        density = np.zeros((16, 16))
        density[:, 8:] = 1.0  # right half fully kept

        image = rasterize_points(points, 16, density_map=density, rng=DefaultPRNG(2))

        assert np.count_nonzero(image[:, :8]) == 0
        assert np.count_nonzero(image[:, 8:]) > 0


class TestDensityMap:
    """Test density map loading."""

    def test_load_saved_map(self, temp_dir: Path):
        data = np.zeros((8, 8), dtype=np.uint8)
        data[:4] = 255
        path = save_raster(data, temp_dir / "density.png")

        density = load_density_map(path, size=8)

        assert density.shape == (8, 8)
        assert np.allclose(density[:4], 1.0)
        assert np.allclose(density[4:], 0.0)

    def test_missing_file(self, temp_dir: Path):
        with pytest.raises(DensityMapError, match="does not exist"):
            load_density_map(temp_dir / "missing.png")

    def test_unreadable_file(self, temp_dir: Path):
        path = temp_dir / "broken.png"
        path.write_bytes(b"not an image")
        with pytest.raises(DensityMapError):
            load_density_map(path)

    def test_wrong_size(self, temp_dir: Path):
        path = save_raster(np.zeros((8, 8), dtype=np.uint8), temp_dir / "density.png")
        with pytest.raises(DensityMapError, match="expected 16x16"):
            load_density_map(path, size=16)


class TestFrames:
    """Test frame sequence rendering."""

    def test_frame_count(self, sample_points: np.ndarray):
        frames = list(render_frames(sample_points, 32, every=20))
        assert len(frames) == 3  # 50 points in batches of 20

    def test_frames_are_cumulative(self, sample_points: np.ndarray):
        frames = list(render_frames(sample_points, 32, every=10))

        for earlier, later in zip(frames, frames[1:]):
            assert np.all(later[earlier > 0] > 0)
        assert np.array_equal(frames[-1], rasterize_points(sample_points, 32))

    def test_frames_are_copies(self, sample_points: np.ndarray):
        frames = list(render_frames(sample_points, 32, every=25))
        assert frames[0] is not frames[1]
        assert np.count_nonzero(frames[0]) < np.count_nonzero(frames[1])

    def test_empty_point_set(self):
        assert list(render_frames(np.empty((0, 2)), 8)) == []

    def test_invalid_every(self, sample_points: np.ndarray):
        with pytest.raises(ValueError):
            list(render_frames(sample_points, 8, every=0))

    def test_save_frames(self, sample_points: np.ndarray, temp_dir: Path):
        paths = save_frames(render_frames(sample_points, 16, every=10), temp_dir / "frames")

        assert len(paths) == 5
        assert paths[0].name == "frame_00000.png"
        assert paths[-1].name == "frame_00004.png"
        assert all(p.exists() for p in paths)
