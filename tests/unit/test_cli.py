"""Unit tests for the command-line interface."""

from pathlib import Path

import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend for testing
import pytest
from typer.testing import CliRunner

from poissongen import __version__
from poissongen.cli.app import app
from poissongen.core import Config
from poissongen.processing import read_points

runner = CliRunner()


@pytest.fixture
def config_file(temp_dir: Path) -> Path:
    """Write a configuration with caching disabled."""
    path = temp_dir / "poissongen.toml"
    Config(
        cache={"enabled": False},
        logging={"level": "WARNING", "colorize": False},
    ).save_toml(path)
    return path


class TestInfo:
    """Test the info command."""

    def test_info(self):
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert __version__ in result.output
        for method in ("poisson", "vogel", "jittered", "hammersley"):
            assert method in result.output


class TestGenerate:
    """Test the generate command."""

    def test_generate_outputs(self, config_file: Path, temp_dir: Path):
        points_path = temp_dir / "points.txt"
        image_path = temp_dir / "points.png"
        plot_path = temp_dir / "plot.png"

        result = runner.invoke(
            app,
            [
                "generate",
                "-c", str(config_file),
                "-m", "hammersley",
                "-n", "50",
                "-o", str(points_path),
                "-i", str(image_path),
                "--size", "32",
                "-p", str(plot_path),
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Generated 50 points" in result.output
        assert read_points(points_path).shape == (50, 2)
        assert image_path.exists()
        assert plot_path.exists()

    def test_generate_array_format(self, config_file: Path, temp_dir: Path):
        output = temp_dir / "points.glsl"

        result = runner.invoke(
            app,
            [
                "generate",
                "-c", str(config_file),
                "-n", "100",
                "--seed", "7",
                "-f", "array",
                "-o", str(output),
            ],
        )

        assert result.exit_code == 0, result.output
        assert output.read_text().startswith("const vec2 points[")

    def test_generate_saturated_warning(self, config_file: Path):
        result = runner.invoke(
            app,
            ["generate", "-c", str(config_file), "-n", "1000", "-d", "0.3", "--seed", "1"],
        )

        assert result.exit_code == 0, result.output
        assert "saturated" in result.output

    def test_generate_bad_method(self, config_file: Path):
        result = runner.invoke(app, ["generate", "-c", str(config_file), "-m", "random"])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_generate_zero_distance(self, config_file: Path):
        result = runner.invoke(
            app, ["generate", "-c", str(config_file), "-n", "10", "-d", "0", "--seed", "1"]
        )

        assert result.exit_code == 0, result.output
        assert "Generated 1 points" in result.output

    def test_generate_missing_config(self, temp_dir: Path):
        result = runner.invoke(app, ["generate", "-c", str(temp_dir / "missing.toml")])

        assert result.exit_code == 1
        assert "not found" in result.output


class TestAnimate:
    """Test the animate command."""

    def test_animate(self, config_file: Path, temp_dir: Path):
        frames_dir = temp_dir / "frames"

        result = runner.invoke(
            app,
            [
                "animate",
                str(frames_dir),
                "-c", str(config_file),
                "-m", "vogel",
                "-n", "100",
                "--every", "25",
                "--size", "16",
            ],
        )

        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in frames_dir.glob("*.png")) == [
            f"frame_{i:05d}.png" for i in range(4)
        ]


class TestCache:
    """Test the cache command."""

    def test_cache_stats_disabled(self, config_file: Path):
        result = runner.invoke(app, ["cache", "stats", "-c", str(config_file)])

        assert result.exit_code == 0
        assert "Cache is disabled" in result.output

    def test_cache_stats_enabled(self, temp_dir: Path):
        path = temp_dir / "cached.toml"
        Config(cache={"cache_dir": temp_dir / "cache"}).save_toml(path)

        result = runner.invoke(app, ["cache", "stats", "-c", str(path)])

        assert result.exit_code == 0
        assert "Cache Statistics" in result.output

    def test_cache_unknown_action(self, config_file: Path):
        result = runner.invoke(app, ["cache", "compact", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "Unknown action" in result.output
