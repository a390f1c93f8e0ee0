"""Shared test fixtures and configuration."""

import shutil
import tempfile
from pathlib import Path
from typing import Generator

import numpy as np
import pytest

from poissongen.core import Config
from poissongen.sampling import DefaultPRNG
from poissongen.utils import CacheManager


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture
def test_config() -> Config:
    """Create a test configuration."""
    return Config(
        cache={"enabled": False},  # Disable cache for tests by default
        sampling={"num_points": 200, "seed": 1234},  # Smaller for speed
        raster={"image_size": 64},
        animation={"frame_every": 50, "frame_size": 32},
    )


@pytest.fixture
def cache_manager(temp_dir: Path) -> CacheManager:
    """Create a test cache manager."""
    from poissongen.core.config import CacheConfig

    cache_config = CacheConfig(
        enabled=True,
        cache_dir=temp_dir / "cache",
        max_size_gb=0.1,  # Small size for tests
        ttl_days=1,
    )
    return CacheManager(cache_config)


@pytest.fixture
def rng() -> DefaultPRNG:
    """Seeded random source."""
    return DefaultPRNG(42)


@pytest.fixture
def sample_points() -> np.ndarray:
    """Create a small point set in the unit square."""
    return np.random.default_rng(7).random((50, 2))


# Markers for different test categories
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that test multiple components"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take more than 1 second"
    )
