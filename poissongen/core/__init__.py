"""Core functionality for PoissonGen."""

from poissongen.core.config import (
    AnimationConfig,
    CacheConfig,
    Config,
    ExportConfig,
    LoggingConfig,
    RasterConfig,
    SamplingConfig,
    get_default_config,
    load_config,
)
from poissongen.core.exceptions import (
    CacheError,
    ConfigurationError,
    DensityMapError,
    ExportError,
    GridConfigurationError,
    PoissonGenError,
    SamplingError,
)
from poissongen.core.generator import GenerationResult, PointSetGenerator

__all__ = [
    # Config classes
    "Config",
    "SamplingConfig",
    "RasterConfig",
    "ExportConfig",
    "AnimationConfig",
    "CacheConfig",
    "LoggingConfig",
    # Config functions
    "get_default_config",
    "load_config",
    # Generator
    "PointSetGenerator",
    "GenerationResult",
    # Exceptions
    "PoissonGenError",
    "ConfigurationError",
    "GridConfigurationError",
    "SamplingError",
    "DensityMapError",
    "ExportError",
    "CacheError",
]
