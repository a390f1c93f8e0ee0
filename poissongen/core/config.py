"""Configuration management for PoissonGen using Pydantic."""

from pathlib import Path
from typing import Literal, Optional

import tomli
from pydantic import BaseModel, ConfigDict, Field


class SamplingConfig(BaseModel):
    """Configuration for point set sampling."""

    model_config = ConfigDict(frozen=True)

    num_points: int = Field(20000, ge=0, description="Number of points to generate")
    method: Literal["poisson", "vogel", "jittered", "hammersley"] = Field(
        "poisson", description="Sampling method to use"
    )
    shape: Literal["circle", "square"] = Field(
        "circle", description="Domain to fill"
    )
    min_distance: float = Field(
        -1.0, description="Minimum distance between points (negative = auto)"
    )
    k_candidates: int = Field(
        30, ge=1, description="Candidates tried around each active point"
    )
    search_radius: int = Field(
        5, ge=2, description="Half-width of the grid neighbourhood search window"
    )
    seed: Optional[int] = Field(
        None, ge=0, le=2**32 - 1, description="Random seed (None = entropy)"
    )
    shuffle: bool = Field(False, description="Shuffle the output order")


class RasterConfig(BaseModel):
    """Configuration for rasterizing point sets."""

    model_config = ConfigDict(frozen=True)

    image_size: int = Field(1024, ge=1, description="Output image size in pixels")
    density_map: Optional[Path] = Field(
        None, description="Grayscale density map used to thin points"
    )
    point_value: int = Field(255, ge=0, le=255, description="Pixel value of a point")


class ExportConfig(BaseModel):
    """Configuration for text export."""

    model_config = ConfigDict(frozen=True)

    format: Literal["raw", "array"] = Field("raw", description="Text output format")
    array_name: str = Field("points", description="Variable name for array output")


class AnimationConfig(BaseModel):
    """Configuration for frame sequences."""

    model_config = ConfigDict(frozen=True)

    frame_every: int = Field(
        100, ge=1, description="Emit a frame every N accepted points"
    )
    frame_size: int = Field(512, ge=1, description="Frame size in pixels")


class CacheConfig(BaseModel):
    """Configuration for caching system."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(True, description="Enable caching")
    cache_dir: Path = Field(
        Path.home() / ".cache" / "poissongen", description="Cache directory"
    )
    max_size_gb: float = Field(1.0, gt=0, description="Maximum cache size (GB)")
    ttl_days: int = Field(30, ge=1, description="Cache time-to-live (days)")


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    model_config = ConfigDict(frozen=True)

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", description="Logging level"
    )
    format: Literal["json", "console", "plain"] = Field(
        "console", description="Log format"
    )
    colorize: bool = Field(True, description="Colorize console output")
    add_caller_info: bool = Field(False, description="Add file/line/function to events")
    timestamp_format: str = Field("iso", description="structlog timestamp format")
    log_dir: Optional[Path] = Field(None, description="Directory for log files")
    log_to_file: bool = Field(False, description="Enable file logging")


class Config(BaseModel):
    """Main configuration for PoissonGen."""

    model_config = ConfigDict(frozen=True)

    sampling: SamplingConfig = Field(
        default_factory=SamplingConfig, description="Sampling configuration"
    )
    raster: RasterConfig = Field(
        default_factory=RasterConfig, description="Raster configuration"
    )
    export: ExportConfig = Field(
        default_factory=ExportConfig, description="Export configuration"
    )
    animation: AnimationConfig = Field(
        default_factory=AnimationConfig, description="Animation configuration"
    )
    cache: CacheConfig = Field(
        default_factory=CacheConfig, description="Cache configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @classmethod
    def from_toml(cls, path: Path | str) -> "Config":
        """Load configuration from TOML file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            tomli.TOMLDecodeError: If TOML is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, "rb") as f:
            data = tomli.load(f)

        return cls(**data)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create configuration from dictionary."""
        return cls(**data)

    def to_dict(self) -> dict:
        """Convert configuration to a TOML-compatible dictionary.

        Paths become strings and unset optional values are dropped, since TOML
        has no null.
        """
        return self.model_dump(mode="json", exclude_none=True)

    def with_overrides(self, section: str, **values) -> "Config":
        """Return a copy with fields of one section replaced.

        Args:
            section: Name of the sub-configuration (e.g. "sampling")
            **values: Field values to replace; None values are ignored

        Returns:
            New Config instance
        """
        updates = {k: v for k, v in values.items() if v is not None}
        if not updates:
            return self
        current = getattr(self, section)
        merged = current.model_validate({**current.model_dump(), **updates})
        return self.model_copy(update={section: merged})

    def save_toml(self, path: Path | str) -> None:
        """Save configuration to TOML file.

        Args:
            path: Path to save TOML file
        """
        import tomli_w

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "wb") as f:
            tomli_w.dump(self.to_dict(), f)


def get_default_config() -> Config:
    """Get default configuration.

    Returns:
        Default Config instance
    """
    return Config()


def load_config(path: Optional[Path | str] = None) -> Config:
    """Load configuration from file or return defaults.

    Args:
        path: Optional path to configuration file

    Returns:
        Config instance
    """
    if path:
        return Config.from_toml(path)
    return get_default_config()
