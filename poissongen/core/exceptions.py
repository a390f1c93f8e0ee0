"""Custom exceptions for PoissonGen."""

from pathlib import Path
from typing import Any, Optional


class PoissonGenError(Exception):
    """Base exception for PoissonGen."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(PoissonGenError):
    """Raised when configuration is invalid."""

    pass


class GridConfigurationError(ConfigurationError):
    """Raised when a spatial grid cannot guarantee correct neighbour queries."""

    def __init__(self, reason: str, **details: Any):
        super().__init__(f"Invalid grid configuration: {reason}", details)
        self.reason = reason


class SamplingError(PoissonGenError):
    """Raised when a sampler cannot produce its seed point."""

    pass


class DensityMapError(PoissonGenError):
    """Raised when a density map cannot be loaded."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Failed to load density map '{path}': {reason}")
        self.path = path
        self.reason = reason


class ExportError(PoissonGenError):
    """Raised when a point set cannot be written or read back."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Failed to export points '{path}': {reason}")
        self.path = path
        self.reason = reason


class CacheError(PoissonGenError):
    """Raised when cache operations fail."""

    pass
