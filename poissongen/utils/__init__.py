"""Utility functions for PoissonGen."""

from poissongen.utils.cache import CacheManager, create_cache_manager
from poissongen.utils.logging import (
    setup_logging,
    get_logger,
    log_performance,
    log_generation_result,
    StructuredLogger,
)

__all__ = [
    "CacheManager",
    "create_cache_manager",
    "setup_logging",
    "get_logger",
    "log_performance",
    "log_generation_result",
    "StructuredLogger",
]
