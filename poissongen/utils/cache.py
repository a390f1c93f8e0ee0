"""Caching of generated point sets using DiskCache."""

import hashlib
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
from diskcache import Cache

from poissongen.core.config import CacheConfig
from poissongen.core.exceptions import CacheError

logger = logging.getLogger(__name__)


class CacheManager:
    """Manages on-disk caching of reproducible point sets."""

    # TTL values in seconds
    TTL_POINT_SET = 7 * 24 * 3600  # 7 days

    def __init__(self, config: Optional[CacheConfig] = None):
        """Initialize cache manager.

        Args:
            config: Cache configuration

        Raises:
            CacheError: If the cache directory cannot be created or opened
        """
        if config is None:
            config = CacheConfig()

        self.config = config
        self.enabled = config.enabled

        if not self.enabled:
            logger.info("Cache disabled")
            return

        self.cache_dir = Path(config.cache_dir)
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            self.cache = Cache(
                str(self.cache_dir / "point_sets"),
                size_limit=int(config.max_size_gb * 1024**3),
                eviction_policy="least-recently-used",
            )
        except OSError as e:
            raise CacheError(
                f"Cannot open cache at {self.cache_dir}: {e}",
                {"cache_dir": str(self.cache_dir)},
            )
        self.cache.stats(enable=True)

        logger.info(f"Cache initialized at {self.cache_dir}")

    @staticmethod
    def generate_key(params: Dict[str, Any], prefix: str = "ps") -> str:
        """Generate a deterministic cache key from sampling parameters.

        Args:
            params: JSON-serializable parameters
            prefix: Key prefix

        Returns:
            Cache key string
        """
        param_str = json.dumps(params, sort_keys=True, default=str)
        key_hash = hashlib.md5(param_str.encode()).hexdigest()[:16]
        return f"{prefix}_{key_hash}"

    def get(self, key: str, default: Any = None) -> Any:
        """Get value from cache.

        Args:
            key: Cache key
            default: Default value if not found

        Returns:
            Cached value or default
        """
        if not self.enabled:
            return default

        try:
            value = self.cache.get(key, default)
            if value is not default:
                logger.debug(f"Cache hit: {key}")
            else:
                logger.debug(f"Cache miss: {key}")
            return value
        except Exception as e:
            logger.warning(f"Cache get error: {e}")
            return default

    def set(
        self,
        key: str,
        value: Any,
        ttl: Optional[float] = None,
        tag: Optional[str] = None,
    ) -> None:
        """Set value in cache.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time to live in seconds
            tag: Optional tag for grouped operations
        """
        if not self.enabled:
            return

        try:
            expire = ttl if ttl else self.config.ttl_days * 24 * 3600
            self.cache.set(key, value, expire=expire, tag=tag)
            logger.debug(f"Cache set: {key} (TTL: {expire}s)")
        except Exception as e:
            logger.warning(f"Cache set error: {e}")

    def clear(self) -> None:
        """Clear entire cache."""
        if not self.enabled:
            return

        try:
            self.cache.clear()
            logger.info("Cache cleared")
        except Exception as e:
            logger.warning(f"Cache clear error: {e}")

    def evict_expired(self) -> int:
        """Evict expired entries.

        Returns:
            Number of entries evicted
        """
        if not self.enabled:
            return 0

        try:
            return self.cache.expire()
        except Exception as e:
            logger.warning(f"Cache evict error: {e}")
            return 0

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with cache statistics
        """
        if not self.enabled:
            return {"enabled": False}

        try:
            hits, misses = self.cache.stats()
            stats = {
                "enabled": True,
                "location": str(self.cache_dir),
                "size_limit_gb": self.config.max_size_gb,
                "entries": len(self.cache),
                "size_bytes": self.cache.volume(),
                "size_mb": self.cache.volume() / 1024 / 1024,
                "hits": hits,
                "misses": misses,
            }

            total = hits + misses
            stats["hit_rate"] = hits / total if total > 0 else 0.0

            return stats
        except Exception as e:
            logger.warning(f"Cache stats error: {e}")
            return {"enabled": True, "error": str(e)}

    def cache_point_set(
        self,
        key: str,
        points: np.ndarray,
        metadata: Optional[Dict[str, Any]] = None,
        ttl: Optional[float] = None,
    ) -> None:
        """Cache a generated point set.

        Args:
            key: Cache key
            points: Point array (N, 2)
            metadata: Optional metadata
            ttl: Optional TTL override
        """
        if not self.enabled:
            return

        data = {
            "points": points,
            "metadata": metadata or {},
            "shape": points.shape,
            "dtype": str(points.dtype),
        }

        self.set(
            key,
            data,
            ttl=ttl or self.TTL_POINT_SET,
            tag="pointset",
        )

    def get_point_set(
        self,
        key: str,
    ) -> tuple[Optional[np.ndarray], Optional[Dict[str, Any]]]:
        """Get a cached point set.

        Args:
            key: Cache key

        Returns:
            Tuple of (points, metadata)
        """
        if not self.enabled:
            return None, None

        data = self.get(key)
        if data:
            return data.get("points"), data.get("metadata")

        return None, None


def create_cache_manager(
    config: Optional[CacheConfig] = None
) -> CacheManager:
    """Create a cache manager instance.

    Args:
        config: Optional cache configuration

    Returns:
        CacheManager instance
    """
    return CacheManager(config)
