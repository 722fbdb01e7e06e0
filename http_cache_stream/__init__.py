"""
HTTP Cache Stream: Cache Configuration

Configuration models for an HTTP caching subsystem: where the cache
lives on disk, how much a download may buffer in memory, and how
request/response headers are handled.
"""

from .config.cache_config import (
    CacheConfig,
    ConfigRangeError,
    DefaultGlobalCacheConfig,
    GlobalCacheConfig,
    LocalCacheConfig,
)
from .config.headers import HeaderMap

__version__ = "1.0.0"

__all__ = [
    "CacheConfig",
    "ConfigRangeError",
    "DefaultGlobalCacheConfig",
    "GlobalCacheConfig",
    "HeaderMap",
    "LocalCacheConfig",
]
