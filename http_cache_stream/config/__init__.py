"""Configuration module for HTTP Cache Stream."""

from .cache_config import (
    CACHE_DIR_NAME,
    CacheConfig,
    ConfigRangeError,
    DefaultGlobalCacheConfig,
    GlobalCacheConfig,
    LocalCacheConfig,
    resolve_default_cache_directory,
)
from .headers import HeaderMap

__all__ = [
    "CACHE_DIR_NAME",
    "CacheConfig",
    "ConfigRangeError",
    "DefaultGlobalCacheConfig",
    "GlobalCacheConfig",
    "HeaderMap",
    "LocalCacheConfig",
    "resolve_default_cache_directory",
]
