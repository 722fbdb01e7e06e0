"""
Cache Configuration Module

Defines the configuration consumed by the HTTP cache stream: header
handling, buffering thresholds and, for the global config, the cache
directory on disk.

Config Variants:
- LocalCacheConfig: per-request/per-session override, no directory
- GlobalCacheConfig: shared by a whole cache store, owns the directory
- DefaultGlobalCacheConfig: global config rooted in the platform temp dir

Size Limits:
- max_buffer_size: at least 1MB, default 25MB
- min_chunk_size: at least 0, default 64KB
- range_request_split_threshold: None (disabled) or at least 0
"""

import asyncio
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .headers import HeaderMap

logger = logging.getLogger(__name__)


MIN_BUFFER_SIZE = 1024 * 1024 * 1  # 1MB
DEFAULT_MAX_BUFFER_SIZE = 1024 * 1024 * 25  # 25MB
DEFAULT_MIN_CHUNK_SIZE = 1024 * 64  # 64KB

# Subdirectory of the platform temp dir used by the default global config
CACHE_DIR_NAME = "http_cache_stream"

# Passed by DefaultGlobalCacheConfig.create() to unlock __init__
_CREATE_TOKEN = object()


class ConfigRangeError(ValueError):
    """
    Raised when a config value falls outside its allowed range.

    Attributes:
        name: The field being set
        value: The rejected value
        minimum: The smallest accepted value
    """

    def __init__(self, name: str, value: int, minimum: int):
        self.name = name
        self.value = value
        self.minimum = minimum
        super().__init__(f"Invalid {name}: {value}. Must be >= {minimum}")


def _check_at_least(name: str, value: Any, minimum: int) -> int:
    """Validate that value is an int no smaller than minimum."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < minimum:
        logger.debug(f"Rejected {name}={value} (minimum {minimum})")
        raise ConfigRangeError(name, value, minimum)
    return value


class CacheConfig:
    """
    Base cache configuration with validated setters.

    Not meant to be instantiated directly; use LocalCacheConfig or
    GlobalCacheConfig. Every setter validates before storing, so a
    rejected value leaves the previous one in place.

    Attributes:
        request_headers: Custom headers sent when downloading the cache
        response_headers: Custom headers added to every cached response
        copy_cached_response_headers: Copy the cached response headers
            into response_headers (default False)
        validate_outdated_cache: Revalidate with the server when the
            cache is outdated (default False)
        range_request_split_threshold: Bytes that must lie between the
            current download position and a range request's start
            before a separate download stream is opened. None disables
            separate range downloads (default None)
        max_buffer_size: Bytes buffered in memory before flushing to
            disk. Downloads keep buffering while a flush runs, so peak
            memory per download is about twice this (default 25MB)
        min_chunk_size: Preferred minimum size of chunks emitted from
            the download stream (default 64KB)
    """

    def __init__(self) -> None:
        if type(self) is CacheConfig:
            raise TypeError("CacheConfig cannot be instantiated directly; "
                            "use LocalCacheConfig or GlobalCacheConfig")
        self._request_headers = HeaderMap()
        self._response_headers = HeaderMap()
        self.copy_cached_response_headers: bool = False
        self.validate_outdated_cache: bool = False
        self._range_request_split_threshold: Optional[int] = None
        self._max_buffer_size: int = DEFAULT_MAX_BUFFER_SIZE
        self._min_chunk_size: int = DEFAULT_MIN_CHUNK_SIZE

    @property
    def request_headers(self) -> HeaderMap:
        return self._request_headers

    @request_headers.setter
    def request_headers(self, headers: Mapping[str, Any]) -> None:
        self._request_headers = HeaderMap(headers)

    @property
    def response_headers(self) -> HeaderMap:
        return self._response_headers

    @response_headers.setter
    def response_headers(self, headers: Mapping[str, Any]) -> None:
        self._response_headers = HeaderMap(headers)

    @property
    def range_request_split_threshold(self) -> Optional[int]:
        return self._range_request_split_threshold

    @range_request_split_threshold.setter
    def range_request_split_threshold(self, value: Optional[int]) -> None:
        if value is not None:
            value = _check_at_least("range_request_split_threshold", value, 0)
        self._range_request_split_threshold = value

    @property
    def max_buffer_size(self) -> int:
        return self._max_buffer_size

    @max_buffer_size.setter
    def max_buffer_size(self, value: int) -> None:
        self._max_buffer_size = _check_at_least("max_buffer_size", value, MIN_BUFFER_SIZE)

    @property
    def min_chunk_size(self) -> int:
        return self._min_chunk_size

    @min_chunk_size.setter
    def min_chunk_size(self, value: int) -> None:
        self._min_chunk_size = _check_at_least("min_chunk_size", value, 0)

    def to_dict(self) -> Dict[str, Any]:
        """
        Snapshot of the configuration as plain data.

        Returns:
            Dictionary with one entry per field; header maps become dicts
        """
        return {
            "request_headers": dict(self._request_headers),
            "response_headers": dict(self._response_headers),
            "copy_cached_response_headers": self.copy_cached_response_headers,
            "validate_outdated_cache": self.validate_outdated_cache,
            "range_request_split_threshold": self._range_request_split_threshold,
            "max_buffer_size": self._max_buffer_size,
            "min_chunk_size": self._min_chunk_size,
        }

    def _repr_fields(self) -> str:
        return (f"max_buffer_size={self._max_buffer_size}, "
                f"min_chunk_size={self._min_chunk_size}, "
                f"range_request_split_threshold={self._range_request_split_threshold}, "
                f"copy_cached_response_headers={self.copy_cached_response_headers}, "
                f"validate_outdated_cache={self.validate_outdated_cache}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._repr_fields()})"


class LocalCacheConfig(CacheConfig):
    """Cache configuration scoped to a single request or session."""


class GlobalCacheConfig(CacheConfig):
    """
    Cache configuration shared by an entire on-disk cache store.

    The cache directory can only be set at construction. It must be
    writable and accessible by the application; that is not checked
    here and the directory is not created.
    """

    def __init__(self, cache_directory: Union[str, "os.PathLike[str]"]):
        """
        Initialize the global config.

        Args:
            cache_directory: Directory where the cache is stored
        """
        super().__init__()
        self._cache_directory = Path(cache_directory)

    @property
    def cache_directory(self) -> Path:
        """The directory where the cache is stored."""
        return self._cache_directory

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["cache_directory"] = str(self._cache_directory)
        return data

    def _repr_fields(self) -> str:
        return f"cache_directory='{self._cache_directory}', {super()._repr_fields()}"


async def resolve_default_cache_directory() -> Path:
    """
    Resolve the default cache directory.

    The platform temp directory lookup may touch the filesystem, so it
    runs in a worker thread. Lookup failures propagate to the caller.

    Returns:
        <platform temp dir>/http_cache_stream
    """
    temp_dir = await asyncio.to_thread(tempfile.gettempdir)
    cache_dir = Path(temp_dir) / CACHE_DIR_NAME
    logger.debug(f"Resolved default cache directory: {cache_dir}")
    return cache_dir


class DefaultGlobalCacheConfig(GlobalCacheConfig):
    """
    Global config stored under the platform temp directory.

    Only create() may build instances; calling the class directly
    raises TypeError.

    Usage:
        config = await DefaultGlobalCacheConfig.create()
        config.cache_directory  # e.g. /tmp/http_cache_stream
    """

    def __init__(self, cache_directory: Path, _token: object = None):
        if _token is not _CREATE_TOKEN:
            raise TypeError("DefaultGlobalCacheConfig must be built with "
                            "'await DefaultGlobalCacheConfig.create()'")
        super().__init__(cache_directory)

    @classmethod
    async def create(cls) -> "DefaultGlobalCacheConfig":
        """Resolve the default cache directory and build the config."""
        return cls(await resolve_default_cache_directory(), _CREATE_TOKEN)
