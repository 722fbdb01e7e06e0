"""
HTTP Cache Stream Settings

Process-wide defaults read from the environment. These feed the CLI;
the config models themselves carry fixed defaults.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Environment-driven settings."""

    # Cache location (empty means the platform temp directory)
    CACHE_DIR: str = os.environ.get("HTTP_CACHE_STREAM_DIR", "")

    # Logging settings
    DEBUG: bool = os.environ.get("HTTP_CACHE_STREAM_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("HTTP_CACHE_STREAM_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()
