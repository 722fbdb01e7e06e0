"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import pytest

from http_cache_stream.config.cache_config import GlobalCacheConfig, LocalCacheConfig


# ============================================================================
# Config Fixtures
# ============================================================================

@pytest.fixture
def local_config() -> LocalCacheConfig:
    """Create a fresh LocalCacheConfig with default values."""
    return LocalCacheConfig()


@pytest.fixture
def global_config(tmp_path) -> GlobalCacheConfig:
    """Create a GlobalCacheConfig rooted in a per-test directory."""
    return GlobalCacheConfig(tmp_path / "cache")


@pytest.fixture(params=["local", "global"])
def any_config(request, tmp_path):
    """Run a test against both config variants."""
    if request.param == "local":
        return LocalCacheConfig()
    return GlobalCacheConfig(tmp_path / "cache")


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


# Configure asyncio mode for pytest-asyncio
pytest_plugins = ['pytest_asyncio']
