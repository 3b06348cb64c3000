"""Pytest configuration and fixtures."""

import logging

import pytest

from bounded_cache.config.settings import CacheConfig
from bounded_cache.core.cache import BoundedCache


def pytest_configure(config):
    """Register custom markers used in the test suite."""
    config.addinivalue_line("markers", "property: hypothesis-driven property tests")


@pytest.fixture(autouse=True)
def _debug_cache_logs(caplog):
    """Capture DEBUG output from the cache modules."""
    caplog.set_level(logging.DEBUG, logger="bounded_cache")


@pytest.fixture
def cache():
    """Default-configured cache."""
    return BoundedCache()


@pytest.fixture
def small_cache():
    """Two-entry cache for eviction scenarios."""
    return BoundedCache(CacheConfig(limit=2))


@pytest.fixture
def serial_cache():
    """Cache storing serializable values as JSON bytes."""
    return BoundedCache(CacheConfig(serialize=True))


class Missing:
    """Sentinel passed as ``default`` to tell absent keys from stored ``None``."""

    def __repr__(self) -> str:
        return "<missing>"


@pytest.fixture
def missing():
    return Missing()
