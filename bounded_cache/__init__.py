"""Bounded Cache v0.1.0.

A small in-memory key/value store for memoizing lookups inside a host
application.

This package provides:
- A fixed-capacity cache with least-recently-used eviction
- Optional JSON/UTF-8 serialized storage of payloads
- pydantic-based configuration and Prometheus counters
"""

from __future__ import annotations

import logging
from typing import Any

__version__ = "0.1.0"
__description__ = "Bounded in-memory key/value cache with LRU eviction"

# Configure default logging (no handlers by default for library use)
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "BoundedCache",
    "CacheConfig",
    "CacheSettings",
    "BoundedCacheError",
    "ConfigurationError",
    "DecodeError",
    "get_settings",
]


# Lazy attribute access keeps `import bounded_cache` free of pydantic and
# prometheus_client until something is actually used.
def __getattr__(name: str) -> Any:
    """Lazily import and return objects from submodules on attribute access."""
    if name == "BoundedCache":
        from bounded_cache.core.cache import BoundedCache

        return BoundedCache
    elif name in ("CacheConfig", "CacheSettings", "get_settings"):
        from bounded_cache.config import settings

        return getattr(settings, name)
    elif name in ("BoundedCacheError", "ConfigurationError", "DecodeError"):
        from bounded_cache.utils import exceptions

        return getattr(exceptions, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def get_version_info() -> dict[str, Any]:
    """Get version information of the bounded_cache package."""
    return {
        "version": __version__,
        "description": __description__,
    }
