# bounded_cache/core/__init__.py
"""Core module for the bounded cache."""

from __future__ import annotations

__all__ = [
    "BoundedCache",
    "ValueKind",
    "classify",
    "is_serializable",
]


def __getattr__(name: str) -> object:
    if name == "BoundedCache":
        from bounded_cache.core.cache import BoundedCache

        return BoundedCache
    elif name in ("ValueKind", "classify", "is_serializable"):
        from bounded_cache.core import codec

        return getattr(codec, name)
    else:
        raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
