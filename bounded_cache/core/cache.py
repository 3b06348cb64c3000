"""bounded_cache.core.cache
=================================
Fixed-capacity in-memory key/value store with least-recently-used
eviction and an optional JSON/UTF-8 serialized storage mode.

The cache is single-owner: it performs no locking. Callers sharing an
instance between threads must guard it with their own lock.
"""

from __future__ import annotations

# ────────────────────────── stdlib imports ──────────────────────────
import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

# ─────────────────────── third-party imports ───────────────────────
from pydantic import ValidationError

# ───────────────────────── local imports ───────────────────────────
from bounded_cache.config.settings import CacheConfig
from bounded_cache.core.codec import decode_value, encode_value, is_serializable
from bounded_cache.utils.exceptions import ConfigurationError, DecodeError, log_exception
from bounded_cache.utils.metrics import (
    MET_ERRORS_TOTAL,
    MET_EVICTIONS_TOTAL,
    MET_HITS_TOTAL,
    MET_MISSES_TOTAL,
)

if TYPE_CHECKING:  # pragma: no cover
    from bounded_cache.config.settings import CacheSettings

log = logging.getLogger(__name__)

Identifier = Union[str, int]

__all__ = ["BoundedCache", "Identifier"]


@dataclass(slots=True, frozen=True)
class _Slot:
    """A stored payload; ``encoded`` marks bytes produced by the codec."""

    payload: Any
    encoded: bool = False


class BoundedCache:
    """In-memory cache holding at most ``limit`` entries.

    Parameters
    ----------
    config:
        Frozen :class:`CacheConfig`. Defaults to ``CacheConfig()``.
    enable_metrics:
        Record hits, misses, evictions and errors in Prometheus collectors.
    **options:
        ``limit`` and/or ``serialize``, applied on top of *config*.
    """

    def __init__(
        self,
        config: CacheConfig | None = None,
        *,
        enable_metrics: bool = True,
        **options: Any,
    ) -> None:
        if options:
            base = config.model_dump() if config is not None else {}
            try:
                config = CacheConfig(**{**base, **options})
            except ValidationError as exc:
                raise ConfigurationError(
                    "invalid cache options", context={"options": options}, cause=exc
                ) from exc
        self._config: CacheConfig = config if config is not None else CacheConfig()
        self._metrics = enable_metrics
        self._entries: OrderedDict[Identifier, _Slot] = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @classmethod
    def from_settings(cls, settings: CacheSettings) -> "BoundedCache":
        """Build a cache from the ``cache`` and ``monitoring`` settings sections."""
        return cls(settings.cache, enable_metrics=settings.monitoring.enable_metrics)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def limit(self) -> int:
        return self._config.limit

    @property
    def serialize(self) -> bool:
        return self._config.serialize

    @property
    def size(self) -> int:
        return len(self._entries)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def set(self, key: Identifier, value: Any) -> None:
        """Store *value* under *key*, evicting the least-recent entry when full.

        The capacity check runs before the key is looked up, so updating an
        existing key while the cache is full still evicts the oldest entry.
        """
        slot = self._prepare(value)
        if len(self._entries) >= self._config.limit:
            self._evict_oldest()
        self._entries[key] = slot
        self._entries.move_to_end(key)

    def get(self, key: Identifier, default: Any = None) -> Any:
        """Return the value stored under *key*, or *default* if absent.

        A hit marks the entry as most recently used. Serialized payloads are
        decoded; a corrupt payload raises :class:`DecodeError`.
        """
        slot = self._entries.get(key)
        if slot is None:
            self._misses += 1
            if self._metrics:
                MET_MISSES_TOTAL.inc()
            return default

        self._entries.move_to_end(key)
        self._hits += 1
        if self._metrics:
            MET_HITS_TOTAL.inc()
        if not slot.encoded:
            return slot.payload
        try:
            return decode_value(slot.payload)
        except DecodeError as exc:
            exc.context["key"] = key
            if self._metrics:
                MET_ERRORS_TOTAL.labels(type="decode").inc()
            log_exception(exc, log)
            raise

    def clear(self) -> None:
        """Drop every entry. Configuration and counters are kept."""
        self._entries.clear()

    def get_stats(self) -> dict[str, Any]:
        """Get basic statistics about the cache."""
        lookups = self._hits + self._misses
        return {
            "size": len(self._entries),
            "limit": self._config.limit,
            "serialize": self._config.serialize,
            "hits": self._hits,
            "misses": self._misses,
            "evictions": self._evictions,
            "hit_rate": self._hits / lookups if lookups else 0.0,
        }

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _prepare(self, value: Any) -> _Slot:
        if not (self._config.serialize and is_serializable(value)):
            return _Slot(value)
        try:
            return _Slot(encode_value(value), encoded=True)
        except (TypeError, ValueError) as exc:
            log.debug("Storing %s value unserialized: %s", type(value).__name__, exc)
            return _Slot(value)

    def _evict_oldest(self) -> None:
        key, _ = self._entries.popitem(last=False)
        self._evictions += 1
        if self._metrics:
            MET_EVICTIONS_TOTAL.inc()
        log.debug("Evicted %r (limit=%d)", key, self._config.limit)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(limit={self._config.limit}, "
            f"serialize={self._config.serialize}, size={len(self._entries)})"
        )
