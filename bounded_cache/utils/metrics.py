"""Prometheus metrics for the bounded cache."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest


MET_HITS_TOTAL = Counter("bounded_cache_hits_total", "Cache lookups that found an entry")
MET_MISSES_TOTAL = Counter("bounded_cache_misses_total", "Cache lookups for absent keys")
MET_EVICTIONS_TOTAL = Counter("bounded_cache_evictions_total", "Entries evicted to respect the limit")
MET_ERRORS_TOTAL = Counter("bounded_cache_errors_total", "Total errors", ["type"])
LAT_DECODE = Histogram("bounded_cache_decode_latency_seconds", "Serialized payload decode latency")


P = ParamSpec("P")
R = TypeVar("R")


def measure_time(metric: Histogram) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator factory for synchronous function timing."""

    def decorator(fn: Callable[P, R]) -> Callable[P, R]:
        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with metric.time():
                return fn(*args, **kwargs)

        return wrapper

    return decorator


def get_prometheus_metrics() -> str:
    """Return the latest metrics as plaintext (Prometheus exposition format)."""
    return generate_latest().decode()


def get_metrics_content_type() -> str:
    """Return the appropriate Content-Type for Prometheus metrics."""
    return CONTENT_TYPE_LATEST
