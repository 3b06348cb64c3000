"""Tests for Prometheus metric collection."""

import pytest
from prometheus_client import REGISTRY

from bounded_cache.core.cache import BoundedCache
from bounded_cache.utils.exceptions import DecodeError
from bounded_cache.utils.metrics import get_metrics_content_type, get_prometheus_metrics


def _sample(name, labels=None):
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


def _exercise(cache):
    cache.set("a", 1)
    cache.set("b", 2)
    cache.set("c", 3)
    cache.get("a")
    cache.get("c")


def test_counters_increment():
    before = {n: _sample(n) for n in ("bounded_cache_hits_total", "bounded_cache_misses_total", "bounded_cache_evictions_total")}
    _exercise(BoundedCache(limit=2))

    assert _sample("bounded_cache_hits_total") - before["bounded_cache_hits_total"] == 1
    assert _sample("bounded_cache_misses_total") - before["bounded_cache_misses_total"] == 1
    assert _sample("bounded_cache_evictions_total") - before["bounded_cache_evictions_total"] == 1


def test_metrics_disabled():
    before = _sample("bounded_cache_hits_total") + _sample("bounded_cache_evictions_total")
    cache = BoundedCache(limit=2, enable_metrics=False)
    _exercise(cache)

    assert _sample("bounded_cache_hits_total") + _sample("bounded_cache_evictions_total") == before
    assert cache.get_stats()["evictions"] == 1


def test_decode_error_and_latency_recorded(monkeypatch):
    monkeypatch.setattr("bounded_cache.core.cache.encode_value", lambda value: b"\xff")
    errors = _sample("bounded_cache_errors_total", {"type": "decode"})
    decodes = _sample("bounded_cache_decode_latency_seconds_count")

    cache = BoundedCache(serialize=True)
    cache.set("k", [1])
    with pytest.raises(DecodeError):
        cache.get("k")

    assert _sample("bounded_cache_errors_total", {"type": "decode"}) == errors + 1
    assert _sample("bounded_cache_decode_latency_seconds_count") == decodes + 1


def test_exposition():
    BoundedCache().get("missing")
    assert "bounded_cache_misses_total" in get_prometheus_metrics()
    assert get_metrics_content_type().startswith("text/plain")
