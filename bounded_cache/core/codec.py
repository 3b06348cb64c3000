"""bounded_cache.core.codec
=================================
Classification of cacheable values and the JSON/UTF-8 payload codec used
when a cache stores values in serialized form.
"""

from __future__ import annotations

import enum
import json
from typing import Any

from bounded_cache.utils.exceptions import DecodeError
from bounded_cache.utils.metrics import LAT_DECODE, measure_time

__all__ = ["ValueKind", "classify", "is_serializable", "encode_value", "decode_value"]


class ValueKind(enum.Enum):
    """Closed set of value kinds eligible for serialization."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    TEXT = "text"
    STRUCTURED = "structured"


def classify(value: Any) -> ValueKind | None:
    """Return the kind of *value*, or ``None`` when it cannot be serialized.

    Structured values qualify only when every dict inside them, at any
    depth, has ``str`` keys; JSON would turn other keys into text.
    """
    # bool is an int subclass
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, (dict, list, tuple)) and _has_text_keys(value, set()):
        return ValueKind.STRUCTURED
    return None


def _has_text_keys(value: Any, seen: set[int]) -> bool:
    if not isinstance(value, (dict, list, tuple)):
        return True
    # circular references are left for json.dumps to reject
    if id(value) in seen:
        return True
    seen.add(id(value))
    if isinstance(value, dict):
        if not all(isinstance(key, str) for key in value):
            return False
        value = value.values()
    return all(_has_text_keys(item, seen) for item in value)


def is_serializable(value: Any) -> bool:
    return classify(value) is not None


def encode_value(value: Any) -> bytes:
    """Encode *value* as the UTF-8 bytes of its compact JSON text.

    Raises ``TypeError`` or ``ValueError`` when a structured value holds
    something standard JSON cannot represent (a set, a circular reference,
    NaN or infinity).
    """
    return json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    ).encode("utf-8")


@measure_time(LAT_DECODE)
def decode_value(data: bytes) -> Any:
    """Decode bytes produced by :func:`encode_value` back into a value."""
    try:
        return json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError(
            "stored payload is not valid UTF-8 JSON",
            context={"length": len(data)},
            cause=exc,
        ) from exc
