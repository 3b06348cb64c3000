"""Exception hierarchy for the bounded cache.

Defines structured exception classes with JSON serialization, context info
and cause chaining, plus a helper for logging them.
"""

from __future__ import annotations

import datetime as dt
import json
import logging
from typing import Any

__all__ = [
    "BoundedCacheError",
    "ConfigurationError",
    "DecodeError",
    "log_exception",
]

log = logging.getLogger(__name__)


class BoundedCacheError(RuntimeError):
    """Base exception class for all bounded cache errors."""

    default_code: str = "bounded_cache_error"

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        """Initialize the error with an optional context and cause."""
        super().__init__(message)
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.code: str = self.default_code
        self.ts_utc: dt.datetime = dt.datetime.now(dt.timezone.utc)
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Serialize the exception to a dictionary for logging."""
        payload: dict[str, Any] = {
            "error": self.code,
            "message": self.message,
            "timestamp": self.ts_utc.isoformat(),
        }
        if self.context:
            payload["context"] = self.context
        if self.__cause__ is not None:
            payload["cause"] = {
                "type": type(self.__cause__).__name__,
                "message": str(self.__cause__),
            }
        return payload

    def __str__(self) -> str:
        """Return a JSON representation of the exception."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=repr)


class ConfigurationError(BoundedCacheError):
    """Invalid cache options (e.g. a non-positive limit)."""

    default_code = "configuration_error"


class DecodeError(BoundedCacheError):
    """Stored bytes are not valid UTF-8 JSON text."""

    default_code = "decode_error"


def log_exception(
    error: BoundedCacheError, logger: logging.Logger | None = None, level: int = logging.ERROR
) -> None:
    """
    Log an exception in structured JSON form.
    If no logger is provided, uses the local module logger.
    """
    if logger is None:
        logger = log
    logger.log(level, "%s", json.dumps(error.to_dict(), ensure_ascii=False, default=repr))
