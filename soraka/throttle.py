"""Request throttling, browser fingerprints and whitespace trimming of parameters."""

from __future__ import annotations

import hashlib
import math
import threading
import time
from collections.abc import Callable, Mapping
from datetime import timedelta
from typing import Any

__all__ = [
    "RateLimiter",
    "Debouncer",
    "browser_fingerprint",
    "generate_browser_key",
    "trim_spaces",
    "trim_query",
]

_GO_SPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

_FINGERPRINT_HEADERS = ("User-Agent", "Accept", "Accept-Encoding", "Accept-Language")


class RateLimiter:
    """Token bucket admitting ``rate`` requests per second with bursts of ``burst``."""

    def __init__(self, rate: float, burst: int, clock: Callable[[], float] = time.monotonic) -> None:
        self.rate = float(rate)
        self.burst = int(burst)
        self._clock = clock
        self._tokens = float(max(self.burst, 0))
        self._last: float | None = None
        self._lock = threading.Lock()

    def allow(self) -> bool:
        """Take a token if one is available and report whether it was."""
        with self._lock:
            if math.isinf(self.rate) and self.rate > 0:
                return True
            now = self._clock()
            if self._last is not None and now > self._last and self.rate > 0:
                elapsed = now - self._last
                self._tokens = min(float(self.burst), self._tokens + elapsed * self.rate)
            if self._last is None or now > self._last:
                self._last = now
            if self._tokens >= 1:
                self._tokens -= 1
                return True
            return False


class Debouncer:
    """Rejects a key seen again within ``duration`` of its last accepted use."""

    def __init__(
        self,
        duration: float | timedelta,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.duration = duration.total_seconds() if isinstance(duration, timedelta) else float(duration)
        self._clock = clock
        self._last: dict[str, float] = {}
        self._lock = threading.Lock()

    def allow(self, key: str) -> bool:
        """Return True and record the time if ``key`` is not within its quiet period."""
        with self._lock:
            now = self._clock()
            last = self._last.get(key)
            if last is not None and now - last < self.duration:
                return False
            self._last[key] = now
            return True


def _header(headers: Mapping[str, str], name: str) -> str:
    if name in headers:
        return headers[name]
    folded = name.lower()
    for key, value in headers.items():
        if key.lower() == folded:
            return value
    return ""


def browser_fingerprint(headers: Mapping[str, str]) -> str:
    """Return 16 hex digits identifying a browser by its request headers."""
    digest = hashlib.sha256()
    for name in _FINGERPRINT_HEADERS:
        digest.update(_header(headers, name).encode("utf-8"))
    return digest.hexdigest()[:16]


def generate_browser_key(headers: Mapping[str, str], method: str, path: str) -> str:
    """Return a debounce key combining the browser fingerprint with method and path."""
    return "|".join([browser_fingerprint(headers), method + "_" + path])


def _trim(s: str) -> str:
    return s.strip(_GO_SPACE)


def _trim_value(value: Any) -> Any:
    if isinstance(value, str):
        return _trim(value)
    if isinstance(value, dict):
        return trim_spaces(value)
    if isinstance(value, list):
        return [
            _trim(item) if isinstance(item, str)
            else trim_spaces(item) if isinstance(item, dict)
            else item
            for item in value
        ]
    return value


def trim_spaces(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of decoded JSON with surrounding whitespace trimmed from strings.

    Nested objects are trimmed too, as are strings and objects directly inside lists.
    """
    return {key: _trim_value(value) for key, value in data.items()}


def trim_query(params: Mapping[str, list[str]]) -> dict[str, list[str]]:
    """Trim every form value and join each key's values with commas."""
    return {key: [",".join(_trim(v) for v in values)] for key, values in params.items()}