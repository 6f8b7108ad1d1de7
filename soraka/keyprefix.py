"""Per-platform key prefixes for Redis commands, driven by the current context."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

__all__ = [
    "CTX_DB_KEY",
    "COMMANDS_WITH_PREFIX",
    "db_key",
    "get_db_key",
    "skip_prefix",
    "should_skip_prefix",
    "add_prefix_to_args",
    "PlatformKeyHook",
]

CTX_DB_KEY = "Platform"

COMMANDS_WITH_PREFIX = frozenset({
    "GET", "SET", "EXISTS", "DEL", "TYPE",
    "RPUSH", "LPOP", "RPOP", "LLEN", "LRANGE",
    "SADD", "SREM", "SISMEMBER", "SMEMBERS", "SCARD",
    "HSET", "HMSET", "HGET", "HGETALL",
    "ZADD", "ZRANGE", "ZRANGEBYSCORE", "ZREVRANGEBYSCORE", "ZREM",
    "INCR", "INCRBY", "INCRBYFLOAT",
    "WATCH", "MULTI", "EXEC", "EXPIRE",
})

_db_key: ContextVar[str | None] = ContextVar("db_key", default=None)
_skip_prefix: ContextVar[bool] = ContextVar("skip_prefix", default=False)


@contextmanager
def db_key(key: str) -> Iterator[str]:
    """Make ``key`` the current platform key for the duration of the block."""
    token = _db_key.set(key)
    try:
        yield key
    finally:
        _db_key.reset(token)


def get_db_key() -> str:
    """Return the current platform key, or an empty string if none is set."""
    return _db_key.get() or ""


@contextmanager
def skip_prefix() -> Iterator[None]:
    """Leave command keys unprefixed for the duration of the block."""
    token = _skip_prefix.set(True)
    try:
        yield
    finally:
        _skip_prefix.reset(token)


def should_skip_prefix() -> bool:
    """Return True inside a ``skip_prefix`` block."""
    return _skip_prefix.get()


def _to_string(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if value is None:
        return ""
    return str(value)


def add_prefix_to_args(args: Sequence[Any], prefix: str) -> list[Any]:
    """Return command ``args`` with ``prefix_`` put before the key arguments.

    ``MGET`` and ``DEL`` prefix every key, ``MSET`` every other argument,
    ``SCAN`` its ``match`` pattern and other known commands their first key.
    """
    out = list(args)
    if len(out) <= 1:
        return out

    def prefixed(value: Any) -> str:
        return prefix + "_" + _to_string(value)

    name = _to_string(out[0]).upper()
    if name in ("MGET", "DEL"):
        out[1:] = [prefixed(v) for v in out[1:]]
    elif name == "MSET":
        out[1::2] = [prefixed(v) for v in out[1::2]]
    elif name == "SCAN":
        for i in range(2, len(out), 2):
            if out[i] == "match" and i + 1 < len(out):
                out[i + 1] = prefixed(out[i + 1])
                break
    elif name in COMMANDS_WITH_PREFIX:
        out[1] = prefixed(out[1])
    return out


class PlatformKeyHook:
    """Prefixes command keys with the current platform key."""

    def before_process(self, args: Sequence[Any]) -> list[Any]:
        """Return ``args`` prefixed, unless prefixing is being skipped."""
        if should_skip_prefix():
            return list(args)
        return add_prefix_to_args(args, get_db_key())

    def before_process_pipeline(self, commands: Iterable[Sequence[Any]]) -> list[list[Any]]:
        """Return every command of a pipeline prefixed."""
        return [self.before_process(args) for args in commands]