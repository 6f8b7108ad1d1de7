"""JSON encoding and decoding of local date-times in several layouts."""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

__all__ = ["ZERO_TIME", "parse_local_time", "format_local_time"]

ZERO_TIME = datetime(1, 1, 1)

_DATE = r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
_HMS = r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"

_RFC3339 = re.compile(
    _DATE + "T" + _HMS + r"(?:\.(?P<frac>\d{1,9}))?(?P<tz>Z|[+-]\d{2}:\d{2})",
    re.ASCII,
)
_PLAIN_LAYOUTS = [
    re.compile(_DATE + " " + _HMS, re.ASCII),
    re.compile(_DATE + r" (?P<hour>\d{2})", re.ASCII),
    re.compile(_DATE + r" (?P<hour>\d{2}):(?P<minute>\d{2})", re.ASCII),
    re.compile(_DATE, re.ASCII),
    re.compile(_HMS, re.ASCII),
]


def _fields(m: re.Match[str]) -> dict[str, int]:
    found = {k: int(v) for k, v in m.groupdict().items() if v is not None and k not in ("frac", "tz")}
    return {"year": 1, "month": 1, "day": 1, **found}


def _build_rfc3339(m: re.Match[str]) -> datetime:
    frac = (m["frac"] or "")[:6].ljust(6, "0")
    tz = m["tz"]
    if tz == "Z":
        tzinfo = timezone.utc
    else:
        offset = timedelta(hours=int(tz[1:3]), minutes=int(tz[4:6]))
        tzinfo = timezone(-offset if tz[0] == "-" else offset)
    return datetime(**_fields(m), microsecond=int(frac), tzinfo=tzinfo)


def _build_plain(m: re.Match[str]) -> datetime:
    return datetime(**_fields(m))


_PARSERS: list[tuple[re.Pattern[str], Callable[[re.Match[str]], datetime]]] = [
    (_RFC3339, _build_rfc3339),
    *((pattern, _build_plain) for pattern in _PLAIN_LAYOUTS),
]


def parse_local_time(data: str | bytes) -> datetime:
    """Decode a JSON time value.

    A two-byte value such as ``""`` gives ``ZERO_TIME``. Accepted layouts are
    RFC 3339, ``YYYY-MM-DD HH:MM:SS``, ``YYYY-MM-DD HH``, ``YYYY-MM-DD HH:MM``,
    ``YYYY-MM-DD`` and ``HH:MM:SS`` (which falls on ``0001-01-01``). Values
    without an offset are naive local times. Raises ValueError otherwise.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    if len(raw) == 2:
        return ZERO_TIME
    text = raw.decode("utf-8")
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        text = text[1:-1]
    for pattern, build in _PARSERS:
        match = pattern.fullmatch(text)
        if match is None:
            continue
        try:
            return build(match)
        except ValueError:
            continue
    raise ValueError(f"cannot parse {text!r} as a time")


def format_local_time(t: datetime) -> str:
    """Encode ``t`` as a quoted JSON string in ``YYYY-MM-DD HH:MM:SS`` layout."""
    return (
        f'"{t.year:04d}-{t.month:02d}-{t.day:02d} '
        f'{t.hour:02d}:{t.minute:02d}:{t.second:02d}"'
    )