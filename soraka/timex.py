"""Time rounding helpers."""

from __future__ import annotations

from datetime import datetime

__all__ = ["replace_time_near_5_minute"]


def replace_time_near_5_minute(t: datetime) -> datetime:
    """Round ``t`` down to the nearest five-minute mark, dropping seconds."""
    return t.replace(minute=t.minute - t.minute % 5, second=0, microsecond=0)