"""String helpers: case conversion, random passwords and set-like comparison."""

from __future__ import annotations

import uuid
from collections.abc import Sequence

__all__ = [
    "generate_password24",
    "first_upper",
    "first_lower",
    "snake_to_big_camel",
    "camel_to_snake",
    "slices_equal",
]


def _is_upper_ascii(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _is_lower_ascii(ch: str) -> bool:
    return "a" <= ch <= "z"


def generate_password24() -> str:
    """Return a random 24-character hexadecimal password."""
    return uuid.uuid4().hex[4:28]


def first_upper(s: str) -> str:
    """Upper-case the first character of ``s``."""
    if not s:
        return ""
    return s[0].upper() + s[1:]


def first_lower(s: str) -> str:
    """Lower-case the first character of ``s``."""
    if not s:
        return ""
    return s[0].lower() + s[1:]


def snake_to_big_camel(s: str) -> str:
    """Convert snake case to upper camel case.

    ``xx_yy`` becomes ``XxYy`` and ``xx_y_y`` becomes ``XxYY``.
    """
    out: list[str] = []
    upper_next = False
    started = False
    last = len(s) - 1
    for i, ch in enumerate(s):
        if not started and _is_upper_ascii(ch):
            started = True
        if _is_lower_ascii(ch) and (upper_next or not started):
            ch = ch.upper()
            upper_next = False
            started = True
        if started and ch == "_" and i < last and _is_lower_ascii(s[i + 1]):
            upper_next = True
            continue
        out.append(ch)
    return "".join(out)


def camel_to_snake(s: str) -> str:
    """Convert camel case to snake case.

    ``XxYy`` becomes ``xx_yy``, ``XxYY`` becomes ``xx_y_y`` and
    ``xxYy`` becomes ``xx_yy``.
    """
    out: list[str] = []
    seen_word = False
    for i, ch in enumerate(s):
        if i > 0 and _is_upper_ascii(ch) and seen_word:
            out.append("_")
        if ch != "_":
            seen_word = True
        out.append(ch)
    return "".join(out).lower()


def slices_equal(first: Sequence[str], second: Sequence[str]) -> bool:
    """Return True if both sequences hold the same strings, in any order."""
    if len(first) != len(second):
        return False
    return sorted(first) == sorted(second)