"""Field validators for request parameters and their Chinese messages."""

from __future__ import annotations

import re
from decimal import Decimal

__all__ = [
    "validate_mobile",
    "validate_non_negative_number",
    "validate_float64_decimal",
    "excludes_all",
    "positive_number",
    "transfer_empty_string",
    "translate",
]

_MOBILE = re.compile(
    r"\A(?:1\d{10}|(?:0\d{2,3}-?|\(0\d{2,3}\))?[1-9]\d{4,7}(?:-\d{1,8})?)\Z",
    re.ASCII,
)
_NON_NEGATIVE = re.compile(r"\A\d+(?:\.\d+)?\Z", re.ASCII)
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_PLACEHOLDER = re.compile(r"\{(\d)\}")

_TRANSLATIONS = {
    "ltefield": "{0}必须小于或等于{1}",
    "eqfield": "{0}必须等于{1}",
    "gtefield": "{0} 必须大于或等于 最小值",
    "mobile": "{0}必须为手机号码格式!",
    "float64Decimal": "{0}的小数位数超过了允许的最大位数 {1} 位!",
    "excludesall": "{0} 不能包含字符 “{1}” ",
    "positiveNumber": "{0} 不能为负数 ",
}
_FIELD_REFERENCE_TAGS = frozenset({"ltefield", "eqfield", "gtefield"})
_PARAM_NAMES: dict[str, str] = {}


def validate_mobile(value: str) -> bool:
    """Return True for a mobile number or a landline with optional area code and extension."""
    return _MOBILE.search(value) is not None


def validate_non_negative_number(value: str) -> bool:
    """Return True if ``value`` is a non-negative decimal number, ignoring surrounding spaces."""
    value = value.strip()
    if not value:
        return False
    return _NON_NEGATIVE.match(value) is not None


def _shortest_plain(value: float) -> str:
    return format(Decimal(repr(value)).normalize(), "f")


def validate_float64_decimal(value: float, param: str | int) -> bool:
    """Return True if non-negative ``value`` has at most ``param`` decimal places."""
    param = str(param)
    if not _INTEGER.fullmatch(param):
        return False
    places = int(param)
    if places < 0:
        return False
    pattern = re.compile(r"\A\d+(?:\.\d{0,%d})?\Z" % places, re.ASCII)
    return pattern.match(_shortest_plain(float(value))) is not None


def excludes_all(value: str, param: str) -> bool:
    """Return True if ``value`` holds none of the characters in ``param`` (``0x2C`` means a comma)."""
    forbidden = param.replace("0x2C", ",")
    return not any(ch in value for ch in forbidden)


def _parse_float(text: str) -> float:
    if text != text.strip() or "_" in text:
        raise ValueError(text)
    try:
        return float(text)
    except ValueError:
        if "0x" in text.lower():
            return float.fromhex(text)
        raise


def positive_number(value: str) -> bool:
    """Return True if ``value`` parses as a number greater than zero."""
    if not value:
        return False
    try:
        number = _parse_float(value)
    except ValueError:
        return False
    return number > 0


def transfer_empty_string(value: str) -> bool:
    """Accept any string, empty or not."""
    return value == "" or value != ""


def translate(tag: str, field: str, param: str = "") -> str:
    """Return the message for a failed ``tag`` check on ``field``.

    Raises KeyError for a tag with no message.
    """
    try:
        template = _TRANSLATIONS[tag]
    except KeyError:
        raise KeyError(f"no translation for tag {tag!r}") from None
    if tag in _FIELD_REFERENCE_TAGS:
        param = _PARAM_NAMES.get(param) or param
    values = [field, param]
    return _PLACEHOLDER.sub(lambda m: values[int(m[1])] if int(m[1]) < len(values) else m[0], template)