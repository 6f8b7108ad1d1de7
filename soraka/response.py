"""Uniform JSON response bodies and XML envelopes for HTTP handlers."""

from __future__ import annotations

import dataclasses
import json
import re
import socket
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from .ecode import Code, text

__all__ = [
    "JSON_CONTENT_TYPE",
    "XML_CONTENT_TYPE",
    "Body",
    "standard_pg_error",
    "result",
    "success",
    "success_with_ok",
    "fail",
    "xml_result",
    "xml_success",
    "xml_fail",
    "custom_xml",
]

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
XML_CONTENT_TYPE = "text/xml"

_DATETIME_LAYOUT = "%Y-%m-%d %H:%M:%S"

_PG_MESSAGES = {
    "23505": "该记录已存在, 请检查重复项!",
    "23503": "外键约束失败",
    "23502": "字段不能为空",
    "42703": "字段列不存在",
}

_NETWORK_ERRORS = (ConnectionError, TimeoutError, socket.gaierror)

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_JSON_ESCAPE_RE = re.compile("[<>&\u2028\u2029]")

_XML_ESCAPES = {
    '"': "&#34;",
    "'": "&#39;",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}

_TEMPLATE_FIELD = re.compile(r"\{\{\s*\.(\w+)\s*\}\}")


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.strftime(_DATETIME_LAYOUT)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    raise TypeError(f"object of type {type(value).__name__} is not JSON serializable")


def _dumps(value: Any, *, sort_keys: bool = False) -> str:
    encoded = json.dumps(
        value,
        ensure_ascii=False,
        separators=(",", ":"),
        default=_json_default,
        sort_keys=sort_keys,
    )
    return _JSON_ESCAPE_RE.sub(lambda m: _JSON_ESCAPES[m[0]], encoded)


@dataclass
class Body:
    """A response body: status code, message and payload."""

    code: int
    msg: str
    data: Any

    def to_json(self) -> str:
        """Encode as compact JSON, with date-times as ``YYYY-MM-DD HH:MM:SS``."""
        return _dumps({"code": self.code, "msg": self.msg, "data": self.data})


def standard_pg_error(code: str) -> str:
    """Return a user-facing message for a PostgreSQL SQLSTATE ``code``."""
    return _PG_MESSAGES.get(code, "数据库错误")


def _pg_code(err: Any) -> str | None:
    for attr in ("pgcode", "sqlstate"):
        value = getattr(err, attr, None)
        if isinstance(value, str):
            return value
    return None


def result(code: int, data: Any = None, err: Any = None) -> Body:
    """Build a body for ``code``, appending details of ``err`` to the message.

    A mapping is taken as field validation messages, an exception carrying a
    SQLSTATE as a database error, network errors get a fixed message and
    other exceptions and strings are appended as text.
    """
    if data is None:
        data = {}
    msg = text(code)
    if isinstance(err, Mapping):
        msg += ": " + _dumps(dict(err), sort_keys=True)
    elif isinstance(err, BaseException) and _pg_code(err) is not None:
        msg += ": " + standard_pg_error(_pg_code(err) or "")
    elif isinstance(err, _NETWORK_ERRORS):
        msg += ": 网络连接异常"
    elif isinstance(err, BaseException):
        msg += ": " + str(err)
    elif isinstance(err, str):
        msg += ":" + err
    return Body(code=int(code), msg=msg, data=data)


def success(data: Any = None) -> Body:
    """A success body carrying ``data``."""
    return result(Code.SUCCESS, data, None)


def success_with_ok() -> Body:
    """A success body whose payload is ``"ok"``."""
    return result(Code.SUCCESS, "ok", None)


def fail(code: int, err: Any = None) -> Body:
    """A failure body for ``code`` with details from ``err``."""
    return result(code, None, err)


def _xml_char_ok(ch: str) -> bool:
    c = ord(ch)
    return (
        ch in "\t\n\r"
        or 0x20 <= c <= 0xD7FF
        or 0xE000 <= c <= 0xFFFD
        or 0x10000 <= c <= 0x10FFFF
    )


def _xml_escape(s: str) -> str:
    return "".join(
        _XML_ESCAPES.get(ch, ch) if _xml_char_ok(ch) else "\ufffd" for ch in s
    )


def _xml_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    raise TypeError(f"cannot encode {type(value).__name__} as XML data")


def _xml_data(data: Any) -> str:
    if data is None:
        return ""
    if isinstance(data, (list, tuple)):
        return "".join(_xml_data(item) for item in data)
    return "<Data>" + _xml_escape(_xml_text(data)) + "</Data>"


def _render(txt: str, action: str, body: str) -> str:
    values = {"Action": action, "Body": body}

    def substitute(match: re.Match[str]) -> str:
        name = match[1]
        if name not in values:
            raise ValueError(f"template refers to unknown field {name!r}")
        return values[name]

    return _TEMPLATE_FIELD.sub(substitute, txt)


def xml_result(action: str, status: int, msg: str, txt: str, data: Any = None) -> str:
    """Fill template ``txt`` with ``action`` and an escaped result envelope.

    ``txt`` may refer to ``{{.Action}}`` and ``{{.Body}}``; the response is
    meant to be sent with ``XML_CONTENT_TYPE``. Raises ValueError for other
    template fields and TypeError for data that cannot be encoded.
    """
    envelope = (
        "<OutParam><OutResult>"
        f"<Status>{int(status)}</Status>"
        f"<Msg>{_xml_escape(msg)}</Msg>"
        f"{_xml_data(data)}"
        "</OutResult></OutParam>"
    )
    return _render(txt, action, _xml_escape(envelope))


def xml_success(action: str, txt: str) -> str:
    """A success envelope with status 1 and no data."""
    return xml_result(action, 1, "Success", txt, None)


def xml_fail(action: str, txt: str, err: BaseException | str) -> str:
    """A failure envelope with status 0 and the error as its message."""
    return xml_result(action, 0, str(err), txt, None)


def custom_xml(action: str, result: str, txt: str) -> str:
    """Fill template ``txt`` with ``action`` and the escaped ``result`` text."""
    return _render(txt, action, _xml_escape(result))