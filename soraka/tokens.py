"""Signed session tokens: claims, creation, refresh pairs and parsing."""

from __future__ import annotations

import json
import math
import re
import threading
from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from fractions import Fraction
from typing import Any, TypeVar

import jwt

__all__ = [
    "SIGNING_KEY",
    "HEADER_SIGN_TOKEN_BUFFER_TIME",
    "HEADER_SIGN_TOKEN_EXPIRES",
    "BaseClaims",
    "CustomClaims",
    "TokenError",
    "TokenExpired",
    "TokenNotValidYet",
    "TokenMalformed",
    "TokenInvalid",
    "parse_duration",
    "JWT",
]

SIGNING_KEY = "mc"
HEADER_SIGN_TOKEN_BUFFER_TIME = "1d"
HEADER_SIGN_TOKEN_EXPIRES = "7d"

_HMAC_ALGORITHMS = ["HS256", "HS384", "HS512"]
_INT64_MAX = 2**63 - 1
_INT64_MIN = -(2**63)

_UNIT_NS = {
    "ns": 1,
    "us": 1_000,
    "\u00b5s": 1_000,
    "\u03bcs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}
_COMPONENT = re.compile(r"(\d*)(?:\.(\d*))?(ns|us|\u00b5s|\u03bcs|ms|s|m|h)", re.ASCII)
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)

T = TypeVar("T")


class TokenError(Exception):
    """Base class for token failures."""

    default_message = "token error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class TokenExpired(TokenError):
    default_message = "Token is expired"


class TokenNotValidYet(TokenError):
    default_message = "Token not active yet"


class TokenMalformed(TokenError):
    default_message = "That's not even a token"


class TokenInvalid(TokenError):
    default_message = "Couldn't handle this token:"


def _duration_ns(s: str) -> int:
    """Parse a duration such as ``1h30m`` or ``1.5s`` into nanoseconds."""
    original = s
    negative = False
    if s and s[0] in "+-":
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return 0
    if not s:
        raise ValueError(f"invalid duration {original!r}")
    total = Fraction(0)
    pos = 0
    while pos < len(s):
        match = _COMPONENT.match(s, pos)
        if match is None or (not match[1] and not match[2]):
            raise ValueError(f"invalid duration {original!r}")
        value = Fraction(int(match[1] or "0"))
        if match[2]:
            value += Fraction(int(match[2]), 10 ** len(match[2]))
        total += value * _UNIT_NS[match[3]]
        pos = match.end()
    ns = int(-total if negative else total)
    if not _INT64_MIN <= ns <= _INT64_MAX:
        raise ValueError(f"invalid duration {original!r}")
    return ns


def _ns_to_timedelta(ns: int) -> timedelta:
    return timedelta(microseconds=int(Fraction(ns, 1000)))


def parse_duration(d: str) -> timedelta:
    """Parse a duration, also accepting a leading day count such as ``7d`` or ``1d2h``.

    A bare integer is taken as nanoseconds. Raises ValueError when nothing fits.
    """
    d = d.strip()
    try:
        return _ns_to_timedelta(_duration_ns(d))
    except ValueError:
        pass
    if "d" in d:
        index = d.index("d")
        head = d[:index]
        days = int(head) if _INTEGER.fullmatch(head) else 0
        if not _INT64_MIN <= days <= _INT64_MAX:
            days = 0
        dr = timedelta(days=days)
        try:
            extra = _duration_ns(d[index + 1 :])
        except ValueError:
            return dr
        return dr + _ns_to_timedelta(extra)
    if not _INTEGER.fullmatch(d) or not _INT64_MIN <= int(d) <= _INT64_MAX:
        raise ValueError(f"invalid duration {d!r}")
    return _ns_to_timedelta(int(d))


@dataclass
class BaseClaims:
    """The user identity carried in a token."""

    user_id: int = 0
    platform: str = ""
    username: str = ""
    phone: str = ""
    nick_name: str = ""


@dataclass
class CustomClaims:
    """Identity, buffer time and the registered claims of a token."""

    base_claims: BaseClaims = field(default_factory=BaseClaims)
    buffer_time: int = 0
    issuer: str = ""
    subject: str = ""
    audience: list[str] = field(default_factory=list)
    expires_at: datetime | None = None
    not_before: datetime | None = None
    issued_at: datetime | None = None
    token_id: str = ""


def _numeric(moment: datetime) -> int:
    return math.floor(moment.timestamp())


def _claims_to_payload(claims: CustomClaims) -> dict[str, Any]:
    base = claims.base_claims
    payload: dict[str, Any] = {
        "UserID": base.user_id,
        "Platform": base.platform,
        "Username": base.username,
        "Phone": base.phone,
        "NickName": base.nick_name,
        "BufferTime": claims.buffer_time,
    }
    if claims.issuer:
        payload["iss"] = claims.issuer
    if claims.subject:
        payload["sub"] = claims.subject
    if claims.audience:
        payload["aud"] = list(claims.audience)
    if claims.expires_at is not None:
        payload["exp"] = _numeric(claims.expires_at)
    if claims.not_before is not None:
        payload["nbf"] = _numeric(claims.not_before)
    if claims.issued_at is not None:
        payload["iat"] = _numeric(claims.issued_at)
    if claims.token_id:
        payload["jti"] = claims.token_id
    return payload


def _typed(payload: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = payload.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, kind):
        raise TokenMalformed()
    return value


def _time_claim(payload: dict[str, Any], key: str) -> datetime | None:
    value = payload.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TokenMalformed()
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise TokenMalformed() from exc


def _audience(payload: dict[str, Any]) -> list[str]:
    value = payload.get("aud")
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    raise TokenMalformed()


def _claims_from_payload(payload: dict[str, Any]) -> CustomClaims:
    base = BaseClaims(
        user_id=_typed(payload, "UserID", int, 0),
        platform=_typed(payload, "Platform", str, ""),
        username=_typed(payload, "Username", str, ""),
        phone=_typed(payload, "Phone", str, ""),
        nick_name=_typed(payload, "NickName", str, ""),
    )
    return CustomClaims(
        base_claims=base,
        buffer_time=_typed(payload, "BufferTime", int, 0),
        issuer=_typed(payload, "iss", str, ""),
        subject=_typed(payload, "sub", str, ""),
        audience=_audience(payload),
        expires_at=_time_claim(payload, "exp"),
        not_before=_time_claim(payload, "nbf"),
        issued_at=_time_claim(payload, "iat"),
        token_id=_typed(payload, "jti", str, ""),
    )


class _SingleFlight:
    """Collapses concurrent calls sharing a key into one execution."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._calls: dict[str, Future[Any]] = {}

    def do(self, key: str, fn: Callable[[], T]) -> T:
        with self._lock:
            future = self._calls.get(key)
            leader = future is None
            if future is None:
                future = Future()
                self._calls[key] = future
        if not leader:
            return future.result()
        try:
            future.set_result(fn())
        except BaseException as exc:  # noqa: BLE001 - handed to every waiter
            future.set_exception(exc)
        finally:
            with self._lock:
                del self._calls[key]
        return future.result()


_single_group = _SingleFlight()


class JWT:
    """Creates and parses HMAC-signed tokens."""

    def __init__(self, signing_key: bytes | str = SIGNING_KEY) -> None:
        self.signing_key = signing_key.encode("utf-8") if isinstance(signing_key, str) else bytes(signing_key)
        self._jws = jwt.PyJWS()

    def create_claims(self, base_claims: BaseClaims) -> CustomClaims:
        """Build claims valid for the buffer time, audience and issuer set to the signing key."""
        buffer = parse_duration(HEADER_SIGN_TOKEN_BUFFER_TIME)
        now = datetime.now(timezone.utc)
        return CustomClaims(
            base_claims=base_claims,
            buffer_time=int(buffer.total_seconds()),
            audience=[SIGNING_KEY],
            not_before=now - timedelta(microseconds=1),
            expires_at=now + buffer,
            issuer=SIGNING_KEY,
        )

    def create_token(self, claims: CustomClaims) -> str:
        """Sign ``claims`` with HS256."""
        return jwt.encode(_claims_to_payload(claims), self.signing_key, algorithm="HS256")

    def create_token_pair(self, claims: CustomClaims) -> tuple[str, str]:
        """Return an access token for ``claims`` and a refresh token lasting the expiry period."""
        access = self.create_token(claims)
        expires = parse_duration(HEADER_SIGN_TOKEN_EXPIRES)
        refresh_claims = CustomClaims(
            base_claims=claims.base_claims,
            buffer_time=int(expires.total_seconds()),
            expires_at=datetime.now(timezone.utc) + expires,
            issuer=SIGNING_KEY,
        )
        return access, self.create_token(refresh_claims)

    def create_token_by_old_token(self, old_token: str, claims: CustomClaims) -> str:
        """Create a new token, sharing one result among concurrent calls for the same old token."""
        return _single_group.do("JWT:" + old_token, lambda: self.create_token(claims))

    def _signature_valid(self, token: str) -> bool:
        try:
            self._jws.decode_complete(token, self.signing_key, algorithms=_HMAC_ALGORITHMS)
        except jwt.PyJWTError:
            return False
        return True

    def parse_token(self, token: str) -> CustomClaims:
        """Parse and validate ``token``.

        An expired token still yields its claims. Raises TokenNotValidYet for an
        empty or not yet active token, TokenMalformed for undecodable input and
        TokenInvalid for a bad signature or any other failure.
        """
        if not token:
            raise TokenNotValidYet()
        try:
            decoded = self._jws.decode_complete(token, options={"verify_signature": False})
            payload = json.loads(decoded["payload"])
        except (jwt.PyJWTError, ValueError) as exc:
            raise TokenMalformed() from exc
        if not isinstance(payload, dict):
            raise TokenMalformed()
        claims = _claims_from_payload(payload)
        now = datetime.now(timezone.utc)
        signature_ok = self._signature_valid(token)
        if claims.expires_at is not None and now >= claims.expires_at:
            return claims
        if claims.not_before is not None and now < claims.not_before:
            raise TokenNotValidYet()
        if not signature_ok or (claims.issued_at is not None and now < claims.issued_at):
            raise TokenInvalid()
        return claims