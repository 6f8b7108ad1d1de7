"""Decryption of phone number data handed over by the mini-program platform."""

from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass, field
from typing import Any

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

__all__ = ["Watermark", "PhoneNumberInfo", "DecryptError", "decrypt_phone_number"]

_BLOCK_SIZE = 16
_KEY_SIZES = (16, 24, 32)


class DecryptError(ValueError):
    """Raised when encrypted phone data cannot be decoded or decrypted."""


@dataclass
class Watermark:
    """The application id and timestamp stamped on the data."""

    appid: str = ""
    timestamp: int = 0


@dataclass
class PhoneNumberInfo:
    """A decrypted phone number with its country code and watermark."""

    phone_number: str = ""
    pure_phone_number: str = ""
    country_code: str = ""
    watermark: Watermark = field(default_factory=Watermark)


def _decode(name: str, value: str) -> bytes:
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecryptError(f"{name} decode error: {exc}") from exc


def _pkcs7_unpad(data: bytes) -> bytes:
    pad = data[-1]
    if pad > len(data):
        return data
    return data[: len(data) - pad]


def _lookup(obj: dict[str, Any], name: str) -> Any:
    if name in obj:
        return obj[name]
    folded = name.casefold()
    for key, value in obj.items():
        if key.casefold() == folded:
            return value
    return None


def _json_error(message: str) -> DecryptError:
    return DecryptError("unmarshal decrypted phone info error: " + message)


def _string(obj: dict[str, Any], name: str) -> str:
    value = _lookup(obj, name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _json_error(f"field {name} must be a string")
    return value


def _watermark(value: Any) -> Watermark:
    if value is None:
        return Watermark()
    if not isinstance(value, dict):
        raise _json_error("field watermark must be an object")
    timestamp = _lookup(value, "timestamp")
    if timestamp is None:
        timestamp = 0
    elif isinstance(timestamp, bool) or not isinstance(timestamp, int):
        raise _json_error("field timestamp must be an integer")
    return Watermark(appid=_string(value, "appid"), timestamp=timestamp)


def decrypt_phone_number(session_key: str, encrypted_data: str, iv: str) -> PhoneNumberInfo:
    """Decrypt base64 AES-CBC ``encrypted_data`` with ``session_key`` and ``iv``.

    Raises DecryptError when decoding, decryption or parsing fails.
    """
    data = _decode("encryptedData", encrypted_data)
    key = _decode("sessionKey", session_key)
    iv_bytes = _decode("iv", iv)

    if len(key) not in _KEY_SIZES:
        raise DecryptError(f"new cipher error: invalid key size {len(key)}")
    if len(data) % _BLOCK_SIZE != 0:
        raise DecryptError("encryptedData is not a multiple of the block size")
    if len(iv_bytes) != _BLOCK_SIZE:
        raise DecryptError("IV length must equal block size")
    if not data:
        raise DecryptError("encryptedData is empty")

    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv_bytes)).decryptor()
    plain = _pkcs7_unpad(decryptor.update(data) + decryptor.finalize())

    try:
        parsed = json.loads(plain.decode("utf-8", errors="replace"))
    except ValueError as exc:
        raise _json_error(str(exc)) from exc
    if parsed is None:
        return PhoneNumberInfo()
    if not isinstance(parsed, dict):
        raise _json_error("decrypted data is not an object")
    return PhoneNumberInfo(
        phone_number=_string(parsed, "phoneNumber"),
        pure_phone_number=_string(parsed, "purePhoneNumber"),
        country_code=_string(parsed, "countryCode"),
        watermark=_watermark(_lookup(parsed, "watermark")),
    )