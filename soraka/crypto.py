"""Hash digests, bcrypt password hashing and salt generation."""

from __future__ import annotations

import base64
import hashlib
import secrets

import bcrypt

__all__ = [
    "encrypt_sha256",
    "encrypt_md5",
    "bcrypt_hash",
    "bcrypt_check",
    "generate_salt",
]

_DEFAULT_COST = 10
_MAX_PASSWORD_BYTES = 72
_SALT_SIZE = 16


def encrypt_sha256(data: str) -> str:
    """Return the hex SHA-256 digest of ``data``."""
    return hashlib.sha256(data.encode("utf-8")).hexdigest()


def encrypt_md5(data: str) -> str:
    """Return the hex MD5 digest of ``data``."""
    return hashlib.md5(data.encode("utf-8")).hexdigest()


def bcrypt_hash(password: str, salt: str) -> str:
    """Hash ``password`` concatenated with ``salt`` using bcrypt.

    Raises ValueError if the combined input exceeds 72 bytes.
    """
    secret_bytes = (password + salt).encode("utf-8")
    if len(secret_bytes) > _MAX_PASSWORD_BYTES:
        raise ValueError("bcrypt: password length exceeds 72 bytes")
    hashed = bcrypt.hashpw(secret_bytes, bcrypt.gensalt(rounds=_DEFAULT_COST, prefix=b"2a"))
    return hashed.decode("ascii")


def bcrypt_check(password: str, salt: str, hashed: str) -> bool:
    """Return True if ``password`` plus ``salt`` matches the bcrypt ``hashed``."""
    try:
        return bcrypt.checkpw((password + salt).encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False


def generate_salt() -> str:
    """Return 16 random bytes encoded as standard base64."""
    return base64.b64encode(secrets.token_bytes(_SALT_SIZE)).decode("ascii")