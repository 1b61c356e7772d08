"""Password hashing (scrypt) and signed session cookie values."""

import hashlib
import hmac
import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from fzscripts.core.config import settings

# scrypt parameters; stored form is "<hex(key)>.<salt>" with the salt used as text.
SCRYPT_N = 16384
SCRYPT_R = 8
SCRYPT_P = 1
SCRYPT_KEY_LEN = 64
SALT_BYTES = 16

# Session id entropy (bytes before urlsafe base64).
SESSION_ID_BYTES = 32
SESSION_COOKIE_ALGORITHM = "HS256"


def _derive_key(plain_password: str, salt: str) -> bytes:
    return hashlib.scrypt(
        plain_password.encode("utf-8"),
        salt=salt.encode("utf-8"),
        n=SCRYPT_N,
        r=SCRYPT_R,
        p=SCRYPT_P,
        maxmem=64 * 1024 * 1024,
        dklen=SCRYPT_KEY_LEN,
    )


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    salt = secrets.token_hex(SALT_BYTES)
    return f"{_derive_key(plain_password, salt).hex()}.{salt}"


def verify_password(plain_password: str, stored: str) -> bool:
    """
    Verify a plain password against a stored "<hash>.<salt>" value.

    Comparison is constant-time. Malformed input yields False, never an exception.
    """
    try:
        hashed, salt = stored.split(".")
        expected = bytes.fromhex(hashed)
        if len(expected) != SCRYPT_KEY_LEN or not salt:
            return False
        supplied = _derive_key(plain_password, salt)
    except (AttributeError, TypeError, ValueError, MemoryError):
        return False
    return hmac.compare_digest(expected, supplied)


def new_session_id() -> str:
    """Opaque random session identifier."""
    return secrets.token_urlsafe(SESSION_ID_BYTES)


def sign_session_cookie(session_id: str, ttl: timedelta | None = None) -> str:
    """Wrap a session id in a signed token suitable for the session cookie."""
    now = datetime.now(UTC)
    expire = now + (ttl or timedelta(hours=settings.SESSION_TTL_HOURS))
    payload: dict[str, Any] = {
        "sid": session_id,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(
        payload,
        settings.SESSION_SECRET.get_secret_value(),
        algorithm=SESSION_COOKIE_ALGORITHM,
    )


def read_session_cookie(value: str | None) -> str | None:
    """
    Return the session id from a signed cookie value.
    Missing, tampered or expired cookies give None.
    """
    if not value:
        return None
    try:
        payload = jwt.decode(
            value,
            settings.SESSION_SECRET.get_secret_value(),
            algorithms=[SESSION_COOKIE_ALGORITHM],
        )
    except jwt.PyJWTError:
        return None
    sid = payload.get("sid")
    if not isinstance(sid, str) or not sid:
        return None
    return sid
