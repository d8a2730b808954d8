"""
Security utilities.

Password hashing (bcrypt), JWT access tokens (python-jose) and the
OAuth2 bearer scheme used by the API dependencies.
"""

import secrets
import string
from datetime import datetime, timedelta
from typing import Optional

import bcrypt
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt

from app.core.config import settings

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")

# Bcrypt limit; longer passwords must be truncated
_BCRYPT_MAX_BYTES = 72

# Invite codes use uppercase letters and digits
_INVITE_ALPHABET = string.ascii_uppercase + string.digits


def _truncate_password_for_bcrypt(password: str) -> bytes:
    """Truncate password to bcrypt's 72-byte limit, respecting UTF-8 boundaries."""
    encoded = password.encode("utf-8")
    if len(encoded) <= _BCRYPT_MAX_BYTES:
        return encoded
    truncated = encoded[:_BCRYPT_MAX_BYTES]
    while truncated:
        try:
            truncated.decode("utf-8")
            return truncated
        except UnicodeDecodeError:
            truncated = truncated[:-1]
    return b""


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Hashed password (ASCII string for DB storage)
    """
    hashed = bcrypt.hashpw(_truncate_password_for_bcrypt(password), bcrypt.gensalt())
    return hashed.decode("ascii")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its bcrypt hash."""
    return bcrypt.checkpw(_truncate_password_for_bcrypt(plain_password), hashed_password.encode("ascii"))


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT access token.

    Args:
        data: Claims to encode (``{"sub": email}``)
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token
    """
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({ "exp": expire, "type": "access" })
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Optional[str]:
    """Decode a JWT access token and return its subject (email), or ``None`` if invalid."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    if payload.get("type") != "access":
        return None
    return payload.get("sub")


def generate_invite_code(length: int = 6) -> str:
    """Random school invite code, e.g. ``'K7Q2ZD'``."""
    return "".join(secrets.choice(_INVITE_ALPHABET) for _ in range(length))
