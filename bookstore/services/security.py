"""
Security Service

Handles password hashing and bearer token operations.

Security Features:
==================
1. Password hashing with bcrypt (passlib), fixed work factor
2. JWT token generation and validation (python-jose, HS256)
3. Constant-time password verification

Usage:
    from bookstore.services.security import hash_password, verify_password

    hashed = hash_password("Test1234#")
    is_valid = verify_password("Test1234#", hashed)
"""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from bookstore.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

# -------------------------------------------------------------------------
# Password Hashing Configuration
# -------------------------------------------------------------------------
# bcrypt__rounds pins the work factor so every hash costs the same
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def hash_password(password: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Example:
        >>> hashed = hash_password("Test1234#")
        >>> hashed.startswith("$2b$")
        True
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Uses constant-time comparison to prevent timing attacks.

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


# -------------------------------------------------------------------------
# JWT Token Configuration
# -------------------------------------------------------------------------
ALGORITHM = "HS256"


def create_access_token(
    user_id: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a bearer token for a user.

    The payload is {"id": <user id>, "exp": <expiry>}.

    Args:
        user_id: Hex string of the user's ObjectId
        expires_delta: Optional custom lifetime (defaults to
            settings.jwt_expires_minutes)

    Returns:
        Encoded JWT token string

    Example:
        >>> token = create_access_token("61c2201867d0d894dc6e4b85")
        >>> token.count(".") == 2  # JWT format: header.payload.signature
        True
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_expires_minutes)

    to_encode = {
        "id": str(user_id),
        "exp": datetime.now(UTC) + expires_delta,
    }

    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=ALGORITHM,
    )


def decode_token(token: str) -> dict[str, Any] | None:
    """
    Decode and validate a JWT token.

    Signature and expiry are both checked.

    Returns:
        Decoded payload if valid, None if invalid or expired
    """
    try:
        return jwt.decode(
            token,
            settings.secret_key,
            algorithms=[ALGORITHM],
        )
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        return None


def verify_token(token: str) -> str | None:
    """
    Resolve a bearer token to the user id it was issued for.

    Returns:
        The user id (hex string), or None if the token is invalid, expired
        or carries no id
    """
    payload = decode_token(token)
    if payload is None:
        return None

    user_id = payload.get("id")
    if not isinstance(user_id, str):
        logger.warning("JWT payload has no user id")
        return None

    return user_id
