"""
JWT helper utilities.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import JWTError, jwt

from ..config import get_settings


def create_access_token(data: Dict[str, Any], expires_minutes: int | None = None) -> str:
    """
    Create a signed JWT access token with expiration and JTI.

    Args:
        data: Claims to include in the token (e.g., {"sub": "5"}).
        expires_minutes: Optional override for expiration window in minutes.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    to_encode = data.copy()
    expire_delta = timedelta(
        minutes=expires_minutes or settings.access_token_expire_minutes
    )
    expire = datetime.now(timezone.utc) + expire_delta
    to_encode.update({
        "exp": expire,
        "jti": str(uuid.uuid4()),
    })
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def create_user_token(user_id: int) -> str:
    """Issue an access token whose subject is the user's id."""
    return create_access_token({"sub": str(user_id)})


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT access token.

    Raises:
        ValueError: If token is invalid or signature/expiry check fails.
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise ValueError("Invalid token") from exc
