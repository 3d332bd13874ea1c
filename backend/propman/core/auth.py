import base64
import hashlib
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from propman.core.config import settings
from propman.utils.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

REFRESH_TOKEN_BYTES = 64

if settings.JWT_SECRET_KEY == "change-me-secret-key-should-be-strong":
    logger.warning("JWT_SECRET_KEY is not set, using the built-in development key")


def _optional(value: Any) -> str:
    return "" if value is None else str(value)


def create_access_token(user, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed access token carrying the user's profile claims"""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {
        "sub": str(user.id),
        "unique_name": user.username,
        "name": _optional(user.name),
        "rank": _optional(user.rank),
        "cmd_id": _optional(user.cmd_id),
        "base_id": _optional(user.base_id),
        "unit_id": _optional(user.unit_id),
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "iat": now,
        "exp": expire,
        "type": "access",
    }
    encoded_jwt = jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    logger.info(f"Access token created for user {user.id}")
    return encoded_jwt


def create_refresh_token() -> str:
    """Generate an opaque random refresh token"""
    return base64.urlsafe_b64encode(secrets.token_bytes(REFRESH_TOKEN_BYTES)).decode("ascii").rstrip("=")


def hash_refresh_token(token: str) -> str:
    """Hash a refresh token for storage"""
    return hashlib.sha256(token.encode()).hexdigest()


def verify_access_token(token: str) -> Dict[str, Any]:
    """Verify and decode an access token"""
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
    except JWTError as e:
        raise AuthenticationError(f"Invalid token: {str(e)}")

    if payload.get("type") != "access":
        raise AuthenticationError("Invalid token type")

    return payload
