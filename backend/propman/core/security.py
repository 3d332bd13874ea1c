import hmac
import logging
import secrets
from typing import NamedTuple, Optional

from passlib.crypto.digest import pbkdf2_hmac

logger = logging.getLogger(__name__)

SALT_SIZE = 16
KEY_SIZE = 32
DEFAULT_ITERATIONS = 150_000


class PasswordHash(NamedTuple):
    hash: bytes
    salt: bytes
    iterations: int


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations, KEY_SIZE)


def effective_iterations(iterations: Optional[int]) -> int:
    """Stored iteration count, or the default when missing or non-positive"""
    if not iterations or iterations <= 0:
        return DEFAULT_ITERATIONS
    return iterations


def get_password_hash(password: str, iterations: int = DEFAULT_ITERATIONS) -> PasswordHash:
    """Derive a PBKDF2-SHA256 key for a password with a fresh random salt."""
    if not password or not isinstance(password, str):
        raise ValueError("Password must be a non-empty string")

    if len(password.strip()) == 0:
        raise ValueError("Password cannot be empty or whitespace only")

    salt = secrets.token_bytes(SALT_SIZE)
    hashed = _derive(password, salt, iterations)
    logger.info("Password hashing completed")
    return PasswordHash(hash=hashed, salt=salt, iterations=iterations)


def verify_password(
    plain_password: str,
    hashed_password: Optional[bytes],
    salt: Optional[bytes],
    iterations: Optional[int] = DEFAULT_ITERATIONS,
) -> bool:
    if not plain_password or not hashed_password or not salt:
        logger.warning("Empty password, hash or salt")
        return False

    computed = _derive(plain_password, bytes(salt), effective_iterations(iterations))
    return hmac.compare_digest(computed, bytes(hashed_password))
