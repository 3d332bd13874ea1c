import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from fastapi import Response
from sqlalchemy import case, func, select, update
from sqlalchemy.orm import Session

from propman.core.auth import create_access_token, create_refresh_token, hash_refresh_token
from propman.core.config import settings
from propman.core.security import verify_password
from propman.models import User
from propman.schemas.auth import LoginRequest, LoginResponse, RefreshResponse
from propman.utils.exceptions import AuthenticationError, BadRequestError

logger = logging.getLogger(__name__)

MAX_FAILED_ATTEMPTS = 3
STATUS_ACTIVE = 1
STATUS_INACTIVE = 0


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive datetimes
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def set_refresh_cookie(response: Response, token: str, expires_at: datetime) -> None:
    response.set_cookie(
        key=settings.REFRESH_COOKIE_NAME,
        value=token,
        expires=expires_at,
        httponly=True,
        secure=settings.REFRESH_COOKIE_SECURE,
        samesite="lax",
    )


class AuthService:
    def __init__(self, db: Session):
        self.db = db

    def _user_by_username(self, username: str) -> Optional[User]:
        # Row lock serialises concurrent logins for the same account
        stmt = select(User).where(User.username == username).with_for_update()
        return self.db.scalars(stmt).first()

    def _user_by_refresh_token(self, token_hash: str) -> Optional[User]:
        stmt = select(User).where(User.refresh_token == token_hash).with_for_update()
        return self.db.scalars(stmt).first()

    def _record_failed_attempt(self, user: User) -> int:
        """Increment the attempt counter in SQL, locking the account at the limit"""
        attempts = func.coalesce(User.password_attempts, 0) + 1
        self.db.execute(
            update(User)
            .where(User.id == user.id)
            .values(
                password_attempts=attempts,
                status=case((attempts >= MAX_FAILED_ATTEMPTS, STATUS_INACTIVE), else_=User.status),
            )
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        # commit expired the instance, so this reloads the stored count
        return user.password_attempts

    def _issue_tokens(self, user: User) -> Tuple[str, str, datetime]:
        """Create an access token and rotate the stored refresh token hash"""
        access_token = create_access_token(user)
        refresh_token = create_refresh_token()
        expires_at = datetime.now(timezone.utc) + timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)

        user.refresh_token = hash_refresh_token(refresh_token)
        user.refresh_token_expires_at = expires_at
        return access_token, refresh_token, expires_at

    async def login(self, request: LoginRequest) -> Tuple[LoginResponse, str, datetime]:
        """Verify credentials and issue an access token plus a refresh token.

        Returns the response body, the plain refresh token for the cookie and
        its expiry. Every failure raises AuthenticationError after persisting
        the attempt counter.
        """
        if not request.username or not request.username.strip() or not request.password:
            raise BadRequestError("Username and password are required.")

        user = self._user_by_username(request.username.strip())

        if not user or not user.password or not user.password_salt:
            logger.warning(f"Login failed for unknown user {request.username}")
            raise AuthenticationError("Invalid credentials.")

        if user.status != STATUS_ACTIVE:
            logger.warning(f"Login rejected for inactive user {user.id}")
            raise AuthenticationError("Account is inactive or locked.")

        if (user.password_attempts or 0) >= MAX_FAILED_ATTEMPTS:
            user.status = STATUS_INACTIVE
            self.db.commit()
            logger.warning(f"Login rejected for locked user {user.id}")
            raise AuthenticationError("Account locked due to multiple failed attempts.")

        if not verify_password(request.password, user.password, user.password_salt, user.password_iterations):
            attempts = self._record_failed_attempt(user)
            if attempts >= MAX_FAILED_ATTEMPTS:
                logger.warning(f"User {user.id} locked after {attempts} failed attempts")
                raise AuthenticationError("Account locked due to multiple failed attempts.")
            logger.warning(f"Invalid password for user {user.id} (attempt {attempts})")
            raise AuthenticationError("Invalid credentials.")

        user.password_attempts = 0
        access_token, refresh_token, expires_at = self._issue_tokens(user)
        self.db.commit()
        self.db.refresh(user)
        logger.info(f"User {user.id} logged in")

        response = LoginResponse(
            id=user.id,
            username=user.username,
            pak_no=user.pak_no,
            name=user.name,
            rank=user.rank,
            category=user.category,
            unit_id=user.unit_id,
            base_id=user.base_id,
            cmd_id=user.cmd_id,
            status=user.status,
            access_token=access_token,
        )
        return response, refresh_token, expires_at

    async def refresh(self, refresh_token: Optional[str]) -> Tuple[RefreshResponse, str, datetime]:
        """Exchange a refresh token for a new token pair; the old token stops working"""
        if not refresh_token:
            raise AuthenticationError("Refresh token missing.")

        old_hash = hash_refresh_token(refresh_token)
        user = self._user_by_refresh_token(old_hash)

        expires_at = _as_utc(user.refresh_token_expires_at) if user else None
        if (
            not user
            or expires_at is None
            or expires_at <= datetime.now(timezone.utc)
            or user.status != STATUS_ACTIVE
            or (user.password_attempts or 0) >= MAX_FAILED_ATTEMPTS
        ):
            logger.warning("Rejected refresh token")
            raise AuthenticationError("Invalid refresh token.")

        access_token = create_access_token(user)
        new_refresh_token = create_refresh_token()
        new_expires_at = datetime.now(timezone.utc) + timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)

        # Only the request that still sees the old hash may rotate it
        result = self.db.execute(
            update(User)
            .where(User.id == user.id, User.refresh_token == old_hash)
            .values(refresh_token=hash_refresh_token(new_refresh_token), refresh_token_expires_at=new_expires_at)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            self.db.rollback()
            logger.warning(f"Refresh token for user {user.id} was already rotated")
            raise AuthenticationError("Invalid refresh token.")
        self.db.commit()
        logger.info(f"Tokens refreshed for user {user.id}")
        return RefreshResponse(access_token=access_token), new_refresh_token, new_expires_at
