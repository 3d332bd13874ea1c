"""Login and token refresh routes"""

from typing import Annotated, Optional
from fastapi import APIRouter, Cookie, Depends, Response
from sqlalchemy.orm import Session

from propman.core.config import settings
from propman.db.session import get_db
from propman.schemas.auth import LoginRequest, LoginResponse, RefreshResponse
from propman.services.auth import AuthService, set_refresh_cookie

router = APIRouter(prefix="/api/login", tags=["Authentication"])


@router.post("", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)]
):
    """Login with username and password"""
    body, refresh_token, expires_at = await AuthService(db).login(request)
    set_refresh_cookie(response, refresh_token, expires_at)
    return body


@router.post("/refresh", response_model=RefreshResponse)
async def refresh(
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    refresh_token: Optional[str] = Cookie(None, alias=settings.REFRESH_COOKIE_NAME)
):
    """Exchange the refresh token cookie for a new token pair"""
    body, new_refresh_token, expires_at = await AuthService(db).refresh(refresh_token)
    set_refresh_cookie(response, new_refresh_token, expires_at)
    return body
