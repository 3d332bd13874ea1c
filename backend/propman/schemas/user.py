from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from propman.schemas.common import AuditPayload, AuditResponse


class UserCreate(AuditPayload):
    username: str = Field(..., min_length=1, max_length=100)
    # Plain text; hashed before it reaches the users table
    password: Optional[str] = Field(None, min_length=1, max_length=128)
    pak_no: Optional[str] = Field(None, max_length=50)
    name: Optional[str] = Field(None, max_length=150)
    password_iterations: Optional[int] = Field(None, ge=0)
    rank: Optional[str] = Field(None, max_length=50)
    category: Optional[str] = Field(None, max_length=50)
    unit_id: Optional[int] = None
    base_id: Optional[int] = None
    cmd_id: Optional[int] = None
    status: Optional[int] = Field(1, ge=0, le=255)


class UserUpdate(UserCreate):
    id: Optional[int] = 0


class UserResponse(AuditResponse):
    username: str
    pak_no: Optional[str] = None
    name: Optional[str] = None
    rank: Optional[str] = None
    category: Optional[str] = None
    unit_id: Optional[int] = None
    base_id: Optional[int] = None
    cmd_id: Optional[int] = None
    status: Optional[int] = None
    password_attempts: int = 0
    refresh_token_expires_at: Optional[datetime] = None
