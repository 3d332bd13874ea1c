from typing import Optional
from pydantic import BaseModel

from propman.schemas.common import EntityPayload


class LoginRequest(EntityPayload):
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    id: int
    username: str
    pak_no: Optional[str] = None
    name: Optional[str] = None
    rank: Optional[str] = None
    category: Optional[str] = None
    unit_id: Optional[int] = None
    base_id: Optional[int] = None
    cmd_id: Optional[int] = None
    status: Optional[int] = None
    access_token: str
    token_type: str = "bearer"


class RefreshResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
