from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from propman.schemas.common import EntityPayload


class UserNoteCreate(EntityPayload):
    user_id: Optional[str] = Field(None, max_length=100)
    content: Optional[str] = None


class UserNoteUpdate(UserNoteCreate):
    id: Optional[int] = 0


class UserNoteResponse(BaseModel):
    id: int
    user_id: Optional[str]
    content: Optional[str]
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True
