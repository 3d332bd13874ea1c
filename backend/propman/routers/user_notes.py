"""User note routes"""

from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from propman.db.session import get_db
from propman.schemas.user_note import UserNoteCreate, UserNoteUpdate, UserNoteResponse
from propman.services.user_note import UserNoteService

router = APIRouter(prefix="/api/user-notes", tags=["User Notes"])


@router.get("", response_model=List[UserNoteResponse])
async def list_user_notes(
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    page_number: Optional[int] = Query(1, description="Page number"),
    page_size: Optional[int] = Query(None, description="Items per page")
):
    """List notes, most recently updated first"""
    items, headers = await UserNoteService(db).list_notes(page_number, page_size)
    response.headers.update(headers)
    return items


@router.get("/{user_id}", response_model=UserNoteResponse)
async def get_user_note(
    user_id: str,
    db: Annotated[Session, Depends(get_db)]
):
    """Get the note of a user"""
    return await UserNoteService(db).get_for_user(user_id)


@router.post("", response_model=UserNoteResponse, status_code=status.HTTP_201_CREATED)
async def create_user_note(
    request: UserNoteCreate,
    response: Response,
    db: Annotated[Session, Depends(get_db)]
):
    """Create note"""
    note = await UserNoteService(db).create(request)
    response.headers["Location"] = f"/api/user-notes/{note.id}"
    return note


@router.put("/{note_id}", response_model=UserNoteResponse)
async def save_user_note(
    note_id: int,
    request: UserNoteUpdate,
    db: Annotated[Session, Depends(get_db)]
):
    """Update note, or create one when note_id is -1"""
    return await UserNoteService(db).save(note_id, request)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user_note(
    note_id: int,
    db: Annotated[Session, Depends(get_db)]
):
    """Delete note"""
    await UserNoteService(db).delete(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
