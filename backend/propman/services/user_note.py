from datetime import datetime, timezone
from typing import List, Optional, Tuple, Dict

from sqlalchemy.orm import Session

from propman.models import UserNote
from propman.repositories import GenericRepository, reconcile_route_id
from propman.schemas.user_note import UserNoteCreate, UserNoteResponse, UserNoteUpdate
from propman.services.crud import normalize_paging, paging_headers
from propman.utils.exceptions import NotFoundError

# Route id that asks PUT to create instead of update
NEW_NOTE_ID = -1


class UserNoteService:
    def __init__(self, db: Session):
        self.db = db
        self.notes = GenericRepository(db, UserNote)

    def _get(self, note_id: int) -> UserNote:
        note = self.notes.get_by_id(note_id)
        if not note:
            raise NotFoundError("User note not found.")
        return note

    async def list_notes(self, page_number: Optional[int], page_size: Optional[int]
                         ) -> Tuple[List[UserNoteResponse], Dict[str, str]]:
        """Notes, most recently updated first"""
        page_number, page_size = normalize_paging(page_number, page_size)
        notes, total = self.notes.get_page(page_number, page_size, order_by=UserNote.updated_at.desc())
        return [UserNoteResponse.model_validate(n) for n in notes], paging_headers(total, page_number, page_size)

    async def get_for_user(self, user_id: str) -> UserNoteResponse:
        notes, _ = self.notes.get_page(1, 1, UserNote.user_id == user_id, order_by=UserNote.id)
        if not notes:
            raise NotFoundError("User note not found.")
        return UserNoteResponse.model_validate(notes[0])

    async def create(self, request: UserNoteCreate) -> UserNoteResponse:
        note = UserNote(
            user_id=request.user_id,
            content=request.content,
            updated_at=datetime.now(timezone.utc),
        )
        return UserNoteResponse.model_validate(self.notes.add(note))

    async def save(self, note_id: int, request: UserNoteUpdate) -> UserNoteResponse:
        """Update a note, or create one when the route id is -1"""
        if note_id == NEW_NOTE_ID:
            return await self.create(request)

        reconcile_route_id(request.id, note_id)
        note = self._get(note_id)
        note = self.notes.update(note, {
            "user_id": request.user_id,
            "content": request.content,
            "updated_at": datetime.now(timezone.utc),
        })
        return UserNoteResponse.model_validate(note)

    async def delete(self, note_id: int) -> None:
        self.notes.delete(self._get(note_id))
