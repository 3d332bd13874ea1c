from .auth import AuthService
from .crud import CrudService
from .enrichment import EnrichmentService
from .property_group import PropertyGroupService
from .upload import UploadService
from .user_note import UserNoteService

__all__ = [
    "AuthService",
    "CrudService",
    "EnrichmentService",
    "PropertyGroupService",
    "UploadService",
    "UserNoteService",
]
