from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from propman.schemas.common import AuditPayload, AuditResponse


class FileUploadFields(BaseModel):
    form_id: int = 0
    form_name: Optional[str] = Field(None, max_length=150)
    path: Optional[str] = Field(None, max_length=500)
    uploaded_date: Optional[datetime] = None


class FileUploadCreate(AuditPayload, FileUploadFields):
    pass


class FileUploadUpdate(FileUploadCreate):
    id: Optional[int] = 0


class FileUploadResponse(AuditResponse, FileUploadFields):
    pass


class UploadedFile(BaseModel):
    id: int
    form_id: int
    form_name: Optional[str]
    path: Optional[str]
    uploaded_date: Optional[datetime]

    class Config:
        from_attributes = True


class UploadResult(BaseModel):
    message: str
    uploaded_files: List[UploadedFile]


class StoredFileInfo(BaseModel):
    id: int
    file_name: str
    path: Optional[str] = None
    size: int = 0
    size_formatted: str = "0 B"
    uploaded_date: Optional[datetime] = None
    mime_type: Optional[str] = None
    error: Optional[str] = None


class StoredFileList(BaseModel):
    files: List[StoredFileInfo]


class FileDeleteResponse(BaseModel):
    message: str
    id: int
