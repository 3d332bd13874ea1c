"""File upload routes"""

from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.orm import Session

from propman.db.session import get_db
from propman.dependencies import get_current_actor
from propman.schemas.file_upload import FileDeleteResponse, StoredFileList, UploadResult
from propman.services.upload import UploadService

router = APIRouter(prefix="/api/uploads", tags=["Uploads"])


@router.post("", response_model=UploadResult, status_code=status.HTTP_201_CREATED)
async def upload_files(
    db: Annotated[Session, Depends(get_db)],
    actor: Annotated[str, Depends(get_current_actor)],
    id: int = Form(...),
    table_name: Optional[str] = Form(None),
    files: Optional[List[UploadFile]] = File(None)
):
    """Upload files for a record of a form"""
    return await UploadService(db).store_files(id, table_name, files, actor)


@router.get("", response_model=StoredFileList)
async def list_files(
    db: Annotated[Session, Depends(get_db)],
    id: Optional[int] = Query(None, description="Record id"),
    form_name: Optional[str] = Query(None, description="Form (table) name")
):
    """List the files uploaded for a record"""
    return await UploadService(db).list_files(id, form_name)


@router.delete("/{file_id}", response_model=FileDeleteResponse)
async def delete_file(
    file_id: int,
    db: Annotated[Session, Depends(get_db)],
    actor: Annotated[str, Depends(get_current_actor)]
):
    """Soft delete an uploaded file record"""
    return await UploadService(db).delete_file(file_id, actor)
