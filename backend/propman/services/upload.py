import logging
import mimetypes
import os
import re
import shutil
from datetime import datetime, timezone
from pathlib import Path, PurePosixPath
from typing import List, Optional

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from propman.core.config import settings
from propman.models import FileUpload
from propman.repositories import GenericRepository
from propman.schemas.file_upload import (
    FileDeleteResponse, StoredFileInfo, StoredFileList, UploadedFile, UploadResult
)
from propman.utils.exceptions import BadRequestError, NotFoundError, StorageError

logger = logging.getLogger(__name__)

# Prefix of the relative paths stored in file_uploads.path
STORED_ROOT = "Uploads"
MAX_FILE_NAME_LENGTH = 255
SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")

_RESERVED = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def sanitize_file_name(name: Optional[str], fallback: str = "file") -> str:
    """Strip directories and reserved characters, capping the length but keeping the extension"""
    name = (name or "").replace("\\", "/").split("/")[-1]
    name = _RESERVED.sub("_", name).strip().strip(".")
    if not name:
        return fallback
    if len(name) > MAX_FILE_NAME_LENGTH:
        stem, ext = os.path.splitext(name)
        if len(ext) >= MAX_FILE_NAME_LENGTH:
            ext = ""
        name = stem[:MAX_FILE_NAME_LENGTH - len(ext)] + ext
    return name


def format_size(size: int) -> str:
    """Human readable size: 1536 -> '1.5 KB'"""
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[unit]}"


def stored_file_path(row: FileUpload) -> Path:
    """Location of an uploaded file under UPLOADS_DIR.

    Only the file name is taken from the stored path; the directories are
    rebuilt from ``form_name`` and ``form_id``.
    """
    file_name = sanitize_file_name(PurePosixPath((row.path or "").replace("\\", "/")).name)
    table = sanitize_file_name(row.form_name, fallback="table")
    return Path(settings.UPLOADS_DIR) / table / str(row.form_id) / file_name


class UploadService:
    def __init__(self, db: Session):
        self.db = db
        self.uploads = GenericRepository(db, FileUpload)

    async def store_files(
        self,
        form_id: int,
        table_name: Optional[str],
        files: List[UploadFile],
        actor: Optional[str] = None
    ) -> UploadResult:
        """Write files under <UPLOADS_DIR>/<table>/<id>/ and record one row per file.

        Empty files are skipped. On any failure the <id> folder is removed and
        the transaction rolled back.
        """
        if form_id <= 0:
            raise BadRequestError("A valid id is required.")
        if not table_name or not table_name.strip():
            raise BadRequestError("Table name is required.")
        if not files:
            raise BadRequestError("No files uploaded.")

        table = sanitize_file_name(table_name.strip(), fallback="table")
        target_dir = Path(settings.UPLOADS_DIR) / table / str(form_id)
        stored: List[FileUpload] = []

        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            for upload in files:
                file_name = sanitize_file_name(upload.filename)
                target = target_dir / file_name
                with open(target, "wb") as fh:
                    await run_in_threadpool(shutil.copyfileobj, upload.file, fh)
                if target.stat().st_size == 0:
                    target.unlink()
                    logger.info(f"Skipping empty upload {upload.filename}")
                    continue

                row = FileUpload(
                    form_id=form_id,
                    form_name=table_name.strip(),
                    path=f"{STORED_ROOT}/{table}/{form_id}/{file_name}",
                    uploaded_date=datetime.now(timezone.utc),
                )
                stored.append(self.uploads.add(row, actor, commit=False))
            self.db.commit()
        except (OSError, SQLAlchemyError) as e:
            self.db.rollback()
            shutil.rmtree(target_dir, ignore_errors=True)
            logger.error(f"Upload to {target_dir} failed: {str(e)}")
            raise StorageError(f"Error uploading files: {str(e)}")

        logger.info(f"Stored {len(stored)} file(s) for {table}/{form_id}")
        return UploadResult(
            message=f"{len(stored)} file(s) uploaded successfully.",
            uploaded_files=[UploadedFile.model_validate(row) for row in stored],
        )

    async def list_files(self, form_id: Optional[int], form_name: Optional[str]) -> StoredFileList:
        """Uploaded files of one form record, with their size on disk"""
        if not form_id or form_id <= 0 or not form_name or not form_name.strip():
            raise BadRequestError("A valid id and form name are required.")

        rows = self.uploads.get_all(
            FileUpload.form_id == form_id, FileUpload.form_name == form_name.strip()
        )

        files = []
        for row in rows:
            info = StoredFileInfo(
                id=row.id,
                file_name=PurePosixPath(row.path or "").name,
                path=row.path,
                uploaded_date=row.uploaded_date,
            )
            disk_path = stored_file_path(row)
            if row.path and disk_path.is_file():
                info.size = disk_path.stat().st_size
                info.mime_type = mimetypes.guess_type(disk_path.name)[0] or "application/octet-stream"
            else:
                info.error = "File not found on disk"
            info.size_formatted = format_size(info.size)
            files.append(info)

        return StoredFileList(files=files)

    async def delete_file(self, file_id: int, actor: Optional[str] = None) -> FileDeleteResponse:
        if file_id <= 0:
            raise BadRequestError("Invalid file id.")

        row = self.uploads.get_by_id(file_id)
        if not row:
            raise NotFoundError("File not found.")
        self.uploads.delete(row, actor)
        return FileDeleteResponse(message="File deleted successfully.", id=file_id)
