from typing import Optional
from datetime import datetime
from sqlalchemy import String, Integer, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column
from propman.db.base import BaseEntity


class FileUpload(BaseEntity):
    __tablename__ = "file_uploads"
    __entity_name__ = "FileUpload"
    __table_args__ = (
        Index("ix_file_uploads_form", "form_id", "form_name"),
    )
    form_id: Mapped[int] = mapped_column(Integer, nullable=False)
    uploaded_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    path: Mapped[Optional[str]] = mapped_column(String(500))
    form_name: Mapped[Optional[str]] = mapped_column(String(150))
