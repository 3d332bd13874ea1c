# propman/db/base.py
from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

ACTION_CREATE = "CREATE"
ACTION_UPDATE = "UPDATE"
ACTION_DELETE = "DELETE"

AUDIT_FIELDS = ("action_date", "action_by", "action", "is_deleted")


class Base(DeclarativeBase):
    pass


class BaseEntity(Base):
    """Shared identity and audit columns for every soft-deletable table."""
    __abstract__ = True

    # Attributes the generic update keeps untouched (credentials and the like)
    __update_protected__: tuple = ()

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    action_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    action_by: Mapped[Optional[str]] = mapped_column(String(100))
    action: Mapped[Optional[str]] = mapped_column(String(20))
    is_deleted: Mapped[Optional[bool]] = mapped_column(Boolean, default=False)
