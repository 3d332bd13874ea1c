from typing import Optional
from datetime import datetime
from sqlalchemy import String, Integer, SmallInteger, LargeBinary, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from propman.db.base import BaseEntity


class User(BaseEntity):
    __tablename__ = "users"
    __entity_name__ = "User"
    __update_protected__ = (
        "password",
        "password_salt",
        "password_iterations",
        "password_attempts",
        "refresh_token",
        "refresh_token_expires_at",
    )
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    pak_no: Mapped[Optional[str]] = mapped_column(String(50))
    name: Mapped[Optional[str]] = mapped_column(String(150))
    password: Mapped[Optional[bytes]] = mapped_column(LargeBinary)
    password_salt: Mapped[Optional[bytes]] = mapped_column(LargeBinary)
    password_iterations: Mapped[Optional[int]] = mapped_column(Integer)
    password_attempts: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    refresh_token: Mapped[Optional[str]] = mapped_column(String(128), index=True)
    refresh_token_expires_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    rank: Mapped[Optional[str]] = mapped_column(String(50))
    category: Mapped[Optional[str]] = mapped_column(String(50))
    unit_id: Mapped[Optional[int]] = mapped_column(Integer)
    base_id: Mapped[Optional[int]] = mapped_column(Integer)
    cmd_id: Mapped[Optional[int]] = mapped_column(Integer)
    status: Mapped[Optional[int]] = mapped_column(SmallInteger, default=1)
