from typing import Optional
from decimal import Decimal
from sqlalchemy import String, Integer, Numeric, Boolean, Text, Index
from sqlalchemy.orm import Mapped, mapped_column
from propman.db.base import BaseEntity


class RentalProperty(BaseEntity):
    __tablename__ = "rental_properties"
    __entity_name__ = "RentalProperty"
    __table_args__ = (
        Index("ix_rental_properties_cmd_id", "cmd_id"),
        Index("ix_rental_properties_base_id", "base_id"),
        Index("ix_rental_properties_class_id", "class_id"),
    )
    cmd_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    base_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    class_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    p_id: Mapped[Optional[str]] = mapped_column(String(100))
    uom: Mapped[Optional[str]] = mapped_column(String(50))
    area: Mapped[Optional[Decimal]] = mapped_column(Numeric(18, 2))
    location: Mapped[Optional[str]] = mapped_column(String(255))
    remarks: Mapped[Optional[str]] = mapped_column(Text)
    status: Mapped[Optional[bool]] = mapped_column(Boolean)
