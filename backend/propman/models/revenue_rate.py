from typing import Optional
from datetime import datetime
from decimal import Decimal
from sqlalchemy import Integer, Numeric, Boolean, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from propman.db.base import BaseEntity


class RevenueRate(BaseEntity):
    __tablename__ = "revenue_rates"
    __entity_name__ = "RevenueRate"
    property_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    applicable_date: Mapped[Optional[datetime]] = mapped_column(DateTime)
    rate: Mapped[Optional[Decimal]] = mapped_column(Numeric(18, 2))
    attachments: Mapped[Optional[str]] = mapped_column(Text)
    status: Mapped[Optional[bool]] = mapped_column(Boolean)
