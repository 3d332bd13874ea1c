from typing import Optional
from sqlalchemy import String, Boolean, Text
from sqlalchemy.orm import Mapped, mapped_column
from propman.db.base import BaseEntity


class Tenant(BaseEntity):
    __tablename__ = "tenants"
    __entity_name__ = "Tenant"
    tenant_no: Mapped[str] = mapped_column(String(100), nullable=False, default="", index=True)
    owner_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    prefix: Mapped[Optional[str]] = mapped_column(String(20))
    business_name: Mapped[Optional[str]] = mapped_column(String(255))
    address: Mapped[Optional[str]] = mapped_column(Text)
    province: Mapped[Optional[str]] = mapped_column(String(100))
    city: Mapped[Optional[str]] = mapped_column(String(100))
    telephone_no: Mapped[Optional[str]] = mapped_column(String(50))
    cell_no: Mapped[Optional[str]] = mapped_column(String(50))
    ntn_no: Mapped[Optional[str]] = mapped_column(String(50))
    gst_no: Mapped[Optional[str]] = mapped_column(String(50))
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    remarks: Mapped[Optional[str]] = mapped_column(Text)
