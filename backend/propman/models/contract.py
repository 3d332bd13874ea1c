from typing import Optional
from datetime import datetime
from decimal import Decimal
from sqlalchemy import String, Integer, Numeric, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from propman.db.base import BaseEntity


class Contract(BaseEntity):
    __tablename__ = "contracts"
    __entity_name__ = "Contract"
    contract_no: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    cmd_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    base_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    class_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    grp_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    tenant_no: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    business_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    nature_of_business: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    contract_start_date: Mapped[Optional[datetime]] = mapped_column(DateTime)
    contract_end_date: Mapped[Optional[datetime]] = mapped_column(DateTime)
    commercial_operation_date: Mapped[Optional[datetime]] = mapped_column(DateTime)
    initial_rent_pm: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False, default=0)
    initial_rent_pa: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False, default=0)
    payment_term_months: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    increase_rate_percent: Mapped[Optional[Decimal]] = mapped_column(Numeric(9, 2))
    increase_interval_months: Mapped[Optional[int]] = mapped_column(Integer)
    sd_rate_months: Mapped[Optional[int]] = mapped_column(Integer)
    security_deposit_amount: Mapped[Optional[Decimal]] = mapped_column(Numeric(18, 2))
    rental_value: Mapped[Optional[Decimal]] = mapped_column(Numeric(18, 2))
    govt_share_condition: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    paf_share: Mapped[Optional[Decimal]] = mapped_column(Numeric(9, 2))
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
