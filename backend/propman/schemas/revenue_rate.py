from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from propman.schemas.common import AuditPayload, AuditResponse, Money


class RevenueRateFields(BaseModel):
    property_id: int = 0
    applicable_date: Optional[datetime] = None
    rate: Optional[Money] = None
    attachments: Optional[str] = None
    status: Optional[bool] = None


class RevenueRateCreate(AuditPayload, RevenueRateFields):
    pass


class RevenueRateUpdate(RevenueRateCreate):
    id: Optional[int] = 0


class RevenueRateResponse(AuditResponse, RevenueRateFields):
    pass


class RevenueRateDetail(RevenueRateResponse):
    """Revenue rate with the location details of its rental property"""
    cmd_id: Optional[int] = None
    cmd_name: str = ""
    base_id: Optional[int] = None
    base_name: str = ""
    class_id: Optional[int] = None
    class_name: str = ""
    property_identifier: Optional[str] = None
    uom: Optional[str] = None
    area: Optional[Money] = None
    location: Optional[str] = None
    remarks: Optional[str] = None
