from typing import Optional
from pydantic import BaseModel, Field

from propman.schemas.common import AuditPayload, AuditResponse, Money


class RentalPropertyFields(BaseModel):
    cmd_id: int = 0
    base_id: int = 0
    class_id: int = 0
    p_id: Optional[str] = Field(None, max_length=100)
    uom: Optional[str] = Field(None, max_length=50)
    area: Optional[Money] = None
    location: Optional[str] = Field(None, max_length=255)
    remarks: Optional[str] = None
    status: Optional[bool] = None


class RentalPropertyCreate(AuditPayload, RentalPropertyFields):
    pass


class RentalPropertyUpdate(RentalPropertyCreate):
    id: Optional[int] = 0


class RentalPropertyResponse(AuditResponse, RentalPropertyFields):
    pass


class RentalPropertyDetail(RentalPropertyResponse):
    cmd_name: str = ""
    base_name: str = ""
    class_name: str = ""
