from typing import Optional
from pydantic import BaseModel, Field

from propman.schemas.common import AuditPayload, AuditResponse


class TenantFields(BaseModel):
    tenant_no: str = Field("", max_length=100)
    owner_name: str = Field("", max_length=255)
    prefix: Optional[str] = Field(None, max_length=20)
    business_name: Optional[str] = Field(None, max_length=255)
    address: Optional[str] = None
    province: Optional[str] = Field(None, max_length=100)
    city: Optional[str] = Field(None, max_length=100)
    telephone_no: Optional[str] = Field(None, max_length=50)
    cell_no: Optional[str] = Field(None, max_length=50)
    ntn_no: Optional[str] = Field(None, max_length=50)
    gst_no: Optional[str] = Field(None, max_length=50)
    status: bool = False
    remarks: Optional[str] = None


class TenantCreate(AuditPayload, TenantFields):
    pass


class TenantUpdate(TenantCreate):
    id: Optional[int] = 0


class TenantResponse(AuditResponse, TenantFields):
    pass
