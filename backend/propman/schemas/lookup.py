from typing import Optional
from pydantic import Field

from propman.schemas.common import AuditPayload, AuditResponse, LenientMoney


class NamedLookupBase(AuditPayload):
    name: Optional[str] = Field(None, max_length=150)


class CommandCreate(NamedLookupBase):
    pass


class CommandUpdate(CommandCreate):
    id: Optional[int] = 0


class CommandResponse(AuditResponse):
    name: Optional[str] = None


class BaseCreate(NamedLookupBase):
    cmd_id: Optional[int] = None


class BaseUpdate(BaseCreate):
    id: Optional[int] = 0


class BaseResponse(AuditResponse):
    name: Optional[str] = None
    cmd_id: Optional[int] = None


class ClassCreate(NamedLookupBase):
    pass


class ClassUpdate(ClassCreate):
    id: Optional[int] = 0


class ClassResponse(AuditResponse):
    name: Optional[str] = None


class RoleCreate(NamedLookupBase):
    pass


class RoleUpdate(RoleCreate):
    id: Optional[int] = 0


class RoleResponse(AuditResponse):
    name: Optional[str] = None


class UnitCreate(NamedLookupBase):
    base_id: Optional[int] = None


class UnitUpdate(UnitCreate):
    id: Optional[int] = 0


class UnitResponse(AuditResponse):
    name: Optional[str] = None
    base_id: Optional[int] = None


class NatureCreate(NamedLookupBase):
    description: Optional[str] = None
    status: Optional[int] = Field(None, ge=0, le=255)
    rental_val: LenientMoney = None
    annual_rent: LenientMoney = None
    govt_share: Optional[int] = Field(None, ge=0, le=255)
    paf_share: Optional[int] = Field(None, ge=0, le=255)
    prop_number: Optional[str] = Field(None, max_length=50)


class NatureUpdate(NatureCreate):
    id: Optional[int] = 0


class NatureResponse(AuditResponse):
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[int] = None
    rental_val: LenientMoney = None
    annual_rent: LenientMoney = None
    govt_share: Optional[int] = None
    paf_share: Optional[int] = None
    prop_number: Optional[str] = None
