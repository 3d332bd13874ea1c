from typing import List, Optional
from pydantic import BaseModel, Field

from propman.schemas.common import AuditPayload, AuditResponse, Money


class PropertyGroupFields(BaseModel):
    cmd_id: int = 0
    base_id: int = 0
    class_id: int = 0
    g_id: Optional[str] = Field(None, max_length=100)
    uom: Optional[str] = Field(None, max_length=50)
    area: Optional[Money] = None
    location: Optional[str] = Field(None, max_length=255)
    remarks: Optional[str] = None
    status: Optional[bool] = None


class PropertyGroupCreate(AuditPayload, PropertyGroupFields):
    # Ids of rental properties to link to the new group
    property_group_linkings: Optional[List[int]] = None


class PropertyGroupUpdate(AuditPayload, PropertyGroupFields):
    id: Optional[int] = 0


class PropertyGroupResponse(AuditResponse, PropertyGroupFields):
    pass


class PropertyGroupDetail(PropertyGroupResponse):
    cmd_name: str = ""
    base_name: str = ""
    class_name: str = ""


class PropertyGroupCreateResponse(BaseModel):
    property_group: PropertyGroupResponse
    linked_properties_count: int


class PropertyGroupLinkingFields(BaseModel):
    grp_id: int = 0
    prop_id: int = 0
    area: Optional[Money] = None
    status: Optional[bool] = None


class PropertyGroupLinkingCreate(AuditPayload, PropertyGroupLinkingFields):
    pass


class PropertyGroupLinkingUpdate(PropertyGroupLinkingCreate):
    id: Optional[int] = 0


class PropertyGroupLinkingResponse(AuditResponse, PropertyGroupLinkingFields):
    pass


class GroupLinkResponse(BaseModel):
    id: int
    grp_id: int
    prop_id: int
    group_name: str = ""
    property_name: str = ""
