from .common import *
from .lookup import *
from .user import *
from .auth import *
from .rental_property import *
from .property_group import *
from .revenue_rate import *
from .contract import *
from .tenant import *
from .file_upload import *
from .user_note import *

__all__ = [
    # Common
    "EntityPayload",
    "AuditPayload",
    "AuditResponse",
    "Money",
    "LenientMoney",

    # Lookups
    "CommandCreate", "CommandUpdate", "CommandResponse",
    "BaseCreate", "BaseUpdate", "BaseResponse",
    "ClassCreate", "ClassUpdate", "ClassResponse",
    "RoleCreate", "RoleUpdate", "RoleResponse",
    "UnitCreate", "UnitUpdate", "UnitResponse",
    "NatureCreate", "NatureUpdate", "NatureResponse",

    # Users and auth
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "LoginRequest",
    "LoginResponse",
    "RefreshResponse",

    # Rental properties
    "RentalPropertyCreate",
    "RentalPropertyUpdate",
    "RentalPropertyResponse",
    "RentalPropertyDetail",

    # Property groups
    "PropertyGroupCreate",
    "PropertyGroupUpdate",
    "PropertyGroupResponse",
    "PropertyGroupDetail",
    "PropertyGroupCreateResponse",
    "PropertyGroupLinkingCreate",
    "PropertyGroupLinkingUpdate",
    "PropertyGroupLinkingResponse",
    "GroupLinkResponse",

    # Revenue rates
    "RevenueRateCreate",
    "RevenueRateUpdate",
    "RevenueRateResponse",
    "RevenueRateDetail",

    # Contracts
    "ContractCreate",
    "ContractUpdate",
    "ContractResponse",
    "ContractDetail",

    # Tenants
    "TenantCreate",
    "TenantUpdate",
    "TenantResponse",

    # Uploads
    "FileUploadCreate",
    "FileUploadUpdate",
    "FileUploadResponse",
    "UploadedFile",
    "UploadResult",
    "StoredFileInfo",
    "StoredFileList",
    "FileDeleteResponse",

    # User notes
    "UserNoteCreate",
    "UserNoteUpdate",
    "UserNoteResponse",
]
