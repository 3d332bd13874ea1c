from .lookup import Command, AirBase, PropertyClass, Role, Unit, Nature
from .user import User
from .rental_property import RentalProperty
from .property_group import PropertyGroup, PropertyGroupLinking
from .revenue_rate import RevenueRate
from .contract import Contract
from .tenant import Tenant
from .file_upload import FileUpload
from .user_note import UserNote

__all__ = [
    "Command",
    "AirBase",
    "PropertyClass",
    "Role",
    "Unit",
    "Nature",
    "User",
    "RentalProperty",
    "PropertyGroup",
    "PropertyGroupLinking",
    "RevenueRate",
    "Contract",
    "Tenant",
    "FileUpload",
    "UserNote",
]
