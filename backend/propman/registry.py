"""Entity registry for the generic /api/{entity_name} routes"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel

from propman.core.security import effective_iterations, get_password_hash
from propman.db.base import Base
from propman.models import (
    Command, AirBase, PropertyClass, Role, Unit, Nature, User, RentalProperty,
    PropertyGroup, PropertyGroupLinking, RevenueRate, Contract, Tenant, FileUpload
)
from propman.schemas import (
    CommandUpdate, CommandResponse, BaseUpdate, BaseResponse, ClassUpdate, ClassResponse,
    RoleUpdate, RoleResponse, UnitUpdate, UnitResponse, NatureUpdate, NatureResponse,
    UserUpdate, UserResponse, RentalPropertyUpdate, RentalPropertyResponse,
    PropertyGroupUpdate, PropertyGroupResponse, PropertyGroupLinkingUpdate,
    PropertyGroupLinkingResponse, RevenueRateUpdate, RevenueRateResponse,
    ContractUpdate, ContractResponse, TenantUpdate, TenantResponse,
    FileUploadUpdate, FileUploadResponse
)
from propman.schemas.common import normalize_key

logger = logging.getLogger(__name__)

WriteHook = Callable[[Any, BaseModel], None]


def pluralize(name: str) -> str:
    if name.endswith("y") and len(name) > 1 and name[-2].lower() not in "aeiou":
        return name[:-1] + "ies"
    if name.endswith(("s", "x", "ch", "sh")):
        return name + "es"
    return name + "s"


@dataclass
class EntityHandler:
    """Everything the generic routes need to serve one entity type"""
    name: str
    model: Type[Base]
    payload_schema: Type[BaseModel]
    response_schema: Type[BaseModel]
    on_write: Optional[WriteHook] = None
    plural: str = ""
    unique_fields: Tuple[str, ...] = ()

    def __post_init__(self):
        if not self.plural:
            self.plural = pluralize(self.name)

    @property
    def route(self) -> str:
        return f"/api/{self.plural}"


class EntityRegistry:
    def __init__(self):
        self._handlers: Dict[str, EntityHandler] = {}
        self._lookup: Dict[str, EntityHandler] = {}

    def register(self, handler: EntityHandler) -> EntityHandler:
        if handler.name in self._handlers:
            raise ValueError(f"Entity {handler.name} is already registered")
        self._handlers[handler.name] = handler
        self._lookup[normalize_key(handler.name)] = handler
        self._lookup[normalize_key(handler.plural)] = handler
        logger.debug(f"Registered entity {handler.name} at {handler.route}")
        return handler

    def resolve(self, name: str) -> Optional[EntityHandler]:
        """Find a handler by singular or plural name, ignoring case, '-' and '_'"""
        if not name:
            return None
        return self._lookup.get(normalize_key(name))

    def handlers(self) -> List[EntityHandler]:
        return list(self._handlers.values())

    def routes(self) -> List[str]:
        return sorted(handler.route for handler in self._handlers.values())


def hash_user_password(user: User, payload: BaseModel) -> None:
    """Turn a plain ``password`` from the payload into stored credentials"""
    password = getattr(payload, "password", None)
    if not password:
        return
    iterations = effective_iterations(payload.password_iterations or user.password_iterations)
    hashed = get_password_hash(password, iterations)
    user.password = hashed.hash
    user.password_salt = hashed.salt
    user.password_iterations = hashed.iterations
    user.password_attempts = 0


registry = EntityRegistry()

for _handler in (
    EntityHandler("Command", Command, CommandUpdate, CommandResponse),
    EntityHandler("Base", AirBase, BaseUpdate, BaseResponse),
    EntityHandler("Class", PropertyClass, ClassUpdate, ClassResponse),
    EntityHandler("Role", Role, RoleUpdate, RoleResponse),
    EntityHandler("Unit", Unit, UnitUpdate, UnitResponse),
    EntityHandler("Nature", Nature, NatureUpdate, NatureResponse),
    EntityHandler(
        "User", User, UserUpdate, UserResponse,
        on_write=hash_user_password, unique_fields=("username",)
    ),
    EntityHandler("RentalProperty", RentalProperty, RentalPropertyUpdate, RentalPropertyResponse),
    EntityHandler("PropertyGroup", PropertyGroup, PropertyGroupUpdate, PropertyGroupResponse),
    EntityHandler(
        "PropertyGroupLinking", PropertyGroupLinking,
        PropertyGroupLinkingUpdate, PropertyGroupLinkingResponse
    ),
    EntityHandler("RevenueRate", RevenueRate, RevenueRateUpdate, RevenueRateResponse),
    EntityHandler("Contract", Contract, ContractUpdate, ContractResponse),
    EntityHandler("Tenant", Tenant, TenantUpdate, TenantResponse),
    EntityHandler("FileUpload", FileUpload, FileUploadUpdate, FileUploadResponse),
):
    registry.register(_handler)
