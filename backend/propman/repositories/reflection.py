"""Reflection helpers used by the generic repository.

Entities are plain SQLAlchemy mapped classes. The repository never hard-codes
their key or soft-delete columns; it discovers them from the mapper so that a
new entity only needs a model, schemas and a registry entry.
"""

from typing import Any, List, Optional, Sequence

from sqlalchemy import inspect

from propman.utils.exceptions import BadRequestError

SOFT_DELETE_ATTRIBUTE = "is_deleted"


def _normalize(name: str) -> str:
    return name.replace("_", "").lower()


def resolve_primary_key_name(type_name: str, attribute_names: Sequence[str]) -> str:
    """Pick the key attribute for a type by naming convention.

    Candidates, in order: ``<type_name>Id`` (``rental_property_id`` and
    ``RentalPropertyId`` both match ``RentalProperty``), ``id``, then any
    attribute ending in ``id``. The first match wins, so a type with several
    ``*_id`` attributes and no canonical key resolves to whichever comes first.
    """
    names = list(attribute_names)
    type_key = _normalize(type_name) + "id"

    for name in names:
        if _normalize(name) == type_key:
            return name
    for name in names:
        if _normalize(name) == "id":
            return name
    for name in names:
        if _normalize(name).endswith("id"):
            return name

    raise LookupError(f"No primary key property found on {type_name}.")


def attribute_names(model) -> List[str]:
    """Mapped column attribute names in declaration order"""
    return [attr.key for attr in inspect(model).column_attrs]


def primary_key_attribute(model) -> str:
    type_name = getattr(model, "__entity_name__", model.__name__)
    return resolve_primary_key_name(type_name, attribute_names(model))


def soft_delete_attribute(model) -> Optional[str]:
    """Name of the soft-delete flag if the model maps one"""
    if SOFT_DELETE_ATTRIBUTE in attribute_names(model):
        return SOFT_DELETE_ATTRIBUTE
    return None


def is_marked_deleted(value: Any) -> bool:
    """Interpret a tri-state soft-delete flag; NULL and false mean live"""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    return False


def is_entity_deleted(entity) -> bool:
    attr = soft_delete_attribute(type(entity))
    if attr is None:
        return False
    return is_marked_deleted(getattr(entity, attr))


def reconcile_route_id(body_id: Optional[int], route_id: int) -> int:
    """Route id wins when the body carries none; a different body id is an error"""
    if body_id is None or body_id == 0:
        return route_id
    if int(body_id) != route_id:
        raise BadRequestError("ID mismatch.")
    return route_id
