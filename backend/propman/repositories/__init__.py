from .generic import GenericRepository, SYSTEM_ACTOR
from .reflection import (
    resolve_primary_key_name, attribute_names, primary_key_attribute, soft_delete_attribute,
    is_marked_deleted, is_entity_deleted, reconcile_route_id
)

__all__ = [
    "GenericRepository",
    "SYSTEM_ACTOR",
    "resolve_primary_key_name",
    "attribute_names",
    "primary_key_attribute",
    "soft_delete_attribute",
    "is_marked_deleted",
    "is_entity_deleted",
    "reconcile_route_id",
]
