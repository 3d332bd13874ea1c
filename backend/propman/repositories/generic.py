import logging
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from propman.db.base import (
    ACTION_CREATE, ACTION_DELETE, ACTION_UPDATE, AUDIT_FIELDS, Base
)
from propman.db.session import INCLUDE_DELETED, not_deleted
from propman.repositories.reflection import (
    attribute_names, is_entity_deleted, primary_key_attribute, soft_delete_attribute
)

logger = logging.getLogger(__name__)

SYSTEM_ACTOR = "System"

T = TypeVar("T", bound=Base)


class GenericRepository(Generic[T]):
    """CRUD over one mapped entity type with audit stamping and soft delete"""

    def __init__(self, db: Session, model: Type[T]):
        self.db = db
        self.model = model
        self.pk_name = primary_key_attribute(model)
        self.soft_delete_name = soft_delete_attribute(model)

    @property
    def pk_column(self):
        return getattr(self.model, self.pk_name)

    def _select(self, include_deleted: bool = False):
        stmt = select(self.model)
        if include_deleted:
            stmt = stmt.execution_options(**{INCLUDE_DELETED: True})
        return stmt

    def get_all(self, *criteria, include_deleted: bool = False) -> List[T]:
        stmt = self._select(include_deleted).where(*criteria).order_by(self.pk_column)
        return list(self.db.scalars(stmt).all())

    def get_page(self, page_number: int, page_size: int, *criteria, order_by=None) -> Tuple[List[T], int]:
        """Page of live rows matching ``criteria``, newest key first, plus the total count"""
        count_stmt = select(func.count()).select_from(self.model).where(*criteria)
        if self.soft_delete_name:
            count_stmt = count_stmt.where(not_deleted(self.model))
        total = self.db.scalar(count_stmt.execution_options(**{INCLUDE_DELETED: True}))
        stmt = (
            self._select()
            .where(*criteria)
            .order_by(order_by if order_by is not None else self.pk_column.desc())
            .offset((page_number - 1) * page_size)
            .limit(page_size)
        )
        return list(self.db.scalars(stmt).all()), total or 0

    def get_by_id(self, entity_id: Any, include_deleted: bool = False) -> Optional[T]:
        stmt = self._select(include_deleted).where(self.pk_column == entity_id)
        entity = self.db.scalars(stmt).first()
        if entity is None:
            return None
        # Objects already in the identity map skip the SELECT filter
        if not include_deleted and is_entity_deleted(entity):
            return None
        return entity

    def _stamp(self, entity: T, action: str, actor: Optional[str]) -> None:
        if not hasattr(entity, "action"):
            return
        entity.action = action
        entity.action_date = datetime.now(timezone.utc)
        entity.action_by = actor or entity.action_by or SYSTEM_ACTOR

    def add(self, entity: T, actor: Optional[str] = None, commit: bool = True) -> T:
        self._stamp(entity, ACTION_CREATE, actor)
        if self.soft_delete_name:
            setattr(entity, self.soft_delete_name, False)
        self.db.add(entity)
        if commit:
            self.db.commit()
            self.db.refresh(entity)
        else:
            self.db.flush()
        logger.info(f"Created {self.model.__name__} {getattr(entity, self.pk_name)}")
        return entity

    def writable_attributes(self) -> List[str]:
        protected = {self.pk_name, *AUDIT_FIELDS, *getattr(self.model, "__update_protected__", ())}
        return [name for name in attribute_names(self.model) if name not in protected]

    def update(self, entity: T, values: Dict[str, Any], actor: Optional[str] = None) -> T:
        """Copy writable values onto the entity and stamp UPDATE.

        Primary key, audit columns and the model's protected attributes are
        never overwritten from ``values``.
        """
        writable = set(self.writable_attributes())
        for key, value in values.items():
            if key in writable:
                setattr(entity, key, value)
        self._stamp(entity, ACTION_UPDATE, actor)
        self.db.commit()
        self.db.refresh(entity)
        logger.info(f"Updated {self.model.__name__} {getattr(entity, self.pk_name)}")
        return entity

    def delete(self, entity: T, actor: Optional[str] = None) -> T:
        """Soft delete when the model has a flag; hard delete otherwise"""
        entity_id = getattr(entity, self.pk_name)
        if self.soft_delete_name:
            setattr(entity, self.soft_delete_name, True)
            self._stamp(entity, ACTION_DELETE, actor)
            self.db.commit()
            logger.info(f"Soft deleted {self.model.__name__} {entity_id}")
        else:
            self.db.delete(entity)
            self.db.commit()
            logger.info(f"Deleted {self.model.__name__} {entity_id}")
        return entity
