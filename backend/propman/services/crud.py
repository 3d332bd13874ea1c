"""Generic create/read/update/delete over registered entities"""

import logging
from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select
from sqlalchemy.orm import Session

from propman.core.config import settings
from propman.db.session import INCLUDE_DELETED
from propman.registry import EntityHandler
from propman.repositories import GenericRepository, reconcile_route_id
from propman.services.enrichment import EnrichmentService
from propman.utils.exceptions import BadRequestError, ConflictError, NotFoundError

logger = logging.getLogger(__name__)


def normalize_paging(
    page_number: Optional[int],
    page_size: Optional[int],
    default_size: Optional[int] = None,
    max_size: Optional[int] = None,
) -> Tuple[int, int]:
    """Clamp paging input: non-positive values fall back to the defaults"""
    default_size = default_size or settings.DEFAULT_PAGE_SIZE
    max_size = max_size or settings.MAX_PAGE_SIZE
    page_number = page_number if page_number and page_number > 0 else 1
    page_size = page_size if page_size and page_size > 0 else default_size
    return page_number, min(page_size, max_size)


def paging_headers(total: int, page_number: int, page_size: int) -> Dict[str, str]:
    return {
        "X-Total-Count": str(total),
        "X-Page-Number": str(page_number),
        "X-Page-Size": str(page_size),
    }


def parse_payload(schema: Type[BaseModel], body: Any) -> BaseModel:
    """Validate a raw JSON body, reporting failures as bad requests"""
    if not isinstance(body, dict):
        raise BadRequestError("Invalid payload.")
    try:
        return schema.model_validate(body)
    except PydanticValidationError as e:
        logger.warning(f"Rejected {schema.__name__} payload: {e.error_count()} error(s)")
        raise BadRequestError(f"Invalid payload: {e.errors(include_url=False)}")


class CrudService:
    """CRUD for one entity type, optionally driven by a registry handler"""

    def __init__(self, db: Session, model: Type[Any], response_schema: Type[BaseModel],
                 on_write=None, unique_fields: Tuple[str, ...] = ()):
        self.db = db
        self.model = model
        self.response_schema = response_schema
        self.on_write = on_write
        self.unique_fields = unique_fields
        self.repository = GenericRepository(db, model)

    @classmethod
    def for_handler(cls, db: Session, handler: EntityHandler) -> "CrudService":
        return cls(db, handler.model, handler.response_schema, handler.on_write, handler.unique_fields)

    def _values(self, payload: BaseModel) -> Dict[str, Any]:
        writable = set(self.repository.writable_attributes())
        return {key: value for key, value in payload.model_dump().items() if key in writable}

    def _check_unique(self, values: Dict[str, Any], entity_id: Optional[int] = None) -> None:
        """Reject values already taken by another row, soft-deleted rows included"""
        for field in self.unique_fields:
            value = values.get(field)
            if value is None:
                continue
            stmt = (
                select(self.repository.pk_column)
                .where(getattr(self.model, field) == value)
                .execution_options(**{INCLUDE_DELETED: True})
            )
            if entity_id is not None:
                stmt = stmt.where(self.repository.pk_column != entity_id)
            if self.db.scalars(stmt).first() is not None:
                name = getattr(self.model, "__entity_name__", self.model.__name__)
                logger.warning(f"Rejected duplicate {name}.{field}")
                raise ConflictError(f"{name} with this {field} already exists.")

    def _actor(self, payload: BaseModel, actor: Optional[str]) -> Optional[str]:
        return actor or getattr(payload, "action_by", None)

    def enrich(self, entities: List[Any]) -> List[Dict[str, Any]]:
        return EnrichmentService(self.db).enrich(self.model, self.response_schema, entities)

    async def list_all(self) -> List[Dict[str, Any]]:
        """All live rows, enriched"""
        return self.enrich(self.repository.get_all())

    async def list_page(self, page_number: Optional[int], page_size: Optional[int]
                        ) -> Tuple[List[Dict[str, Any]], Dict[str, str]]:
        """One page of live rows, newest first, with the paging headers"""
        page_number, page_size = normalize_paging(page_number, page_size)
        items, total = self.repository.get_page(page_number, page_size)
        return self.enrich(items), paging_headers(total, page_number, page_size)

    def get_entity(self, entity_id: int) -> Any:
        entity = self.repository.get_by_id(entity_id)
        if entity is None:
            name = getattr(self.model, "__entity_name__", self.model.__name__)
            raise NotFoundError(f"{name} not found.")
        return entity

    async def get(self, entity_id: int) -> Dict[str, Any]:
        return self.enrich([self.get_entity(entity_id)])[0]

    async def create(self, payload: BaseModel, actor: Optional[str] = None) -> Any:
        values = self._values(payload)
        self._check_unique(values)
        entity = self.model(**values)
        if self.on_write:
            self.on_write(entity, payload)
        return self.repository.add(entity, self._actor(payload, actor))

    async def update(self, entity_id: int, payload: BaseModel, actor: Optional[str] = None) -> Any:
        """Replace the writable fields of a live row"""
        reconcile_route_id(getattr(payload, "id", None), entity_id)
        entity = self.get_entity(entity_id)
        values = self._values(payload)
        self._check_unique(values, entity_id)
        if self.on_write:
            self.on_write(entity, payload)
        return self.repository.update(entity, values, self._actor(payload, actor))

    async def delete(self, entity_id: int, actor: Optional[str] = None) -> Any:
        entity = self.get_entity(entity_id)
        return self.repository.delete(entity, actor)
