"""Generic CRUD routes for every registered entity"""

from typing import Annotated, Any, Optional
from fastapi import APIRouter, Body, Depends, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from propman.db.session import get_db
from propman.dependencies import get_token_username
from propman.registry import EntityHandler, registry
from propman.services.crud import CrudService, parse_payload
from propman.utils.exceptions import NotFoundError

router = APIRouter(prefix="/api", tags=["Entities"])


def get_entity_handler(entity_name: str) -> EntityHandler:
    """Resolve the {entity_name} path segment to a registered entity"""
    handler = registry.resolve(entity_name)
    if handler is None:
        raise NotFoundError(f"Entity '{entity_name}' not found.")
    return handler


@router.get("/{entity_name}")
async def list_entities(
    handler: Annotated[EntityHandler, Depends(get_entity_handler)],
    db: Annotated[Session, Depends(get_db)]
):
    """List live rows of an entity"""
    return await CrudService.for_handler(db, handler).list_all()


@router.get("/{entity_name}/{entity_id}")
async def get_entity(
    entity_id: int,
    handler: Annotated[EntityHandler, Depends(get_entity_handler)],
    db: Annotated[Session, Depends(get_db)]
):
    """Get one live row of an entity"""
    return await CrudService.for_handler(db, handler).get(entity_id)


@router.post("/{entity_name}", status_code=status.HTTP_201_CREATED)
async def create_entity(
    entity_name: str,
    handler: Annotated[EntityHandler, Depends(get_entity_handler)],
    db: Annotated[Session, Depends(get_db)],
    actor: Annotated[Optional[str], Depends(get_token_username)],
    body: Any = Body(None)
):
    """Create a row of an entity"""
    payload = parse_payload(handler.payload_schema, body)
    entity = await CrudService.for_handler(db, handler).create(payload, actor)
    content = handler.response_schema.model_validate(entity).model_dump(mode="json")
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=content,
        headers={"Location": f"/api/{entity_name}/{entity.id}"},
    )


@router.put("/{entity_name}/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_entity(
    entity_id: int,
    handler: Annotated[EntityHandler, Depends(get_entity_handler)],
    db: Annotated[Session, Depends(get_db)],
    actor: Annotated[Optional[str], Depends(get_token_username)],
    body: Any = Body(None)
):
    """Replace a row of an entity"""
    payload = parse_payload(handler.payload_schema, body)
    await CrudService.for_handler(db, handler).update(entity_id, payload, actor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{entity_name}/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entity(
    entity_id: int,
    handler: Annotated[EntityHandler, Depends(get_entity_handler)],
    db: Annotated[Session, Depends(get_db)],
    actor: Annotated[Optional[str], Depends(get_token_username)]
):
    """Soft delete a row of an entity"""
    await CrudService.for_handler(db, handler).delete(entity_id, actor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
