"""Rental property routes"""

from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from propman.db.session import get_db
from propman.dependencies import get_token_username
from propman.models import RentalProperty
from propman.schemas.rental_property import (
    RentalPropertyCreate, RentalPropertyUpdate, RentalPropertyResponse, RentalPropertyDetail
)
from propman.services.crud import CrudService

router = APIRouter(prefix="/api/rental-properties", tags=["Rental Properties"])


def get_service(db: Annotated[Session, Depends(get_db)]) -> CrudService:
    return CrudService(db, RentalProperty, RentalPropertyResponse)


@router.get("", response_model=List[RentalPropertyDetail])
async def list_rental_properties(
    response: Response,
    service: Annotated[CrudService, Depends(get_service)],
    page_number: Optional[int] = Query(1, description="Page number"),
    page_size: Optional[int] = Query(None, description="Items per page")
):
    """List rental properties with command, base and class names"""
    items, headers = await service.list_page(page_number, page_size)
    response.headers.update(headers)
    return items


@router.get("/{property_id}", response_model=RentalPropertyDetail)
async def get_rental_property(
    property_id: int,
    service: Annotated[CrudService, Depends(get_service)]
):
    """Get rental property"""
    return await service.get(property_id)


@router.post("", response_model=RentalPropertyResponse, status_code=status.HTTP_201_CREATED)
async def create_rental_property(
    request: RentalPropertyCreate,
    response: Response,
    service: Annotated[CrudService, Depends(get_service)],
    actor: Annotated[Optional[str], Depends(get_token_username)]
):
    """Create rental property"""
    entity = await service.create(request, actor)
    response.headers["Location"] = f"/api/rental-properties/{entity.id}"
    return entity


@router.put("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_rental_property(
    property_id: int,
    request: RentalPropertyUpdate,
    service: Annotated[CrudService, Depends(get_service)],
    actor: Annotated[Optional[str], Depends(get_token_username)]
):
    """Replace rental property"""
    await service.update(property_id, request, actor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_rental_property(
    property_id: int,
    service: Annotated[CrudService, Depends(get_service)],
    actor: Annotated[Optional[str], Depends(get_token_username)]
):
    """Soft delete rental property"""
    await service.delete(property_id, actor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
