"""Revenue rate routes"""

from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from propman.db.session import get_db
from propman.dependencies import get_token_username
from propman.models import RevenueRate
from propman.schemas.revenue_rate import (
    RevenueRateCreate, RevenueRateUpdate, RevenueRateResponse, RevenueRateDetail
)
from propman.services.crud import CrudService

router = APIRouter(prefix="/api/revenue-rates", tags=["Revenue Rates"])


def get_service(db: Annotated[Session, Depends(get_db)]) -> CrudService:
    return CrudService(db, RevenueRate, RevenueRateResponse)


@router.get("", response_model=List[RevenueRateDetail])
async def list_revenue_rates(
    response: Response,
    service: Annotated[CrudService, Depends(get_service)],
    page_number: Optional[int] = Query(1, description="Page number"),
    page_size: Optional[int] = Query(None, description="Items per page")
):
    """List revenue rates with their rental property details"""
    items, headers = await service.list_page(page_number, page_size)
    response.headers.update(headers)
    return items


@router.get("/{rate_id}", response_model=RevenueRateDetail)
async def get_revenue_rate(
    rate_id: int,
    service: Annotated[CrudService, Depends(get_service)]
):
    """Get revenue rate"""
    return await service.get(rate_id)


@router.post("", response_model=RevenueRateResponse, status_code=status.HTTP_201_CREATED)
async def create_revenue_rate(
    request: RevenueRateCreate,
    response: Response,
    service: Annotated[CrudService, Depends(get_service)],
    actor: Annotated[Optional[str], Depends(get_token_username)]
):
    """Create revenue rate"""
    entity = await service.create(request, actor)
    response.headers["Location"] = f"/api/revenue-rates/{entity.id}"
    return entity


@router.put("/{rate_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_revenue_rate(
    rate_id: int,
    request: RevenueRateUpdate,
    service: Annotated[CrudService, Depends(get_service)],
    actor: Annotated[Optional[str], Depends(get_token_username)]
):
    """Replace revenue rate"""
    await service.update(rate_id, request, actor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{rate_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_revenue_rate(
    rate_id: int,
    service: Annotated[CrudService, Depends(get_service)],
    actor: Annotated[Optional[str], Depends(get_token_username)]
):
    """Soft delete revenue rate"""
    await service.delete(rate_id, actor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
