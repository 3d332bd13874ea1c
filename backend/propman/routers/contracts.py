"""Contract routes"""

from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from propman.db.session import get_db
from propman.dependencies import get_token_username
from propman.models import Contract
from propman.schemas.contract import (
    ContractCreate, ContractUpdate, ContractResponse, ContractDetail
)
from propman.services.crud import CrudService

router = APIRouter(prefix="/api/contracts", tags=["Contracts"])


def get_service(db: Annotated[Session, Depends(get_db)]) -> CrudService:
    return CrudService(db, Contract, ContractResponse)


@router.get("", response_model=List[ContractDetail])
async def list_contracts(
    response: Response,
    service: Annotated[CrudService, Depends(get_service)],
    page_number: Optional[int] = Query(1, description="Page number"),
    page_size: Optional[int] = Query(None, description="Items per page")
):
    """List contracts with command, base, class and group names"""
    items, headers = await service.list_page(page_number, page_size)
    response.headers.update(headers)
    return items


@router.get("/{contract_id}", response_model=ContractDetail)
async def get_contract(
    contract_id: int,
    service: Annotated[CrudService, Depends(get_service)]
):
    """Get contract"""
    return await service.get(contract_id)


@router.post("", response_model=ContractResponse, status_code=status.HTTP_201_CREATED)
async def create_contract(
    request: ContractCreate,
    response: Response,
    service: Annotated[CrudService, Depends(get_service)],
    actor: Annotated[Optional[str], Depends(get_token_username)]
):
    """Create contract"""
    entity = await service.create(request, actor)
    response.headers["Location"] = f"/api/contracts/{entity.id}"
    return entity


@router.put("/{contract_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_contract(
    contract_id: int,
    request: ContractUpdate,
    service: Annotated[CrudService, Depends(get_service)],
    actor: Annotated[Optional[str], Depends(get_token_username)]
):
    """Replace contract"""
    await service.update(contract_id, request, actor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{contract_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contract(
    contract_id: int,
    service: Annotated[CrudService, Depends(get_service)],
    actor: Annotated[Optional[str], Depends(get_token_username)]
):
    """Soft delete contract"""
    await service.delete(contract_id, actor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
