"""Tenant routes"""

from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from propman.db.session import get_db
from propman.dependencies import get_token_username
from propman.models import Tenant
from propman.schemas.tenant import TenantCreate, TenantUpdate, TenantResponse
from propman.services.crud import CrudService

router = APIRouter(prefix="/api/tenants", tags=["Tenants"])


def get_service(db: Annotated[Session, Depends(get_db)]) -> CrudService:
    return CrudService(db, Tenant, TenantResponse)


@router.get("", response_model=List[TenantResponse])
async def list_tenants(service: Annotated[CrudService, Depends(get_service)]):
    """List all tenants"""
    return await service.list_all()


@router.get("/{tenant_id}", response_model=TenantResponse)
async def get_tenant(
    tenant_id: int,
    service: Annotated[CrudService, Depends(get_service)]
):
    """Get tenant"""
    return await service.get(tenant_id)


@router.post("", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
async def create_tenant(
    request: TenantCreate,
    response: Response,
    service: Annotated[CrudService, Depends(get_service)],
    actor: Annotated[Optional[str], Depends(get_token_username)]
):
    """Create tenant"""
    tenant = await service.create(request, actor)
    response.headers["Location"] = f"/api/tenants/{tenant.id}"
    return tenant


@router.put("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_tenant(
    tenant_id: int,
    request: TenantUpdate,
    service: Annotated[CrudService, Depends(get_service)],
    actor: Annotated[Optional[str], Depends(get_token_username)]
):
    """Replace tenant"""
    await service.update(tenant_id, request, actor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tenant(
    tenant_id: int,
    service: Annotated[CrudService, Depends(get_service)],
    actor: Annotated[Optional[str], Depends(get_token_username)]
):
    """Soft delete tenant"""
    await service.delete(tenant_id, actor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
