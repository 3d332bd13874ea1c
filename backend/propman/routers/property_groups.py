"""Property group and property linking routes"""

from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from propman.db.session import get_db
from propman.dependencies import get_current_actor
from propman.models import PropertyGroup
from propman.schemas.property_group import (
    PropertyGroupCreate, PropertyGroupUpdate, PropertyGroupResponse, PropertyGroupDetail,
    PropertyGroupCreateResponse, PropertyGroupLinkingCreate, PropertyGroupLinkingResponse,
    GroupLinkResponse
)
from propman.services.crud import CrudService
from propman.services.property_group import PropertyGroupService

router = APIRouter(prefix="/api/property-groups", tags=["Property Groups"])


def get_crud_service(db: Annotated[Session, Depends(get_db)]) -> CrudService:
    return CrudService(db, PropertyGroup, PropertyGroupResponse)


@router.get("", response_model=List[PropertyGroupDetail])
async def list_property_groups(
    response: Response,
    service: Annotated[CrudService, Depends(get_crud_service)],
    page_number: Optional[int] = Query(1, description="Page number"),
    page_size: Optional[int] = Query(None, description="Items per page")
):
    """List property groups with command, base and class names"""
    items, headers = await service.list_page(page_number, page_size)
    response.headers.update(headers)
    return items


@router.get("/by-group/{grp_id}", response_model=List[GroupLinkResponse])
async def list_group_links(
    grp_id: int,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    page_number: Optional[int] = Query(1, description="Page number"),
    page_size: Optional[int] = Query(None, description="Items per page")
):
    """List the rental properties linked to a group"""
    items, headers = await PropertyGroupService(db).get_links_by_group(grp_id, page_number, page_size)
    response.headers.update(headers)
    return items


@router.get("/{group_id}", response_model=PropertyGroupDetail)
async def get_property_group(
    group_id: int,
    service: Annotated[CrudService, Depends(get_crud_service)]
):
    """Get property group"""
    return await service.get(group_id)


@router.post("", response_model=PropertyGroupCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_property_group(
    request: PropertyGroupCreate,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    actor: Annotated[str, Depends(get_current_actor)]
):
    """Create property group and link the listed properties"""
    result = await PropertyGroupService(db).create_with_links(request, actor)
    response.headers["Location"] = f"/api/property-groups/{result['property_group'].id}"
    return result


@router.put("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_property_group(
    group_id: int,
    request: PropertyGroupUpdate,
    service: Annotated[CrudService, Depends(get_crud_service)],
    actor: Annotated[str, Depends(get_current_actor)]
):
    """Replace property group"""
    await service.update(group_id, request, actor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_property_group(
    group_id: int,
    service: Annotated[CrudService, Depends(get_crud_service)],
    actor: Annotated[str, Depends(get_current_actor)]
):
    """Soft delete property group"""
    await service.delete(group_id, actor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/linking", response_model=PropertyGroupLinkingResponse, status_code=status.HTTP_201_CREATED)
async def create_linking(
    request: PropertyGroupLinkingCreate,
    db: Annotated[Session, Depends(get_db)],
    actor: Annotated[str, Depends(get_current_actor)]
):
    """Link a rental property to a group"""
    return await PropertyGroupService(db).add_link(request, actor)


@router.delete("/linking/{link_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_linking(
    link_id: int,
    db: Annotated[Session, Depends(get_db)],
    actor: Annotated[str, Depends(get_current_actor)]
):
    """Soft delete a property linking"""
    await PropertyGroupService(db).remove_link(link_id, actor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
