import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from propman.models import PropertyGroup, PropertyGroupLinking, RentalProperty
from propman.repositories import GenericRepository
from propman.schemas.property_group import (
    PropertyGroupCreate, PropertyGroupLinkingCreate, PropertyGroupLinkingResponse,
    PropertyGroupResponse
)
from propman.services.crud import normalize_paging, paging_headers
from propman.services.enrichment import EnrichmentService
from propman.utils.exceptions import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)

BY_GROUP_DEFAULT_PAGE_SIZE = 100
BY_GROUP_MAX_PAGE_SIZE = 500


class PropertyGroupService:
    def __init__(self, db: Session):
        self.db = db
        self.groups = GenericRepository(db, PropertyGroup)
        self.links = GenericRepository(db, PropertyGroupLinking)

    async def create_with_links(self, request: PropertyGroupCreate, actor: Optional[str]) -> Dict[str, Any]:
        """Create a group and link it to the listed rental properties in one transaction"""
        writable = set(self.groups.writable_attributes())
        values = {k: v for k, v in request.model_dump().items() if k in writable}
        actor = actor or request.action_by

        try:
            group = self.groups.add(PropertyGroup(**values), actor, commit=False)
            linked = 0
            for prop_id in request.property_group_linkings or []:
                if prop_id <= 0:
                    continue
                link = PropertyGroupLinking(grp_id=group.id, prop_id=prop_id, area=group.area, status=True)
                self.links.add(link, actor, commit=False)
                linked += 1
            self.db.commit()
            self.db.refresh(group)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create property group: {str(e)}")
            raise

        logger.info(f"Property group {group.id} created with {linked} linked properties")
        return {
            "property_group": PropertyGroupResponse.model_validate(group),
            "linked_properties_count": linked,
        }

    async def get_links_by_group(
        self,
        grp_id: int,
        page_number: Optional[int] = None,
        page_size: Optional[int] = None
    ) -> Tuple[List[Dict[str, Any]], Dict[str, str]]:
        """Linked properties of one group with group and property identifiers"""
        if grp_id <= 0:
            raise BadRequestError("Invalid group id.")

        page_number, page_size = normalize_paging(
            page_number, page_size, BY_GROUP_DEFAULT_PAGE_SIZE, BY_GROUP_MAX_PAGE_SIZE
        )
        links, total = self.links.get_page(
            page_number, page_size, PropertyGroupLinking.grp_id == grp_id
        )

        enrichment = EnrichmentService(self.db)
        group_names = enrichment.names_by_id(PropertyGroup, "g_id", [grp_id])
        property_names = enrichment.names_by_id(RentalProperty, "p_id", (link.prop_id for link in links))
        items = [
            {
                "id": link.id,
                "grp_id": link.grp_id,
                "prop_id": link.prop_id,
                "group_name": group_names.get(link.grp_id, ""),
                "property_name": property_names.get(link.prop_id, ""),
            }
            for link in links
        ]
        return items, paging_headers(total, page_number, page_size)

    async def add_link(self, request: PropertyGroupLinkingCreate, actor: Optional[str]) -> PropertyGroupLinkingResponse:
        if request.grp_id <= 0 or request.prop_id <= 0:
            raise BadRequestError("Valid GrpId and PropId are required.")

        link = PropertyGroupLinking(
            grp_id=request.grp_id,
            prop_id=request.prop_id,
            area=request.area,
            status=True if request.status is None else request.status,
        )
        link = self.links.add(link, actor or request.action_by)
        return PropertyGroupLinkingResponse.model_validate(link)

    async def remove_link(self, link_id: int, actor: Optional[str]) -> None:
        if link_id <= 0:
            raise BadRequestError("Invalid linking id.")

        link = self.links.get_by_id(link_id)
        if not link:
            raise NotFoundError("Property group linking not found.")
        self.links.delete(link, actor)
