"""Display-name enrichment for foreign-key ids"""

from typing import Any, Dict, Iterable, List, Optional, Type

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.orm import Session

from propman.db.session import INCLUDE_DELETED, not_deleted
from propman.models import AirBase, Command, Contract, PropertyClass, PropertyGroup, RentalProperty, RevenueRate

# id attribute -> (lookup model, column giving the display name, output key)
NAME_LOOKUPS = (
    ("cmd_id", Command, "name", "cmd_name"),
    ("base_id", AirBase, "name", "base_name"),
    ("class_id", PropertyClass, "name", "class_name"),
)


class EnrichmentService:
    def __init__(self, db: Session):
        self.db = db

    def names_by_id(self, model, column: str, ids: Iterable[Optional[int]]) -> Dict[int, str]:
        """Map each live row id in ``ids`` to its display column"""
        wanted = {i for i in ids if i}
        if not wanted:
            return {}
        name_column = getattr(model, column)
        stmt = (
            select(model.id, name_column)
            .where(model.id.in_(wanted), not_deleted(model))
            .execution_options(**{INCLUDE_DELETED: True})
        )
        return {row_id: name or "" for row_id, name in self.db.execute(stmt).all()}

    def _live_by_id(self, model, ids: Iterable[Optional[int]]) -> Dict[int, Any]:
        wanted = {i for i in ids if i}
        if not wanted:
            return {}
        stmt = select(model).where(model.id.in_(wanted))
        return {row.id: row for row in self.db.scalars(stmt).all()}

    def _add_location_names(self, rows: List[Dict[str, Any]]) -> None:
        for id_key, model, column, out_key in NAME_LOOKUPS:
            if not any(id_key in row for row in rows):
                continue
            names = self.names_by_id(model, column, (row.get(id_key) for row in rows))
            for row in rows:
                if id_key in row:
                    row[out_key] = names.get(row[id_key], "")

    def enrich(self, model: Type[Any], schema: Type[BaseModel], entities: List[Any]) -> List[Dict[str, Any]]:
        """Serialise entities and attach cmd/base/class (and group) names"""
        if model is RevenueRate:
            return self.enrich_revenue_rates(schema, entities)

        rows = [schema.model_validate(entity).model_dump(mode="json") for entity in entities]
        self._add_location_names(rows)

        if model is Contract:
            groups = self.names_by_id(PropertyGroup, "g_id", (row.get("grp_id") for row in rows))
            for row in rows:
                row["grp_name"] = groups.get(row.get("grp_id"), "")
        return rows

    def enrich_revenue_rates(self, schema: Type[BaseModel], rates: List[RevenueRate]) -> List[Dict[str, Any]]:
        """Attach the rental property's location details to each rate.

        A rate whose property is missing or soft-deleted keeps null ids and
        empty names.
        """
        properties = self._live_by_id(RentalProperty, (rate.property_id for rate in rates))
        rows = []
        for rate in rates:
            row = schema.model_validate(rate).model_dump(mode="json")
            prop = properties.get(rate.property_id)
            row.update({
                "cmd_id": prop.cmd_id if prop else None,
                "base_id": prop.base_id if prop else None,
                "class_id": prop.class_id if prop else None,
                "property_identifier": prop.p_id if prop else None,
                "uom": prop.uom if prop else None,
                "area": float(prop.area) if prop and prop.area is not None else None,
                "location": prop.location if prop else None,
                "remarks": prop.remarks if prop else None,
            })
            rows.append(row)

        for id_key, model, column, out_key in NAME_LOOKUPS:
            names = self.names_by_id(model, column, (row[id_key] for row in rows))
            for row in rows:
                row[out_key] = names.get(row[id_key], "")
        return rows
