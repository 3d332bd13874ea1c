from typing import Optional
from decimal import Decimal
from sqlalchemy import String, Integer, Numeric, Boolean, Text, Index
from sqlalchemy.orm import Mapped, mapped_column
from propman.db.base import BaseEntity


class PropertyGroup(BaseEntity):
    __tablename__ = "property_groups"
    __entity_name__ = "PropertyGroup"
    __table_args__ = (
        Index("ix_property_groups_cmd_id", "cmd_id"),
        Index("ix_property_groups_base_id", "base_id"),
        Index("ix_property_groups_class_id", "class_id"),
    )
    cmd_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    base_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    class_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    g_id: Mapped[Optional[str]] = mapped_column(String(100))
    uom: Mapped[Optional[str]] = mapped_column(String(50))
    area: Mapped[Optional[Decimal]] = mapped_column(Numeric(18, 2))
    location: Mapped[Optional[str]] = mapped_column(String(255))
    remarks: Mapped[Optional[str]] = mapped_column(Text)
    status: Mapped[Optional[bool]] = mapped_column(Boolean)


class PropertyGroupLinking(BaseEntity):
    __tablename__ = "property_group_linkings"
    __entity_name__ = "PropertyGroupLinking"
    __table_args__ = (
        Index("ix_property_group_linkings_grp_id", "grp_id"),
    )
    grp_id: Mapped[int] = mapped_column(Integer, nullable=False)
    prop_id: Mapped[int] = mapped_column(Integer, nullable=False)
    area: Mapped[Optional[Decimal]] = mapped_column(Numeric(18, 2))
    status: Mapped[Optional[bool]] = mapped_column(Boolean)
