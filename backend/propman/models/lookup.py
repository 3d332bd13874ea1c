from typing import Optional
from decimal import Decimal
from sqlalchemy import String, Integer, SmallInteger, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column
from propman.db.base import BaseEntity


class Command(BaseEntity):
    __tablename__ = "commands"
    __entity_name__ = "Command"
    name: Mapped[Optional[str]] = mapped_column(String(150))


class AirBase(BaseEntity):
    __tablename__ = "bases"
    __entity_name__ = "Base"
    name: Mapped[Optional[str]] = mapped_column(String(150))
    cmd_id: Mapped[Optional[int]] = mapped_column(Integer, index=True)


class PropertyClass(BaseEntity):
    __tablename__ = "classes"
    __entity_name__ = "Class"
    name: Mapped[Optional[str]] = mapped_column(String(150))


class Role(BaseEntity):
    __tablename__ = "roles"
    __entity_name__ = "Role"
    name: Mapped[Optional[str]] = mapped_column(String(100))


class Unit(BaseEntity):
    __tablename__ = "units"
    __entity_name__ = "Unit"
    name: Mapped[Optional[str]] = mapped_column(String(150))
    base_id: Mapped[Optional[int]] = mapped_column(Integer, index=True)


class Nature(BaseEntity):
    __tablename__ = "natures"
    __entity_name__ = "Nature"
    name: Mapped[Optional[str]] = mapped_column(String(150))
    description: Mapped[Optional[str]] = mapped_column(Text)
    status: Mapped[Optional[int]] = mapped_column(SmallInteger)
    rental_val: Mapped[Optional[Decimal]] = mapped_column(Numeric(18, 2))
    annual_rent: Mapped[Optional[Decimal]] = mapped_column(Numeric(18, 2))
    govt_share: Mapped[Optional[int]] = mapped_column(SmallInteger)
    paf_share: Mapped[Optional[int]] = mapped_column(SmallInteger)
    prop_number: Mapped[Optional[str]] = mapped_column(String(50))
