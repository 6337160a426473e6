"""Item/equipment model."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Column, Index, Integer, String
from sqlmodel import Field, SQLModel


class Item(SQLModel, table=True):
    """Equipment with a type and a power rating."""

    __tablename__ = "items"
    __table_args__ = (Index("ix_items_type_name", "type", "name"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(sa_column=Column(String, nullable=False))
    type: str = Field(sa_column=Column(String, nullable=False))
    power: int = Field(default=0, sa_column=Column(Integer, nullable=False))
