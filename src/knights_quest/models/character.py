"""Character model (read-only from the quest flow)."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Column, Index, String
from sqlmodel import Field, SQLModel


class Character(SQLModel, table=True):
    """A party member belonging to exactly one realm."""

    __tablename__ = "characters"
    __table_args__ = (
        Index("ix_characters_name", "name"),
        Index("ix_characters_realm", "realm_id"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(sa_column=Column(String, nullable=False))
    role: str = Field(sa_column=Column(String, nullable=False))
    realm_id: int = Field(foreign_key="realms.id")
