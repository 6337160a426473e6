"""Realm model."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Column, Index, String, Text
from sqlmodel import Field, SQLModel


class Realm(SQLModel, table=True):
    """A kingdom that scopes which characters may join a quest."""

    __tablename__ = "realms"
    __table_args__ = (Index("ix_realms_name", "name"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(sa_column=Column(String, nullable=False))
    ruler: str = Field(sa_column=Column(String, nullable=False))
    description: Optional[str] = Field(
        default=None, sa_column=Column(Text, nullable=True)
    )
