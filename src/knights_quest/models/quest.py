"""Quest and quest assignment models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, Column, DateTime, Index, String, text
from sqlmodel import Field, SQLModel

MAX_TITLE_LENGTH = 150


class Quest(SQLModel, table=True):
    """Top-level record created by one quest-creation run."""

    __tablename__ = "quests"
    __table_args__ = (
        CheckConstraint("length(trim(title)) > 0", name="ck_quests_title_not_blank"),
        Index("ix_quests_realm", "realm_id"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(sa_column=Column(String(MAX_TITLE_LENGTH), nullable=False))
    realm_id: int = Field(foreign_key="realms.id")

    # Filled in by the database so raw inserts get a timestamp too.
    created_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(
            DateTime(timezone=True),
            server_default=text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    )


class QuestAssignment(SQLModel, table=True):
    """Records that a character carries an item on a quest."""

    __tablename__ = "quest_assignments"
    __table_args__ = (
        Index("ix_quest_assignments_quest", "quest_id"),
        Index("ix_quest_assignments_character", "character_id"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    quest_id: int = Field(foreign_key="quests.id")
    character_id: int = Field(foreign_key="characters.id")
    item_id: int = Field(foreign_key="items.id")
