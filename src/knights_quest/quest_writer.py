"""Transactional save for a quest and its assignments."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from knights_quest.db.access import Database, TransactionHandle
from knights_quest.models.character import Character
from knights_quest.models.item import Item
from knights_quest.queries import catalog

logger = logging.getLogger(__name__)


@dataclass
class Assignment:
    """One character and the items chosen for them, in selection order."""

    character: Character
    items: list[Item] = field(default_factory=list)


@dataclass
class SavedQuest:
    id: int
    title: str
    realm_id: int
    created_at: datetime | str | None
    assignment_ids: list[int] = field(default_factory=list)


def _insert_assignments(
    handle: TransactionHandle, quest_id: int, assignments: Sequence[Assignment]
) -> list[int]:
    ids: list[int] = []
    for assignment in assignments:
        for item in assignment.items:
            rows = handle.query(
                catalog.INSERT_QUEST_ASSIGNMENT,
                {
                    "quest_id": quest_id,
                    "character_id": assignment.character.id,
                    "item_id": item.id,
                },
            )
            ids.append(int(rows[0]["id"]))
    return ids


def save_quest(
    database: Database,
    title: str,
    realm_id: int,
    assignments: Sequence[Assignment],
) -> SavedQuest:
    """Insert the quest, then every assignment, as one transaction.

    The quest row is written first; assignment rows follow in character
    selection order, then item selection order. Any failure rolls the whole
    quest back.
    """

    def unit_of_work(handle: TransactionHandle) -> SavedQuest:
        rows = handle.query(
            catalog.INSERT_QUEST, {"title": title, "realm_id": realm_id}
        )
        quest: dict[str, Any] = dict(rows[0])
        assignment_ids = _insert_assignments(handle, int(quest["id"]), assignments)
        return SavedQuest(
            id=int(quest["id"]),
            title=quest["title"],
            realm_id=int(quest["realm_id"]),
            created_at=quest["created_at"],
            assignment_ids=assignment_ids,
        )

    saved = database.transaction(unit_of_work)
    logger.info(
        "Saved quest %s with %d assignments", saved.id, len(saved.assignment_ids)
    )
    return saved
