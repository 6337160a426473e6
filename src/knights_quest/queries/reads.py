"""Read helpers that turn catalog rows into model objects."""

from __future__ import annotations

from typing import Any

from knights_quest.db.access import Database
from knights_quest.models.character import Character
from knights_quest.models.item import Item
from knights_quest.models.realm import Realm
from knights_quest.queries import catalog


def fetch_realms(database: Database) -> list[Realm]:
    """Return every realm ordered by name."""
    return [Realm(**row) for row in database.query(catalog.LIST_REALMS)]


def fetch_realm_by_id(database: Database, realm_id: int) -> Realm | None:
    rows = database.query(catalog.GET_REALM_BY_ID, {"realm_id": realm_id})
    if not rows:
        return None
    return Realm(**rows[0])


def fetch_characters_by_realm(database: Database, realm_id: int) -> list[Character]:
    """Return the realm's characters ordered by name."""
    rows = database.query(catalog.CHARACTERS_BY_REALM, {"realm_id": realm_id})
    return [Character(**row) for row in rows]


def fetch_items(database: Database) -> list[Item]:
    """Return every item ordered by type, then name."""
    return [Item(**row) for row in database.query(catalog.LIST_ITEMS)]


def fetch_character_by_id(database: Database, character_id: int) -> dict[str, Any] | None:
    rows = database.query(catalog.GET_CHARACTER_BY_ID, {"character_id": character_id})
    return dict(rows[0]) if rows else None


def fetch_item_by_id(database: Database, item_id: int) -> Item | None:
    rows = database.query(catalog.GET_ITEM_BY_ID, {"item_id": item_id})
    return Item(**rows[0]) if rows else None


def get_quest_details(database: Database, quest_id: int) -> dict[str, Any] | None:
    """Return the quest joined with its realm name, or None."""
    rows = database.query(catalog.GET_QUEST_DETAILS, {"quest_id": quest_id})
    return dict(rows[0]) if rows else None


def get_quest_assignments(database: Database, quest_id: int) -> list[dict[str, Any]]:
    """Return the quest's assignments with character and item names."""
    rows = database.query(catalog.GET_QUEST_ASSIGNMENTS, {"quest_id": quest_id})
    return [dict(row) for row in rows]


def count_quests(database: Database) -> int:
    rows = database.query(catalog.COUNT_QUESTS)
    return int(rows[0]["total"])
