"""Statement catalog and read helpers."""

from knights_quest.queries.reads import (
    count_quests,
    fetch_character_by_id,
    fetch_characters_by_realm,
    fetch_item_by_id,
    fetch_items,
    fetch_realm_by_id,
    fetch_realms,
    get_quest_assignments,
    get_quest_details,
)

__all__ = [
    "count_quests",
    "fetch_character_by_id",
    "fetch_characters_by_realm",
    "fetch_item_by_id",
    "fetch_items",
    "fetch_realm_by_id",
    "fetch_realms",
    "get_quest_assignments",
    "get_quest_details",
]
