"""Parameterized SQL statements used by the quest flow.

Every value reaches the database as a bound parameter; none of these
templates are ever formatted with user input.
"""

from __future__ import annotations

from sqlalchemy import text

# Reads

LIST_REALMS = text(
    """
    SELECT id, name, ruler, description
    FROM realms
    ORDER BY name
    """
)

# :realm_id
CHARACTERS_BY_REALM = text(
    """
    SELECT id, name, role, realm_id
    FROM characters
    WHERE realm_id = :realm_id
    ORDER BY name
    """
)

LIST_ITEMS = text(
    """
    SELECT id, name, type, power
    FROM items
    ORDER BY type, name
    """
)

# :realm_id
GET_REALM_BY_ID = text(
    """
    SELECT id, name, ruler, description
    FROM realms
    WHERE id = :realm_id
    """
)

# :character_id
GET_CHARACTER_BY_ID = text(
    """
    SELECT c.id, c.name, c.role, c.realm_id, r.name AS realm_name
    FROM characters c
    JOIN realms r ON c.realm_id = r.id
    WHERE c.id = :character_id
    """
)

# :item_id
GET_ITEM_BY_ID = text(
    """
    SELECT id, name, type, power
    FROM items
    WHERE id = :item_id
    """
)

# Writes

# :title, :realm_id
INSERT_QUEST = text(
    """
    INSERT INTO quests (title, realm_id)
    VALUES (:title, :realm_id)
    RETURNING id, title, realm_id, created_at
    """
)

# :quest_id, :character_id, :item_id
INSERT_QUEST_ASSIGNMENT = text(
    """
    INSERT INTO quest_assignments (quest_id, character_id, item_id)
    VALUES (:quest_id, :character_id, :item_id)
    RETURNING id
    """
)

# Verification

# :quest_id
GET_QUEST_DETAILS = text(
    """
    SELECT q.id, q.title, q.realm_id, q.created_at, r.name AS realm_name
    FROM quests q
    JOIN realms r ON q.realm_id = r.id
    WHERE q.id = :quest_id
    """
)

# :quest_id
GET_QUEST_ASSIGNMENTS = text(
    """
    SELECT
        qa.id,
        qa.character_id,
        qa.item_id,
        c.name AS character_name,
        c.role AS character_role,
        i.name AS item_name,
        i.type AS item_type,
        i.power AS item_power
    FROM quest_assignments qa
    JOIN characters c ON qa.character_id = c.id
    JOIN items i ON qa.item_id = i.id
    WHERE qa.quest_id = :quest_id
    ORDER BY c.name, qa.id
    """
)

COUNT_QUESTS = text("SELECT COUNT(*) AS total FROM quests")
