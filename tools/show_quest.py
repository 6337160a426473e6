#!/usr/bin/env python3
"""Print a saved quest and its party assignments."""

from __future__ import annotations

if __name__ == "__main__":
    import sys
    from pathlib import Path

    ROOT = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(ROOT / "src"))

import argparse

from knights_quest.config import load_environment
from knights_quest.db.access import Database
from knights_quest.db.engine import get_engine
from knights_quest.queries import count_quests, get_quest_assignments, get_quest_details


def main() -> None:
    ap = argparse.ArgumentParser(description="Show a quest with its character/item assignments.")
    ap.add_argument("--id", type=int, required=True, help="Quest id")
    ap.add_argument("--database-url", help="Defaults to the configured database URL.")
    args = ap.parse_args()

    load_environment()
    database = Database(get_engine(args.database_url))
    try:
        quest = get_quest_details(database, args.id)
        if quest is None:
            raise SystemExit(f"Quest not found: {args.id}")
        assignments = get_quest_assignments(database, args.id)
        total = count_quests(database)
    finally:
        database.close()

    print(f"Quest {quest['id']}: {quest['title']}")
    print(f"Realm: {quest['realm_name']}")
    print(f"Created: {quest['created_at']}")
    print("Assignments:")
    current = None
    for row in assignments:
        if row["character_name"] != current:
            current = row["character_name"]
            print(f"  {row['character_name']} ({row['character_role']})")
        print(f"    - {row['item_name']} ({row['item_type']}, Power: {row['item_power']})")
    print(f"\nQuests recorded: {total}")


if __name__ == "__main__":
    main()
