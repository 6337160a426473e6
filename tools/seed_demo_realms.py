#!/usr/bin/env python3
"""Create a local demo database with Arthurian realms, characters, and items."""

from __future__ import annotations

if __name__ == "__main__":
    import sys
    from pathlib import Path

    ROOT = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(ROOT / "src"))

import argparse
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlmodel import Session, select

from knights_quest.config import get_database_url, load_environment
from knights_quest.db.engine import create_db_and_tables, get_engine
from knights_quest.models import Character, Item, Realm

REALMS = [
    ("Camelot", "King Arthur", "Seat of the Round Table."),
    ("Avalon", "The Lady of the Lake", "Isle of apples, hidden in the mists."),
    ("Cornwall", "King Mark", "Rocky southern kingdom of Tintagel."),
    ("Orkney", "King Lot", "Windswept northern isles."),
]

CHARACTERS = {
    "Camelot": [
        ("Sir Lancelot", "Knight"),
        ("Sir Gawain", "Knight"),
        ("Sir Galahad", "Knight"),
        ("Merlin", "Wizard"),
        ("Queen Guinevere", "Queen"),
    ],
    "Avalon": [("Nimue", "Enchantress"), ("Morgan le Fay", "Sorceress")],
    "Cornwall": [("Sir Tristan", "Knight"), ("Isolde", "Healer")],
    "Orkney": [],
}

ITEMS = [
    ("Excalibur", "Weapon", 10),
    ("Arondight", "Weapon", 9),
    ("Galatine", "Weapon", 8),
    ("Spear of Longinus", "Weapon", 7),
    ("Pridwen", "Armor", 6),
    ("Chainmail Hauberk", "Armor", 3),
    ("Holy Grail", "Relic", 10),
    ("Scabbard of Excalibur", "Relic", 7),
    ("Healing Herbs", "Consumable", 2),
]


def seed(session: Session) -> tuple[int, int, int]:
    """Insert demo rows once; return (realms, characters, items) created."""
    if session.exec(select(Realm)).first() is not None:
        return 0, 0, 0

    realms = {name: Realm(name=name, ruler=ruler, description=desc) for name, ruler, desc in REALMS}
    session.add_all(realms.values())
    session.commit()

    characters = []
    for realm_name, members in CHARACTERS.items():
        realm_id = realms[realm_name].id
        for name, role in members:
            characters.append(Character(name=name, role=role, realm_id=realm_id))
    items = [Item(name=name, type=type_, power=power) for name, type_, power in ITEMS]
    session.add_all(characters + items)
    session.commit()
    return len(realms), len(characters), len(items)


def main() -> None:
    ap = argparse.ArgumentParser(
        description="Create the quest tables in a local database and load Arthurian demo data."
    )
    ap.add_argument("--database-url", help="Defaults to the configured database URL.")
    args = ap.parse_args()

    load_environment()
    url = args.database_url or get_database_url()
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite" and parsed.database:
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    engine = get_engine(url)
    create_db_and_tables(engine)
    with Session(engine) as session:
        realms, characters, items = seed(session)
    engine.dispose()

    if realms == 0:
        print("Demo data already present; nothing to do.")
        return
    print(f"Seeded {realms} realms, {characters} characters, {items} items.")


if __name__ == "__main__":
    main()
