from __future__ import annotations

from pathlib import Path
import sys
from typing import Any, Callable, Sequence

import pytest
from sqlmodel import Session

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from knights_quest.db.access import Database
from knights_quest.db.engine import create_db_and_tables, get_engine
from knights_quest.errors import QuestValidationError
from knights_quest.models.character import Character
from knights_quest.models.item import Item
from knights_quest.models.realm import Realm
from knights_quest.prompts import Choice
from knights_quest.validation import validate_selection


def seed_round_table(session: Session) -> dict[str, int]:
    camelot = Realm(name="Camelot", ruler="King Arthur", description="Seat of the Round Table")
    avalon = Realm(name="Avalon", ruler="The Lady of the Lake")
    orkney = Realm(name="Orkney", ruler="King Lot")
    session.add_all([camelot, avalon, orkney])
    session.commit()
    for realm in (camelot, avalon, orkney):
        session.refresh(realm)

    characters = {
        "Lancelot": Character(name="Lancelot", role="Knight", realm_id=camelot.id),
        "Gawain": Character(name="Gawain", role="Knight", realm_id=camelot.id),
        "Merlin": Character(name="Merlin", role="Wizard", realm_id=camelot.id),
        "Guinevere": Character(name="Guinevere", role="Queen", realm_id=camelot.id),
        "Nimue": Character(name="Nimue", role="Enchantress", realm_id=avalon.id),
    }
    items = {
        "Excalibur": Item(name="Excalibur", type="Weapon", power=10),
        "Sword": Item(name="Sword", type="Weapon", power=5),
        "Shield": Item(name="Shield", type="Armor", power=2),
        "Grail": Item(name="Grail", type="Relic", power=8),
    }
    session.add_all(list(characters.values()) + list(items.values()))
    session.commit()

    ids = {"Camelot": camelot.id, "Avalon": avalon.id, "Orkney": orkney.id}
    for name, row in {**characters, **items}.items():
        session.refresh(row)
        ids[name] = row.id
    return ids


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'quests.db'}"


@pytest.fixture
def database(database_url: str):
    engine = get_engine(database_url)
    create_db_and_tables(engine)
    db = Database(engine)
    yield db
    db.close()


@pytest.fixture
def seeded(database: Database) -> tuple[Database, dict[str, int]]:
    with Session(database.engine) as session:
        ids = seed_round_table(session)
    return database, ids


def _pick(choices: Sequence[Choice], name: str) -> Any:
    for choice in choices:
        if choice.label == name or choice.label.startswith(f"{name} "):
            return choice.value
    raise AssertionError(f"No choice labelled {name!r}")


class ScriptedPrompter:
    """Answers prompts from queues and records rejected answers."""

    def __init__(
        self,
        *,
        realms: list[str] | None = None,
        selections: list[list[str]] | None = None,
        titles: list[str] | None = None,
        confirmations: list[bool] | None = None,
        on_confirm: Callable[[str], None] | None = None,
    ) -> None:
        self.realms = list(realms or [])
        self.selections = list(selections or [])
        self.titles = list(titles or [])
        self.confirmations = list(confirmations or [])
        self.on_confirm = on_confirm
        self.rejections: list[str] = []
        self.confirm_messages: list[str] = []

    def select_one(self, message: str, choices: Sequence[Choice]) -> Any:
        return _pick(choices, self.realms.pop(0))

    def select_many(
        self,
        message: str,
        choices: Sequence[Choice],
        minimum: int,
        maximum: int | None = None,
        *,
        noun: str = "option",
    ) -> list[Any]:
        while True:
            picked = [_pick(choices, name) for name in self.selections.pop(0)]
            try:
                validate_selection(picked, minimum, maximum, noun=noun)
            except QuestValidationError as exc:
                self.rejections.append(str(exc))
                continue
            return picked

    def ask_text(self, message: str, validate: Callable[[str], str]) -> str:
        while True:
            try:
                return validate(self.titles.pop(0))
            except QuestValidationError as exc:
                self.rejections.append(str(exc))

    def confirm(self, message: str, default: bool = True) -> bool:
        self.confirm_messages.append(message)
        if self.on_confirm is not None:
            self.on_confirm(message)
        return self.confirmations.pop(0)


@pytest.fixture
def scripted_prompter() -> type[ScriptedPrompter]:
    return ScriptedPrompter
