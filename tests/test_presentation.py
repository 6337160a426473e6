from __future__ import annotations

from io import StringIO
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

import pytest
from rich.console import Console

from knights_quest.errors import DatabaseConnectivityError
from knights_quest.models.character import Character
from knights_quest.models.item import Item
from knights_quest.models.realm import Realm
from knights_quest.presentation import (
    connection_hint,
    render_error,
    render_success,
    render_summary,
    render_welcome,
)
from knights_quest.quest_writer import Assignment


def _render(renderable) -> str:
    output = StringIO()
    Console(file=output, width=100).print(renderable)
    return output.getvalue()


def test_summary_lists_realm_party_and_equipment() -> None:
    realm = Realm(id=1, name="Camelot", ruler="King Arthur")
    assignments = [
        Assignment(
            Character(id=1, name="Lancelot", role="Knight", realm_id=1),
            [Item(id=1, name="Excalibur", type="Weapon", power=10)],
        ),
        Assignment(
            Character(id=2, name="Merlin", role="Wizard", realm_id=1),
            [Item(id=2, name="Grail", type="Relic", power=8), Item(id=3, name="Shield", type="Armor", power=2)],
        ),
    ]

    text = _render(render_summary("Seek the Grail", realm, assignments))

    assert "Seek the Grail" in text
    assert "Camelot (Ruled by King Arthur)" in text
    assert "Lancelot (Knight)" in text
    assert "Excalibur (Weapon, Power: 10)" in text
    assert "Shield (Armor, Power: 2)" in text
    assert text.index("Lancelot") < text.index("Merlin")


def test_success_and_welcome_banners() -> None:
    assert "Quest ID: 42" in _render(render_success(42))
    assert "KNIGHTS QUEST" in _render(render_welcome())


def test_error_panel_includes_hint() -> None:
    text = _render(render_error("connectivity", "Could not connect", "Start the server"))

    assert "Database Unreachable" in text
    assert "Could not connect" in text
    assert "Start the server" in text


@pytest.mark.parametrize(
    ("message", "expected"),
    [
        ("Could not connect to the database: connection refused", "server running"),
        ("could not translate host name \"db\" to address", "could not be resolved"),
        ("FATAL: password authentication failed for user \"arthur\"", "credentials"),
        ("FATAL: database \"camelot\" does not exist", "does not exist"),
        ("Could not connect to the database: unable to open database file", "SQLite file"),
        ("Invalid database configuration: Could not parse SQLAlchemy URL", "KNIGHTS_QUEST_DATABASE_URL"),
        ("Database driver is not installed: No module named 'psycopg'", "knights-quest[postgres]"),
        (
            "No database configured: set KNIGHTS_QUEST_DATABASE_URL or DATABASE_URL",
            "KNIGHTS_QUEST_DB_PATH",
        ),
        (
            "Lost database connection during query: server closed the connection unexpectedly",
            "connection dropped",
        ),
    ],
)
def test_connection_hint_matches_failure(message: str, expected: str) -> None:
    hint = connection_hint(DatabaseConnectivityError(message))

    assert hint is not None
    assert expected in hint


def test_connection_hint_is_none_for_unknown_failures() -> None:
    assert connection_hint(DatabaseConnectivityError("the raven ate the cable")) is None
