"""Banners, summaries, and error panels for the quest CLI.

Every function here only builds a renderable; printing is left to the caller.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.text import Text
from rich.tree import Tree

from knights_quest.models.realm import Realm
from knights_quest.quest_writer import Assignment

ERROR_TITLES = {
    "connectivity": "Database Unreachable",
    "statement": "Quest Creation Failed",
    "empty": "Cannot Proceed",
    "fatal": "Fatal Error",
}

# Ordered; the first matching pattern wins.
_CONNECTION_HINTS: tuple[tuple[tuple[str, ...], str], ...] = (
    (
        ("no database configured",),
        "Set KNIGHTS_QUEST_DATABASE_URL (or DATABASE_URL) in your environment or a .env file, "
        "or point KNIGHTS_QUEST_DB_PATH at an existing SQLite database.",
    ),
    (
        ("invalid database configuration", "could not parse", "can't load plugin"),
        "Check KNIGHTS_QUEST_DATABASE_URL (or DATABASE_URL) in your environment or .env file.",
    ),
    (
        ("driver is not installed",),
        "Install the driver for your database, e.g. pip install 'knights-quest[postgres]'.",
    ),
    (
        ("connection refused", "econnrefused"),
        "Is the database server running and accepting connections on that host and port?",
    ),
    (
        ("could not translate host name", "name or service not known", "nodename nor servname", "enotfound"),
        "The database host could not be resolved. Check the host name in your connection URL.",
    ),
    (
        ("password authentication failed", "authentication failed", "access denied"),
        "The database rejected the credentials. Check the user name and password.",
    ),
    (
        ("does not exist", "unknown database"),
        "The database named in the connection URL does not exist. Create it and load the schema.",
    ),
    (
        ("unable to open database file",),
        "The SQLite file could not be opened. Check KNIGHTS_QUEST_DB_PATH and its permissions.",
    ),
    (
        ("server closed the connection", "connection reset", "lost database connection"),
        "The database connection dropped. Check the server, then start a new quest.",
    ),
    (
        ("timeout", "timed out"),
        "The database did not answer in time. Check the network and try again.",
    ),
)


def render_welcome() -> Panel:
    body = Text.assemble(
        ("KNIGHTS QUEST\n", "bold yellow"),
        ("King Arthur's Round Table Adventure", "italic"),
    )
    body.justify = "center"
    return Panel(body, box=box.DOUBLE, border_style="yellow")


def render_step(number: int, label: str) -> Text:
    return Text(f"\nStep {number}: {label}\n", style="bold cyan")


def render_summary(title: str, realm: Realm, assignments: Sequence[Assignment]) -> Panel:
    """Summarize the realm, party, and equipment before confirmation."""
    header = Text.assemble(
        ("Quest: ", "bold"),
        (f"{title}\n", "yellow"),
        ("Realm: ", "bold"),
        f"{realm.name} (Ruled by {realm.ruler})",
    )
    party = Tree(Text("Party Members & Equipment", style="bold"))
    for assignment in assignments:
        character = assignment.character
        branch = party.add(f"{character.name} ({character.role})")
        for item in assignment.items:
            branch.add(f"{item.name} ({item.type}, Power: {item.power})")
    return Panel(
        Group(header, Text(""), party),
        title="QUEST SUMMARY",
        border_style="cyan",
    )


def render_success(quest_id: int) -> Panel:
    body = Text.assemble(
        "Your quest has been recorded in the archives!\n",
        ("Quest ID: ", "bold"),
        (str(quest_id), "green"),
    )
    return Panel(body, title="QUEST CREATED!", border_style="green")


def render_cancelled() -> Text:
    return Text("\nQuest creation cancelled.\n", style="yellow")


def render_error(kind: str, message: str, hint: str | None = None) -> Panel:
    body = Text(message)
    if hint:
        body.append(f"\n\n{hint}", style="dim")
    return Panel(
        body,
        title=ERROR_TITLES.get(kind, "Error"),
        border_style="red",
    )


def render_farewell() -> Panel:
    body = Text.assemble(
        ("FAREWELL, NOBLE KNIGHT!\n", "bold yellow"),
        ("May your quests bring glory to the realm!", "italic"),
    )
    body.justify = "center"
    return Panel(body, box=box.DOUBLE, border_style="yellow")


def connection_hint(error: BaseException) -> str | None:
    """Pick a troubleshooting hint for a connectivity failure message."""
    message = str(error).lower()
    for patterns, hint in _CONNECTION_HINTS:
        if any(pattern in message for pattern in patterns):
            return hint
    return None
