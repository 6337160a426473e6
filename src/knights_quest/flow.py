"""Quest-creation flow: realm, party, equipment, title, confirm, save."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from rich.console import Console

from knights_quest.db.access import Database
from knights_quest.errors import (
    DatabaseConnectivityError,
    DatabaseStatementError,
    EmptyPrerequisiteError,
    QuestError,
)
from knights_quest.models.character import Character
from knights_quest.models.item import Item
from knights_quest.models.realm import Realm
from knights_quest.presentation import (
    connection_hint,
    render_cancelled,
    render_error,
    render_step,
    render_success,
    render_summary,
)
from knights_quest.prompts import Choice, Prompter
from knights_quest.queries import (
    fetch_characters_by_realm,
    fetch_items,
    fetch_realm_by_id,
    fetch_realms,
)
from knights_quest.quest_writer import Assignment, SavedQuest, save_quest
from knights_quest.validation import (
    MAX_PARTY_SIZE,
    MIN_ITEMS_PER_CHARACTER,
    MIN_PARTY_SIZE,
    validate_title,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FlowStep(Enum):
    SELECT_REALM = 1
    SELECT_CHARACTERS = 2
    ASSIGN_ITEMS = 3
    NAME_QUEST = 4
    CONFIRM_AND_SAVE = 5
    DONE = 6


STEP_LABELS = {
    FlowStep.SELECT_REALM: "Choose Your Realm",
    FlowStep.SELECT_CHARACTERS: "Assemble Your Party",
    FlowStep.ASSIGN_ITEMS: "Equip Your Party",
    FlowStep.NAME_QUEST: "Name Your Quest",
}


@dataclass
class FlowResult:
    created: bool
    quest: SavedQuest | None = None
    cancelled: bool = False
    error: QuestError | None = None


class QuestCreationFlow:
    """One run of the quest-creation state machine.

    Steps only move forward. Each step fetches what it needs, prompts, and
    hands its validated answer to the next step. Failures end the run; the
    caller decides whether to start another.
    """

    def __init__(
        self,
        database: Database,
        prompter: Prompter,
        console: Console | None = None,
    ) -> None:
        self.database = database
        self.prompter = prompter
        self.console = console or Console()
        self.step = FlowStep.SELECT_REALM

    def _enter(self, step: FlowStep) -> None:
        self.step = step
        logger.debug("Entering step %s", step.name)
        label = STEP_LABELS.get(step)
        if label:
            self.console.print(render_step(step.value, label))

    def _fetch(self, fetch: Callable[..., T], *args: object) -> T:
        with self.console.status("[cyan]Consulting the archives..."):
            return fetch(self.database, *args)

    def select_realm(self) -> Realm:
        self._enter(FlowStep.SELECT_REALM)
        realms = self._fetch(fetch_realms)
        if not realms:
            raise EmptyPrerequisiteError(
                "realms", "No realms found. Load the realm data and try again."
            )
        realm_id = self.prompter.select_one(
            "Choose a realm for your quest",
            [Choice(f"{realm.name} (Ruler: {realm.ruler})", realm.id) for realm in realms],
        )
        realm = self._fetch(fetch_realm_by_id, realm_id)
        if realm is None:
            raise EmptyPrerequisiteError("realm", "The chosen realm no longer exists.")
        return realm

    def select_characters(self, realm: Realm) -> list[Character]:
        self._enter(FlowStep.SELECT_CHARACTERS)
        characters = self._fetch(fetch_characters_by_realm, realm.id)
        if not characters:
            raise EmptyPrerequisiteError(
                "characters",
                f"No characters found in {realm.name}. Please choose another realm.",
            )
        return self.prompter.select_many(
            f"Select your party members ({MIN_PARTY_SIZE}-{MAX_PARTY_SIZE} characters)",
            [Choice(f"{character.name} ({character.role})", character) for character in characters],
            MIN_PARTY_SIZE,
            MAX_PARTY_SIZE,
            noun="character",
        )

    def assign_items(self, characters: list[Character]) -> list[Assignment]:
        self._enter(FlowStep.ASSIGN_ITEMS)
        items: list[Item] = self._fetch(fetch_items)
        if not items:
            raise EmptyPrerequisiteError(
                "items", "No items found. Load the armory data and try again."
            )
        choices = [
            Choice(f"{item.name} - {item.type} (Power: {item.power})", item)
            for item in items
        ]
        assignments = []
        for character in characters:
            selected = self.prompter.select_many(
                f"Assign items to {character.name} ({character.role})",
                choices,
                MIN_ITEMS_PER_CHARACTER,
                noun="item",
            )
            assignments.append(Assignment(character=character, items=list(selected)))
        return assignments

    def name_quest(self) -> str:
        self._enter(FlowStep.NAME_QUEST)
        return self.prompter.ask_text("Enter a title for your quest", validate_title)

    def confirm_and_save(
        self, title: str, realm: Realm, assignments: list[Assignment]
    ) -> SavedQuest | None:
        self.step = FlowStep.CONFIRM_AND_SAVE
        self.console.print(render_summary(title, realm, assignments))
        if not self.prompter.confirm("Create this quest?", default=True):
            return None
        with self.console.status("[cyan]Recording your quest..."):
            return save_quest(self.database, title, realm.id, assignments)

    def run(self) -> FlowResult:
        """Run every step once and report the outcome."""
        try:
            realm = self.select_realm()
            characters = self.select_characters(realm)
            assignments = self.assign_items(characters)
            title = self.name_quest()
            quest = self.confirm_and_save(title, realm, assignments)
        except EmptyPrerequisiteError as exc:
            self.console.print(render_error("empty", str(exc)))
            return FlowResult(created=False, error=exc)
        except DatabaseConnectivityError as exc:
            logger.warning("Connectivity failure during %s: %s", self.step.name, exc)
            self.console.print(
                render_error("connectivity", str(exc), connection_hint(exc))
            )
            return FlowResult(created=False, error=exc)
        except DatabaseStatementError as exc:
            logger.warning("Statement failure during %s: %s", self.step.name, exc)
            self.console.print(
                render_error("statement", f"Error creating quest: {exc}")
            )
            return FlowResult(created=False, error=exc)

        if quest is None:
            self.console.print(render_cancelled())
            return FlowResult(created=False, cancelled=True)

        self.step = FlowStep.DONE
        self.console.print(render_success(quest.id))
        return FlowResult(created=True, quest=quest)
