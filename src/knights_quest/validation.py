"""Input rules for quest titles and party selections."""

from __future__ import annotations

from collections.abc import Sized

from knights_quest.errors import QuestValidationError
from knights_quest.models.quest import MAX_TITLE_LENGTH

MIN_PARTY_SIZE = 1
MAX_PARTY_SIZE = 3
MIN_ITEMS_PER_CHARACTER = 1


def validate_title(raw: str) -> str:
    """Return the trimmed title or raise QuestValidationError."""
    title = (raw or "").strip()
    if not title:
        raise QuestValidationError("Quest title cannot be empty!")
    if len(title) > MAX_TITLE_LENGTH:
        raise QuestValidationError(
            f"Quest title must be {MAX_TITLE_LENGTH} characters or less!"
        )
    return title


def validate_selection(
    selected: Sized,
    minimum: int,
    maximum: int | None = None,
    *,
    noun: str = "option",
) -> None:
    count = len(selected)
    if count < minimum:
        plural = noun if minimum == 1 else f"{noun}s"
        raise QuestValidationError(f"You must select at least {minimum} {plural}!")
    if maximum is not None and count > maximum:
        plural = noun if maximum == 1 else f"{noun}s"
        raise QuestValidationError(f"You can only select up to {maximum} {plural}!")
