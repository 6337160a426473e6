from __future__ import annotations

from io import StringIO
from pathlib import Path
import sys
from typing import Any

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

import pytest
from rich.console import Console

from knights_quest import prompts
from knights_quest.errors import QuestValidationError
from knights_quest.prompts import Choice, RichPrompter, parse_indices
from knights_quest.validation import validate_title


def _prompter(monkeypatch: pytest.MonkeyPatch, answers: list[Any]) -> tuple[RichPrompter, StringIO]:
    pending = list(answers)

    def fake_ask(*args: Any, **kwargs: Any) -> Any:
        return pending.pop(0)

    monkeypatch.setattr(prompts.Prompt, "ask", fake_ask)
    monkeypatch.setattr(prompts.Confirm, "ask", fake_ask)
    output = StringIO()
    return RichPrompter(Console(file=output, width=100)), output


CHOICES = [Choice("Lancelot (Knight)", "lancelot"), Choice("Merlin (Wizard)", "merlin"), Choice("Gawain (Knight)", "gawain")]


def test_parse_indices_keeps_order_and_ignores_repeats() -> None:
    assert parse_indices("3, 1,3", 3) == [2, 0]
    assert parse_indices("2 1", 3) == [1, 0]
    assert parse_indices("", 3) == []


@pytest.mark.parametrize("raw", ["0", "4", "two"])
def test_parse_indices_rejects_bad_numbers(raw: str) -> None:
    with pytest.raises(QuestValidationError):
        parse_indices(raw, 3)


def test_select_one_returns_choice_value(monkeypatch: pytest.MonkeyPatch) -> None:
    prompter, output = _prompter(monkeypatch, ["2"])

    assert prompter.select_one("Choose a realm", CHOICES) == "merlin"
    assert "1. Lancelot (Knight)" in output.getvalue()


def test_select_many_reprompts_until_selection_is_valid(monkeypatch: pytest.MonkeyPatch) -> None:
    prompter, output = _prompter(monkeypatch, ["", "9", "1,2,3,3", "3,1"])

    picked = prompter.select_many("Select your party", CHOICES, 1, 2, noun="character")

    assert picked == ["gawain", "lancelot"]
    text = output.getvalue()
    assert "at least 1 character!" in text
    assert "between 1 and 3" in text
    assert "up to 2 characters" in text


def test_ask_text_reprompts_on_invalid_title(monkeypatch: pytest.MonkeyPatch) -> None:
    prompter, output = _prompter(monkeypatch, ["   ", "X" * 151, "  Quest for the Grail "])

    assert prompter.ask_text("Enter a title", validate_title) == "Quest for the Grail"
    assert "cannot be empty" in output.getvalue()
    assert "150 characters or less" in output.getvalue()


def test_confirm_delegates_to_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    prompter, _ = _prompter(monkeypatch, [False])

    assert prompter.confirm("Create this quest?") is False
