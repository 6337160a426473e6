"""Interactive prompts: single choice, checklist, free text, and yes/no."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt

from knights_quest.errors import QuestValidationError
from knights_quest.validation import validate_selection


@dataclass(frozen=True)
class Choice:
    label: str
    value: Any


class Prompter(Protocol):
    def select_one(self, message: str, choices: Sequence[Choice]) -> Any: ...

    def select_many(
        self,
        message: str,
        choices: Sequence[Choice],
        minimum: int,
        maximum: int | None = None,
        *,
        noun: str = "option",
    ) -> list[Any]: ...

    def ask_text(self, message: str, validate: Callable[[str], str]) -> str: ...

    def confirm(self, message: str, default: bool = True) -> bool: ...


def parse_indices(raw: str, count: int) -> list[int]:
    """Parse "1, 3" into zero-based indices, keeping first-seen order."""
    indices: list[int] = []
    for token in raw.replace(" ", ",").split(","):
        if not token:
            continue
        try:
            number = int(token)
        except ValueError:
            raise QuestValidationError(f"'{token}' is not a number.") from None
        if number < 1 or number > count:
            raise QuestValidationError(f"Choose numbers between 1 and {count}.")
        if number - 1 not in indices:
            indices.append(number - 1)
    return indices


class RichPrompter:
    """Prompter backed by rich's Prompt and Confirm."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _show_choices(self, choices: Sequence[Choice]) -> None:
        for number, choice in enumerate(choices, start=1):
            self.console.print(f"  [bold]{number}[/bold]. {choice.label}")

    def _warn(self, message: str) -> None:
        self.console.print(f"[red]{message}[/red]")

    def select_one(self, message: str, choices: Sequence[Choice]) -> Any:
        self._show_choices(choices)
        answer = Prompt.ask(
            message,
            choices=[str(number) for number in range(1, len(choices) + 1)],
            show_choices=False,
            console=self.console,
        )
        return choices[int(answer) - 1].value

    def select_many(
        self,
        message: str,
        choices: Sequence[Choice],
        minimum: int,
        maximum: int | None = None,
        *,
        noun: str = "option",
    ) -> list[Any]:
        self._show_choices(choices)
        while True:
            raw = Prompt.ask(
                f"{message} [dim](comma-separated numbers)[/dim]",
                console=self.console,
            )
            try:
                indices = parse_indices(raw, len(choices))
                validate_selection(indices, minimum, maximum, noun=noun)
            except QuestValidationError as exc:
                self._warn(str(exc))
                continue
            return [choices[index].value for index in indices]

    def ask_text(self, message: str, validate: Callable[[str], str]) -> str:
        while True:
            raw = Prompt.ask(message, console=self.console)
            try:
                return validate(raw)
            except QuestValidationError as exc:
                self._warn(str(exc))

    def confirm(self, message: str, default: bool = True) -> bool:
        return Confirm.ask(message, default=default, console=self.console)
