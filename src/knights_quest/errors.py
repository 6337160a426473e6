"""Custom exceptions for quest creation."""

from __future__ import annotations


class QuestError(Exception):
    """Base quest-creation error."""


class DatabaseConnectivityError(QuestError):
    """Raised when the database cannot be reached or the connection is lost."""


class DatabaseStatementError(QuestError):
    """Raised when a statement is malformed or violates a constraint."""


class EmptyPrerequisiteError(QuestError):
    """Raised when a list the flow depends on has no rows."""

    def __init__(self, prerequisite: str, message: str | None = None) -> None:
        if message is None:
            message = f"No {prerequisite} found."
        super().__init__(message)
        self.prerequisite = prerequisite


class QuestValidationError(QuestError):
    """Raised when user input breaks a title or selection rule."""
