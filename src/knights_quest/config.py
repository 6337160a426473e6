"""Configuration helpers for knights_quest."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from knights_quest.errors import DatabaseConnectivityError

DB_PATH_ENV_VAR = "KNIGHTS_QUEST_DB_PATH"
DATABASE_URL_ENV_VAR = "KNIGHTS_QUEST_DATABASE_URL"
FALLBACK_DATABASE_URL_ENV_VAR = "DATABASE_URL"
LOG_LEVEL_ENV_VAR = "KNIGHTS_QUEST_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def load_environment(dotenv_path: str | None = None) -> bool:
    """Load a .env file into the process environment without overriding it.

    Without an explicit path the file is looked up from the working directory.
    """
    if dotenv_path is None:
        dotenv_path = find_dotenv(usecwd=True)
    return load_dotenv(dotenv_path=dotenv_path, override=False)


def get_db_path() -> str | None:
    """Return the absolute SQLite path when one is configured explicitly."""
    env_value = os.getenv(DB_PATH_ENV_VAR)
    if env_value and env_value.strip():
        return str(Path(env_value.strip()).expanduser().resolve())
    return None


def get_database_url() -> str:
    """Return the configured database URL.

    Raises DatabaseConnectivityError when no database is configured at all.
    """
    for name in (DATABASE_URL_ENV_VAR, FALLBACK_DATABASE_URL_ENV_VAR):
        env_value = os.getenv(name)
        if env_value and env_value.strip():
            return env_value.strip()
    db_path = get_db_path()
    if db_path is not None:
        return f"sqlite:///{db_path}"
    raise DatabaseConnectivityError(
        f"No database configured: set {DATABASE_URL_ENV_VAR} or "
        f"{FALLBACK_DATABASE_URL_ENV_VAR}"
    )


def get_log_level() -> str:
    env_value = os.getenv(LOG_LEVEL_ENV_VAR)
    if env_value and env_value.strip():
        return env_value.strip().upper()
    return DEFAULT_LOG_LEVEL
