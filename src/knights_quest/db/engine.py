"""Database engine helpers for knights_quest."""

from __future__ import annotations

import logging

from sqlalchemy import event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError, NoSuchModuleError
from sqlmodel import SQLModel, create_engine

from knights_quest.config import get_database_url
from knights_quest.errors import DatabaseConnectivityError

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite does not enforce foreign keys unless asked per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def get_engine(database_url: str | None = None) -> Engine:
    """Create the process-wide engine (and its connection pool)."""
    raw_url = database_url or get_database_url()
    try:
        url = make_url(raw_url)
        if url.get_backend_name() == "sqlite":
            engine = create_engine(url, connect_args={"check_same_thread": False})
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        else:
            engine = create_engine(url, pool_pre_ping=True)
    except (ArgumentError, NoSuchModuleError) as exc:
        raise DatabaseConnectivityError(
            f"Invalid database configuration: {exc}"
        ) from exc
    except ImportError as exc:
        raise DatabaseConnectivityError(
            f"Database driver is not installed: {exc}"
        ) from exc
    logger.debug("Created engine for %s", engine.url.render_as_string(hide_password=True))
    return engine


def create_db_and_tables(engine: Engine) -> None:
    """Create the quest tables if they do not already exist (tests and demos)."""
    from knights_quest import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
