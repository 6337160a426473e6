"""Parameterized query execution and the scoped transaction primitive."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any, TypeVar

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine, RowMapping
from sqlalchemy.exc import (
    DBAPIError,
    DisconnectionError,
    InterfaceError,
    SQLAlchemyError,
)
from sqlalchemy.sql.elements import TextClause

from knights_quest.errors import DatabaseConnectivityError, DatabaseStatementError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Statement = TextClause | str
Parameters = Mapping[str, Any] | None


def _as_clause(statement: Statement) -> TextClause:
    if isinstance(statement, str):
        return text(statement)
    return statement


def _is_disconnect(exc: SQLAlchemyError) -> bool:
    if isinstance(exc, (DisconnectionError, InterfaceError)):
        return True
    return isinstance(exc, DBAPIError) and bool(exc.connection_invalidated)


def _describe(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


@contextmanager
def _translate_errors(action: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        if _is_disconnect(exc):
            raise DatabaseConnectivityError(
                f"Lost database connection during {action}: {_describe(exc)}"
            ) from exc
        raise DatabaseStatementError(f"{action} failed: {_describe(exc)}") from exc


def _execute(
    connection: Connection, statement: Statement, parameters: Parameters
) -> list[RowMapping]:
    with _translate_errors("query"):
        result = connection.execute(_as_clause(statement), dict(parameters or {}))
        if not result.returns_rows:
            return []
        return list(result.mappings().all())


class TransactionHandle:
    """Runs statements on the single connection owned by one transaction."""

    def __init__(self, connection: Connection) -> None:
        self._connection = connection

    def query(self, statement: Statement, parameters: Parameters = None) -> list[RowMapping]:
        return _execute(self._connection, statement, parameters)


class Database:
    """Data access over an injected engine and its connection pool."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._closed = False

    def _connect(self) -> Connection:
        try:
            return self.engine.connect()
        except SQLAlchemyError as exc:
            raise DatabaseConnectivityError(
                f"Could not connect to the database: {_describe(exc)}"
            ) from exc

    def query(self, statement: Statement, parameters: Parameters = None) -> list[RowMapping]:
        """Execute one parameterized statement and return its rows."""
        with self._connect() as connection:
            rows = _execute(connection, statement, parameters)
            with _translate_errors("commit"):
                connection.commit()
        return rows

    def transaction(self, unit_of_work: Callable[[TransactionHandle], T]) -> T:
        """Run ``unit_of_work`` inside one transaction on one connection.

        Commits and returns the unit of work's result on success. On any
        failure, including ``KeyboardInterrupt``, the transaction is rolled
        back and the original exception is re-raised. The connection goes
        back to the pool on every exit path.
        """
        connection = self._connect()
        try:
            with _translate_errors("begin"):
                transaction = connection.begin()
            logger.debug("BEGIN")
            try:
                result = unit_of_work(TransactionHandle(connection))
                with _translate_errors("commit"):
                    transaction.commit()
            except BaseException:
                self._rollback(transaction)
                raise
            logger.debug("COMMIT")
            return result
        finally:
            connection.close()

    @staticmethod
    def _rollback(transaction) -> None:
        try:
            if transaction.is_active:
                transaction.rollback()
                logger.debug("ROLLBACK")
        except SQLAlchemyError:
            # The original failure is re-raised by the caller.
            logger.warning("Rollback failed", exc_info=True)

    def test_connection(self) -> None:
        """Round-trip a trivial query; raises DatabaseConnectivityError."""
        try:
            self.query("SELECT 1")
        except DatabaseStatementError as exc:
            raise DatabaseConnectivityError(str(exc)) from exc

    def close(self) -> None:
        """Release every pooled connection."""
        if self._closed:
            return
        self._closed = True
        self.engine.dispose()
        logger.debug("Connection pool disposed")
