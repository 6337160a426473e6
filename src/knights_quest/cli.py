"""Command-line interface for knights_quest."""

from __future__ import annotations

import argparse
import logging
from importlib.metadata import PackageNotFoundError, version

from rich.console import Console

from knights_quest.config import get_log_level, load_environment
from knights_quest.db.access import Database
from knights_quest.db.engine import get_engine
from knights_quest.errors import DatabaseConnectivityError
from knights_quest.flow import QuestCreationFlow
from knights_quest.presentation import (
    connection_hint,
    render_error,
    render_farewell,
    render_welcome,
)
from knights_quest.prompts import Prompter, RichPrompter

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _package_version() -> str:
    try:
        return version("knights-quest")
    except PackageNotFoundError:
        return "unknown"


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="knights-quest",
        description=(
            "Interactively assemble a quest: pick a realm, a party of 1-3 "
            "characters, and their equipment, then record it in the database. "
            "Connection settings come from KNIGHTS_QUEST_DATABASE_URL or "
            "DATABASE_URL (a .env file is honored)."
        ),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {_package_version()}"
    )
    return parser


def _run_sessions(database: Database, prompter: Prompter, console: Console) -> None:
    while True:
        QuestCreationFlow(database, prompter, console).run()
        if not prompter.confirm("Would you like to create another quest?", default=True):
            return


def main(
    argv: list[str] | None = None,
    *,
    console: Console | None = None,
    prompter: Prompter | None = None,
) -> int:
    """Run the interactive quest creator and return the process exit code."""
    build_parser().parse_args(argv)
    load_environment()
    _configure_logging(get_log_level())

    console = console or Console()
    prompter = prompter or RichPrompter(console)
    console.print(render_welcome())

    database: Database | None = None
    try:
        try:
            database = Database(get_engine())
            database.test_connection()
        except DatabaseConnectivityError as exc:
            logger.error("Startup connectivity check failed: %s", exc)
            console.print(render_error("connectivity", str(exc), connection_hint(exc)))
            return 1
        _run_sessions(database, prompter, console)
        console.print(render_farewell())
        return 0
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Interrupted. Closing the archives.[/yellow]")
        return 0
    except Exception as exc:
        logger.exception("Fatal error")
        console.print(render_error("fatal", str(exc)))
        return 1
    finally:
        if database is not None:
            database.close()


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
