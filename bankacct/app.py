"""Program entry point.

Exit codes:

* ``0``: normal exit
* ``1``: the database file could not be loaded or saved, the log file
  could not be opened, or the configuration is invalid
"""

import curses
import locale
import sys

from bankacct.config import AppConfig
from bankacct.exceptions import (
    ConfigurationError,
    DatabaseError,
    DatabaseFormatError,
    DuplicateAccountError,
    QuitRequested,
)
from bankacct.logging import get_logger, setup_logging
from bankacct.sinks import FlatFileSink
from bankacct.store import AccountStore
from bankacct.ui.screens import database_prompt, main_menu
from bankacct.ui.terminal import Terminal

logger = get_logger(__name__)


def load_store(sink: FlatFileSink, config: AppConfig) -> AccountStore:
    """Read the database into a store sorted by account number."""
    accounts = sink.load()
    try:
        return AccountStore(accounts, master_password=config.master_password)
    except DuplicateAccountError as exc:
        raise DatabaseFormatError(f'"{sink.path}": {exc}') from exc


def run(stdscr, config: AppConfig) -> int:
    """Body of the curses session."""
    term = Terminal.initialise(stdscr, config.esc_delay_ms)

    try:
        db_name = database_prompt(term, config.default_database)
    except QuitRequested:
        logger.info("Quit at database prompt")
        return 0

    sink = FlatFileSink(db_name)
    store = load_store(sink, config)

    # Written back on every way out of the menu, Ctrl-C included
    try:
        main_menu(term, store, config)
    except QuitRequested:
        logger.info("Quit requested")
    finally:
        sink.save(store)
    return 0


def main() -> int:
    try:
        config = AppConfig.from_env()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        setup_logging(
            level=config.logging.level,
            format_type=config.logging.format_type,
            log_file=config.logging.log_file,
        )
    except OSError as exc:
        print(f'Error: log file "{config.logging.log_file}" could not be opened: {exc}', file=sys.stderr)
        return 1

    # Must run before curses starts
    locale.setlocale(locale.LC_ALL, "")

    try:
        return curses.wrapper(run, config)
    except DatabaseError as exc:
        logger.error("Database error: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
