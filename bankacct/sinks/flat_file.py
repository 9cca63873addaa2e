"""Flat text file sink holding the account database."""

from pathlib import Path
from typing import Iterable

from bankacct.exceptions import DatabaseError, DatabaseFormatError
from bankacct.logging import get_logger
from bankacct.models import Account
from bankacct.sinks.serialization import dumps, loads, to_dict

logger = get_logger(__name__)


class FlatFileSink:
    """Load and save the whole account list as one whitespace-delimited file.

    Each record is nine lines (last, first, middle initial, SSN, area code,
    phone, balance, account number, password) followed by a blank line.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize flat file sink.

        Parameters
        ----------
        path : str | Path
            Database file to read from and write to.
        """
        self.path = Path(path)

    def load(self) -> list[Account]:
        """Read every record from the database file."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DatabaseError(f'"{self.path}" could not be opened') from exc
        except UnicodeDecodeError as exc:
            raise DatabaseFormatError(f'"{self.path}" is not a text database') from exc

        accounts = loads(text)
        for account in accounts:
            logger.debug("Loaded account %s", account.number, extra={"extra": to_dict(account)})
        logger.info("Loaded %d accounts from %s", len(accounts), self.path)
        return accounts

    def save(self, accounts: Iterable[Account]) -> None:
        """Overwrite the database file with ``accounts``."""
        accounts = list(accounts)
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(dumps(accounts))
        except OSError as exc:
            raise DatabaseError(f'"{self.path}" could not be written') from exc
        logger.info("Saved %d accounts to %s", len(accounts), self.path)
