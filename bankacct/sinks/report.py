"""Fixed-width report file sink."""

from pathlib import Path
from typing import Iterable

from bankacct.exceptions import ReportError
from bankacct.logging import get_logger
from bankacct.models import Account
from bankacct.sinks.serialization import format_balance

logger = get_logger(__name__)

REPORT_HEADER = (
    "-------  ----            -----           --  ---------  ------------  -------\n"
    "Account  Last            First           MI  SS         Phone         Account\n"
    "Number   Name            Name                Number     Number        Balance\n"
    "-------  ----            -----           --  ---------  ------------  -------\n"
)


def format_report_line(account: Account) -> str:
    """One report row. Names wider than the column are not truncated."""
    return (
        f" {account.number}   "
        f"{account.last:<14}  "
        f"{account.first:<14}  "
        f"{account.middle}.  "
        f"{account.ssn}  "
        f"{account.phone_display}  "
        f"{format_balance(account.balance)}\n"
    )


class ReportSink:
    """Write a human-readable account report."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def render(self, accounts: Iterable[Account]) -> str:
        """Return the full report text."""
        return REPORT_HEADER + "".join(format_report_line(acc) for acc in accounts)

    def write(self, accounts: Iterable[Account]) -> int:
        """Write the report and return the number of rows."""
        accounts = list(accounts)
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(self.render(accounts))
        except OSError as exc:
            raise ReportError(f'"{self.path}" could not be opened') from exc
        logger.info("Wrote report of %d accounts to %s", len(accounts), self.path)
        return len(accounts)
