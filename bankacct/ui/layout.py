"""Column geometry and cell formatting for the main menu.

The name and balance columns stretch with the terminal width; the others
are fixed. Any width beyond the stretch limits is split evenly as margin.

::

     -------         ----        ---------  ------------  -------
    [Account]        Name        SS Number  Phone Number  Balance
     -------         ----        ---------  ------------  -------
       A123B   Novotny, Alexa...  123456789  (999)8887777  7898.09
    [- B234C   Doe, John C.       987654321  (888)7776666     5.05-]
"""

from dataclasses import dataclass
from decimal import Decimal

from bankacct.models import Account

MIN_NAME = 17
MAX_NAME = 28
MIN_BAL = 7
MAX_BAL = 15
ACC_COL = 7
SSN_COL = 9
PHO_COL = 12
MIN_ROW = 11

# Two spaces between five columns, three on either side
_GAPS = 8 + 6
MIN_WIDTH = MIN_NAME + MIN_BAL + ACC_COL + SSN_COL + PHO_COL + _GAPS
MAX_VAR = (MAX_NAME - MIN_NAME) + (MAX_BAL - MIN_BAL)

ELLIPSIS = "..."


@dataclass(frozen=True)
class MenuColumns:
    """Left edge of every column and the stretched widths."""

    name_width: int
    balance_width: int
    account_x: int
    name_x: int
    ssn_x: int
    phone_x: int
    balance_x: int
    footer_x: int

    @classmethod
    def for_width(cls, width: int) -> "MenuColumns":
        var_space = max(0, width - MIN_WIDTH)
        margin = max(0, var_space - MAX_VAR)
        var_space -= margin
        balance_extra = min(var_space // 2, MAX_BAL - MIN_BAL)
        name_extra = var_space - balance_extra

        account_x = 3 + margin // 2
        name_x = account_x + ACC_COL + 2
        ssn_x = name_x + MIN_NAME + name_extra + 2
        phone_x = ssn_x + SSN_COL + 2
        balance_x = phone_x + PHO_COL + 2
        return cls(
            name_width=MIN_NAME + name_extra,
            balance_width=MIN_BAL + balance_extra,
            account_x=account_x,
            name_x=name_x,
            ssn_x=ssn_x,
            phone_x=phone_x,
            balance_x=balance_x,
            footer_x=name_x + var_space // 2 - 2,
        )

    @property
    def right_edge(self) -> int:
        return self.balance_x + self.balance_width


def fits_main_menu(height: int, width: int) -> bool:
    return height >= MIN_ROW and width >= MIN_WIDTH


def format_name_cell(account: Account, width: int) -> str:
    """``Last, First M.`` cut with an ellipsis to ``width`` characters."""
    room = width - len(ELLIPSIS)
    if len(account.last) > room:
        return account.last[:room] + ELLIPSIS

    first_room = width - len(account.last) - 2
    text = f"{account.last}, {account.first[:first_room]}"
    if len(account.first) > first_room - len(ELLIPSIS):
        return text[:room] + ELLIPSIS
    return f"{text} {account.middle}."


def format_balance_cell(balance: Decimal, width: int) -> str:
    """Right-justified balance; a ``~`` marks dropped leading digits."""
    if balance >= Decimal(10) ** (width - 3):
        return "~" + f"{balance % Decimal(10) ** (width - 4):.2f}"
    return f"{balance:>{width}.2f}"


def format_short_balance(balance: Decimal) -> str:
    """Balance for the account screen, limited to nine integer digits."""
    return f"{balance % Decimal(10) ** 9:.2f}"
