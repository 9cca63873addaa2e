"""Keystroke-driven entry of a monetary amount.

Deposit, withdraw and transfer share one state machine. The amount is
built digit by digit; ``place`` tracks where the next digit goes:

* ``0``: no decimal point yet, digits extend the integer part
* ``-1``: decimal point typed, next digit is tenths
* ``-2``: next digit is hundredths
* ``-3``: both decimals entered, further digits are ignored

A first Enter arms a confirmation, a second Enter commits. Any other key
disarms it.
"""

import curses
from decimal import ROUND_DOWN, Decimal
from enum import Enum

from bankacct.exceptions import QuitRequested
from bankacct.sinks.serialization import num_places
from bankacct.ui.keys import CTRL_C, ESC, as_char, is_backspace, is_enter

# Widest integer part the credited balance may reach
MAX_PLACES = 12

# Width of the rendered amount field ("%15.2f")
FIELD_WIDTH = 15


class EntryOutcome(str, Enum):
    PENDING = "PENDING"
    CANCELLED = "CANCELLED"
    COMMITTED = "COMMITTED"


class AmountEntry:
    """State of one amount being typed.

    Parameters
    ----------
    source_balance : Decimal | None
        Balance of the debited account (withdraw, transfer).
    target_balance : Decimal | None
        Balance of the credited account (deposit, transfer).
    """

    def __init__(
        self,
        source_balance: Decimal | None = None,
        target_balance: Decimal | None = None,
    ) -> None:
        self.source_balance = source_balance
        self.target_balance = target_balance
        self.amount = Decimal("0")
        self.place = 0
        self.confirm = False

    @property
    def source_after(self) -> Decimal | None:
        if self.source_balance is None:
            return None
        return self.source_balance - self.amount

    @property
    def target_after(self) -> Decimal | None:
        if self.target_balance is None:
            return None
        return self.target_balance + self.amount

    @property
    def overdrawn(self) -> bool:
        """True when committing would leave the debited account negative."""
        after = self.source_after
        return after is not None and after < 0

    @property
    def complete(self) -> bool:
        """True once both decimal places have been typed."""
        return self.place < -2

    @property
    def cursor_index(self) -> int | None:
        """Column of the text cursor within the amount field."""
        if self.complete:
            return None
        return FIELD_WIDTH - 4 - self.place

    def feed(self, key: int) -> EntryOutcome:
        """Apply one keystroke."""
        if key == CTRL_C:
            raise QuitRequested()
        if key == curses.KEY_RESIZE:
            return EntryOutcome.PENDING

        if is_enter(key):
            if self.confirm:
                return EntryOutcome.COMMITTED
            if not self.overdrawn:
                self.confirm = True
            return EntryOutcome.PENDING

        was_armed = self.confirm
        self.confirm = False

        if key == ESC:
            return EntryOutcome.PENDING if was_armed else EntryOutcome.CANCELLED

        char = as_char(key)
        if char is not None and char.isdigit():
            self._digit(int(char))
        elif char == ".":
            if self.place == 0:
                self.place = -1
        elif is_backspace(key):
            self._backspace()
        return EntryOutcome.PENDING

    def _digit(self, digit: int) -> None:
        if self.complete or self.overdrawn:
            return
        if self.place == 0:
            # Leading zeros
            if digit == 0 and self.amount == 0:
                return
            reference = self.target_after if self.target_after is not None else self.amount
            if num_places(reference) >= MAX_PLACES:
                return
            self.amount = self.amount * 10 + digit
        else:
            self.amount += Decimal(digit).scaleb(self.place)
            self.place -= 1

    def _backspace(self) -> None:
        if self.place <= -2:
            self.place += 1
            quantum = Decimal(1).scaleb(self.place + 1)
            self.amount = self.amount.quantize(quantum, rounding=ROUND_DOWN)
        elif self.place == -1:
            self.place = 0
        else:
            self.amount = self.amount // 10
