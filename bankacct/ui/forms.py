"""Text fields and the multi-field open-account form."""

import curses
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable

from bankacct.exceptions import QuitRequested
from bankacct.models import Account
from bankacct.models.account import (
    ACCOUNT_NUMBER_LENGTH,
    AREA_CODE_LENGTH,
    FIRST_NAME_LENGTH,
    LAST_NAME_LENGTH,
    PASSWORD_LENGTH,
    PHONE_LENGTH,
    SSN_LENGTH,
)
from bankacct.store import AccountStore
from bankacct.ui.entry import MAX_PLACES
from bankacct.ui.keys import CTRL_C, ESC, TAB, as_char, is_backspace, is_enter

MIN_NAME_LENGTH = 3


class InputOutcome(str, Enum):
    PENDING = "PENDING"
    CANCELLED = "CANCELLED"
    SUBMITTED = "SUBMITTED"


class TextInput:
    """Single-line text buffer.

    Parameters
    ----------
    value : str
        Initial contents.
    max_length : int | None
        Characters beyond this are ignored.
    allowed : Callable[[str], bool] | None
        Character filter; everything printable when ``None``.
    upper : bool
        Uppercase accepted characters.
    submit_when_full : bool
        Submit as soon as ``max_length`` characters are typed.
    """

    def __init__(
        self,
        value: str = "",
        max_length: int | None = None,
        allowed: Callable[[str], bool] | None = None,
        upper: bool = False,
        submit_when_full: bool = False,
    ) -> None:
        self.value = value
        self.max_length = max_length
        self.allowed = allowed
        self.upper = upper
        self.submit_when_full = submit_when_full

    @property
    def full(self) -> bool:
        return self.max_length is not None and len(self.value) >= self.max_length

    def feed(self, key: int) -> InputOutcome:
        if key == CTRL_C:
            raise QuitRequested()
        if is_enter(key):
            return InputOutcome.SUBMITTED
        if key == ESC:
            return InputOutcome.CANCELLED
        if is_backspace(key):
            self.value = self.value[:-1]
            return InputOutcome.PENDING

        char = as_char(key)
        if char is None or self.full:
            return InputOutcome.PENDING
        if self.allowed is not None and not self.allowed(char):
            return InputOutcome.PENDING
        self.value += char.upper() if self.upper else char
        if self.submit_when_full and self.full:
            return InputOutcome.SUBMITTED
        return InputOutcome.PENDING


def password_input() -> TextInput:
    """Password prompt that checks itself once six characters are typed."""
    return TextInput(max_length=PASSWORD_LENGTH, allowed=str.isalnum, submit_when_full=True)


class AccountNumberInput:
    """Target-account picker of the transfer screen.

    Typing five characters looks the account up; Tab cycles through the
    accounts in number order, never offering the source account.
    """

    def __init__(self, store: AccountStore, source: str) -> None:
        self.store = store
        self.source = source
        self.text = ""
        self.target: Account | None = None
        self.error = False

    @property
    def display(self) -> str:
        return self.target.number if self.target is not None else self.text

    def feed(self, key: int) -> InputOutcome:
        if key == CTRL_C:
            raise QuitRequested()
        if is_enter(key):
            if self.target is not None:
                return InputOutcome.SUBMITTED
            self.error = True
            return InputOutcome.PENDING
        if key == ESC:
            return InputOutcome.CANCELLED
        if is_backspace(key):
            if self.target is not None:
                self.text = self.target.number
                self.target = None
            self.text = self.text[:-1]
            self.error = False
            return InputOutcome.PENDING
        if key == TAB:
            self.target = self.store.next_after(self.display, exclude=self.source)
            if self.target is not None:
                self.text = self.target.number
            self.error = False
            return InputOutcome.PENDING

        char = as_char(key)
        if char is None or not char.isalnum() or self.target is not None:
            return InputOutcome.PENDING
        if len(self.text) >= ACCOUNT_NUMBER_LENGTH:
            return InputOutcome.PENDING
        self.text += char.upper()
        self.error = False
        if len(self.text) == ACCOUNT_NUMBER_LENGTH:
            found = self.store.find(self.text)
            if found is None or found.number == self.source:
                self.error = True
            else:
                self.target = found
        return InputOutcome.PENDING


@dataclass(frozen=True)
class FieldSpec:
    """One field of the open-account form."""

    name: str
    label: str
    accepts: Callable[[str, str], bool]  # (buffer, char)
    complete: Callable[[str], bool]
    upper: bool = False
    secret: bool = False


def _letters(limit: int) -> Callable[[str, str], bool]:
    return lambda buf, ch: ch.isalpha() and len(buf) < limit


def _digits(limit: int) -> Callable[[str, str], bool]:
    return lambda buf, ch: ch.isdigit() and len(buf) < limit


def _alnum(limit: int) -> Callable[[str, str], bool]:
    return lambda buf, ch: ch.isalnum() and len(buf) < limit


def _balance_char(buf: str, ch: str) -> bool:
    if ch == ".":
        return "." not in buf
    if not ch.isdigit():
        return False
    if "." in buf:
        return len(buf) - buf.index(".") <= 2
    return len(buf) < MAX_PLACES


FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("first", "First Name", _letters(FIRST_NAME_LENGTH), lambda v: len(v) >= MIN_NAME_LENGTH),
    FieldSpec("last", "Last Name", _letters(LAST_NAME_LENGTH), lambda v: len(v) >= MIN_NAME_LENGTH),
    FieldSpec("middle", "Middle Initial", _letters(1), lambda v: len(v) == 1, upper=True),
    FieldSpec("ssn", "Social Security Number", _digits(SSN_LENGTH), lambda v: len(v) == SSN_LENGTH),
    FieldSpec("area_code", "Phone Number Area Code", _digits(AREA_CODE_LENGTH), lambda v: len(v) == AREA_CODE_LENGTH),
    FieldSpec("phone", "Phone Number", _digits(PHONE_LENGTH), lambda v: len(v) == PHONE_LENGTH),
    FieldSpec("balance", "Balance", _balance_char, lambda v: v not in ("", ".")),
    FieldSpec("number", "Account Number", _alnum(ACCOUNT_NUMBER_LENGTH), lambda v: len(v) == ACCOUNT_NUMBER_LENGTH, upper=True),
    FieldSpec("password", "Password", _alnum(PASSWORD_LENGTH), lambda v: len(v) == PASSWORD_LENGTH, secret=True),
)


class NewAccountForm:
    """Field-by-field construction of a new account.

    Fields are filled in order; Enter accepts the current field only when
    it is complete, Backspace on an empty field reopens the previous one.
    Once the last field is accepted :attr:`account` holds the result.
    """

    def __init__(self, store: AccountStore) -> None:
        self.store = store
        self.index = 0
        self.buffer = ""
        self.values: dict[str, str] = {}
        self.error: str | None = None
        self.account: Account | None = None

    @property
    def field(self) -> FieldSpec:
        return FIELDS[self.index]

    def rows(self) -> list[tuple[str, str]]:
        """Label and shown text of every field opened so far."""
        result = []
        for spec in FIELDS[: self.index + 1]:
            text = self.buffer if spec is self.field else self.values[spec.name]
            if spec.secret:
                text = "*" * len(text)
            result.append((spec.label, text))
        return result

    def feed(self, key: int) -> InputOutcome:
        if key == CTRL_C:
            raise QuitRequested()
        if key == ESC:
            return InputOutcome.CANCELLED
        if is_enter(key):
            return self._accept()
        if key == curses.KEY_RESIZE:
            return InputOutcome.PENDING

        self.error = None
        if is_backspace(key):
            if self.buffer:
                self.buffer = self.buffer[:-1]
            elif self.index > 0:
                self.index -= 1
                self.buffer = self.values.pop(self.field.name)
            return InputOutcome.PENDING

        char = as_char(key)
        if char is not None and self.field.accepts(self.buffer, char):
            self.buffer += char.upper() if self.field.upper else char
        return InputOutcome.PENDING

    def _accept(self) -> InputOutcome:
        spec = self.field
        if not spec.complete(self.buffer):
            return InputOutcome.PENDING
        if spec.name == "number" and self.buffer in self.store:
            self.error = f"Account {self.buffer} already exists"
            return InputOutcome.PENDING

        self.values[spec.name] = self.buffer
        self.buffer = ""
        if self.index < len(FIELDS) - 1:
            self.index += 1
            return InputOutcome.PENDING

        values: dict = dict(self.values)
        values["balance"] = Decimal(values["balance"])
        self.account = Account(**values)
        return InputOutcome.SUBMITTED
