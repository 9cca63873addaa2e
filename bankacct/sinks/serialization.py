"""Shared serialization utilities for sinks."""

from dataclasses import fields
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Iterator

from bankacct.exceptions import DatabaseFormatError
from bankacct.models import Account
from bankacct.models.account import ACCOUNT_NUMBER_LENGTH, PASSWORD_LENGTH

# Order of fields in a database record
RECORD_FIELDS = (
    "last",
    "first",
    "middle",
    "ssn",
    "area_code",
    "phone",
    "balance",
    "number",
    "password",
)

_DIGIT_FIELDS = {"ssn": 9, "area_code": 3, "phone": 7}


def format_balance(value: Decimal) -> str:
    """Two-decimal rendering used in files and on screen."""
    return f"{value:.2f}"


def num_places(value: int | Decimal) -> int:
    """Number of characters the integer part of ``value`` takes up."""
    whole = int(value)
    places = 1
    if whole < 0:
        whole = -whole
        places += 1
    while whole >= 10:
        places += 1
        whole //= 10
    return places


def to_record_lines(account: Account) -> list[str]:
    """Serialize an account to its database lines (one field per line)."""
    values = {name: getattr(account, name) for name in RECORD_FIELDS}
    values["balance"] = format_balance(account.balance)
    return [str(values[name]) for name in RECORD_FIELDS]


def dumps(accounts: Iterable[Account]) -> str:
    """Serialize accounts to database text; each record ends with a blank line."""
    chunks = []
    for account in accounts:
        chunks.append("\n".join(to_record_lines(account)) + "\n\n")
    return "".join(chunks)


def iter_records(text: str) -> Iterator[list[str]]:
    """Split database text into nine-token records.

    A trailing incomplete record is ignored.
    """
    tokens = text.split()
    width = len(RECORD_FIELDS)
    for start in range(0, len(tokens) - width + 1, width):
        yield tokens[start : start + width]


def from_record_tokens(tokens: list[str]) -> Account:
    """Build an account from one record's tokens."""
    if len(tokens) != len(RECORD_FIELDS):
        raise DatabaseFormatError(
            f"Expected {len(RECORD_FIELDS)} fields, got {len(tokens)}"
        )
    values: dict[str, Any] = dict(zip(RECORD_FIELDS, tokens))

    for name, length in _DIGIT_FIELDS.items():
        if not values[name].isdigit():
            raise DatabaseFormatError(f"Field {name} must be numeric, got {values[name]!r}")
        values[name] = values[name].zfill(length)

    if len(values["middle"]) != 1 or not values["middle"].isalpha():
        raise DatabaseFormatError(f"Middle initial must be one letter, got {values['middle']!r}")

    number = values["number"]
    if len(number) != ACCOUNT_NUMBER_LENGTH or not number.isalnum() or number != number.upper():
        raise DatabaseFormatError(
            f"Account number must be {ACCOUNT_NUMBER_LENGTH} uppercase letters or digits, got {number!r}"
        )
    if len(values["password"]) != PASSWORD_LENGTH or not values["password"].isalnum():
        raise DatabaseFormatError(
            f"Password of account {number} must be {PASSWORD_LENGTH} letters or digits"
        )

    try:
        values["balance"] = Decimal(values["balance"])
    except InvalidOperation as exc:
        raise DatabaseFormatError(f"Invalid balance {values['balance']!r}") from exc
    if not values["balance"].is_finite():
        raise DatabaseFormatError(f"Invalid balance {tokens[6]!r}")

    return Account(**values)


def loads(text: str) -> list[Account]:
    """Parse database text into accounts (file order)."""
    return [from_record_tokens(tokens) for tokens in iter_records(text)]


def to_dict(account: Account) -> dict:
    """Account as a dict with the password masked; for log extras."""
    result = {f.name: getattr(account, f.name) for f in fields(account)}
    result["balance"] = format_balance(account.balance)
    result["password"] = "******"
    result["ssn"] = "*****" + account.ssn[-4:]
    return result
