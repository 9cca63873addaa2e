"""Pytest configuration and fixtures."""

import curses
from decimal import Decimal

import pytest

from bankacct.models import Account
from bankacct.store import AccountStore


def keys(*parts: str | int) -> list[int]:
    """Key codes for a mix of typed strings and raw key codes."""
    result: list[int] = []
    for part in parts:
        if isinstance(part, str):
            result.extend(ord(ch) for ch in part)
        else:
            result.append(part)
    return result


class FakeTerminal:
    """Scripted stand-in for ``bankacct.ui.terminal.Terminal``.

    Keys are consumed in order; running out of keys fails the test
    instead of blocking. Everything written since the last clear is kept
    in ``screen``.
    """

    standout = curses.A_STANDOUT
    underline = curses.A_UNDERLINE
    error_attr = 1 << 30

    def __init__(self, key_codes: list[int], height: int = 24, width: int = 100) -> None:
        self.keys = list(key_codes)
        self.height = height
        self.width = width
        self.screen: list[tuple[int, int, str, int]] = []
        self.history: list[str] = []
        self.cursor: tuple[int, int] | None = None

    def size(self) -> tuple[int, int]:
        return self.height, self.width

    def clear(self) -> None:
        self.screen = []

    def write(self, y: int, x: int, text: str, attr: int = 0) -> None:
        self.screen.append((y, x, text, attr))
        self.history.append(text)

    def show_cursor(self, y: int, x: int) -> None:
        self.cursor = (y, x)

    def hide_cursor(self) -> None:
        self.cursor = None

    def getch(self) -> int:
        if not self.keys:
            raise AssertionError("FakeTerminal ran out of keys")
        return self.keys.pop(0)

    def texts(self, attr: int | None = None) -> list[str]:
        """Text currently on screen, optionally only with ``attr`` set."""
        return [t for _y, _x, t, a in self.screen if attr is None or a & attr]

    def seen(self, fragment: str) -> bool:
        """Whether ``fragment`` was ever written."""
        return any(fragment in text for text in self.history)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_account() -> Account:
    """Create a sample account."""
    return Account(
        first="John",
        last="Doe",
        middle="C",
        ssn="123456789",
        area_code="555",
        phone="1234567",
        balance=Decimal("100.50"),
        number="B2345",
        password="pass12",
    )


@pytest.fixture
def other_account() -> Account:
    """A second account sorting before ``sample_account``."""
    return Account(
        first="Alexander",
        last="Novotny",
        middle="K",
        ssn="987654321",
        area_code="999",
        phone="8887777",
        balance=Decimal("7898.09"),
        number="A1234",
        password="abc123",
    )


@pytest.fixture
def third_account() -> Account:
    return Account(
        first="Mary",
        last="Smith",
        middle="J",
        ssn="012345678",
        area_code="212",
        phone="5550000",
        balance=Decimal("0.00"),
        number="C3456",
        password="Zz9Zz9",
    )


@pytest.fixture
def store(sample_account: Account, other_account: Account, third_account: Account) -> AccountStore:
    """Store with three accounts: A1234, B2345, C3456."""
    return AccountStore([sample_account, other_account, third_account])


@pytest.fixture
def make_terminal():
    """Factory for a FakeTerminal pre-loaded with keystrokes.

    Strings are typed character by character, integers are sent as raw
    key codes.
    """

    def factory(*parts: str | int, height: int = 24, width: int = 100) -> FakeTerminal:
        return FakeTerminal(keys(*parts), height=height, width=width)

    return factory
