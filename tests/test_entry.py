"""Tests for keystroke-driven amount entry."""

import curses
from decimal import Decimal

import pytest

from bankacct.exceptions import QuitRequested
from bankacct.ui.entry import AmountEntry, EntryOutcome
from bankacct.ui.keys import CTRL_C, ESC

ENTER = 10


def type_text(entry: AmountEntry, text: str) -> EntryOutcome:
    outcome = EntryOutcome.PENDING
    for ch in text:
        outcome = entry.feed(ord(ch))
    return outcome


class TestTyping:
    """Tests for building the amount."""

    def test_integer_and_decimals(self) -> None:
        entry = AmountEntry()
        type_text(entry, "12.34")

        assert entry.amount == Decimal("12.34")
        assert entry.place == -3
        assert entry.complete
        assert entry.cursor_index is None

    def test_third_decimal_ignored(self) -> None:
        entry = AmountEntry()
        type_text(entry, "1.239")

        assert entry.amount == Decimal("1.23")

    def test_leading_zeros_ignored(self) -> None:
        entry = AmountEntry()
        type_text(entry, "007")

        assert entry.amount == Decimal("7")

    def test_cents_only(self) -> None:
        entry = AmountEntry()
        type_text(entry, ".05")

        assert entry.amount == Decimal("0.05")

    def test_second_point_ignored(self) -> None:
        entry = AmountEntry()
        type_text(entry, "1..5")

        assert entry.amount == Decimal("1.5")
        assert entry.place == -2

    def test_letters_ignored(self) -> None:
        entry = AmountEntry()
        type_text(entry, "4x2")

        assert entry.amount == Decimal("42")

    def test_cursor_position(self) -> None:
        entry = AmountEntry()
        assert entry.cursor_index == 11

        type_text(entry, "5.")
        assert entry.cursor_index == 12

        type_text(entry, "5")
        assert entry.cursor_index == 13

    def test_integer_cap_on_credited_balance(self) -> None:
        entry = AmountEntry(target_balance=Decimal("99999999999"))
        type_text(entry, "12")

        assert entry.amount == Decimal("1")
        assert entry.target_after == Decimal("100000000000")

    def test_decimals_allowed_at_cap(self) -> None:
        entry = AmountEntry(target_balance=Decimal("99999999999"))
        type_text(entry, "1.25")

        assert entry.amount == Decimal("1.25")


class TestBackspace:
    """Tests for erasing typed characters."""

    def test_unwinds_in_order(self) -> None:
        entry = AmountEntry()
        type_text(entry, "12.34")
        backspace = curses.KEY_BACKSPACE

        entry.feed(backspace)
        assert (entry.amount, entry.place) == (Decimal("12.3"), -2)

        entry.feed(backspace)
        assert (entry.amount, entry.place) == (Decimal("12"), -1)

        entry.feed(backspace)
        assert (entry.amount, entry.place) == (Decimal("12"), 0)

        entry.feed(backspace)
        assert entry.amount == Decimal("1")

        entry.feed(backspace)
        assert entry.amount == Decimal("0")

    def test_delete_key_code(self) -> None:
        entry = AmountEntry()
        type_text(entry, "9")
        entry.feed(127)

        assert entry.amount == 0


class TestConfirmation:
    """Tests for the two-step Enter confirmation."""

    def test_double_enter_commits(self) -> None:
        entry = AmountEntry(target_balance=Decimal("10"))
        type_text(entry, "5")

        assert entry.feed(ENTER) is EntryOutcome.PENDING
        assert entry.confirm
        assert entry.feed(ENTER) is EntryOutcome.COMMITTED
        assert entry.target_after == Decimal("15")

    def test_other_key_disarms(self) -> None:
        entry = AmountEntry()
        type_text(entry, "5")
        entry.feed(ENTER)
        entry.feed(ord("0"))

        assert not entry.confirm
        assert entry.amount == Decimal("50")
        assert entry.feed(ENTER) is EntryOutcome.PENDING

    def test_resize_keeps_confirmation(self) -> None:
        entry = AmountEntry()
        entry.feed(ENTER)
        entry.feed(curses.KEY_RESIZE)

        assert entry.confirm

    def test_escape_cancels(self) -> None:
        assert AmountEntry().feed(ESC) is EntryOutcome.CANCELLED

    def test_escape_disarms_first(self) -> None:
        entry = AmountEntry()
        entry.feed(ENTER)

        assert entry.feed(ESC) is EntryOutcome.PENDING
        assert not entry.confirm
        assert entry.feed(ESC) is EntryOutcome.CANCELLED

    def test_zero_amount_can_commit(self) -> None:
        entry = AmountEntry()
        entry.feed(ENTER)

        assert entry.feed(ENTER) is EntryOutcome.COMMITTED

    def test_ctrl_c_quits(self) -> None:
        with pytest.raises(QuitRequested):
            AmountEntry().feed(CTRL_C)


class TestOverdraft:
    """Tests for debits larger than the balance."""

    def test_overdrawn_blocks_confirm(self) -> None:
        entry = AmountEntry(source_balance=Decimal("100"))
        type_text(entry, "150")

        assert entry.overdrawn
        assert entry.source_after == Decimal("-50")
        assert entry.feed(ENTER) is EntryOutcome.PENDING
        assert not entry.confirm

    def test_overdrawn_blocks_more_digits(self) -> None:
        entry = AmountEntry(source_balance=Decimal("100"))
        type_text(entry, "1500")

        assert entry.amount == Decimal("150")

    def test_backspace_recovers(self) -> None:
        entry = AmountEntry(source_balance=Decimal("100"))
        type_text(entry, "150")
        entry.feed(curses.KEY_BACKSPACE)
        entry.feed(ENTER)

        assert not entry.overdrawn
        assert entry.feed(ENTER) is EntryOutcome.COMMITTED

    def test_exact_balance_allowed(self) -> None:
        entry = AmountEntry(source_balance=Decimal("100.50"))
        type_text(entry, "100.50")
        entry.feed(ENTER)

        assert entry.confirm
        assert entry.source_after == Decimal("0")
