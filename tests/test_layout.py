"""Tests for main menu geometry and cell formatting."""

from decimal import Decimal

from bankacct.models import Account
from bankacct.ui.layout import (
    MIN_WIDTH,
    MenuColumns,
    fits_main_menu,
    format_balance_cell,
    format_name_cell,
    format_short_balance,
)
from bankacct.ui.terminal import strike


class TestMenuColumns:
    """Tests for MenuColumns."""

    def test_minimum_width(self) -> None:
        cols = MenuColumns.for_width(MIN_WIDTH)

        assert MIN_WIDTH == 66
        assert (cols.name_width, cols.balance_width) == (17, 7)
        assert (cols.account_x, cols.name_x, cols.ssn_x) == (3, 12, 31)
        assert (cols.phone_x, cols.balance_x) == (42, 56)
        assert cols.right_edge == 63

    def test_columns_stretch(self) -> None:
        cols = MenuColumns.for_width(76)

        assert (cols.name_width, cols.balance_width) == (22, 12)
        assert cols.account_x == 3

    def test_wide_terminal_adds_margin(self) -> None:
        cols = MenuColumns.for_width(200)

        assert (cols.name_width, cols.balance_width) == (28, 15)
        assert cols.account_x == 60

    def test_fits(self) -> None:
        assert fits_main_menu(11, 66)
        assert not fits_main_menu(10, 66)
        assert not fits_main_menu(24, 65)


class TestCells:
    """Tests for name and balance cells."""

    def test_name_fits(self, sample_account: Account) -> None:
        assert format_name_cell(sample_account, 17) == "Doe, John C."

    def test_name_truncated(self, other_account: Account) -> None:
        assert format_name_cell(other_account, 17) == "Novotny, Alexa..."

    def test_long_last_name(self, sample_account: Account) -> None:
        sample_account.last = "Wolfeschlegelsteinhausen"

        assert format_name_cell(sample_account, 17) == "Wolfeschlegels..."

    def test_balance_right_justified(self) -> None:
        assert format_balance_cell(Decimal("5.05"), 7) == "   5.05"

    def test_balance_too_wide(self) -> None:
        assert format_balance_cell(Decimal("12345.67"), 7) == "~345.67"

    def test_short_balance(self) -> None:
        assert format_short_balance(Decimal("1234567890.12")) == "234567890.12"
        assert format_short_balance(Decimal("5")) == "5.00"


class TestStrike:
    def test_strike(self) -> None:
        assert strike("ab") == "a\u0336b\u0336"
