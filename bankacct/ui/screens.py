"""Interactive screens.

Every screen is a loop: clear, draw the current state, read one key,
dispatch it. Ctrl-C on any screen raises ``QuitRequested``.
"""

import curses
from decimal import Decimal
from typing import Callable

from bankacct.config import AppConfig
from bankacct.exceptions import BankAcctError, QuitRequested, ReportError
from bankacct.logging import get_logger
from bankacct.models import Account, AccountAction
from bankacct.sinks import ReportSink
from bankacct.store import AccountStore
from bankacct.ui.entry import AmountEntry, EntryOutcome
from bankacct.ui.forms import (
    AccountNumberInput,
    InputOutcome,
    NewAccountForm,
    TextInput,
    password_input,
)
from bankacct.ui.keys import CTRL_C, CTRL_F, CTRL_N, CTRL_R, ESC, is_enter
from bankacct.ui.layout import (
    MIN_NAME,
    MenuColumns,
    fits_main_menu,
    format_balance_cell,
    format_name_cell,
    format_short_balance,
)
from bankacct.ui.navigation import ListWindow, visible_rows
from bankacct.ui.terminal import Terminal, strike

logger = get_logger(__name__)

# Account, deposit and withdraw screens
ACC_MIN_WIDTH = 46
ACC_MIN_HEIGHT = 10
ACC_MAIN_MIN = 30
ACC_SEPARATION = 7

# Transfer screens
TRANS_MIN_WIDTH = 80
TRANS_MIN_HEIGHT = 10
TRANS_MID_COL = 10

NEWACC_LEFTSHIFT = 20

RULE = "-----------------"


def _check_quit(key: int) -> None:
    if key == CTRL_C:
        raise QuitRequested()


def _print_heading(term: Terminal, x: int, heading: str) -> None:
    term.write(0, x, "-" * len(heading))
    term.write(1, x, heading)
    term.write(2, x, "-" * len(heading))


def _account_banner(term: Terminal, y: int, x: int, number: str, attr: int = 0) -> None:
    """Boxed ``Account XXXXX`` title centred on ``x``."""
    term.write(y, x - 9, RULE)
    term.write(y + 1, x - 7, f"Account {number}", attr)
    term.write(y + 2, x - 9, RULE)


def _flash(term: Terminal, message: str, attr: int = 0) -> None:
    """Show ``message`` centred and wait for any key."""
    height, width = term.size()
    term.hide_cursor()
    term.write(height // 2 + 2, max(0, width // 2 - len(message) // 2), message, attr)
    term.write(height // 2 + 3, width // 2 - 14, "Press Any Key to Continue...")
    _check_quit(term.getch())


def _draw_details(term: Terminal, y: int, left: int, right: int, account: Account | None) -> None:
    """Name, balance, SSN and phone rows between ``left`` and ``right``."""
    term.write(y, left, "Name")
    term.write(y + 1, left, "Balance")
    term.write(y + 2, left, "SSN")
    term.write(y + 3, left, "Phone")
    if account is None:
        return
    balance = format_short_balance(account.balance)
    term.write(y, right - account.name_length, account.full_name)
    term.write(y + 1, right - len(balance), balance)
    term.write(y + 2, right - len(account.ssn), account.ssn)
    term.write(y + 3, right - len(account.phone_display), account.phone_display)


def _draw_confirm_prompt(term: Terminal, y: int, cx: int, entry: AmountEntry) -> None:
    if entry.confirm:
        term.write(y, cx - 6, "Are you sure?", term.standout)
        return
    attr = term.standout if entry.complete else 0
    prompt = "Enter - Confirm"
    if entry.overdrawn:
        prompt = strike(prompt)
    term.write(y, cx - 14, prompt, attr)
    term.write(y, cx + 1, "  Esc - Cancel")


def _draw_amount_panel(
    term: Terminal,
    x: int,
    label: str,
    sign: str,
    entry: AmountEntry,
    balance: Decimal,
    after: Decimal,
) -> None:
    """Current balance, amount being typed and resulting balance at column ``x``."""
    term.write(4, x, f"{'Current Balance:':<17}{balance:15.2f}")
    term.write(5, x, f"{label:<17}{entry.amount:15.2f}{sign}", term.underline)
    term.write(6, x, f"{'New Balance:':<17}{after:15.2f}", term.error_attr if after < 0 else 0)


def _place_amount_cursor(term: Terminal, x: int, entry: AmountEntry) -> None:
    if entry.cursor_index is None:
        term.hide_cursor()
    else:
        term.show_cursor(5, x + 17 + entry.cursor_index)


# Load database / create report
def filename_prompt(
    term: Terminal,
    title: str,
    default: str,
    submit: Callable[[str], str | None],
) -> str | None:
    """Ask for a file name until ``submit`` accepts it.

    ``submit`` returns an error message to show, or ``None`` on success.
    Returns the accepted name, or ``None`` when the user pressed Esc.
    """
    field = TextInput(default)
    error: str | None = None
    while True:
        term.clear()
        height, width = term.size()
        cy, cx = height // 2, width // 2
        term.write(cy - 4, cx - 8, "-" * (len(title) + 2))
        term.write(cy - 3, cx - 6, title)
        term.write(cy - 2, cx - 8, "-" * (len(title) + 2))
        if error:
            term.write(cy + 1, max(0, cx - len(error) // 2), error, term.error_attr)
        term.write(cy, cx - 12, f"Filename: {field.value}")
        term.show_cursor(cy, cx - 2 + len(field.value))

        outcome = field.feed(term.getch())
        error = None
        if outcome is InputOutcome.CANCELLED:
            return None
        if outcome is InputOutcome.SUBMITTED:
            if not field.value:
                error = "Error: Blank file name not supported"
                continue
            error = submit(field.value)
            if error is None:
                return field.value


def database_prompt(term: Terminal, default: str) -> str:
    """Ask for the database file name. Esc quits."""
    name = filename_prompt(term, "Load Database", default, lambda _name: None)
    if name is None:
        raise QuitRequested()
    return name


def create_report(term: Terminal, store: AccountStore, default: str) -> str | None:
    """Prompt for a report file and write the report to it."""

    def write(name: str) -> str | None:
        try:
            ReportSink(name).write(store)
        except ReportError as exc:
            logger.warning("Report failed: %s", exc)
            return f"Error: {exc}"
        return None

    name = filename_prompt(term, "Create Report", default, write)
    if name is not None:
        height, width = term.size()
        message = f'Report file "{name}" written'
        term.hide_cursor()
        term.write(height // 2 + 1, max(0, width // 2 - len(message) // 2), message, term.standout)
        _check_quit(term.getch())
    return name


# Main menu
def draw_main_menu(
    term: Terminal,
    store: AccountStore,
    window: ListWindow,
    rows: int,
    max_rows: int,
) -> None:
    height, width = term.size()
    cols = MenuColumns.for_width(width)
    extra_name = cols.name_width - MIN_NAME

    _print_heading(term, cols.account_x, "Account")
    _print_heading(term, cols.name_x + extra_name // 2 + 6, "Name")
    _print_heading(term, cols.ssn_x, "SS Number")
    _print_heading(term, cols.phone_x, "Phone Number")
    _print_heading(term, cols.right_edge - len("Balance"), "Balance")

    if len(store):
        term.write(3 + window.cursor, cols.account_x - 2, "[-")
        term.write(3 + window.cursor, cols.right_edge, "-]")

    for i in range(rows):
        idx = window.offset + i
        if idx >= len(store):
            break
        account = store[idx]
        term.write(3 + i, cols.account_x + 1, account.number)
        term.write(3 + i, cols.name_x, format_name_cell(account, cols.name_width))
        term.write(3 + i, cols.ssn_x, account.ssn)
        term.write(3 + i, cols.phone_x, account.phone_display)
        term.write(3 + i, cols.balance_x, format_balance_cell(account.balance, cols.balance_width))

    # Footer sits below the list, not at the bottom of a huge terminal
    footer_y = max_rows + 2 if height >= max_rows + 4 else height - 2
    term.write(footer_y, cols.footer_x, "↑↓ - Navigate  Enter - Select  ^f - Find")
    term.write(footer_y + 1, cols.footer_x, "^n - New Account  ^r - Create Report  Esc - Quit")
    term.hide_cursor()


def main_menu(term: Terminal, store: AccountStore, config: AppConfig) -> None:
    """Account list; returns when the user presses Esc."""
    window = ListWindow()
    while True:
        height, width = term.size()
        rows = visible_rows(height, config.max_rows)
        window.fit(len(store), rows)

        term.clear()
        if fits_main_menu(height, width):
            draw_main_menu(term, store, window, rows, config.max_rows)
        else:
            term.hide_cursor()
            term.write(0, 0, "Terminal too small")

        key = term.getch()
        _check_quit(key)
        if key == curses.KEY_UP:
            window.up(len(store), rows)
        elif key == curses.KEY_DOWN:
            window.down(len(store), rows)
        elif is_enter(key):
            if len(store):
                account_screen(term, store, store[window.selected].number)
        elif key == ESC:
            return
        elif key == CTRL_N:
            number = open_account(term, store)
            if number is not None:
                window.select(store.index_of(number), len(store), rows)
        elif key == CTRL_R:
            create_report(term, store, config.default_report)
        elif key == CTRL_F:
            idx = find_account(term, store)
            if idx is not None:
                window.select(idx, len(store), rows)


def find_account(term: Terminal, store: AccountStore) -> int | None:
    """Prompt for an account number prefix; return the matching index."""
    field = TextInput(max_length=5, allowed=str.isalnum, upper=True)
    error = False
    while True:
        term.clear()
        height, width = term.size()
        cy, cx = height // 2, width // 2
        term.write(cy - 4, cx - 8, "--------------")
        term.write(cy - 3, cx - 6, "Find Account")
        term.write(cy - 2, cx - 8, "--------------")
        term.write(cy, cx - 10, f"Account: {field.value}")
        if error:
            term.write(cy + 1, cx - 9, "No account matches", term.error_attr)
        term.show_cursor(cy, cx - 1 + len(field.value))

        outcome = field.feed(term.getch())
        error = False
        if outcome is InputOutcome.CANCELLED:
            return None
        if outcome is InputOutcome.SUBMITTED:
            idx = store.search(field.value)
            if idx is not None:
                return idx
            error = True


# Account screen
def account_screen(term: Terminal, store: AccountStore, number: str) -> None:
    """Details of one account and the action menu.

    The password is asked once per visit, on the first action.
    """
    actions = list(AccountAction)
    pos = 0
    verified = False
    while True:
        account = store.get(number)
        term.clear()
        term.hide_cursor()
        height, width = term.size()
        cx = width // 2
        main_width = max(ACC_MAIN_MIN, account.name_length + 7 + ACC_SEPARATION)
        left = cx - width % 2 - main_width // 2
        right = cx + main_width // 2

        if width >= ACC_MIN_WIDTH and height >= ACC_MIN_HEIGHT:
            _account_banner(term, 0, cx, account.number)
            _draw_details(term, 3, left, right, account)
            menu = "|".join(
                f"[{action.label}]" if i == pos else f" {action.label} "
                for i, action in enumerate(actions)
            )
            term.write(8, cx - 23, menu)
            term.write(9, cx - 20, "←→ - Navigate  Enter - Select  ESC - Back")

        key = term.getch()
        _check_quit(key)
        if key == ESC:
            return
        if key == curses.KEY_LEFT:
            pos = (pos - 1) % len(actions)
        elif key == curses.KEY_RIGHT:
            pos = (pos + 1) % len(actions)
        elif is_enter(key):
            if not verified:
                verified = verify(term, store, number)
            if not verified:
                continue
            action = actions[pos]
            if action is AccountAction.TRANSFER:
                transfer(term, store, number)
            elif action is AccountAction.CLOSE:
                if close_account(term, store, number):
                    return
            else:
                amount_screen(term, store, number, action)


def ask_password(term: Terminal, store: AccountStore, number: str) -> str | None:
    """Prompt for the account password; return it when it matches."""
    height, width = term.size()
    cy, cx = height // 2, width // 2
    field = password_input()
    while True:
        _account_banner(term, cy - 3, cx, number)
        term.write(cy + 1, cx - 11, "Password: " + "*" * len(field.value) + " " * 6)
        term.show_cursor(cy + 1, cx - 1 + len(field.value))

        outcome = field.feed(term.getch())
        if outcome is InputOutcome.CANCELLED:
            return None
        if outcome is InputOutcome.SUBMITTED and field.full:
            if store.verify(number, field.value):
                return field.value
            _flash(term, "Password incorrect!", term.error_attr)
            return None


def verify(term: Terminal, store: AccountStore, number: str) -> bool:
    return ask_password(term, store, number) is not None


# Deposit / withdraw
def amount_screen(term: Terminal, store: AccountStore, number: str, action: AccountAction) -> bool:
    """Deposit into or withdraw from one account. Returns True when committed."""
    account = store.get(number)
    if action is AccountAction.DEPOSIT:
        entry = AmountEntry(target_balance=account.balance)
        label, sign = "Deposit:", "+"
    else:
        entry = AmountEntry(source_balance=account.balance)
        label, sign = "Withdraw:", "-"

    while True:
        term.clear()
        height, width = term.size()
        cx = width // 2
        x = cx - 17
        if width >= ACC_MIN_WIDTH and height >= ACC_MIN_HEIGHT:
            _account_banner(term, 0, cx, account.number)
            after = entry.target_after if entry.target_after is not None else entry.source_after
            _draw_amount_panel(term, x, label, sign, entry, account.balance, after)
            _draw_confirm_prompt(term, 8, cx, entry)
            _place_amount_cursor(term, x, entry)

        outcome = entry.feed(term.getch())
        if outcome is EntryOutcome.CANCELLED:
            return False
        if outcome is EntryOutcome.COMMITTED:
            try:
                if action is AccountAction.DEPOSIT:
                    store.deposit(number, entry.amount)
                else:
                    store.withdraw(number, entry.amount)
            except BankAcctError as exc:
                _flash(term, str(exc), term.error_attr)
                return False
            return True


# Transfer
def transfer(term: Terminal, store: AccountStore, number: str) -> bool:
    """Pick the receiving account, then the amount."""
    target = transfer_target(term, store, number)
    if target is None:
        return False
    return transfer_amount(term, store, number, target)


def transfer_target(term: Terminal, store: AccountStore, number: str) -> str | None:
    """Let the user type or Tab to the receiving account number."""
    source = store.get(number)
    picker = AccountNumberInput(store, number)
    left_width = max(ACC_MAIN_MIN, 8 + source.name_length)

    while True:
        term.clear()
        height, width = term.size()
        if width >= TRANS_MIN_WIDTH and height >= TRANS_MIN_HEIGHT:
            cx = width // 2
            lx = cx - TRANS_MID_COL // 2 - left_width // 2
            target = picker.target
            right_width = max(ACC_MAIN_MIN, 8 + target.name_length) if target else ACC_MAIN_MIN
            rx = cx + TRANS_MID_COL // 2 + right_width // 2

            _account_banner(term, 0, lx, source.number)
            _draw_details(term, 3, lx - left_width // 2, lx + left_width // 2, source)

            term.write(1, cx - 4, "Transfer")
            term.write(4, cx - 1, "->")

            _account_banner(term, 0, rx, picker.display, term.error_attr if picker.error else 0)
            _draw_details(term, 3, rx - right_width // 2, rx + right_width // 2, target)

            term.write(8, cx - 14, "Enter - Confirm", term.standout if target else 0)
            term.write(8, cx + 1, "  Esc - Cancel")
            if target is None:
                term.show_cursor(1, rx + 1 + len(picker.text))
            else:
                term.hide_cursor()

        outcome = picker.feed(term.getch())
        if outcome is InputOutcome.CANCELLED:
            return None
        if outcome is InputOutcome.SUBMITTED:
            return picker.target.number


def transfer_amount(term: Terminal, store: AccountStore, source: str, target: str) -> bool:
    """Amount entry with both accounts side by side. Returns True when committed."""
    from_acc = store.get(source)
    to_acc = store.get(target)
    entry = AmountEntry(source_balance=from_acc.balance, target_balance=to_acc.balance)

    while True:
        term.clear()
        height, width = term.size()
        cx = width // 2
        left = cx - 21 - 17
        right = cx + 22 - 17
        if width >= TRANS_MIN_WIDTH and height >= TRANS_MIN_HEIGHT:
            _account_banner(term, 0, cx - 21, from_acc.number)
            _draw_amount_panel(term, left, "Withdraw:", "-", entry, from_acc.balance, entry.source_after)

            _account_banner(term, 0, cx + 22, to_acc.number)
            _draw_amount_panel(term, right, "Deposit:", "+", entry, to_acc.balance, entry.target_after)

            term.write(1, cx - 4, "Transfer")
            term.write(4, cx - 1, "->")
            _draw_confirm_prompt(term, 8, cx, entry)
            _place_amount_cursor(term, left, entry)

        outcome = entry.feed(term.getch())
        if outcome is EntryOutcome.CANCELLED:
            return False
        if outcome is EntryOutcome.COMMITTED:
            try:
                store.transfer(source, target, entry.amount)
            except BankAcctError as exc:
                _flash(term, str(exc), term.error_attr)
                return False
            return True


# Close
def close_account(term: Terminal, store: AccountStore, number: str) -> bool:
    """Confirm, re-verify and remove an account. Returns True when closed."""
    term.clear()
    term.hide_cursor()
    height, width = term.size()
    cy, cx = height // 2, width // 2
    term.write(cy - 2, cx - 11, f"Closing Account {number}")
    term.write(cy, cx - 7, "Are you sure?", term.standout)
    term.write(cy + 1, cx - 6, "Enter / ESC")
    while True:
        key = term.getch()
        _check_quit(key)
        if key == ESC:
            return False
        if is_enter(key):
            term.clear()
            password = ask_password(term, store, number)
            if password is None:
                return False
            store.close(number, password)
            return True


# Open account
def open_account(term: Terminal, store: AccountStore) -> str | None:
    """Field-by-field new account entry. Returns the new account number."""
    form = NewAccountForm(store)
    while True:
        term.clear()
        height, width = term.size()
        cx = width // 2
        x = cx - NEWACC_LEFTSHIFT
        term.write(0, cx - 6, "-------------")
        term.write(1, cx - 5, "New Account")
        term.write(2, cx - 6, "-------------")

        rows = form.rows()
        for i, (label, text) in enumerate(rows):
            term.write(4 + i, x, f"{label}: {text}")
        if form.error:
            term.write(5 + len(rows), x, form.error, term.error_attr)
        label, text = rows[-1]
        term.show_cursor(3 + len(rows), x + len(label) + 2 + len(text))

        outcome = form.feed(term.getch())
        if outcome is InputOutcome.CANCELLED:
            return None
        if outcome is InputOutcome.SUBMITTED:
            account = form.account
            store.add(account)
            return account.number
