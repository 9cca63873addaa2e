"""Account store kept sorted by account number."""

from bisect import bisect_left
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Iterator

from bankacct.exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
    InsufficientFundsError,
    InvalidAccountStateError,
    InvalidAmountError,
    VerificationError,
)
from bankacct.logging import get_logger
from bankacct.models import Account
from bankacct.models.account import CENTS

logger = get_logger(__name__)


@dataclass
class AccountStore:
    """In-memory store for accounts, ordered by account number.

    The store owns its accounts. Screens hold account numbers or indexes
    only for the duration of a single interaction.
    """

    accounts: list[Account] = field(default_factory=list)
    master_password: str | None = None

    def __post_init__(self) -> None:
        self.accounts.sort(key=lambda acc: acc.number)
        numbers = [acc.number for acc in self.accounts]
        for prev, cur in zip(numbers, numbers[1:]):
            if prev == cur:
                raise DuplicateAccountError(f"Account {cur} already exists")

    def __len__(self) -> int:
        return len(self.accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(self.accounts)

    def __getitem__(self, index: int) -> Account:
        return self.accounts[index]

    def __contains__(self, number: object) -> bool:
        return isinstance(number, str) and self.find(number) is not None

    def add(self, account: Account) -> int:
        """Insert an account at its sorted position and return the index."""
        numbers = [acc.number for acc in self.accounts]
        idx = bisect_left(numbers, account.number)
        if idx < len(numbers) and numbers[idx] == account.number:
            raise DuplicateAccountError(f"Account {account.number} already exists")
        self.accounts.insert(idx, account)
        logger.info("Opened account %s", account.number)
        return idx

    def extend(self, accounts: Iterable[Account]) -> None:
        """Add many accounts."""
        for account in accounts:
            self.add(account)

    # Query methods
    def find(self, number: str) -> Account | None:
        """Return the account with ``number`` or ``None``."""
        for account in self.accounts:
            if account.number == number:
                return account
        return None

    def get(self, number: str) -> Account:
        """Return the account with ``number``."""
        account = self.find(number)
        if account is None:
            raise AccountNotFoundError(f"Account {number} not found")
        return account

    def index_of(self, number: str) -> int:
        """Return the list position of the account with ``number``."""
        for idx, account in enumerate(self.accounts):
            if account.number == number:
                return idx
        raise AccountNotFoundError(f"Account {number} not found")

    def search(self, prefix: str) -> int | None:
        """Index of the first account whose number starts with ``prefix``."""
        prefix = prefix.upper()
        if not prefix:
            return None
        for idx, account in enumerate(self.accounts):
            if account.number.startswith(prefix):
                return idx
        return None

    def next_after(self, number: str, exclude: str | None = None) -> Account | None:
        """First account sorting after ``number``, wrapping to the start.

        ``exclude`` is never returned. ``None`` when no account is eligible.
        """
        eligible = [acc for acc in self.accounts if acc.number != exclude]
        if not eligible:
            return None
        for account in eligible:
            if account.number > number:
                return account
        return eligible[0]

    # Mutations
    def deposit(self, number: str, amount: Decimal) -> Account:
        """Credit ``amount`` to an account."""
        amount = _checked_amount(amount)
        account = self.get(number)
        account.balance = (account.balance + amount).quantize(CENTS)
        logger.info("Deposited %s into %s", amount, number)
        return account

    def withdraw(self, number: str, amount: Decimal) -> Account:
        """Debit ``amount`` from an account; the balance may not go negative."""
        amount = _checked_amount(amount)
        account = self.get(number)
        if account.balance - amount < 0:
            raise InsufficientFundsError(
                f"Withdrawing {amount} would overdraw account {number}"
            )
        account.balance = (account.balance - amount).quantize(CENTS)
        logger.info("Withdrew %s from %s", amount, number)
        return account

    def transfer(self, source: str, target: str, amount: Decimal) -> tuple[Account, Account]:
        """Move ``amount`` from ``source`` to ``target``."""
        if source == target:
            raise InvalidAccountStateError(f"Cannot transfer from {source} to itself")
        amount = _checked_amount(amount)
        from_acc = self.get(source)
        to_acc = self.get(target)
        if from_acc.balance - amount < 0:
            raise InsufficientFundsError(
                f"Transferring {amount} would overdraw account {source}"
            )
        from_acc.balance = (from_acc.balance - amount).quantize(CENTS)
        to_acc.balance = (to_acc.balance + amount).quantize(CENTS)
        logger.info("Transferred %s from %s to %s", amount, source, target)
        return from_acc, to_acc

    def verify(self, number: str, password: str) -> bool:
        """Check ``password`` against the account's password."""
        account = self.get(number)
        if password == account.password:
            return True
        if self.master_password is not None and password == self.master_password:
            logger.warning("Account %s unlocked with the master password", number)
            return True
        logger.warning("Failed password attempt for %s", number)
        return False

    def close(self, number: str, password: str) -> Account:
        """Remove an account after verifying its password."""
        if not self.verify(number, password):
            raise VerificationError(f"Password incorrect for account {number}")
        account = self.accounts.pop(self.index_of(number))
        logger.info("Closed account %s", number)
        return account

    def summary(self) -> dict[str, int | Decimal]:
        """Return account count and total balance."""
        return {
            "accounts": len(self.accounts),
            "total_balance": sum((acc.balance for acc in self.accounts), Decimal("0.00")),
        }


def _checked_amount(amount: Decimal) -> Decimal:
    amount = Decimal(amount).quantize(CENTS)
    if amount < 0:
        raise InvalidAmountError(f"Amount must not be negative, got {amount}")
    return amount
