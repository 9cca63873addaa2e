"""Account generator for sample databases."""

import random
import string
from decimal import Decimal
from typing import Callable, Iterator

from faker import Faker

from bankacct.models import Account
from bankacct.models.account import ACCOUNT_NUMBER_LENGTH, PASSWORD_LENGTH

_ALNUM = string.ascii_uppercase + string.digits


class AccountGenerator:
    """Generate synthetic bank accounts.

    Names are restricted to plain letters (at least three) so that every
    generated account would also pass the open-account form and survives
    the whitespace-delimited database format.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    """

    MAX_BALANCE = 25_000

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.fake = Faker(locale)
        self.random = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)

    def generate(self, taken: set[str] | None = None) -> Account:
        """Generate a single account.

        Parameters
        ----------
        taken : set[str] | None
            Account numbers already in use; the new number avoids them
            and is added to the set.

        Returns
        -------
        Account
            Generated account.
        """
        taken = taken if taken is not None else set()
        number = self._account_number()
        while number in taken:
            number = self._account_number()
        taken.add(number)

        cents = self.random.randint(0, self.MAX_BALANCE * 100)
        return Account(
            first=self._name(self.fake.first_name),
            last=self._name(self.fake.last_name),
            middle=self.random.choice(string.ascii_uppercase),
            ssn=self.fake.numerify("#########"),
            area_code=self.fake.numerify("%##"),
            phone=self.fake.numerify("%######"),
            balance=Decimal(cents) / 100,
            number=number,
            password="".join(self.random.choices(string.ascii_letters + string.digits, k=PASSWORD_LENGTH)),
        )

    def generate_many(self, count: int, taken: set[str] | None = None) -> Iterator[Account]:
        """Generate ``count`` accounts with distinct numbers."""
        taken = set(taken) if taken else set()
        for _ in range(count):
            yield self.generate(taken)

    def _account_number(self) -> str:
        return "".join(self.random.choices(_ALNUM, k=ACCOUNT_NUMBER_LENGTH))

    def _name(self, factory: Callable[[], str]) -> str:
        name = factory()
        while not (name.isalpha() and name.isascii() and len(name) >= 3):
            name = factory()
        return name
