"""Account model."""

from dataclasses import dataclass
from decimal import Decimal

CENTS = Decimal("0.01")

FIRST_NAME_LENGTH = 50
LAST_NAME_LENGTH = 50
ACCOUNT_NUMBER_LENGTH = 5
PASSWORD_LENGTH = 6
SSN_LENGTH = 9
AREA_CODE_LENGTH = 3
PHONE_LENGTH = 7


@dataclass
class Account:
    """Bank account entity.

    SSN, area code and phone are digit strings so that leading zeros
    survive a save/load cycle.
    """

    first: str
    last: str
    middle: str  # single letter
    ssn: str  # 9 digits
    area_code: str  # 3 digits
    phone: str  # 7 digits
    balance: Decimal
    number: str  # 5 uppercase alphanumerics, unique within a store
    password: str  # 6 alphanumerics

    def __post_init__(self) -> None:
        self.balance = Decimal(self.balance).quantize(CENTS)

    @property
    def full_name(self) -> str:
        """Name as shown on the account screen, e.g. ``Alexander K. Novotny``."""
        return f"{self.first} {self.middle}. {self.last}"

    @property
    def name_length(self) -> int:
        """Display width of :attr:`full_name`."""
        return len(self.first) + len(self.last) + 4

    @property
    def phone_display(self) -> str:
        return f"({self.area_code}){self.phone}"
