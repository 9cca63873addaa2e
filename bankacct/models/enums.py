"""Enumeration types for account entities."""

from enum import Enum


class AccountAction(str, Enum):
    """Actions offered on the account screen, in menu order."""

    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    TRANSFER = "TRANSFER"
    CLOSE = "CLOSE"

    @property
    def label(self) -> str:
        return "Close Account" if self is AccountAction.CLOSE else self.value.title()
