"""Domain models for bank accounts."""

from bankacct.models.account import Account
from bankacct.models.enums import AccountAction

__all__ = ["Account", "AccountAction"]
