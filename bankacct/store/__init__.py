"""In-memory account store."""

from bankacct.store.accounts import AccountStore

__all__ = ["AccountStore"]
