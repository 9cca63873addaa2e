"""Sample data generators."""

from bankacct.generators.account import AccountGenerator

__all__ = ["AccountGenerator"]
