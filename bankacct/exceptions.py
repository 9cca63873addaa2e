"""Custom exception hierarchy for bankacct."""


class BankAcctError(Exception):
    """Base exception for all bankacct errors."""


class AccountNotFoundError(BankAcctError):
    """Raised when a referenced account number does not exist."""


class DuplicateAccountError(BankAcctError):
    """Raised when an account number is already taken."""


class InvalidAccountStateError(BankAcctError):
    """Raised when an account is in an invalid state for the operation."""


class InsufficientFundsError(InvalidAccountStateError):
    """Raised when a debit would leave a balance negative."""


class InvalidAmountError(InvalidAccountStateError):
    """Raised when a monetary amount is negative."""


class VerificationError(BankAcctError):
    """Raised when an account password does not match."""


class ConfigurationError(BankAcctError):
    """Raised when configuration is invalid or missing."""


class SinkError(BankAcctError):
    """Raised when a sink operation fails."""


class DatabaseError(SinkError):
    """Raised when the database file cannot be read or written."""


class DatabaseFormatError(DatabaseError):
    """Raised when the database file contains a malformed record."""


class ReportError(SinkError):
    """Raised when a report file cannot be written."""


class QuitRequested(BankAcctError):
    """Raised when the user presses Ctrl-C on any screen."""
