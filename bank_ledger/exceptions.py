"""Custom exception hierarchy for bank-ledger."""


class LedgerError(Exception):
    """Base exception for all bank-ledger errors."""


class AccountNotFoundError(LedgerError):
    """Raised when a referenced account does not exist."""


class DuplicateAccountError(LedgerError):
    """Raised when an account number is already taken."""


class AuthenticationError(LedgerError):
    """Raised when a PIN does not match the account's digest."""


class ValidationError(LedgerError):
    """Raised when an argument is invalid for the operation."""


class InvalidAmountError(ValidationError):
    """Raised for non-numeric, non-positive or negative amounts."""


class InvalidAccountNumberError(ValidationError):
    """Raised when an account number is not a positive integer."""


class InvalidPinError(ValidationError):
    """Raised when a PIN is not exactly four digits."""


class EmptyNameError(ValidationError):
    """Raised when a holder name is empty."""


class SameAccountError(ValidationError):
    """Raised when a transfer names the same account on both sides."""


class InsufficientFundsError(LedgerError):
    """Raised when a withdrawal or transfer exceeds the balance."""


class PersistenceError(LedgerError):
    """Raised when the ledger file cannot be read or written."""


class MalformedRecordError(PersistenceError):
    """Raised when a ledger file line cannot be parsed."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""
