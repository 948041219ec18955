"""Domain models for the account ledger."""

from bank_ledger.models.account import CENTS, MAX_BALANCE, Account, to_decimal, to_money
from bank_ledger.models.pin import PIN_LENGTH, digest_pin, validate_pin, verify_pin

__all__ = [
    "CENTS",
    "MAX_BALANCE",
    "PIN_LENGTH",
    "Account",
    "digest_pin",
    "to_decimal",
    "to_money",
    "validate_pin",
    "verify_pin",
]
