"""PIN shape validation and digest."""

import hashlib

from bank_ledger.exceptions import InvalidPinError

PIN_LENGTH = 4


def validate_pin(pin: str) -> str:
    """Return ``pin`` if it is exactly four ASCII digits."""
    if not isinstance(pin, str) or len(pin) != PIN_LENGTH or not (pin.isascii() and pin.isdigit()):
        raise InvalidPinError(f"PIN must be {PIN_LENGTH} digits")
    return pin


def digest_pin(pin: str) -> str:
    """Compute the one-way digest stored in place of a PIN.

    Unsalted SHA-256 over the PIN text. Four digits leave only 10 000
    candidates, so this is an access gate, not a credential store.
    """
    return hashlib.sha256(pin.encode("utf-8")).hexdigest()


def verify_pin(candidate: str, pin_digest: str) -> bool:
    """Check a candidate PIN against a stored digest."""
    if not isinstance(candidate, str):
        return False
    return digest_pin(candidate) == pin_digest
