"""Account model for the ledger."""

from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from bank_ledger.exceptions import InvalidAmountError

CENTS = Decimal("0.01")
# Largest amount or balance the ledger holds; sums of two stay exact in
# the default 28-digit decimal context.
MAX_BALANCE = Decimal("999999999999999.99")


def to_decimal(value: int | str | float | Decimal) -> Decimal:
    """Parse a finite Decimal without rounding it.

    Raises
    ------
    InvalidAmountError
        If the value is not numeric or not finite.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Not an amount: {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAmountError(f"Not an amount: {value!r}") from exc
    if not amount.is_finite():
        raise InvalidAmountError(f"Not a finite amount: {value!r}")
    return amount


def to_money(value: int | str | float | Decimal) -> Decimal:
    """Convert a numeric value to a Decimal rounded to cents.

    Floats are converted through ``str()`` so ``0.1`` becomes
    ``Decimal("0.10")`` rather than its binary expansion.

    Raises
    ------
    InvalidAmountError
        If the value is not numeric, not finite, or larger in magnitude
        than ``MAX_BALANCE``.
    """
    amount = to_decimal(value)
    if abs(amount) > MAX_BALANCE:
        raise InvalidAmountError(f"Amount exceeds the maximum of {MAX_BALANCE}: {value!r}")
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass
class Account:
    """Bank account entity.

    The raw PIN is never stored; ``pin_digest`` holds its one-way digest
    (see :mod:`bank_ledger.models.pin`).
    """

    account_number: int
    holder_name: str
    balance: Decimal
    pin_digest: str

    def snapshot(self) -> "Account":
        """Return an independent copy safe to hand out of the store."""
        return replace(self)
