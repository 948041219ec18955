"""Serialization of account snapshots for export sinks."""

from dataclasses import fields
from decimal import Decimal
from typing import Any

from bank_ledger.models import Account

# Never leaves the ledger file
PRIVATE_FIELDS = frozenset({"pin_digest"})


def account_to_dict(account: Account) -> dict[str, Any]:
    """Public view of an account: Decimals as strings, no PIN digest.

    Uses ``dataclasses.fields()`` + ``getattr`` instead of ``asdict()``,
    which would deep-copy every value first.
    """
    return {
        f.name: serialize_value(getattr(account, f.name))
        for f in fields(account)
        if f.name not in PRIVATE_FIELDS
    }


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    return value
