"""In-memory account store."""

from bank_ledger.store.ledger import AccountStore

__all__ = ["AccountStore"]
