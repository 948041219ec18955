"""Flat-file persistence for the account ledger."""

from bank_ledger.persistence.codec import (
    decode_account,
    deserialize,
    encode_account,
    quote_name,
    serialize,
    unquote_name,
    write_accounts,
)
from bank_ledger.persistence.flat_file import load, load_store, save, save_store

__all__ = [
    "decode_account",
    "deserialize",
    "encode_account",
    "load",
    "load_store",
    "quote_name",
    "save",
    "save_store",
    "serialize",
    "unquote_name",
    "write_accounts",
]
