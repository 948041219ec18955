"""Command-line interface for the account ledger."""

from bank_ledger.cli.main import main

__all__ = ["main"]
