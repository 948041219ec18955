"""Synthetic data generators."""

from bank_ledger.generators.account import AccountGenerator, AccountSeed

__all__ = ["AccountGenerator", "AccountSeed"]
