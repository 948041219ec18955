"""Pytest configuration and fixtures."""

import logging
from decimal import Decimal
from typing import Iterator

import pytest

from bank_ledger.store import AccountStore


@pytest.fixture
def alice_pin() -> str:
    """PIN for account 101."""
    return "1234"


@pytest.fixture
def bob_pin() -> str:
    """PIN for account 102."""
    return "9876"


@pytest.fixture
def store(alice_pin: str, bob_pin: str) -> AccountStore:
    """Store with two accounts: 101 (500.00) and 102 (250.00)."""
    ledger = AccountStore()
    ledger.create_account("Alice Smith", 101, Decimal("500.00"), alice_pin)
    ledger.create_account("Bob Jones", 102, Decimal("250.00"), bob_pin)
    return ledger


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop handlers installed by setup_logging so later tests start clean."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger("bank_ledger").setLevel(logging.NOTSET)
