"""Synthetic account generator for demo and test ledgers."""

import random
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator

from bank_ledger.generators.base import BaseGenerator
from bank_ledger.logging import get_logger
from bank_ledger.models import to_money
from bank_ledger.store import AccountStore

logger = get_logger(__name__)


@dataclass
class AccountSeed:
    """Arguments for one ``AccountStore.create_account`` call."""

    name: str
    account_number: int
    initial_balance: Decimal
    pin: str


class AccountGenerator(BaseGenerator):
    """Generate synthetic accounts with Faker holder names.

    Balances follow a log-normal distribution (median around 1 800),
    with about 5% of accounts opened empty.
    """

    EMPTY_ACCOUNT_RATE = 0.05

    def generate(self, account_number: int) -> AccountSeed:
        """Generate a single account.

        Parameters
        ----------
        account_number : int
            Number to assign to the account.

        Returns
        -------
        AccountSeed
            Generated account arguments, including the raw PIN.
        """
        if random.random() < self.EMPTY_ACCOUNT_RATE:
            balance = Decimal("0.00")
        else:
            balance = to_money(round(random.lognormvariate(mu=7.5, sigma=1.0), 2))

        return AccountSeed(
            name=self.fake.name(),
            account_number=account_number,
            initial_balance=balance,
            pin=f"{random.randint(0, 9999):04d}",
        )

    def generate_batch(self, count: int, start_number: int = 1) -> Iterator[AccountSeed]:
        """Generate ``count`` accounts with consecutive numbers.

        Yields
        ------
        AccountSeed
            Generated account arguments.
        """
        for offset in range(count):
            yield self.generate(start_number + offset)

    def populate(self, store: AccountStore, count: int, start_number: int = 1) -> dict[int, str]:
        """Create ``count`` accounts in ``store``.

        Returns
        -------
        dict[int, str]
            Raw PIN per account number, for the caller to hand out.
        """
        pins: dict[int, str] = {}
        for seed in self.generate_batch(count, start_number):
            store.create_account(seed.name, seed.account_number, seed.initial_balance, seed.pin)
            pins[seed.account_number] = seed.pin
        logger.info("Generated %d accounts starting at %d", count, start_number)
        return pins
