"""Account ledger with PIN-gated mutations."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable

from bank_ledger.exceptions import (
    AccountNotFoundError,
    AuthenticationError,
    DuplicateAccountError,
    EmptyNameError,
    InsufficientFundsError,
    InvalidAccountNumberError,
    InvalidAmountError,
    SameAccountError,
)
from bank_ledger.logging import get_logger
from bank_ledger.models import (
    MAX_BALANCE,
    Account,
    digest_pin,
    to_decimal,
    to_money,
    validate_pin,
    verify_pin,
)

logger = get_logger(__name__)


def _check_account_number(account_number: int) -> int:
    if isinstance(account_number, bool) or not isinstance(account_number, int) or account_number < 1:
        raise InvalidAccountNumberError(f"Invalid account number: {account_number!r}")
    return account_number


def _check_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise EmptyNameError("Name cannot be empty")
    return name


def _positive_amount(amount: int | str | float | Decimal) -> Decimal:
    value = to_money(amount)
    if value <= 0:
        raise InvalidAmountError(f"Amount must be positive, got {value}")
    return value


def _check_capacity(account: Account, value: Decimal) -> None:
    if account.balance + value > MAX_BALANCE:
        raise InvalidAmountError(
            f"Balance of account {account.account_number} would exceed the maximum of {MAX_BALANCE}"
        )


@dataclass
class AccountStore:
    """In-memory ledger of accounts kept in insertion order.

    Protected operations (deposit, withdraw, transfer, rename, close)
    take the candidate PIN and authenticate before touching any field.
    Every precondition is checked first, so a failed call leaves the
    store exactly as it was.
    """

    accounts: list[Account] = field(default_factory=list)

    @classmethod
    def from_accounts(cls, accounts: Iterable[Account]) -> "AccountStore":
        """Build a store from loaded records, keeping the first of any duplicate number."""
        store = cls()
        seen: set[int] = set()
        for account in accounts:
            if isinstance(account.account_number, bool) or account.account_number < 1:
                logger.warning("Skipping record with invalid account number %r", account.account_number)
                continue
            if account.account_number in seen:
                logger.warning("Skipping duplicate record for account %d", account.account_number)
                continue
            seen.add(account.account_number)
            store.accounts.append(account)
        return store

    def __len__(self) -> int:
        return len(self.accounts)

    def __contains__(self, account_number: object) -> bool:
        return any(acc.account_number == account_number for acc in self.accounts)

    # Lookup
    def find(self, account_number: int) -> Account | None:
        """Return the live account, or None.

        The returned object is a handle into the store. Use it for one
        operation and drop it; a later close or sort invalidates it.
        """
        for account in self.accounts:
            if account.account_number == account_number:
                return account
        return None

    def get(self, account_number: int) -> Account:
        """Return the live account or raise AccountNotFoundError."""
        account = self.find(account_number)
        if account is None:
            raise AccountNotFoundError(f"Account {account_number} not found")
        return account

    def authenticate(self, account: Account, candidate_pin: str) -> bool:
        """Check a candidate PIN against the account's stored digest."""
        return verify_pin(candidate_pin, account.pin_digest)

    def _authorize(self, account: Account, candidate_pin: str) -> None:
        if not self.authenticate(account, candidate_pin):
            logger.warning("Authentication failed for account %d", account.account_number)
            raise AuthenticationError(f"Invalid PIN for account {account.account_number}")

    # Mutations
    def create_account(
        self,
        name: str,
        account_number: int,
        initial_balance: int | str | float | Decimal,
        pin: str,
    ) -> Account:
        """Open a new account and return a snapshot of it."""
        _check_account_number(account_number)
        if account_number in self:
            raise DuplicateAccountError(f"Account number {account_number} already exists")
        _check_name(name)
        balance = to_money(initial_balance)
        if balance < 0:
            raise InvalidAmountError("Initial balance cannot be negative")
        validate_pin(pin)

        account = Account(
            account_number=account_number,
            holder_name=name,
            balance=balance,
            pin_digest=digest_pin(pin),
        )
        self.accounts.append(account)
        logger.info("Created account %d", account_number)
        return account.snapshot()

    def deposit(self, account_number: int, amount: int | str | float | Decimal, pin: str) -> Decimal:
        """Add ``amount`` to the balance and return the new balance."""
        account = self.get(account_number)
        self._authorize(account, pin)
        value = _positive_amount(amount)
        _check_capacity(account, value)

        account.balance += value
        logger.info("Deposited %s into account %d", value, account_number)
        return account.balance

    def withdraw(self, account_number: int, amount: int | str | float | Decimal, pin: str) -> Decimal:
        """Take ``amount`` from the balance and return the new balance."""
        account = self.get(account_number)
        self._authorize(account, pin)
        value = _positive_amount(amount)
        if value > account.balance:
            raise InsufficientFundsError(
                f"Insufficient balance in account {account_number}: {account.balance} < {value}"
            )

        account.balance -= value
        logger.info("Withdrew %s from account %d", value, account_number)
        return account.balance

    def transfer(
        self,
        from_number: int,
        to_number: int,
        amount: int | str | float | Decimal,
        pin: str,
    ) -> None:
        """Move ``amount`` between two accounts, authenticating the source only."""
        source = self.find(from_number)
        target = self.find(to_number)
        if source is None or target is None:
            missing = from_number if source is None else to_number
            raise AccountNotFoundError(f"Account {missing} not found")
        if from_number == to_number:
            raise SameAccountError("Cannot transfer to the same account")
        self._authorize(source, pin)
        value = _positive_amount(amount)
        if value > source.balance:
            raise InsufficientFundsError(
                f"Insufficient balance in account {from_number}: {source.balance} < {value}"
            )
        _check_capacity(target, value)

        source.balance -= value
        target.balance += value
        logger.info("Transferred %s from account %d to account %d", value, from_number, to_number)

    def rename_holder(self, account_number: int, new_name: str, pin: str) -> None:
        """Replace the holder name."""
        account = self.get(account_number)
        self._authorize(account, pin)
        _check_name(new_name)

        account.holder_name = new_name
        logger.info("Renamed holder of account %d", account_number)

    def close_account(self, account_number: int, pin: str) -> Account:
        """Remove the account permanently and return its final snapshot."""
        account = self.get(account_number)
        self._authorize(account, pin)

        self.accounts.remove(account)
        logger.info("Closed account %d", account_number)
        return account.snapshot()

    # Queries
    def list_all(self) -> list[Account]:
        """Snapshots of all accounts in current order."""
        return [account.snapshot() for account in self.accounts]

    def list_above_balance(self, threshold: int | str | float | Decimal) -> list[Account]:
        """Snapshots of accounts with ``balance >= threshold``, in current order."""
        limit = to_decimal(threshold)
        return [account.snapshot() for account in self.accounts if account.balance >= limit]

    def sort_by_balance(self) -> None:
        """Reorder the ledger ascending by balance; ties keep their order."""
        self.accounts.sort(key=lambda account: account.balance)

    def total_balance(self) -> Decimal:
        """Sum of all balances."""
        return sum((account.balance for account in self.accounts), Decimal("0.00"))

    def summary(self) -> dict[str, int | Decimal]:
        """Return account count and total balance."""
        return {
            "accounts": len(self.accounts),
            "total_balance": self.total_balance(),
        }
