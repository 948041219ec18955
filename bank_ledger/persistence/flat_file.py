"""Load and save the ledger as a flat text file."""

from pathlib import Path

from bank_ledger.exceptions import PersistenceError
from bank_ledger.logging import get_logger
from bank_ledger.models import Account
from bank_ledger.persistence.codec import deserialize, write_accounts
from bank_ledger.store import AccountStore

logger = get_logger(__name__)


def load(path: str | Path, encoding: str = "utf-8") -> list[Account]:
    """Read accounts from ``path``.

    A missing file is the first-run case and yields an empty list.

    Raises
    ------
    PersistenceError
        If the file exists but cannot be read or decoded.
    """
    file_path = Path(path)
    if not file_path.exists():
        logger.info("No ledger file at %s, starting empty", file_path)
        return []

    try:
        with open(file_path, "r", encoding=encoding) as f:
            accounts = deserialize(f)
    except (OSError, UnicodeDecodeError) as exc:
        raise PersistenceError(f"Cannot read ledger file {file_path}: {exc}") from exc

    logger.info("Loaded %d accounts from %s", len(accounts), file_path)
    return accounts


def save(path: str | Path, accounts: list[Account], encoding: str = "utf-8") -> int:
    """Overwrite ``path`` with all accounts; return the number written.

    Raises
    ------
    PersistenceError
        If the file cannot be opened or written.
    """
    file_path = Path(path)
    try:
        with open(file_path, "w", encoding=encoding, newline="\n") as f:
            count = write_accounts(accounts, f)
    except OSError as exc:
        raise PersistenceError(f"Cannot open {file_path} for saving: {exc}") from exc

    logger.info("Saved %d accounts to %s", count, file_path)
    return count


def load_store(path: str | Path, encoding: str = "utf-8") -> AccountStore:
    """Rebuild an AccountStore from ``path``."""
    return AccountStore.from_accounts(load(path, encoding=encoding))


def save_store(path: str | Path, store: AccountStore, encoding: str = "utf-8") -> int:
    """Write the full store to ``path``."""
    return save(path, store.accounts, encoding=encoding)
