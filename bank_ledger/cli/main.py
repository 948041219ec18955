"""Interactive menu for the account ledger.

Loads the ledger file at startup, runs one store operation per menu
choice, and saves the full ledger only when the user quits.
"""

import argparse
import getpass
import sys
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Callable

from bank_ledger.cli.prompts import InputFn, prompt_amount, prompt_int, prompt_text
from bank_ledger.config import LOG_FORMATS, LedgerConfig
from bank_ledger.exceptions import (
    ConfigurationError,
    LedgerError,
    PersistenceError,
    SameAccountError,
)
from bank_ledger.logging import get_logger, setup_logging
from bank_ledger.models import Account
from bank_ledger.persistence import load_store, save_store
from bank_ledger.sinks import JsonFileSink
from bank_ledger.store import AccountStore

logger = get_logger(__name__)

MIN_AMOUNT = Decimal("0.01")


@dataclass
class Session:
    """One interactive run: the store plus the input sources."""

    store: AccountStore
    input_fn: InputFn = input
    pin_fn: InputFn = getpass.getpass

    def ask_pin(self, account_number: int) -> str:
        return self.pin_fn(f"Enter PIN for account {account_number}: ")

    def ask_account(self, prompt: str = "Account number: ") -> int:
        return prompt_int(prompt, self.input_fn, minimum=1)

    def ask_amount(self, prompt: str = "Amount: ", minimum: Decimal = MIN_AMOUNT) -> Decimal:
        return prompt_amount(prompt, self.input_fn, minimum=minimum)


def format_account(account: Account) -> str:
    return (
        f"Name: {account.holder_name} | Account: {account.account_number}"
        f" | Balance: {account.balance:.2f}"
    )


def handle_create(session: Session) -> None:
    name = prompt_text("Name: ", session.input_fn)
    number = session.ask_account("Account Number: ")
    balance = session.ask_amount("Initial Balance: ", minimum=Decimal("0.00"))
    pin = session.pin_fn("Set 4-digit PIN: ")
    session.store.create_account(name, number, balance, pin)
    print("Account created successfully.")


def handle_show_all(session: Session) -> None:
    print("\n--- All Accounts ---")
    accounts = session.store.list_all()
    if not accounts:
        print("No accounts available.")
        return
    for account in accounts:
        print(format_account(account))


def handle_search(session: Session) -> None:
    number = session.ask_account("Enter account number: ")
    account = session.store.find(number)
    if account is None:
        print("Account not found.")
    else:
        print(f"Found -> {account.holder_name} | Balance: {account.balance:.2f}")


def handle_deposit(session: Session) -> None:
    number = session.ask_account()
    amount = session.ask_amount()
    session.store.deposit(number, amount, session.ask_pin(number))
    print("Deposit successful.")


def handle_withdraw(session: Session) -> None:
    number = session.ask_account()
    amount = session.ask_amount()
    session.store.withdraw(number, amount, session.ask_pin(number))
    print("Withdrawal successful.")


def handle_transfer(session: Session) -> None:
    source = session.ask_account("From account: ")
    target = session.ask_account("To account: ")
    amount = session.ask_amount()
    # Existence and same-account errors come before the PIN prompt
    session.store.get(source)
    session.store.get(target)
    if source == target:
        raise SameAccountError("Cannot transfer to the same account")
    session.store.transfer(source, target, amount, session.ask_pin(source))
    print("Transfer successful.")


def handle_close(session: Session) -> None:
    number = session.ask_account("Enter account to close: ")
    session.store.get(number)
    session.store.close_account(number, session.ask_pin(number))
    print("Account closed successfully.")


def handle_rename(session: Session) -> None:
    number = session.ask_account("Enter account number: ")
    new_name = prompt_text("New Name: ", session.input_fn)
    session.store.rename_holder(number, new_name, session.ask_pin(number))
    print("Account name updated.")


def handle_high_balance(session: Session) -> None:
    threshold = session.ask_amount("Enter threshold: ", minimum=Decimal("0.00"))
    print(f"--- Accounts above {threshold:.2f} ---")
    accounts = session.store.list_above_balance(threshold)
    if not accounts:
        print("No accounts meet the threshold.")
    for account in accounts:
        print(format_account(account))


def handle_sort(session: Session) -> None:
    session.store.sort_by_balance()
    print("Accounts sorted by balance.")


EXIT_CHOICE = 0

COMMANDS: dict[int, tuple[str, Callable[[Session], None]]] = {
    1: ("Create Account", handle_create),
    2: ("Show All Accounts", handle_show_all),
    3: ("Search Account", handle_search),
    4: ("Deposit Money", handle_deposit),
    5: ("Withdraw Money", handle_withdraw),
    6: ("Transfer Money", handle_transfer),
    7: ("Close Account", handle_close),
    8: ("Update Account Name", handle_rename),
    9: ("Show High Balance Accounts", handle_high_balance),
    10: ("Sort Accounts by Balance", handle_sort),
}


def print_menu() -> None:
    print("\n=== Bank Ledger ===")
    for choice, (label, _) in COMMANDS.items():
        print(f"{choice}. {label}")
    print(f"{EXIT_CHOICE}. Exit")


def run_menu(session: Session) -> None:
    """Dispatch menu choices until the user quits or input ends."""
    while True:
        print_menu()
        try:
            choice = prompt_int("Enter choice: ", session.input_fn, minimum=0, maximum=max(COMMANDS))
            if choice == EXIT_CHOICE:
                return
            _, handler = COMMANDS[choice]
            handler(session)
        except EOFError:
            print()
            return
        except LedgerError as exc:
            print(f"Error: {exc}", file=sys.stderr)


def export_json(store: AccountStore, output_dir: Path) -> Path:
    sink = JsonFileSink(output_dir, pretty=True)
    path = sink.write_batch("accounts", store.list_all())
    sink.close()
    return path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bank-ledger",
        description="Interactive PIN-protected account ledger.",
    )
    parser.add_argument("--data-file", type=Path, default=None,
                        help="Ledger file (default: $LEDGER_DATA_FILE or accounts_secure.txt)")
    parser.add_argument("--log-level", default=None,
                        help="Log level (default: $LEDGER_LOG_LEVEL or WARNING)")
    parser.add_argument("--log-format", choices=LOG_FORMATS, default=None,
                        help="Log format (default: $LEDGER_LOG_FORMAT or standard)")
    parser.add_argument("--export-json", type=Path, default=None, metavar="DIR",
                        help="Write accounts.json to DIR and exit without the menu")
    return parser


def main(
    argv: list[str] | None = None,
    input_fn: InputFn = input,
    pin_fn: InputFn = getpass.getpass,
) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = LedgerConfig.from_env()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.data_file is not None:
        config.storage.data_file = args.data_file
    if args.log_level is not None:
        config.logging.level = args.log_level
    if args.log_format is not None:
        config.logging.format_type = args.log_format
    config.export_dir = args.export_json

    setup_logging(config.logging.level, config.logging.format_type)

    data_file = config.storage.data_file
    try:
        store = load_store(data_file, encoding=config.storage.encoding)
    except PersistenceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if config.export_dir is not None:
        try:
            path = export_json(store, config.export_dir)
        except PersistenceError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        print(f"Exported {len(store)} accounts to {path}")
        return 0

    run_menu(Session(store=store, input_fn=input_fn, pin_fn=pin_fn))

    print("Saving data...")
    try:
        save_store(data_file, store, encoding=config.storage.encoding)
    except PersistenceError as exc:
        logger.error("Save failed: %s", exc)
        print(f"Error: {exc}. Changes from this session were NOT saved.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
