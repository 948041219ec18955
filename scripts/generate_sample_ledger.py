#!/usr/bin/env python3
"""Generate a sample ledger file for manual testing.

Creates synthetic accounts with Faker holder names, writes them in the
ledger file format, and prints the PIN of every account so the file can
be exercised through the interactive menu.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_ledger.generators import AccountGenerator
from bank_ledger.persistence import save_store
from bank_ledger.store import AccountStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate a sample ledger file")
    parser.add_argument("--count", type=int, default=20, help="Number of accounts (default: 20)")
    parser.add_argument("--start", type=int, default=1001, help="First account number (default: 1001)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--locale", default="en_US", help="Faker locale (default: en_US)")
    parser.add_argument(
        "--output", type=Path, default=Path("accounts_secure.txt"), help="Ledger file to write"
    )
    parser.add_argument("--force", action="store_true", help="Overwrite an existing file")
    args = parser.parse_args()

    if args.output.exists() and not args.force:
        logger.error("%s already exists (use --force to overwrite)", args.output)
        return 1

    store = AccountStore()
    generator = AccountGenerator(seed=args.seed, locale=args.locale)
    pins = generator.populate(store, args.count, start_number=args.start)

    save_store(args.output, store)
    summary = store.summary()
    logger.info("Wrote %d accounts (total balance %s) to %s",
                summary["accounts"], summary["total_balance"], args.output)

    print(f"{'Account':>8}  {'PIN':<4}  Holder")
    for account in store.list_all():
        print(f"{account.account_number:>8}  {pins[account.account_number]:<4}  {account.holder_name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
