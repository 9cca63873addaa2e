#!/usr/bin/env python3
"""Generate a sample account database.

Writes a database file in the flat format the application loads, filled
with Faker-generated accounts. Useful for trying the terminal UI without
typing accounts in by hand.

Usage::

    python scripts/generate_sample_db.py --accounts 60 --seed 42 --output db
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bankacct.generators import AccountGenerator
from bankacct.logging import setup_logging
from bankacct.sinks import FlatFileSink, ReportSink
from bankacct.store import AccountStore

logger = logging.getLogger(__name__)


def generate_database(num_accounts: int, seed: int | None) -> AccountStore:
    """Generate ``num_accounts`` accounts into a fresh store."""
    t0 = time.perf_counter()
    generator = AccountGenerator(seed=seed)
    store = AccountStore()
    store.extend(generator.generate_many(num_accounts))
    logger.info("Generated %d accounts in %.2fs", len(store), time.perf_counter() - t0)
    return store


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a sample bankacct database")
    parser.add_argument(
        "--accounts",
        type=int,
        default=25,
        help="Number of accounts to generate (default: 25)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed (default: 42)",
    )
    parser.add_argument(
        "--output",
        default="db",
        help="Database file to write (default: db)",
    )
    parser.add_argument(
        "--report",
        default=None,
        help="Also write a report file",
    )
    parser.add_argument(
        "--log-file",
        default="generate_sample_db.log",
        help="Log file (default: generate_sample_db.log)",
    )
    args = parser.parse_args()

    if args.accounts < 0:
        parser.error("--accounts must not be negative")

    setup_logging(log_file=args.log_file)

    store = generate_database(args.accounts, args.seed)
    FlatFileSink(args.output).save(store)
    if args.report:
        ReportSink(args.report).write(store)

    summary = store.summary()
    print(f"Wrote {summary['accounts']} accounts to {args.output}")
    print(f"Total balance: {summary['total_balance']:.2f}")


if __name__ == "__main__":
    main()
