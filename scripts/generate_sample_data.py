#!/usr/bin/env python3
"""Generate sample customers.csv and orders.csv files.

The files use the same layout the repositories read, so a generated
directory can be pointed at with ``GROCERY_DATA_DIR``.
"""

import argparse
from pathlib import Path

from grocery_store.config import GroceryStoreConfig
from grocery_store.generators import write_sample_data
from grocery_store.logging import LOG_FORMATS, setup_logging
from grocery_store.store import CustomerRepository, OrderRepository


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    config = GroceryStoreConfig.from_env()
    parser = argparse.ArgumentParser(description="Generate sample grocery-store CSV files")
    parser.add_argument("--output-dir", type=Path, default=Path("local"), help="Directory to write to")
    parser.add_argument("--customers", type=int, default=35, help="Number of customers")
    parser.add_argument("--orders", type=int, default=100, help="Number of orders")
    parser.add_argument("--seed", type=int, default=config.seed, help="Random seed")
    parser.add_argument("--log-level", default=config.log_level, help="Log level")
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=config.log_format,
        help="Log output format",
    )
    return parser.parse_args()


def main() -> None:
    """Generate the files, then load them back as a sanity check."""
    args = parse_args()
    setup_logging(args.log_level, args.log_format)

    paths = write_sample_data(args.output_dir, args.customers, args.orders, seed=args.seed)

    customers = CustomerRepository(paths["customers"])
    orders = OrderRepository(paths["orders"], customers)

    print("=" * 60)
    print("Summary")
    print("=" * 60)
    print(f"{'Customers:':18}{len(customers)}")
    for name, count in orders.summary().items():
        print(f"{name + ':':18}{count}")
    print(f"\nAll files saved to: {args.output_dir}")
    print("=" * 60)


if __name__ == "__main__":
    main()
