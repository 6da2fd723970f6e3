"""Write a reproducible sample ``customers.csv`` / ``orders.csv`` pair."""

from __future__ import annotations

from pathlib import Path

from grocery_store.generators.customer import CustomerGenerator
from grocery_store.generators.order import OrderGenerator
from grocery_store.logging import get_logger
from grocery_store.sinks.csv_file import CsvFileSink

logger = get_logger(__name__)


def write_sample_data(
    output_dir: str | Path,
    num_customers: int = 35,
    num_orders: int = 100,
    seed: int | None = None,
) -> dict[str, Path]:
    """Generate customers and orders and write them as CSV files.

    Returns
    -------
    dict[str, Path]
        Written file per entity type (``customers``, ``orders``).
    """
    customers = list(CustomerGenerator(seed=seed).generate_batch(num_customers))
    orders = list(OrderGenerator(customers, seed=seed).generate_batch(num_orders))
    logger.info("Generated %d customers and %d orders", len(customers), len(orders))

    sink = CsvFileSink(output_dir)
    paths = {
        "customers": sink.write_batch("customers", customers),
        "orders": sink.write_batch("orders", orders),
    }
    sink.close()
    return paths
