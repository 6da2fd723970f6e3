"""CSV file sink for exporting entities to files."""

import csv
from pathlib import Path
from typing import Any, Callable, Iterable

from grocery_store.exceptions import DataFileError
from grocery_store.logging import get_logger
from grocery_store.models.customer import Customer
from grocery_store.models.order import Order
from grocery_store.sinks.serialization import (
    CUSTOMER_COLUMNS,
    ORDER_COLUMNS,
    customer_to_row,
    order_to_rows,
)

logger = get_logger(__name__)


def write_csv(path: str | Path, columns: Iterable[str], rows: Iterable[dict[str, str]]) -> int:
    """Write rows under a header line, replacing any existing file.

    Returns the number of data rows written.
    """
    file_path = Path(path)
    count = 0
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with file_path.open(mode="w", encoding="utf-8", newline="") as handle:
            writer = csv.DictWriter(handle, fieldnames=list(columns))
            writer.writeheader()
            for row in rows:
                writer.writerow(row)
                count += 1
    except OSError as exc:
        raise DataFileError(f"Failed to write {file_path}: {exc}") from exc

    logger.debug("Wrote %d rows to %s", count, file_path)
    return count


class CsvFileSink:
    """Output customers and orders to CSV files in a directory.

    ``entity_type`` picks both the file name and the row layout, so an
    empty batch still gets the right header.
    """

    ENTITY_LAYOUTS: dict[str, tuple[type, tuple[str, ...], Callable[[Any], list[dict[str, str]]]]] = {
        "customers": (Customer, CUSTOMER_COLUMNS, lambda customer: [customer_to_row(customer)]),
        "orders": (Order, ORDER_COLUMNS, order_to_rows),
    }

    def __init__(self, output_dir: str | Path) -> None:
        """Initialize CSV file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write CSV files.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> Path:
        """Write a batch of customers or orders to ``<entity_type>.csv``.

        Parameters
        ----------
        entity_type : str
            ``"customers"`` or ``"orders"``.
        records : list
            Entities of the matching type; may be empty.
        """
        layout = self.ENTITY_LAYOUTS.get(entity_type)
        if layout is None:
            raise DataFileError(f"Unsupported entity type {entity_type!r}")
        record_type, columns, to_rows = layout

        file_path = self.output_dir / f"{entity_type}.csv"
        for record in records:
            if not isinstance(record, record_type):
                raise DataFileError(
                    f"Cannot write {type(record).__name__} records to {file_path}"
                )

        write_csv(file_path, columns, (row for record in records for row in to_rows(record)))
        self._counts[entity_type] = len(records)
        return file_path

    def close(self) -> None:
        """Log summary."""
        logger.info("CSV files written to: %s", self.output_dir)
        for entity_type, count in self._counts.items():
            logger.info("  %s: %d records", entity_type, count)
