"""CSV reading, row parsing and order-row grouping.

``orders.csv`` holds one row per (order, product) pair. Rows are parsed
into ``OrderRow`` records first, then folded into one ``OrderGroup`` per
order id by ``group_order_rows`` before any ``Order`` is constructed.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Iterable, Iterator

from grocery_store.exceptions import DataFileError, InvalidPriceError
from grocery_store.models.base import Address
from grocery_store.models.customer import Customer
from grocery_store.models.enums import FulfillmentStatus
from grocery_store.models.order import to_price
from grocery_store.sinks.serialization import CUSTOMER_COLUMNS, ORDER_COLUMNS


@dataclass(frozen=True)
class OrderRow:
    """A single parsed line of ``orders.csv``.

    ``product_name`` is ``None`` for an order saved without products.
    """

    order_id: int
    product_name: str | None
    product_price: Decimal | None
    customer_id: int
    fulfillment_status: FulfillmentStatus
    line: int = 0


@dataclass
class OrderGroup:
    """All rows of one order, merged."""

    order_id: int
    customer_id: int
    fulfillment_status: FulfillmentStatus
    products: dict[str, Decimal] = field(default_factory=dict)


def read_rows(path: str | Path, columns: tuple[str, ...]) -> Iterator[tuple[int, dict[str, str]]]:
    """Yield ``(line_number, row)`` pairs from a CSV file with a header row.

    Raises
    ------
    DataFileError
        If the file does not exist, has no header, lacks a column, or
        has a row with more fields than the header.
    """
    csv_path = Path(path)
    if not csv_path.exists():
        raise DataFileError(f"Data file not found: {csv_path}")

    with csv_path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            raise DataFileError(f"Data file '{csv_path}' is missing a header row.")
        missing = [col for col in columns if col not in reader.fieldnames]
        if missing:
            raise DataFileError(f"Data file '{csv_path}' is missing columns: {', '.join(missing)}")
        for row in reader:
            if None in row:
                raise DataFileError(f"{csv_path}:{reader.line_num}: more fields than header columns")
            if not any((value or "").strip() for value in row.values()):
                continue  # blank line
            yield reader.line_num, row


def _parse_int(value: str | None, column: str, where: str) -> int:
    try:
        return int((value or "").strip())
    except ValueError as exc:
        raise DataFileError(f"{where}: column '{column}' is not an integer: {value!r}") from exc


def parse_customer_row(row: dict[str, str], where: str = "customers") -> Customer:
    """Build a ``Customer`` from a ``customers.csv`` row."""
    return Customer(
        customer_id=_parse_int(row.get("id"), "id", where),
        email=(row.get("email") or "").strip(),
        address=Address(
            street=(row.get("street") or "").strip(),
            city=(row.get("city") or "").strip(),
            state=(row.get("state") or "").strip(),
            zip=(row.get("zip") or "").strip(),
        ),
    )


def parse_order_row(row: dict[str, str], where: str = "orders", line: int = 0) -> OrderRow:
    """Build an ``OrderRow`` from an ``orders.csv`` row."""
    raw_status = (row.get("fulfillment_status") or "").strip()
    try:
        status = FulfillmentStatus(raw_status)
    except ValueError as exc:
        raise DataFileError(f"{where}: unknown fulfillment_status {raw_status!r}") from exc

    name = (row.get("product_name") or "").strip()
    raw_price = (row.get("product_price") or "").strip()
    price: Decimal | None = None
    if name:
        try:
            price = to_price(raw_price)
        except InvalidPriceError as exc:
            raise DataFileError(f"{where}: {exc}") from exc
    elif raw_price:
        raise DataFileError(f"{where}: product_price given without product_name")

    return OrderRow(
        order_id=_parse_int(row.get("id"), "id", where),
        product_name=name or None,
        product_price=price,
        customer_id=_parse_int(row.get("customer_id"), "customer_id", where),
        fulfillment_status=status,
        line=line,
    )


def group_order_rows(rows: Iterable[OrderRow], source: str = "orders") -> list[OrderGroup]:
    """Fold rows sharing an order id into one group each.

    Groups come back in order of each id's first appearance. Rows of the
    same order must agree on customer and status, and may not repeat a
    product name.
    """
    groups: dict[int, OrderGroup] = {}
    for row in rows:
        group = groups.get(row.order_id)
        if group is None:
            group = OrderGroup(
                order_id=row.order_id,
                customer_id=row.customer_id,
                fulfillment_status=row.fulfillment_status,
            )
            groups[row.order_id] = group
        elif (group.customer_id, group.fulfillment_status) != (row.customer_id, row.fulfillment_status):
            raise DataFileError(
                f"{source}:{row.line}: order {row.order_id} rows disagree on customer or status"
            )

        if row.product_name is None:
            continue
        if row.product_name in group.products:
            raise DataFileError(
                f"{source}:{row.line}: product {row.product_name!r} repeated in order {row.order_id}"
            )
        group.products[row.product_name] = row.product_price

    return list(groups.values())
