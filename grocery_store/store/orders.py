"""CSV-backed order repository."""

from __future__ import annotations

from pathlib import Path

from grocery_store.exceptions import InvalidEntityStateError, ReferentialIntegrityError
from grocery_store.logging import get_logger
from grocery_store.models.order import Order
from grocery_store.sinks.csv_file import write_csv
from grocery_store.sinks.serialization import order_to_rows
from grocery_store.store.csv_rows import (
    ORDER_COLUMNS,
    group_order_rows,
    parse_order_row,
    read_rows,
)
from grocery_store.store.customers import CustomerRepository

logger = get_logger(__name__)


class OrderRepository:
    """Orders loaded from ``orders.csv`` with customers resolved.

    The file is read on first access and cached for the lifetime of the
    repository; ``add_product``/``remove_product`` on returned orders and
    ``add`` all mutate that cached collection, which ``save`` writes out.

    Parameters
    ----------
    source : str | Path
        Path of the orders CSV.
    customers : CustomerRepository
        Repository used to resolve each order's ``customer_id``.
    """

    def __init__(self, source: str | Path, customers: CustomerRepository) -> None:
        self.source = Path(source)
        self.customers = customers
        self._orders: list[Order] | None = None

    def _load(self) -> list[Order]:
        if self._orders is not None:
            return self._orders

        rows = [
            parse_order_row(row, f"{self.source}:{line}", line)
            for line, row in read_rows(self.source, ORDER_COLUMNS)
        ]
        orders = []
        for group in group_order_rows(rows, str(self.source)):
            customer = self.customers.find(group.customer_id)
            if customer is None:
                raise ReferentialIntegrityError(
                    f"Order {group.order_id} references unknown customer {group.customer_id}"
                )
            orders.append(
                Order(
                    order_id=group.order_id,
                    products=group.products,
                    customer=customer,
                    fulfillment_status=group.fulfillment_status,
                )
            )
            logger.debug("Loaded order %d with %d products", group.order_id, len(group.products))

        logger.info("Loaded %d orders (%d rows) from %s", len(orders), len(rows), self.source)
        self._orders = orders
        return orders

    def all(self) -> list[Order]:
        """Return every order, in order of first appearance in the file."""
        return list(self._load())

    def find(self, order_id: int) -> Order | None:
        """Return the order with the given id, or ``None``."""
        for order in self._load():
            if order.order_id == order_id:
                return order
        return None

    def find_by_customer(self, customer_id: int) -> list[Order]:
        """Return all orders placed by a customer, in file order."""
        return [order for order in self._load() if order.customer_id == customer_id]

    def add(self, order: Order) -> None:
        """Add a newly constructed order to the collection."""
        if self.find(order.order_id) is not None:
            raise InvalidEntityStateError(f"Order {order.order_id} already exists")
        if self.customers.find(order.customer_id) is None:
            raise ReferentialIntegrityError(f"Customer {order.customer_id} not found")
        self._load().append(order)

    def save(self, filename: str | Path) -> Path:
        """Write all loaded orders to ``filename``, one row per product."""
        orders = self._load()
        path = Path(filename)
        count = write_csv(path, ORDER_COLUMNS, (row for order in orders for row in order_to_rows(order)))
        logger.info("Saved %d orders (%d rows) to %s", len(orders), count, path)
        return path

    def reload(self) -> None:
        """Forget the cached orders; the next access rereads the file."""
        self._orders = None

    def summary(self) -> dict[str, int]:
        """Return summary counts of loaded orders and product lines."""
        orders = self._load()
        return {
            "orders": len(orders),
            "product_lines": sum(len(order.products) for order in orders),
        }

    def __len__(self) -> int:
        return len(self._load())
