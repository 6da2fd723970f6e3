"""CSV-backed customer repository."""

from __future__ import annotations

from pathlib import Path

from grocery_store.exceptions import DataFileError, InvalidEntityStateError
from grocery_store.logging import get_logger
from grocery_store.models.customer import Customer
from grocery_store.store.csv_rows import CUSTOMER_COLUMNS, parse_customer_row, read_rows

logger = get_logger(__name__)


class CustomerRepository:
    """Customers loaded from ``customers.csv``, indexed by id.

    The file is read on first access and cached for the lifetime of the
    repository.

    Parameters
    ----------
    source : str | Path
        Path of the customers CSV.
    """

    def __init__(self, source: str | Path) -> None:
        self.source = Path(source)
        self._customers: dict[int, Customer] | None = None

    def _load(self) -> dict[int, Customer]:
        if self._customers is not None:
            return self._customers

        customers: dict[int, Customer] = {}
        for line, row in read_rows(self.source, CUSTOMER_COLUMNS):
            where = f"{self.source}:{line}"
            try:
                customer = parse_customer_row(row, where)
            except InvalidEntityStateError as exc:
                raise DataFileError(f"{where}: {exc}") from exc
            if customer.customer_id in customers:
                raise DataFileError(f"{where}: duplicate customer id {customer.customer_id}")
            customers[customer.customer_id] = customer

        logger.info("Loaded %d customers from %s", len(customers), self.source)
        self._customers = customers
        return customers

    def all(self) -> list[Customer]:
        """Return every customer in file order."""
        return list(self._load().values())

    def find(self, customer_id: int) -> Customer | None:
        """Return the customer with the given id, or ``None``."""
        return self._load().get(customer_id)

    def reload(self) -> None:
        """Forget the cached customers; the next access rereads the file."""
        self._customers = None

    def __len__(self) -> int:
        return len(self._load())
