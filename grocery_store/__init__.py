"""CSV-backed customers and orders for a small grocery store."""

from grocery_store.config import DataFilesConfig, GroceryStoreConfig
from grocery_store.store import CustomerRepository, OrderRepository


def open_repositories(config: DataFilesConfig | None = None) -> tuple[CustomerRepository, OrderRepository]:
    """Create customer and order repositories over the configured files."""
    config = config or DataFilesConfig()
    customers = CustomerRepository(config.customers_path)
    orders = OrderRepository(config.orders_path, customers)
    return customers, orders


__all__ = [
    "CustomerRepository",
    "DataFilesConfig",
    "GroceryStoreConfig",
    "OrderRepository",
    "open_repositories",
]
