"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from grocery_store.models import Address, Customer
from grocery_store.store import CustomerRepository, OrderRepository

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@pytest.fixture
def data_dir() -> Path:
    """Directory holding the fixture CSV files."""
    return DATA_DIR


@pytest.fixture
def customers(data_dir: Path) -> CustomerRepository:
    """Customer repository over the fixture customers.csv."""
    return CustomerRepository(data_dir / "customers.csv")


@pytest.fixture
def orders(data_dir: Path, customers: CustomerRepository) -> OrderRepository:
    """Order repository over the fixture orders.csv."""
    return OrderRepository(data_dir / "orders.csv", customers)


@pytest.fixture
def customer() -> Customer:
    """Sample customer not backed by any file."""
    return Customer(
        customer_id=123,
        email="a@a.co",
        address=Address(street="123 Main", city="Seattle", state="WA", zip="98101"),
    )


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42
