"""CSV-backed repositories for customers and orders."""

from grocery_store.store.customers import CustomerRepository
from grocery_store.store.orders import OrderRepository

__all__ = ["CustomerRepository", "OrderRepository"]
