"""Domain models for grocery-store."""

from grocery_store.models.base import Address
from grocery_store.models.customer import Customer
from grocery_store.models.enums import FulfillmentStatus
from grocery_store.models.order import Order

__all__ = ["Address", "Customer", "FulfillmentStatus", "Order"]
