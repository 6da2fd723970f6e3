"""Shared serialization utilities for sinks."""

from enum import Enum
from typing import Any

from grocery_store.models.customer import Customer
from grocery_store.models.order import Order

CUSTOMER_COLUMNS = ("id", "email", "street", "city", "state", "zip")
ORDER_COLUMNS = ("id", "product_name", "product_price", "customer_id", "fulfillment_status")


def serialize_value(value: Any) -> str:
    """Serialize a value for a CSV cell."""
    if value is None:
        return ""
    elif isinstance(value, Enum):
        return value.value
    return str(value)


def customer_to_row(customer: Customer) -> dict[str, str]:
    """Convert a customer to a ``customers.csv`` row."""
    address = customer.address
    return {
        "id": serialize_value(customer.customer_id),
        "email": customer.email,
        "street": address.street,
        "city": address.city,
        "state": address.state,
        "zip": address.zip,
    }


def order_to_rows(order: Order) -> list[dict[str, str]]:
    """Convert an order to ``orders.csv`` rows, one per product.

    An order without products yields a single row with empty product
    columns so that it is not lost on reload.
    """
    base = {
        "id": serialize_value(order.order_id),
        "customer_id": serialize_value(order.customer_id),
        "fulfillment_status": serialize_value(order.fulfillment_status),
    }
    if not order.products:
        return [{**base, "product_name": "", "product_price": ""}]
    return [
        {**base, "product_name": name, "product_price": serialize_value(price)}
        for name, price in order.products.items()
    ]
