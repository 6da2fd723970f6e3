"""Enumeration types for grocery-store entities."""

from enum import Enum


class FulfillmentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    COMPLETE = "complete"
