"""Base models shared across entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """Postal address of a customer.

    Mirrors the address columns of ``customers.csv``:
    street, city, state (abbreviation) and zip.
    """

    street: str
    city: str
    state: str
    zip: str
