"""Customer generator."""

from __future__ import annotations

from typing import Iterator

from grocery_store.generators.address import AddressFactory
from grocery_store.generators.base import BaseGenerator
from grocery_store.models.customer import Customer


class CustomerGenerator(BaseGenerator):
    """Generate synthetic customers with sequential ids starting at 1."""

    def __init__(self, seed: int | None = None, start_id: int = 1) -> None:
        super().__init__(seed)
        self._address_factory = AddressFactory(seed=seed)
        self._next_id = start_id

    def generate(self) -> Customer:
        """Generate a single customer."""
        customer = Customer(
            customer_id=self._next_id,
            email=self.fake.unique.email(),
            address=self._address_factory.generate(),
        )
        self._next_id += 1
        return customer

    def generate_batch(self, count: int) -> Iterator[Customer]:
        """Generate multiple customers.

        Parameters
        ----------
        count : int
            Number of customers to generate.

        Yields
        ------
        Customer
            Generated customers.
        """
        for _ in range(count):
            yield self.generate()
