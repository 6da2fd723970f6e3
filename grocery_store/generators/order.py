"""Order generator."""

from __future__ import annotations

import random
from decimal import Decimal
from typing import Iterator, Sequence

from grocery_store.exceptions import InvalidEntityStateError
from grocery_store.generators.base import BaseGenerator
from grocery_store.models.customer import Customer
from grocery_store.models.enums import FulfillmentStatus
from grocery_store.models.order import Order

PRODUCT_CATALOG = (
    "Amaranth", "Annatto seed", "Apricots", "Bok Choy", "Cacao", "Camomile",
    "Cheddar", "Chickpea", "Cumquat", "Dates", "Dried Figs", "Endive",
    "Fennel", "Garam Masala", "Hokkien Noodles", "Hummus", "Kale", "Kiwi Fruit",
    "Lemongrass", "Lobster", "Lychee", "Mango", "Millet", "Miso", "Mussels",
    "Okra", "Oyster Sauce", "Papaya", "Pecan", "Polenta", "Quinoa", "Radicchio",
    "Rice Paper", "Saffron", "Smoked Trout", "Sorghum", "Star Fruit", "Tahini",
    "Tempeh", "Walnuts", "Wasabi", "Wholewheat flour", "Yams", "Zucchini",
)


class OrderGenerator(BaseGenerator):
    """Generate synthetic orders for a set of customers."""

    STATUSES = list(FulfillmentStatus)
    STATUS_WEIGHTS = [0.20, 0.20, 0.20, 0.15, 0.25]

    def __init__(
        self,
        customers: Sequence[Customer],
        seed: int | None = None,
        start_id: int = 1,
        products_per_order: tuple[int, int] = (1, 5),
        price_range: tuple[float, float] = (0.5, 100.0),
    ) -> None:
        if not customers:
            raise InvalidEntityStateError("OrderGenerator requires at least one customer")
        lo, hi = products_per_order
        if not (1 <= lo <= hi <= len(PRODUCT_CATALOG)):
            raise InvalidEntityStateError(
                f"products_per_order must satisfy 1 <= min <= max <= {len(PRODUCT_CATALOG)}"
            )
        super().__init__(seed)
        self.customers = list(customers)
        self.products_per_order = products_per_order
        self.price_range = price_range
        self._next_id = start_id

    def generate(self) -> Order:
        """Generate a single order."""
        count = random.randint(*self.products_per_order)
        names = random.sample(PRODUCT_CATALOG, k=count)
        products = {
            name: Decimal(str(round(random.uniform(*self.price_range), 2))) for name in names
        }
        status = random.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0]

        order = Order(
            order_id=self._next_id,
            products=products,
            customer=random.choice(self.customers),
            fulfillment_status=status,
        )
        self._next_id += 1
        return order

    def generate_batch(self, count: int) -> Iterator[Order]:
        """Generate ``count`` orders with consecutive ids."""
        for _ in range(count):
            yield self.generate()
