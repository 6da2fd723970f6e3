"""Order model."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from grocery_store.exceptions import (
    DuplicateProductError,
    InvalidPriceError,
    InvalidProductNameError,
    InvalidStatusError,
    ProductNotFoundError,
)
from grocery_store.models.customer import Customer
from grocery_store.models.enums import FulfillmentStatus


def to_price(value: Any) -> Decimal:
    """Coerce a price to a non-negative ``Decimal``.

    Floats go through ``str`` so that ``1.99`` becomes ``Decimal("1.99")``
    rather than its binary expansion.
    """
    if isinstance(value, bool):
        raise InvalidPriceError(f"Price must be a number, got {value!r}")
    try:
        price = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise InvalidPriceError(f"Price must be a number, got {value!r}") from exc
    if not price.is_finite() or price < 0:
        raise InvalidPriceError(f"Price must be a non-negative number, got {value!r}")
    return price


def check_product_name(name: Any) -> str:
    """Return ``name`` if it can be stored as an ``orders.csv`` product name.

    The loader strips cells and reads an empty name as "no product", so
    names must be non-empty strings without surrounding whitespace.
    """
    if not isinstance(name, str) or not name or name != name.strip():
        raise InvalidProductNameError(f"Invalid product name {name!r}")
    return name


@dataclass
class Order:
    """Customer order: product name -> price, plus fulfillment status.

    The ``products`` mapping is copied on construction, so mutating the
    order never touches the caller's dict.
    """

    order_id: int
    products: dict[str, Decimal]
    customer: Customer
    fulfillment_status: FulfillmentStatus = FulfillmentStatus.PENDING

    def __post_init__(self) -> None:
        # Plain strings compare equal to str-enum members, so check the type
        if not isinstance(self.fulfillment_status, FulfillmentStatus):
            raise InvalidStatusError(
                f"Invalid fulfillment status {self.fulfillment_status!r} for order {self.order_id}"
            )
        self.products = {
            check_product_name(name): to_price(price) for name, price in self.products.items()
        }

    def total(self) -> Decimal:
        """Sum of all product prices (zero when there are no products)."""
        return sum(self.products.values(), Decimal("0"))

    def add_product(self, name: str, price: Any) -> None:
        """Add a product to the order.

        Raises
        ------
        DuplicateProductError
            If a product with the same name is already in the order.
        InvalidProductNameError
            If the name is empty or has leading/trailing whitespace.
        InvalidPriceError
            If the price is negative or not a number.
        """
        check_product_name(name)
        if name in self.products:
            raise DuplicateProductError(f"Product {name!r} is already in order {self.order_id}")
        self.products[name] = to_price(price)

    def remove_product(self, name: str) -> None:
        """Remove a product from the order.

        Raises
        ------
        ProductNotFoundError
            If the product is not in the order.
        """
        if name not in self.products:
            raise ProductNotFoundError(f"Product {name!r} is not in order {self.order_id}")
        del self.products[name]

    @property
    def customer_id(self) -> int:
        return self.customer.customer_id
