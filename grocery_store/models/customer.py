"""Customer model."""

from dataclasses import dataclass

from grocery_store.exceptions import InvalidEntityStateError
from grocery_store.models.base import Address


@dataclass(frozen=True)
class Customer:
    """Store customer entity."""

    customer_id: int
    email: str
    address: Address

    def __post_init__(self) -> None:
        if self.customer_id is None:
            raise InvalidEntityStateError("Customer requires a customer_id")
        if not self.email:
            raise InvalidEntityStateError(f"Customer {self.customer_id} requires an email")
        if self.address is None:
            raise InvalidEntityStateError(f"Customer {self.customer_id} requires an address")
