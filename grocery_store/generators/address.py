"""Address generation factory."""

from __future__ import annotations

from faker import Faker

from grocery_store.models.base import Address


class AddressFactory:
    """Generate realistic US street addresses with Faker.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale; must provide ``state_abbr`` and ``zipcode``.
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self._fake = Faker(locale)
        if seed is not None:
            self._fake.seed_instance(seed)

    def generate(self) -> Address:
        """Generate a single address."""
        return Address(
            street=self._fake.street_address(),
            city=self._fake.city(),
            state=self._fake.state_abbr(),
            zip=self._fake.zipcode(),
        )
