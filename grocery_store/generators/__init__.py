"""Sample data generators."""

from grocery_store.generators.address import AddressFactory
from grocery_store.generators.customer import CustomerGenerator
from grocery_store.generators.order import OrderGenerator
from grocery_store.generators.sample import write_sample_data

__all__ = ["AddressFactory", "CustomerGenerator", "OrderGenerator", "write_sample_data"]
