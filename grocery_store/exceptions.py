"""Custom exception hierarchy for grocery-store."""


class GroceryStoreError(Exception):
    """Base exception for all grocery-store errors."""


class EntityNotFoundError(GroceryStoreError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a foreign key reference is violated."""


class InvalidEntityStateError(GroceryStoreError, ValueError):
    """Raised when an entity is in an invalid state for the operation."""


class InvalidStatusError(InvalidEntityStateError):
    """Raised when a fulfillment status is not a FulfillmentStatus member."""


class InvalidPriceError(InvalidEntityStateError):
    """Raised when a product price is negative or not a number."""


class DuplicateProductError(InvalidEntityStateError):
    """Raised when adding a product that is already in the order."""


class ProductNotFoundError(InvalidEntityStateError):
    """Raised when removing a product that is not in the order."""


class ConfigurationError(GroceryStoreError):
    """Raised when configuration is invalid or missing."""


class DataFileError(GroceryStoreError):
    """Raised when a backing CSV file is missing or malformed."""


class InvalidProductNameError(InvalidEntityStateError):
    """Raised when a product name is empty or padded with whitespace."""
