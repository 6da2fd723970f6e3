"""Configuration management for grocery-store."""

from dataclasses import dataclass, field
from pathlib import Path

from grocery_store.exceptions import ConfigurationError
from grocery_store.logging import LOG_FORMATS


@dataclass
class DataFilesConfig:
    """Locations of the backing CSV files."""

    data_dir: Path = field(default_factory=lambda: Path("data"))
    customers_file: str = "customers.csv"
    orders_file: str = "orders.csv"
    all_orders_file: str = "all_orders.csv"

    @property
    def customers_path(self) -> Path:
        """Path of the customers CSV."""
        return self.data_dir / self.customers_file

    @property
    def orders_path(self) -> Path:
        """Path of the orders CSV."""
        return self.data_dir / self.orders_file

    @property
    def all_orders_path(self) -> Path:
        """Default output path for ``OrderRepository.save``."""
        return self.data_dir / self.all_orders_file


@dataclass
class GroceryStoreConfig:
    """Main configuration for grocery-store."""

    data: DataFilesConfig = field(default_factory=DataFilesConfig)
    log_level: str = "INFO"
    log_format: str = "standard"
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "GroceryStoreConfig":
        """Create config from environment variables."""
        import os

        data = DataFilesConfig(
            data_dir=Path(os.getenv("GROCERY_DATA_DIR", "data")),
            customers_file=os.getenv("GROCERY_CUSTOMERS_FILE", "customers.csv"),
            orders_file=os.getenv("GROCERY_ORDERS_FILE", "orders.csv"),
            all_orders_file=os.getenv("GROCERY_ALL_ORDERS_FILE", "all_orders.csv"),
        )

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as exc:
            raise ConfigurationError(f"SEED must be an integer, got {seed_str!r}") from exc

        log_format = os.getenv("LOG_FORMAT", "standard").lower()
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {log_format!r}"
            )

        return cls(
            data=data,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
            seed=seed,
        )
