"""Output sinks for exporting entities."""

from grocery_store.sinks.csv_file import CsvFileSink, write_csv

__all__ = ["CsvFileSink", "write_csv"]
