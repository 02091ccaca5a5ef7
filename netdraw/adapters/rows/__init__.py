"""Row source adapters."""

from .csv_rows import CsvRowSource

__all__ = ["CsvRowSource"]
