"""Network importer adapters.

Available implementations:
- CsvNetworkImporter: Reads vertices.csv and edges.csv from a directory
"""

from .csv_importer import CsvNetworkImporter

__all__ = ["CsvNetworkImporter"]
