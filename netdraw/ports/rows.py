"""Row source port - Sequential access to tabular records.

Importers and the flow reader only need one record at a time and an
explicit end-of-input signal, which lets the underlying file format vary.
"""

from __future__ import annotations

from typing import Optional, Protocol, Tuple


class RowSourcePort(Protocol):
    """Port for reading records one at a time.

    Implementation: adapters/rows/csv_rows.py
    """

    @property
    def path(self) -> str:
        """Name of the underlying file, used in error messages."""
        ...

    @property
    def line_number(self) -> int:
        """1-based line number of the record returned last."""
        ...

    def next_row(self) -> Optional[Tuple[str, ...]]:
        """Return the requested fields of the next record.

        Returns:
            The fields in the order the columns were requested, or None at
            end of input.
        """
        ...

    def parse_int(self, field_name: str, text: str) -> int:
        """Parse integer text of the current record.

        Raises:
            FieldParseError: If ``text`` is not an integer.
        """
        ...

    def parse_float(self, field_name: str, text: str) -> float:
        """Parse real-number text of the current record.

        Raises:
            FieldParseError: If ``text`` is not a finite number.
        """
        ...

    def close(self) -> None:
        """Release the underlying file."""
        ...
