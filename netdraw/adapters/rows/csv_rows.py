"""CSV row source adapter.

Reads a CSV file with a header line and returns the requested columns of
each record, in the requested order. Extra columns are ignored, fields
are trimmed, and blank lines (and optionally comment lines) are skipped.
"""

from __future__ import annotations

import csv
import logging
import math
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from ...domain.errors import FieldParseError, FormatViolationError


class CsvRowSource:
    """Row source over a CSV file.

    The file is opened on construction and released by close(); the
    source is also a context manager.

    Attributes:
        columns: Header names of the fields returned by next_row()
        comment_char: Lines starting with this character are skipped
    """

    def __init__(
        self,
        path: Union[str, Path],
        columns: Sequence[str],
        comment_char: Optional[str] = None,
    ) -> None:
        self._path = str(path)
        self.columns = tuple(columns)
        self.comment_char = comment_char
        self._logger = logging.getLogger(__name__)
        self._line_number = 0

        try:
            self._file = open(self._path, newline="", encoding="utf-8")
        except OSError as e:
            raise FormatViolationError(
                "cannot open file", file_path=self._path, cause=e
            )
        self._reader = csv.reader(self._file)

        try:
            header = self._next_record()
            if header is None:
                raise FormatViolationError(
                    "missing header line", file_path=self._path
                )
            self._indices = self._locate_columns(header)
        except BaseException:
            self.close()
            raise

        self._logger.debug(
            "Opened CSV file",
            extra={"path": self._path, "columns": list(self.columns)},
        )

    @property
    def path(self) -> str:
        return self._path

    @property
    def line_number(self) -> int:
        return self._line_number

    def __enter__(self) -> CsvRowSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _next_record(self) -> Optional[list[str]]:
        for record in self._reader:
            self._line_number = self._reader.line_num
            fields = [f.strip() for f in record]
            if not any(fields):
                continue
            if self.comment_char and fields[0].startswith(self.comment_char):
                continue
            return fields
        return None

    def _locate_columns(self, header: list[str]) -> Tuple[int, ...]:
        missing = [c for c in self.columns if c not in header]
        if missing:
            raise FormatViolationError(
                f"missing column(s) {', '.join(missing)}",
                file_path=self._path,
                line_number=self._line_number,
            )
        return tuple(header.index(c) for c in self.columns)

    def next_row(self) -> Optional[Tuple[str, ...]]:
        """Return the requested fields of the next record, or None at end of input."""
        record = self._next_record()
        if record is None:
            return None
        if len(record) <= max(self._indices, default=-1):
            raise FormatViolationError(
                f"expected at least {max(self._indices) + 1} fields, got {len(record)}",
                file_path=self._path,
                line_number=self._line_number,
            )
        return tuple(record[i] for i in self._indices)

    def parse_int(self, field_name: str, text: str) -> int:
        """Parse integer text from the current record."""
        try:
            if "_" in text:
                raise ValueError(f"digit separator in {text!r}")
            return int(text)
        except ValueError as e:
            raise FieldParseError(
                f"field '{field_name}' is not an integer: {text!r}",
                file_path=self._path,
                line_number=self._line_number,
                field_name=field_name,
                raw_value=text,
                cause=e,
            )

    def parse_float(self, field_name: str, text: str) -> float:
        """Parse real-number text from the current record."""
        try:
            if "_" in text:
                raise ValueError(f"digit separator in {text!r}")
            value = float(text)
        except ValueError as e:
            raise FieldParseError(
                f"field '{field_name}' is not a number: {text!r}",
                file_path=self._path,
                line_number=self._line_number,
                field_name=field_name,
                raw_value=text,
                cause=e,
            )
        if not math.isfinite(value):
            raise FieldParseError(
                f"field '{field_name}' is not a finite number: {text!r}",
                file_path=self._path,
                line_number=self._line_number,
                field_name=field_name,
                raw_value=text,
            )
        return value

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()
