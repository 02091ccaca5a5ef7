"""Reader for origin-destination travel demand files.

The demand file is a CSV file with the columns ``origin`` and
``destination``, each holding an internal vertex id. Lines starting with
'#' are comments.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from ...domain.errors import FormatViolationError
from ...domain.models import ODPair
from ..rows.csv_rows import CsvRowSource

logger = logging.getLogger(__name__)

OD_COLUMNS = ("origin", "destination")


def import_od_pairs(path: Union[str, Path]) -> List[ODPair]:
    """Read all OD pairs from ``path``.

    Raises:
        FormatViolationError: If a vertex id is negative or the file is malformed.
    """
    od_pairs: List[ODPair] = []
    with CsvRowSource(path, OD_COLUMNS, comment_char="#") as reader:
        while (row := reader.next_row()) is not None:
            origin = reader.parse_int("origin", row[0])
            destination = reader.parse_int("destination", row[1])
            if origin < 0 or destination < 0:
                raise FormatViolationError(
                    f"negative vertex id in OD pair ({origin}, {destination})",
                    file_path=reader.path,
                    line_number=reader.line_number,
                )
            od_pairs.append(ODPair(origin, destination))
    logger.info("OD pairs read", extra={"path": str(path), "pairs": len(od_pairs)})
    return od_pairs
