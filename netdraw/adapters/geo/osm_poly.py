"""Reader for the OSM POLY format.

A POLY file starts with a name line, followed by any number of sections.
Each section starts with a section name (a leading '!' marks a hole),
lists one "longitude latitude" pair per line and ends with END. A final
END closes the file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from ...domain.errors import FormatViolationError
from ...domain.models import Area, LatLng

logger = logging.getLogger(__name__)


def read_osm_poly(path: Union[str, Path]) -> Area:
    """Read every section of a POLY file as a face of an Area.

    Raises:
        FormatViolationError: If the file cannot be read or is malformed.
    """
    path = str(path)
    try:
        with open(path, encoding="utf-8") as f:
            lines = [line.strip() for line in f]
    except OSError as e:
        raise FormatViolationError("cannot open file", file_path=path, cause=e)

    def violation(message: str, line_number: int) -> FormatViolationError:
        return FormatViolationError(message, file_path=path, line_number=line_number)

    numbered = [(i, line) for i, line in enumerate(lines, start=1) if line]
    if not numbered:
        raise violation("empty POLY file", 1)

    area = Area(name=numbered[0][1])
    face: list[tuple[float, float]] | None = None
    for line_number, line in numbered[1:]:
        if face is None:
            if line == "END":
                break
            face = []
            continue
        if line == "END":
            if len(face) < 3:
                raise violation("section has fewer than 3 vertices", line_number)
            area.faces.append(face)
            face = None
            continue
        parts = line.split()
        if len(parts) != 2:
            raise violation(f"expected 'longitude latitude', got {line!r}", line_number)
        try:
            lon, lat = float(parts[0]), float(parts[1])
        except ValueError as e:
            raise FormatViolationError(
                f"malformed coordinate {line!r}",
                file_path=path,
                line_number=line_number,
                cause=e,
            )
        if not LatLng(lat, lon).in_range:
            raise violation(f"coordinate out of range {line!r}", line_number)
        face.append((lon, lat))
    else:
        raise violation("missing END", numbered[-1][0])
    if not area.faces:
        raise violation("POLY file has no sections", line_number)

    logger.debug("POLY file read", extra={"path": path, "faces": len(area.faces)})
    return area
