"""Typed domain errors for netdraw.

Every malformed input is reported through one of these types instead of
crashing on an assertion, so the command line can report it once and
exit with a non-zero status.

All errors inherit from NetDrawError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class NetDrawError(Exception):
    """Base error for netdraw.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class FormatViolationError(NetDrawError):
    """An input file does not follow its expected format.

    Attributes:
        file_path: Path to the offending file if known
        line_number: 1-based line of the offending record if known
    """

    file_path: Optional[str] = None
    line_number: Optional[int] = None

    def __str__(self) -> str:
        text = NetDrawError.__str__(self)
        if self.file_path is None:
            return text
        location = self.file_path
        if self.line_number is not None:
            location = f"{location}:{self.line_number}"
        return f"{location}: {text}"


@dataclass
class FieldParseError(FormatViolationError):
    """A field does not hold valid numeric text.

    Attributes:
        field_name: Name of the column that failed to parse
        raw_value: The text found in the column
    """

    field_name: str = ""
    raw_value: str = ""


@dataclass
class DuplicateVertexError(FormatViolationError):
    """The same external vertex identifier was registered twice."""

    external_id: Optional[int] = None


@dataclass
class UnknownEndpointError(FormatViolationError):
    """An edge references a vertex identifier that was never registered."""

    external_id: Optional[int] = None


@dataclass
class FlowFileCorruptError(FormatViolationError):
    """The flow file breaks the iteration/block-size rules."""

    iteration: Optional[int] = None


@dataclass
class ImportOrderError(NetDrawError):
    """Vertices and edges were requested out of order.

    All vertices must be registered before any edge endpoint is resolved.
    """


@dataclass
class ConfigurationError(NetDrawError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None


@dataclass
class RegionCleanupError(NetDrawError):
    """The network does not match the snapshot a cleanup routine expects.

    Attributes:
        expected: Expected (vertices, edges) counts
        actual: Actual (vertices, edges) counts
    """

    expected: tuple[int, int] = (0, 0)
    actual: tuple[int, int] = (0, 0)


@dataclass
class RenderingError(NetDrawError):
    """Writing the graphic failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""
