"""Domain layer - Core value types and errors.

This module contains the immutable models and typed errors used
throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DuplicateVertexError,
    FieldParseError,
    FlowFileCorruptError,
    FormatViolationError,
    ImportOrderError,
    NetDrawError,
    RegionCleanupError,
    RenderingError,
    UnknownEndpointError,
)
from .models import INFTY, INVALID_ID, Area, LatLng, ODPair, Point, Rectangle

__all__ = [
    # Models
    "INFTY",
    "INVALID_ID",
    "Area",
    "LatLng",
    "ODPair",
    "Point",
    "Rectangle",
    # Errors
    "NetDrawError",
    "FormatViolationError",
    "FieldParseError",
    "DuplicateVertexError",
    "UnknownEndpointError",
    "FlowFileCorruptError",
    "ImportOrderError",
    "ConfigurationError",
    "RegionCleanupError",
    "RenderingError",
]
