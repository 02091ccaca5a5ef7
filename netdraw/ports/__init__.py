"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the drawing core and the file
formats and graphics backends it is driven by or drives.
"""

from .canvas import CanvasPort
from .rows import RowSourcePort

__all__ = ["CanvasPort", "RowSourcePort"]
