"""Canvas port - Abstraction for the drawing backend.

The rendering service only draws lines and polygons with a current
color and line width, so any backend that offers these primitives and
page breaks can produce the graphic.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from ..domain.models import Point
from ..viz.palette import Color


class CanvasPort(Protocol):
    """Port for drawing primitives.

    Implementation: adapters/canvas/matplotlib_canvas.py

    Primitives drawn later appear on top of primitives drawn earlier.
    """

    def set_color(self, color: Color) -> None:
        """Set the color of subsequent primitives."""
        ...

    def set_line_width(self, width: float) -> None:
        """Set the line width, in points, of subsequent primitives."""
        ...

    def draw_line(self, src: Point, dst: Point) -> None:
        ...

    def draw_polyline(self, points: Sequence[Point]) -> None:
        ...

    def draw_polygon(self, points: Sequence[Point]) -> None:
        """Draw the outline of a closed polygon."""
        ...

    def new_page(self) -> None:
        """Finish the current page and start an empty one."""
        ...

    def close(self) -> None:
        """Finish the last page and write the output."""
        ...
