"""Canvas adapters - Implementations of CanvasPort."""

from .matplotlib_canvas import MatplotlibCanvas

__all__ = ["MatplotlibCanvas"]
