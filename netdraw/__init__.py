"""Top-level package for netdraw.

netdraw imports road networks from CSV files into a dense in-memory
graph and draws them, or the flow patterns computed on them by a traffic
assignment, as PDF, PNG or SVG graphics.
"""

__version__ = "0.1.0"
