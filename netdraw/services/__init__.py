"""Services layer - Application orchestration.

Available services:
- NetworkDrawingService: Draws a network or its flow patterns onto a canvas
"""

from .draw_network import NetworkDrawingService

__all__ = ["NetworkDrawingService"]
