"""Colors and line widths used for drawing networks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA color with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def with_alpha(self, alpha: int) -> Color:
        return Color(self.red, self.green, self.blue, alpha)

    def to_rgba(self) -> tuple[float, float, float, float]:
        """Channels scaled to [0, 1], as matplotlib expects them."""
        return (self.red / 255, self.green / 255, self.blue / 255, self.alpha / 255)


KIT_BLACK = Color(0, 0, 0)
KIT_BLACK_15 = Color(217, 217, 217)
KIT_GREEN = Color(0, 150, 130)

# ColorBrewer's sequential 9-class Reds scheme, lightest first.
REDS_9CLASS = (
    Color(255, 245, 240),
    Color(254, 224, 210),
    Color(252, 187, 161),
    Color(252, 146, 114),
    Color(251, 106, 74),
    Color(239, 59, 44),
    Color(203, 24, 29),
    Color(165, 15, 21),
    Color(103, 0, 13),
)


class LineWidth:
    """Line widths in points."""

    VERY_THIN = 0.1
    THIN = 0.25
