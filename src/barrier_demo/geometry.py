"""
Drawable primitives: colors, paint styles and rectangles.

Rectangles are immutable. A bar or the barrier holds the rectangles it is
made of and asks them to draw or clear themselves against a surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from barrier_demo.surface import DrawingSurface


class Colors:
    """Color values used throughout the demo."""

    BLACK = "#000000"
    GREY = "#a0a0a0"
    RED = "#ff0000"
    GREEN = "#00ff00"


class PaintStyle(Enum):
    """How a rectangle is painted."""

    OUTLINE = "outline"
    FILLED = "filled"


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle with a paint style.

    Attributes:
        x: Left edge
        y: Top edge
        width: Horizontal extent
        height: Vertical extent
        color: Paint color (hex string)
        style: OUTLINE strokes the edges, FILLED paints the interior
        stroke_width: Outline thickness, only used for OUTLINE
    """

    x: float
    y: float
    width: float
    height: float
    color: str
    style: PaintStyle = PaintStyle.FILLED
    stroke_width: float = 0

    def draw(self, surface: DrawingSurface) -> None:
        """Paint the rectangle onto the surface."""
        if self.style is PaintStyle.OUTLINE:
            surface.paint_outline_rect(
                self.x, self.y, self.width, self.height, self.color, self.stroke_width
            )
        else:
            surface.paint_filled_rect(
                self.x, self.y, self.width, self.height, self.color
            )

    def clear(self, surface: DrawingSurface) -> None:
        """
        Erase the rectangle from the surface.

        An outline straddles the rectangle's edges, so clearing it erases
        four strips of stroke_width centred on each edge rather than the
        interior.
        """
        if self.style is PaintStyle.FILLED:
            surface.erase_rect(self.x, self.y, self.width, self.height)
            return

        half = self.stroke_width / 2
        left = self.x - half
        top = self.y - half
        # top and bottom edges
        surface.erase_rect(left, top, self.width + self.stroke_width, self.stroke_width)
        surface.erase_rect(
            left, top + self.height, self.width + self.stroke_width, self.stroke_width
        )
        # left and right edges
        surface.erase_rect(left, top, self.stroke_width, self.height + self.stroke_width)
        surface.erase_rect(
            left + self.width, top, self.stroke_width, self.height + self.stroke_width
        )
