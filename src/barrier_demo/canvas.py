"""
TerminalCanvas: a DrawingSurface made of terminal cells.

Pixel coordinates are mapped onto a grid where each cell covers
cell_width x cell_height pixels. A filled rectangle claims the cells whose
centres it covers; a rectangle thinner than one cell still claims the cell
it starts in, so a 2px barrier stays visible. Outlines claim the ring of
cells immediately around the rectangle's interior.

The canvas is a Rich renderable: passing it to a Panel or Live draws each
painted cell as a colored full block.
"""

from __future__ import annotations

import math

from rich.text import Text

FULL_BLOCK = "█"


def _round(value: float) -> int:
    return math.floor(value + 0.5)


def _cell_span(start: float, length: float, cell_size: float, limit: int) -> range:
    """Cells covered along one axis, clipped to [0, limit)."""
    if length <= 0:
        return range(0)
    first = _round(start / cell_size)
    last = _round((start + length) / cell_size)
    if last <= first:
        first = math.floor(start / cell_size)
        last = first + 1
    return range(max(first, 0), min(last, limit))


class TerminalCanvas:
    """
    Character-cell drawing surface.

    Each cell holds the color last painted into it, or None for background.

    Example:
        canvas = TerminalCanvas(width=270, height=330)
        canvas.paint_filled_rect(10, 10, 20, 100, "#00ff00")
        console.print(canvas)
    """

    def __init__(
        self,
        width: float,
        height: float,
        cell_width: float = 5.0,
        cell_height: float = 10.0,
    ) -> None:
        """
        Initialize an empty canvas.

        Args:
            width: Surface width in pixels
            height: Surface height in pixels
            cell_width: Pixels covered by one terminal column
            cell_height: Pixels covered by one terminal row
        """
        if cell_width <= 0 or cell_height <= 0:
            raise ValueError("cell dimensions must be positive")
        self.width = width
        self.height = height
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.columns = math.ceil(width / cell_width)
        self.rows = math.ceil(height / cell_height)
        self._cells: list[list[str | None]] = [
            [None] * self.columns for _ in range(self.rows)
        ]

    def _set(
        self, x: float, y: float, width: float, height: float, color: str | None
    ) -> None:
        cols = _cell_span(x, width, self.cell_width, self.columns)
        for row in _cell_span(y, height, self.cell_height, self.rows):
            line = self._cells[row]
            for col in cols:
                line[col] = color

    def paint_filled_rect(
        self, x: float, y: float, width: float, height: float, color: str
    ) -> None:
        self._set(x, y, width, height, color)

    def paint_outline_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: str,
        thickness: float,
    ) -> None:
        if thickness <= 0:
            return
        left = _round(x / self.cell_width) - 1
        right = _round((x + width) / self.cell_width)
        top = _round(y / self.cell_height) - 1
        bottom = _round((y + height) / self.cell_height)
        for row in range(max(top, 0), min(bottom + 1, self.rows)):
            line = self._cells[row]
            if row in (top, bottom):
                for col in range(max(left, 0), min(right + 1, self.columns)):
                    line[col] = color
            else:
                for col in (left, right):
                    if 0 <= col < self.columns:
                        line[col] = color

    def erase_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._set(x, y, width, height, None)

    def clear(self) -> None:
        """Erase the whole canvas."""
        for line in self._cells:
            line[:] = [None] * self.columns

    def color_at(self, x: float, y: float) -> str | None:
        """
        Color of the cell containing a pixel.

        Args:
            x: Pixel column
            y: Pixel row

        Returns:
            Hex color string, or None for background or out-of-bounds
        """
        col = math.floor(x / self.cell_width)
        row = math.floor(y / self.cell_height)
        if 0 <= row < self.rows and 0 <= col < self.columns:
            return self._cells[row][col]
        return None

    def __rich__(self) -> Text:
        text = Text(no_wrap=True, overflow="crop")
        for index, line in enumerate(self._cells):
            if index:
                text.append("\n")
            for color in line:
                if color is None:
                    text.append(" ")
                else:
                    text.append(FULL_BLOCK, style=color)
        return text
