"""
Bar entity: a fillable column made of an outline and a fill area.

Bars fill from the top edge of their fill rectangle downward. A bar whose
current fill reaches its maximum is drawn in its wait color, which is how a
bar blocked at the barrier shows up.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from barrier_demo.geometry import Colors, Rect

if TYPE_CHECKING:
    from barrier_demo.surface import DrawingSurface


class Bar:
    """
    A bar that can be filled up to a maximum.

    fill() is the only mutation used while a phase is ticking and never lets
    current_fill exceed max_fill. set_current_fill() and set_max_fill() are
    raw overwrites for phase setup.

    Example:
        bar = Bar(stroke, fill, max_fill=200)
        bar.fill(10)
        bar.draw(surface)
    """

    def __init__(
        self,
        stroke: Rect,
        fill: Rect,
        max_fill: int,
        fill_color: str = Colors.GREEN,
        wait_color: str = Colors.RED,
    ) -> None:
        """
        Initialize an empty bar.

        Args:
            stroke: Rectangle drawn around the edges
            fill: Rectangle representing the empty contents
            max_fill: Level at which the bar is complete
            fill_color: Color of the filled portion while still filling
            wait_color: Color of the filled portion once complete
        """
        self.stroke_rect = stroke
        self.fill_rect = fill
        self.current_fill = 0
        self.max_fill = max_fill
        self.fill_color = fill_color
        self.wait_color = wait_color

    @property
    def is_complete(self) -> bool:
        return self.current_fill == self.max_fill

    def fill(self, amount: int) -> None:
        """
        Fill the bar by amount, stopping exactly at max_fill.

        Args:
            amount: Fill to add
        """
        if self.current_fill > self.max_fill - amount:
            self.current_fill = self.max_fill
            return
        self.current_fill += amount

    def set_current_fill(self, value: int) -> None:
        """Replace the current fill. Not clamped."""
        self.current_fill = value

    def set_max_fill(self, value: int) -> None:
        """Replace the maximum fill. Not clamped."""
        self.max_fill = value

    def draw(self, surface: DrawingSurface) -> None:
        """Paint outline, empty background, then the filled portion."""
        self.stroke_rect.draw(surface)
        self.fill_rect.draw(surface)

        color = self.wait_color if self.is_complete else self.fill_color
        surface.paint_filled_rect(
            self.fill_rect.x,
            self.fill_rect.y,
            self.fill_rect.width,
            self.current_fill,
            color,
        )

    def __repr__(self) -> str:
        return f"Bar({self.current_fill}/{self.max_fill})"
