"""
Factory for laying out bars side by side, plus the barrier.

Bar i sits at x = offset + (separation + width) * i. Its outline is the
fill rectangle grown by half a stroke on every side, so the stroke hugs the
fill area without covering it.
"""

from barrier_demo.bar import Bar
from barrier_demo.config import BarrierSpec, BarSpec
from barrier_demo.exceptions import BarSpecFieldError
from barrier_demo.geometry import PaintStyle, Rect


class BarFactory:
    """
    Builds a row of bars from a BarSpec.

    Example:
        factory = BarFactory(number=5, max_fill=200)
        factory.set_spec_value("separation", 40)
        bars = factory.make()
    """

    def __init__(
        self,
        number: int = 5,
        max_fill: int = 200,
        bar_spec: BarSpec | None = None,
    ) -> None:
        """
        Initialize factory.

        Args:
            number: Number of bars to make
            max_fill: Maximum fill of each bar
            bar_spec: Layout of each bar (defaults to BarSpec())
        """
        self.number = number
        self.max_fill = max_fill
        self.bar_spec = bar_spec if bar_spec is not None else BarSpec()

    def set_number(self, number: int) -> None:
        self.number = number

    def set_max_fill(self, max_fill: int) -> None:
        self.max_fill = max_fill

    def set_all_spec(self, bar_spec: BarSpec) -> None:
        self.bar_spec = bar_spec

    def set_spec_value(self, name: str, value: object) -> None:
        """
        Replace a single BarSpec field.

        Args:
            name: Field name, e.g. "width" or "wait_color"
            value: New value, validated by BarSpec

        Raises:
            BarSpecFieldError: If BarSpec has no such field
        """
        if name not in BarSpec.model_fields:
            raise BarSpecFieldError(name)
        data = self.bar_spec.model_dump()
        data[name] = value
        self.bar_spec = BarSpec.model_validate(data)

    def make(self) -> list[Bar]:
        """Create number bars, left to right."""
        spec = self.bar_spec
        half_stroke = spec.stroke_width / 2
        bars = []
        for i in range(self.number):
            x = spec.offset + (spec.separation + spec.width) * i
            stroke = Rect(
                x - half_stroke,
                spec.offset - half_stroke,
                spec.width + spec.stroke_width,
                spec.height + spec.stroke_width,
                spec.stroke_color,
                PaintStyle.OUTLINE,
                spec.stroke_width,
            )
            fill = Rect(
                x,
                spec.offset,
                spec.width,
                spec.height,
                spec.empty_color,
                PaintStyle.FILLED,
            )
            bars.append(
                Bar(stroke, fill, self.max_fill, spec.full_color, spec.wait_color)
            )
        return bars


def make_barrier(spec: BarrierSpec) -> Rect:
    """Create the filled rectangle drawn as the barrier line."""
    return Rect(spec.x, spec.y, spec.width, spec.height, spec.color, PaintStyle.FILLED)
