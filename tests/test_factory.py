"""Tests for BarFactory layout and the barrier factory."""

import pydantic
import pytest

from barrier_demo.config import BarrierSpec, BarSpec
from barrier_demo.exceptions import BarSpecFieldError
from barrier_demo.factory import BarFactory, make_barrier
from barrier_demo.geometry import Colors, PaintStyle, Rect


class TestBarFactoryMake:
    def test_default_factory_makes_five_bars(self):
        bars = BarFactory().make()
        assert len(bars) == 5
        assert all(bar.max_fill == 200 for bar in bars)
        assert all(bar.current_fill == 0 for bar in bars)

    def test_fill_rect_layout(self):
        """Bar i sits at offset + (separation + width) * i."""
        bars = BarFactory().make()
        assert bars[1].fill_rect == Rect(60, 10, 20, 300, Colors.GREY, PaintStyle.FILLED)
        assert bars[4].fill_rect.x == 210

    def test_outline_grows_fill_rect_by_half_stroke(self):
        bars = BarFactory().make()
        assert bars[1].stroke_rect == Rect(
            59, 9, 22, 302, Colors.BLACK, PaintStyle.OUTLINE, 2
        )

    def test_bar_colors_come_from_spec(self):
        spec = BarSpec(full_color="#0000ff", wait_color="#ffff00")
        bar = BarFactory(number=1, bar_spec=spec).make()[0]
        assert bar.fill_color == "#0000ff"
        assert bar.wait_color == "#ffff00"

    def test_make_returns_fresh_bars(self):
        factory = BarFactory(number=2)
        first = factory.make()
        second = factory.make()
        assert first[0] is not second[0]


class TestBarFactorySetters:
    def test_set_number(self):
        factory = BarFactory()
        factory.set_number(3)
        assert len(factory.make()) == 3

    def test_set_max_fill_changes_max_fill_not_number(self):
        factory = BarFactory(number=5)
        factory.set_max_fill(250)
        bars = factory.make()
        assert len(bars) == 5
        assert all(bar.max_fill == 250 for bar in bars)

    def test_set_all_spec(self):
        factory = BarFactory(number=2)
        factory.set_all_spec(BarSpec(offset=0, width=10, separation=5))
        bars = factory.make()
        assert bars[1].fill_rect.x == 15

    def test_set_spec_value(self):
        factory = BarFactory(number=2)
        factory.set_spec_value("separation", 40)
        assert factory.make()[1].fill_rect.x == 70

    def test_set_spec_value_unknown_field(self):
        factory = BarFactory()
        with pytest.raises(BarSpecFieldError) as exc_info:
            factory.set_spec_value("seperation", 40)
        assert exc_info.value.field_name == "seperation"

    def test_set_spec_value_is_validated(self):
        factory = BarFactory()
        with pytest.raises(pydantic.ValidationError):
            factory.set_spec_value("width", "wide")


class TestMakeBarrier:
    def test_default_barrier(self):
        barrier = make_barrier(BarrierSpec())
        assert barrier == Rect(1, 210, 240, 2, Colors.BLACK, PaintStyle.FILLED)

    def test_barrier_sits_at_phase_one_capacity(self):
        """Default barrier y equals bar offset plus the barrier_at fill level."""
        spec = BarSpec()
        assert make_barrier(BarrierSpec()).y == spec.offset + spec.barrier_at
