"""Shared fixtures for barrier demo tests."""

import pytest

from barrier_demo.config import DemoSettings, PhaseTwoConfig


class RecordingSurface:
    """DrawingSurface that records every call instead of painting."""

    def __init__(self):
        self.calls = []

    def paint_outline_rect(self, x, y, width, height, color, thickness):
        self.calls.append(("outline", x, y, width, height, color, thickness))

    def paint_filled_rect(self, x, y, width, height, color):
        self.calls.append(("fill", x, y, width, height, color))

    def erase_rect(self, x, y, width, height):
        self.calls.append(("erase", x, y, width, height))

    def fills(self, color=None):
        return [
            call
            for call in self.calls
            if call[0] == "fill" and (color is None or call[5] == color)
        ]

    def reset(self):
        self.calls.clear()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def fast_settings():
    """Three bars, large increments and 1ms ticks so runs finish quickly."""
    return DemoSettings(
        number=3,
        size_increment=50,
        rate_ms=1,
        phase_two=PhaseTwoConfig(pause_ms=1),
    )
