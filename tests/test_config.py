"""Tests for DemoSettings defaults, environment overrides and validation."""

import pydantic
import pytest

from barrier_demo.config import DemoSettings, PhaseOneConfig, PhaseTwoConfig
from barrier_demo.geometry import Colors


class TestDefaults:
    def test_scheduling_defaults(self):
        settings = DemoSettings()
        assert settings.canvas_node == "demo"
        assert settings.size_increment == 10
        assert settings.rate_ms == 100
        assert settings.number == 5

    def test_phase_defaults(self):
        settings = DemoSettings()
        assert settings.phase_one.has_barrier is True
        assert settings.phase_one.max_fill == 200
        assert settings.phase_two.has_barrier is False
        assert settings.phase_two.max_fill == 300
        assert settings.phase_two.pause_ms == 200

    def test_bar_and_barrier_defaults(self):
        settings = DemoSettings()
        assert settings.bar.empty_color == Colors.GREY
        assert settings.bar.wait_color == Colors.RED
        assert settings.bar.stroke_width == 2
        assert settings.barrier.y == 210
        assert settings.barrier.color == Colors.BLACK

    def test_seconds_properties(self):
        settings = DemoSettings(rate_ms=250, phase_two=PhaseTwoConfig(pause_ms=1500))
        assert settings.rate_seconds == 0.25
        assert settings.pause_seconds == 1.5

    def test_nested_defaults_are_not_shared(self):
        first = DemoSettings()
        second = DemoSettings()
        assert first.bar is not second.bar


class TestEnvironmentOverrides:
    def test_top_level_override(self, monkeypatch):
        monkeypatch.setenv("BARRIER_DEMO_RATE_MS", "50")
        assert DemoSettings().rate_ms == 50

    def test_nested_override(self, monkeypatch):
        monkeypatch.setenv("BARRIER_DEMO_PHASE_TWO__MAX_FILL", "280")
        settings = DemoSettings()
        assert settings.phase_two.max_fill == 280
        assert settings.phase_two.pause_ms == 200

    def test_canvas_node_override(self, monkeypatch):
        monkeypatch.setenv("BARRIER_DEMO_CANVAS_NODE", "bars")
        assert DemoSettings().canvas_node == "bars"


class TestValidation:
    @pytest.mark.parametrize("field", ["size_increment", "rate_ms", "number"])
    def test_rejects_non_positive(self, field):
        with pytest.raises(pydantic.ValidationError):
            DemoSettings(**{field: 0})

    def test_rejects_phase_two_below_phase_one(self):
        with pytest.raises(pydantic.ValidationError, match="phase_two.max_fill"):
            DemoSettings(
                phase_one=PhaseOneConfig(max_fill=200),
                phase_two=PhaseTwoConfig(max_fill=150),
            )

    def test_equal_capacities_allowed(self):
        settings = DemoSettings(
            phase_one=PhaseOneConfig(max_fill=200),
            phase_two=PhaseTwoConfig(max_fill=200),
        )
        assert settings.phase_two.max_fill == 200

    def test_rejects_negative_pause(self):
        with pytest.raises(pydantic.ValidationError):
            PhaseTwoConfig(pause_ms=-1)
