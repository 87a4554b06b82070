"""Tests for the terminal host: layout, status formatting and DemoController."""

import asyncio
import io
import signal

import pytest
from rich.console import Console

from barrier_demo.config import DemoSettings, PhaseTwoConfig
from barrier_demo.factory import BarFactory
from barrier_demo.host import BarrierDemo
from barrier_demo.phase import PhaseId
from barrier_demo.run import RunStage
from barrier_demo.surface import SurfaceDocument
from barrier_demo.tui import (
    DemoController,
    create_layout,
    format_status,
    make_panel,
    make_status_panel,
)
from barrier_demo.tui.status import format_bar_line


def quiet_console() -> Console:
    return Console(file=io.StringIO(), width=100)


class TestLayout:
    def test_layout_has_canvas_and_status(self):
        layout = create_layout()
        assert layout["canvas"].name == "canvas"
        assert layout["status"].name == "status"

    def test_make_panel_bolds_title(self):
        panel = make_panel("content", "Canvas", "white")
        assert panel.title == "[bold]Canvas[/bold]"
        assert panel.border_style == "white"

    @pytest.mark.parametrize(
        "stage,style",
        [
            (RunStage.PHASE_ONE, "yellow"),
            (RunStage.DONE, "green"),
            (RunStage.CANCELLED, "red"),
        ],
    )
    def test_status_panel_border_follows_stage(self, stage, style):
        assert make_status_panel("x", stage).border_style == style


class TestFormatStatus:
    def test_bar_line_filling(self):
        bar = BarFactory(number=1).make()[0]
        bar.fill(40)
        line = format_bar_line(0, bar)
        assert line.startswith("#1")
        assert "40/200" in line
        assert "filling" in line

    def test_bar_line_waiting(self):
        bar = BarFactory(number=1, max_fill=10).make()[0]
        bar.fill(10)
        assert "waiting" in format_bar_line(2, bar)

    def test_before_first_run(self):
        bars = BarFactory(number=3).make()
        content = format_status(None, bars)
        assert "pending" in content
        assert "#3" in content
        assert "Barrier holds" in content

    @pytest.mark.asyncio
    async def test_after_completed_run(self, surface):
        document = SurfaceDocument()
        document.attach("demo", surface)
        settings = DemoSettings(
            number=2, size_increment=100, rate_ms=1, phase_two=PhaseTwoConfig(pause_ms=1)
        )
        demo = BarrierDemo(document, settings)
        handle = demo.start()
        await asyncio.wait_for(handle.wait(), timeout=5)

        content = format_status(handle.run, demo.bars)
        assert "done" in content
        assert "Phase 1: 0 active" in content
        assert "Phase 2: 0 active" in content
        assert "phase two capacity" in content
        assert PhaseId.TWO in handle.run.completed


class TestDemoController:
    @pytest.mark.asyncio
    async def test_run_to_completion(self):
        settings = DemoSettings(
            number=2, size_increment=100, rate_ms=1, phase_two=PhaseTwoConfig(pause_ms=1)
        )
        console = quiet_console()
        controller = DemoController(settings, console=console, refresh_interval=0.005)

        stage = await asyncio.wait_for(controller.run(), timeout=10)

        assert stage is RunStage.DONE
        assert "Demo finished (done)" in console.file.getvalue()
        assert all(bar.current_fill == 300 for bar in controller.demo.bars)

    @pytest.mark.asyncio
    async def test_canvas_registered_under_node(self):
        controller = DemoController(DemoSettings(canvas_node="bars"), console=quiet_console())
        assert controller.document.get_surface("bars") is controller.canvas

    @pytest.mark.asyncio
    async def test_signal_cancels_run(self):
        settings = DemoSettings(number=3, size_increment=1, rate_ms=5)
        controller = DemoController(
            settings, console=quiet_console(), refresh_interval=0.005
        )
        loop = asyncio.get_running_loop()
        loop.call_later(0.05, controller._handle_signal, signal.SIGINT)

        stage = await asyncio.wait_for(controller.run(), timeout=10)

        assert stage is RunStage.CANCELLED
        assert controller.demo.current_run.stage is RunStage.CANCELLED
