"""
Barrier Demo

Animates a row of bars filling up in two phases to demonstrate barrier
synchronization. In phase one every bar fills toward a low capacity and
waits at the barrier; once all bars are waiting, the barrier is released
and phase two fills them toward a higher capacity.

This package provides:

- Geometry: Colors, PaintStyle, Rect
- Surfaces: DrawingSurface protocol, SurfaceDocument, TerminalCanvas
- Bars: Bar entity, BarFactory, make_barrier
- Scheduling: ActiveSet, PhaseController, setup_phase, DemoRun, RunHandle
- Host entry points: BarrierDemo.pre_start / start / stop
- Configuration: DemoSettings (pydantic-settings, BARRIER_DEMO_ prefix)
"""

__version__ = "0.1.0"

from barrier_demo.bar import Bar
from barrier_demo.canvas import TerminalCanvas
from barrier_demo.config import (
    BarrierSpec,
    BarSpec,
    CanvasSpec,
    DemoSettings,
    PhaseOneConfig,
    PhaseTwoConfig,
)
from barrier_demo.exceptions import (
    BarSpecFieldError,
    InvalidSurfaceError,
    SurfaceNotFoundError,
)
from barrier_demo.factory import BarFactory, make_barrier
from barrier_demo.geometry import Colors, PaintStyle, Rect
from barrier_demo.host import BarrierDemo
from barrier_demo.phase import (
    ActiveSet,
    PhaseController,
    PhaseId,
    PhaseState,
    setup_phase,
)
from barrier_demo.run import DemoRun, RunHandle, RunStage
from barrier_demo.surface import DrawingSurface, SurfaceDocument

__all__ = [
    "__version__",
    # Geometry
    "Colors",
    "PaintStyle",
    "Rect",
    # Surfaces
    "DrawingSurface",
    "SurfaceDocument",
    "TerminalCanvas",
    # Bars
    "Bar",
    "BarFactory",
    "make_barrier",
    # Scheduling
    "ActiveSet",
    "PhaseController",
    "PhaseId",
    "PhaseState",
    "setup_phase",
    "DemoRun",
    "RunHandle",
    "RunStage",
    # Host
    "BarrierDemo",
    # Configuration
    "BarrierSpec",
    "BarSpec",
    "CanvasSpec",
    "DemoSettings",
    "PhaseOneConfig",
    "PhaseTwoConfig",
    # Errors
    "BarSpecFieldError",
    "InvalidSurfaceError",
    "SurfaceNotFoundError",
]
