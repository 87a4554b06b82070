"""
BarrierDemo: the entry points a host drives.

- pre_start(): Paint the phase one starting state without starting a run
- start(): Stop any previous run, then begin a new two-phase run
- stop(): Cancel the current run

The bars and barrier are built once and reused by every run, so a new run
resets the same Bar objects rather than creating fresh ones.
"""

from __future__ import annotations

import logging
import random

from barrier_demo.config import DemoSettings
from barrier_demo.factory import BarFactory, make_barrier
from barrier_demo.phase import PhaseId, setup_phase
from barrier_demo.run import DemoRun, RunHandle
from barrier_demo.surface import SurfaceDocument

logger = logging.getLogger(__name__)


class BarrierDemo:
    """
    Host-facing controller for the barrier demo.

    At most one run is live at a time: start() always stops the previous
    run before beginning the next.

    Example:
        document = SurfaceDocument()
        document.attach("demo", TerminalCanvas(270, 330))
        demo = BarrierDemo(document)
        demo.pre_start()
        handle = demo.start()  # inside a running event loop
        ...
        demo.stop()
    """

    def __init__(
        self,
        document: SurfaceDocument,
        settings: DemoSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize demo and build its bars and barrier.

        Args:
            document: Document the canvas node is resolved from
            settings: Demo configuration (default: DemoSettings())
            rng: Random source for bar selection
        """
        self.document = document
        self.settings = settings if settings is not None else DemoSettings()
        self._rng = rng if rng is not None else random.Random()

        factory = BarFactory(
            number=self.settings.number,
            max_fill=self.settings.phase_one.max_fill,
            bar_spec=self.settings.bar,
        )
        self.bars = factory.make()
        self.barrier = make_barrier(self.settings.barrier)
        self._handle: RunHandle | None = None

    @property
    def current_run(self) -> DemoRun | None:
        return self._handle.run if self._handle is not None else None

    def pre_start(self) -> None:
        """
        Paint the empty phase one state. No timers are started.

        Raises:
            SurfaceNotFoundError: If the canvas node is not in the document
            InvalidSurfaceError: If the canvas node cannot paint
        """
        surface = self.document.get_surface(self.settings.canvas_node)
        setup_phase(surface, PhaseId.ONE, self.bars, self.barrier, self.settings)

    def start(self) -> RunHandle:
        """
        Stop any previous run and begin a new one.

        Must be called while an asyncio event loop is running.

        Returns:
            Handle of the new run
        """
        self.stop()
        run = DemoRun(self.bars, self.barrier, self.document, self.settings, self._rng)
        self._handle = run.begin()
        logger.info(f"Started demo run with {len(self.bars)} bars")
        return self._handle

    def stop(self) -> None:
        """Cancel the current run, if any. Safe to call repeatedly."""
        if self._handle is not None:
            self._handle.cancel()
