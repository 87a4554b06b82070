"""
Two-phase demo run and the handle that cancels it.

A DemoRun walks an explicit stage sequence inside a single asyncio task:

    PENDING -> PHASE_ONE -> PAUSE -> PHASE_TWO -> DONE

Cancelling the handle from PHASE_ONE, PAUSE or PHASE_TWO moves the run to
CANCELLED instead.

Phase one and phase two each get their own ActiveSet over the same bar
list, so bars entering phase two carry the fill they reached in phase one.

Phase one is set up synchronously in begin(), before the task exists, so a
missing or invalid surface is raised to the caller rather than from inside
a timer. The surface is resolved again at phase two setup.
"""

from __future__ import annotations

import asyncio
import logging
import random
from enum import Enum
from typing import TYPE_CHECKING

from barrier_demo.phase import ActiveSet, PhaseController, PhaseId, setup_phase

if TYPE_CHECKING:
    from barrier_demo.bar import Bar
    from barrier_demo.config import DemoSettings
    from barrier_demo.geometry import Rect
    from barrier_demo.surface import DrawingSurface, SurfaceDocument

logger = logging.getLogger(__name__)


class RunStage(Enum):
    """Where a DemoRun is in its sequence."""

    PENDING = "pending"
    PHASE_ONE = "phase one"
    PAUSE = "pause"
    PHASE_TWO = "phase two"
    DONE = "done"
    CANCELLED = "cancelled"


class DemoRun:
    """
    One full two-phase run over a shared list of bars.

    Example:
        run = DemoRun(bars, barrier, document, settings)
        handle = run.begin()  # must be called with a running event loop
        await handle.wait()
    """

    def __init__(
        self,
        bars: list[Bar],
        barrier: Rect,
        document: SurfaceDocument,
        settings: DemoSettings,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize run in the PENDING stage.

        Args:
            bars: Bars shared by both phases
            barrier: Barrier rectangle
            document: Document the surface is resolved from
            settings: Demo configuration
            rng: Random source shared by both phases
        """
        self.bars = bars
        self.barrier = barrier
        self.document = document
        self.settings = settings
        self._rng = rng if rng is not None else random.Random()

        self.stage = RunStage.PENDING
        self.phases: dict[PhaseId, PhaseController] = {}
        self.completed: list[PhaseId] = []

        # Independent views over the same bars, one per phase
        self._views = {
            PhaseId.ONE: ActiveSet(bars),
            PhaseId.TWO: ActiveSet(bars),
        }

    def _resolve_surface(self) -> DrawingSurface:
        return self.document.get_surface(self.settings.canvas_node)

    def _make_controller(self, phase: PhaseId, surface: DrawingSurface) -> PhaseController:
        phase_config = (
            self.settings.phase_one if phase is PhaseId.ONE else self.settings.phase_two
        )
        controller = PhaseController(
            self._views[phase],
            surface,
            increment=self.settings.size_increment,
            interval=self.settings.rate_seconds,
            barrier=self.barrier if phase_config.has_barrier else None,
            on_complete=self._phase_complete,
            callback_params=phase,
            rng=self._rng,
            name=f"phase {int(phase)}",
        )
        self.phases[phase] = controller
        return controller

    def _phase_complete(self, phase: PhaseId) -> None:
        self.completed.append(phase)

    def begin(self) -> RunHandle:
        """
        Set up phase one and start the run task.

        Returns:
            Handle owning the run task

        Raises:
            SurfaceNotFoundError: If the canvas node is not in the document
            InvalidSurfaceError: If the canvas node cannot paint
            RuntimeError: If called without a running event loop
        """
        if self.stage is not RunStage.PENDING:
            raise RuntimeError(f"Run already begun (stage: {self.stage.value})")

        loop = asyncio.get_running_loop()
        surface = self._resolve_surface()
        setup_phase(surface, PhaseId.ONE, self._views[PhaseId.ONE], self.barrier, self.settings)
        phase_one = self._make_controller(PhaseId.ONE, surface)

        self.stage = RunStage.PHASE_ONE
        task = loop.create_task(self._drive(phase_one), name="barrier-demo-run")
        return RunHandle(self, task)

    async def _drive(self, phase_one: PhaseController) -> None:
        await phase_one.run()

        self.stage = RunStage.PAUSE
        logger.info(f"Barrier released in {self.settings.pause_seconds}s")
        await asyncio.sleep(self.settings.pause_seconds)

        self.stage = RunStage.PHASE_TWO
        surface = self._resolve_surface()
        setup_phase(surface, PhaseId.TWO, self._views[PhaseId.TWO], self.barrier, self.settings)
        await self._make_controller(PhaseId.TWO, surface).run()

        self.stage = RunStage.DONE
        logger.info("Demo run complete")


class RunHandle:
    """
    Owns the task of one DemoRun.

    cancel() is the only way to stop a run and may be called any number of
    times, before or after the run has finished.
    """

    def __init__(self, run: DemoRun, task: asyncio.Task[None]) -> None:
        self.run = run
        self._task = task

    @property
    def done(self) -> bool:
        return self._task.done()

    @property
    def cancelled(self) -> bool:
        return self.run.stage is RunStage.CANCELLED

    def cancel(self) -> None:
        """Stop the run between ticks. Painted state is left as is."""
        if self._task.done():
            return
        self._task.cancel()
        logger.info(f"Run cancelled during {self.run.stage.value}")
        self.run.stage = RunStage.CANCELLED

    async def wait(self) -> RunStage:
        """
        Wait for the run to finish or be cancelled.

        Returns:
            The final stage (DONE or CANCELLED)

        Raises:
            Any exception raised inside the run, e.g. a surface error at
            phase two setup
        """
        try:
            await asyncio.shield(self._task)
        except asyncio.CancelledError:
            if not self._task.cancelled():
                raise
        return self.run.stage
