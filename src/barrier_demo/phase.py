"""
Phase controller: the fill scheduler state machine.

A phase drives a working set of bars to their capacity:
- ActiveSet: Index view over the shared bar list, O(1) swap-remove retirement
- PhaseController: RUNNING -> DONE state machine, one transition per tick
- setup_phase: Synchronous reset/redraw performed before a phase ticks

Tick rule (one transition per timer firing):
1. Empty active set -> DONE, completion callback invoked exactly once
2. Otherwise pick a uniformly random position in the active set
3. Fill the chosen bar by the increment (clamped at its max fill)
4. Redraw every active bar, then the barrier if the phase has one
5. Retire the chosen bar if it is now complete

There is no await inside a tick, so ticks never interleave with each other
or with any other callback on the event loop.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any, Callable

from barrier_demo.bar import Bar
from barrier_demo.geometry import Rect

if TYPE_CHECKING:
    from barrier_demo.config import DemoSettings
    from barrier_demo.surface import DrawingSurface

logger = logging.getLogger(__name__)


class PhaseId(IntEnum):
    """Which of the two demo phases a setup or controller belongs to."""

    ONE = 1
    TWO = 2


class PhaseState(Enum):
    """State of a PhaseController."""

    RUNNING = "running"
    DONE = "done"


class ActiveSet:
    """
    Shrinking view over a shared list of bars.

    Holds positions into the bar list rather than the bars themselves, so
    two phases can each keep their own book-keeping over the same Bar
    objects. Fill progress made in one view is visible through the other.

    Retirement swaps the last index into the retired slot. Iteration order
    therefore changes after a retirement; selection is uniform over
    positions, so order carries no meaning.
    """

    def __init__(self, bars: Sequence[Bar], indices: Iterable[int] | None = None) -> None:
        """
        Initialize view.

        Args:
            bars: Shared bar list
            indices: Positions in bars to include (default: all of them)
        """
        self._bars = bars
        self._indices = list(range(len(bars)) if indices is None else indices)

    def bar_at(self, position: int) -> Bar:
        """Bar at a position in [0, len(self))."""
        return self._bars[self._indices[position]]

    def retire(self, position: int) -> Bar:
        """
        Remove the bar at a position.

        Args:
            position: Position in [0, len(self))

        Returns:
            The retired bar
        """
        bar = self.bar_at(position)
        last = self._indices.pop()
        if position < len(self._indices):
            self._indices[position] = last
        return bar

    def __len__(self) -> int:
        return len(self._indices)

    def __bool__(self) -> bool:
        return bool(self._indices)

    def __iter__(self) -> Iterator[Bar]:
        return (self._bars[i] for i in self._indices)


class PhaseController:
    """
    Drives one phase to completion.

    tick() performs exactly one state-machine transition and can be called
    directly. run() is the recurring timer: it sleeps the interval, ticks,
    and returns once the phase is DONE. Cancelling the task running run()
    stops the phase between two ticks.

    Example:
        controller = PhaseController(
            ActiveSet(bars), surface, increment=10, interval=0.1,
            barrier=barrier, on_complete=done, callback_params=PhaseId.ONE,
        )
        await controller.run()
    """

    def __init__(
        self,
        active: ActiveSet,
        surface: DrawingSurface,
        increment: int,
        interval: float,
        barrier: Rect | None = None,
        on_complete: Callable[[Any], None] | None = None,
        callback_params: Any = None,
        rng: random.Random | None = None,
        name: str = "phase",
    ) -> None:
        """
        Initialize controller in the RUNNING state.

        Args:
            active: Bars still to be filled in this phase
            surface: Surface every tick paints onto
            increment: Fill added to the chosen bar per tick, must be positive
            interval: Seconds between ticks when driven by run()
            barrier: Barrier redrawn every tick, or None for no barrier
            on_complete: Called once with callback_params on DONE
            callback_params: Opaque value handed to on_complete
            rng: Random source for bar selection (default: module random)
            name: Label used in log messages

        Raises:
            ValueError: If increment is not positive
        """
        if increment <= 0:
            raise ValueError(f"increment must be positive, got {increment}")
        self.active = active
        self.surface = surface
        self.increment = increment
        self.interval = interval
        self.barrier = barrier
        self.on_complete = on_complete
        self.callback_params = callback_params
        self.name = name
        self._rng = rng if rng is not None else random.Random()

        self.state = PhaseState.RUNNING
        self.ticks = 0  # ticks that advanced a bar

    @property
    def done(self) -> bool:
        return self.state is PhaseState.DONE

    def tick(self) -> PhaseState:
        """
        Perform one state-machine transition.

        Returns:
            State after the transition. Ticking a DONE controller is a no-op.
        """
        if self.state is PhaseState.DONE:
            return self.state

        if not self.active:
            self.state = PhaseState.DONE
            logger.info(f"{self.name} done after {self.ticks} ticks")
            if self.on_complete is not None:
                self.on_complete(self.callback_params)
            return self.state

        position = self._rng.randrange(len(self.active))
        bar = self.active.bar_at(position)
        bar.fill(self.increment)
        self.ticks += 1

        for active_bar in self.active:
            active_bar.draw(self.surface)
        if self.barrier is not None:
            self.barrier.draw(self.surface)

        if bar.is_complete:
            self.active.retire(position)
            logger.debug(
                f"{self.name}: bar reached {bar.max_fill}, {len(self.active)} still filling"
            )
        return self.state

    async def run(self) -> None:
        """Tick every interval until DONE."""
        logger.info(
            f"{self.name} started: {len(self.active)} bars, "
            f"+{self.increment} every {self.interval}s"
        )
        while self.state is PhaseState.RUNNING:
            await asyncio.sleep(self.interval)
            self.tick()


def setup_phase(
    surface: DrawingSurface,
    phase: PhaseId,
    bars: Iterable[Bar],
    barrier: Rect,
    settings: DemoSettings,
) -> None:
    """
    Prepare bars and barrier for a phase and paint the starting state.

    Phase one resets every bar to empty with the phase one capacity and
    draws the barrier over the bars. Phase two only raises each bar's
    capacity, so bars keep the fill they reached in phase one, and erases
    the barrier.

    Args:
        surface: Surface to paint on
        phase: PhaseId.ONE or PhaseId.TWO
        bars: Bars to prepare
        barrier: Barrier rectangle
        settings: Supplies the per-phase capacities
    """
    bars = list(bars)
    if phase is PhaseId.ONE:
        for bar in bars:
            bar.set_current_fill(0)
            bar.set_max_fill(settings.phase_one.max_fill)
    elif phase is PhaseId.TWO:
        for bar in bars:
            bar.set_max_fill(settings.phase_two.max_fill)
        barrier.clear(surface)

    for bar in bars:
        bar.draw(surface)

    if phase is PhaseId.ONE:
        barrier.draw(surface)
    logger.debug(f"Phase {int(phase)} set up for {len(bars)} bars")
