"""
DemoController for running the barrier demo in a terminal.

This module provides the terminal host that:
- Hosts a TerminalCanvas in a SurfaceDocument under the configured node name
- Paints the initial state, then starts a two-phase run
- Uses Rich Live for flicker-free rendering of canvas and status panels
- Handles graceful shutdown on SIGINT/SIGTERM

Order in run():
1. Register signal handlers BEFORE Live context, so Ctrl+C works at once
2. Paint initial state with pre_start() (fails fast on a bad surface)
3. Enter Live context and start the run
4. Refresh panels until the run finishes or a signal arrives
5. Stop the demo and let Live restore the terminal
"""

import asyncio
import functools
import random
import signal

from rich.console import Console
from rich.live import Live

from barrier_demo.canvas import TerminalCanvas
from barrier_demo.config import DemoSettings
from barrier_demo.host import BarrierDemo
from barrier_demo.run import RunHandle, RunStage
from barrier_demo.surface import SurfaceDocument
from barrier_demo.tui.layout import create_layout, make_panel, make_status_panel
from barrier_demo.tui.status import format_status


class DemoController:
    """
    Runs one barrier demo inside a Rich Live display.

    Example:
        controller = DemoController()
        await controller.run()  # Returns when the run ends or on Ctrl+C
    """

    def __init__(
        self,
        settings: DemoSettings | None = None,
        console: Console | None = None,
        rng: random.Random | None = None,
        refresh_interval: float = 0.05,
    ) -> None:
        """
        Initialize controller.

        Args:
            settings: Demo configuration (default: DemoSettings())
            console: Rich Console to use (creates default if None)
            rng: Random source for bar selection
            refresh_interval: Seconds between panel refreshes
        """
        self.settings = settings if settings is not None else DemoSettings()
        self.console = console if console is not None else Console()
        self.refresh_interval = refresh_interval
        self._shutdown = asyncio.Event()
        self._layout = create_layout()

        canvas_spec = self.settings.canvas
        self.canvas = TerminalCanvas(
            canvas_spec.width,
            canvas_spec.height,
            canvas_spec.cell_width,
            canvas_spec.cell_height,
        )
        self.document = SurfaceDocument()
        self.document.attach(self.settings.canvas_node, self.canvas)
        self.demo = BarrierDemo(self.document, self.settings, rng)

    async def run(self) -> RunStage:
        """
        Run the demo until it completes or a shutdown signal arrives.

        Returns:
            Final stage of the run (DONE, or CANCELLED on shutdown)
        """
        loop = asyncio.get_running_loop()

        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(
                sig,
                functools.partial(self._handle_signal, sig),
            )

        try:
            self.demo.pre_start()
            self._refresh_panels()

            with Live(
                self._layout,
                console=self.console,
                refresh_per_second=20,
                screen=False,
            ) as live:
                handle = self.demo.start()
                try:
                    await self._update_loop(live, handle)
                finally:
                    self.demo.stop()
                stage = await handle.wait()
                self._refresh_panels()
                live.refresh()
        finally:
            for sig in (signal.SIGINT, signal.SIGTERM):
                loop.remove_signal_handler(sig)

        self.console.print(f"[green]Demo finished ({stage.value})[/green]")
        return stage

    async def _update_loop(self, live: Live, handle: RunHandle) -> None:
        """
        Refresh panels until the run is done or shutdown is requested.

        Args:
            live: Rich Live context for refreshing display
            handle: Handle of the run being displayed
        """
        while not self._shutdown.is_set() and not handle.done:
            self._refresh_panels()
            live.refresh()
            try:
                await asyncio.wait_for(
                    self._shutdown.wait(), timeout=self.refresh_interval
                )
            except asyncio.TimeoutError:
                pass  # Normal refresh interval

    def _handle_signal(self, sig: signal.Signals) -> None:
        """Request shutdown. The run loop stops the demo."""
        self._shutdown.set()

    def _refresh_panels(self) -> None:
        """Redraw canvas and status panels from current state."""
        run = self.demo.current_run
        stage = run.stage if run is not None else RunStage.PENDING
        self._layout["canvas"].update(
            make_panel(self.canvas, f"Canvas '{self.settings.canvas_node}'", "white")
        )
        self._layout["status"].update(
            make_status_panel(format_status(run, self.demo.bars), stage)
        )
