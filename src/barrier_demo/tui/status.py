"""Rich markup for the status panel."""

from barrier_demo.bar import Bar
from barrier_demo.phase import PhaseId
from barrier_demo.run import DemoRun, RunStage


def format_bar_line(index: int, bar: Bar) -> str:
    """One line per bar: number, fill level, and a marker once it is full."""
    if bar.is_complete:
        marker = "[red]waiting[/red]"
    else:
        marker = "[green]filling[/green]"
    return f"#{index + 1} {bar.current_fill:>3}/{bar.max_fill:<3} {marker}"


def format_status(run: DemoRun | None, bars: list[Bar]) -> str:
    """
    Format status panel content.

    Args:
        run: Current run, or None before the first start()
        bars: All bars, in layout order

    Returns:
        Rich markup string
    """
    stage = run.stage if run is not None else RunStage.PENDING
    lines = [f"Stage: [bold]{stage.value}[/bold]", ""]

    if run is not None:
        for phase_id, controller in run.phases.items():
            lines.append(
                f"Phase {int(phase_id)}: {len(controller.active)} active, "
                f"{controller.ticks} ticks"
            )
        if run.phases:
            lines.append("")

    lines.extend(format_bar_line(i, bar) for i, bar in enumerate(bars))

    if stage is RunStage.PHASE_ONE or run is None:
        lines.append("")
        lines.append("[dim]Barrier holds bars at phase one capacity[/dim]")
    elif stage is RunStage.DONE and PhaseId.TWO in run.completed:
        lines.append("")
        lines.append("[green]All bars reached phase two capacity[/green]")
    return "\n".join(lines)
