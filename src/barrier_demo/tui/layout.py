"""
Layout factory for the demo dashboard.

Layout structure:
+------------------------------+------------------------+
|                              |                        |
|  Canvas (bars and barrier)   |  Status (28 cols)      |
|  (ratio=1, flex)             |                        |
|                              |                        |
+------------------------------+------------------------+
"""

from rich.console import RenderableType
from rich.layout import Layout
from rich.panel import Panel

from barrier_demo.run import RunStage

# Border color per run stage
STAGE_STYLES = {
    RunStage.PENDING: "blue",
    RunStage.PHASE_ONE: "yellow",
    RunStage.PAUSE: "magenta",
    RunStage.PHASE_TWO: "cyan",
    RunStage.DONE: "green",
    RunStage.CANCELLED: "red",
}


def create_layout() -> Layout:
    """
    Create the two-panel layout.

    Access panels via:
    - layout["canvas"]
    - layout["status"]

    Returns:
        Layout with 2 named panel regions
    """
    layout = Layout(name="root")
    layout.split_row(
        Layout(name="canvas", ratio=1),
        Layout(name="status", size=28),
    )
    return layout


def make_panel(content: RenderableType, title: str, style: str = "blue") -> Panel:
    """
    Create a styled panel with content.

    Args:
        content: Text or renderable for the panel
        title: Panel title (will be bolded)
        style: Border style color (default "blue")

    Returns:
        Panel with formatted title and border style
    """
    return Panel(
        content,
        title=f"[bold]{title}[/bold]",
        border_style=style,
        padding=(0, 1),
    )


def make_status_panel(content: str, stage: RunStage) -> Panel:
    """
    Create the status panel with a stage-dependent border.

    Args:
        content: Rich markup from format_status()
        stage: Current run stage

    Returns:
        Panel whose border color follows STAGE_STYLES
    """
    return make_panel(content, "Status", STAGE_STYLES[stage])
