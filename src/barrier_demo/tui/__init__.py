"""
Terminal host for the barrier demo.

- DemoController: Rich Live host with signal handling
- create_layout / make_panel / make_status_panel: Layout and panel helpers
- format_status: Status panel markup
"""

from barrier_demo.tui.controller import DemoController
from barrier_demo.tui.layout import create_layout, make_panel, make_status_panel
from barrier_demo.tui.status import format_status

__all__ = [
    "DemoController",
    "create_layout",
    "format_status",
    "make_panel",
    "make_status_panel",
]
