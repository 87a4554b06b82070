"""
Precondition errors raised while preparing a demo run.

The fill scheduler itself has no recoverable errors: fill amounts are
clamped and random selection only happens over a non-empty active set.
What can go wrong is the environment the scheduler is handed:
- SurfaceNotFoundError: No drawing surface registered under the name
- InvalidSurfaceError: Registered object cannot paint rectangles
- BarSpecFieldError: Bar factory asked to change an unknown layout field

Surface errors are raised during phase setup, before any timer is armed,
so a host sees them synchronously from pre_start() or start().
"""

from typing import Any


class SurfaceNotFoundError(Exception):
    """
    Raised when a document has no surface registered under a name.

    Attributes:
        name: The element identifier that was looked up
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No drawing surface registered as '{name}'")


class InvalidSurfaceError(Exception):
    """
    Raised when the object registered under a name is not a DrawingSurface.

    Attributes:
        name: The element identifier that was looked up
        surface: The object found under that name
    """

    def __init__(self, name: str, surface: Any) -> None:
        self.name = name
        self.surface = surface
        super().__init__(
            f"Element '{name}' is a {type(surface).__name__}, "
            f"which cannot paint or erase rectangles"
        )


class BarSpecFieldError(Exception):
    """
    Raised when setting a bar layout field that does not exist.

    Attributes:
        field_name: The unknown field
    """

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Unknown bar spec field '{field_name}'")
