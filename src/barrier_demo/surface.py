"""
Drawing surface protocol and the document that hosts named surfaces.

The scheduler never creates a surface. It resolves one by name from a
SurfaceDocument once per phase setup, the way a page script looks up a
canvas element by id, and then only paints and erases rectangles on it.
"""

import logging
from typing import Protocol, runtime_checkable

from barrier_demo.exceptions import InvalidSurfaceError, SurfaceNotFoundError

logger = logging.getLogger(__name__)


@runtime_checkable
class DrawingSurface(Protocol):
    """
    Protocol for anything bars and barriers can be painted on.

    Coordinates are in surface pixels with the origin at the top-left
    corner. Colors are hex strings such as "#00ff00".
    """

    def paint_outline_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: str,
        thickness: float,
    ) -> None:
        """Stroke the edges of a rectangle."""
        ...

    def paint_filled_rect(
        self, x: float, y: float, width: float, height: float, color: str
    ) -> None:
        """Fill a rectangle."""
        ...

    def erase_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Reset a rectangle to the background."""
        ...


class SurfaceDocument:
    """
    Registry of drawing surfaces addressed by element name.

    Example:
        document = SurfaceDocument()
        document.attach("demo", TerminalCanvas(270, 330))
        surface = document.get_surface("demo")
    """

    def __init__(self) -> None:
        self._elements: dict[str, object] = {}

    def attach(self, name: str, surface: object) -> None:
        """Register a surface under a name, replacing any previous one."""
        self._elements[name] = surface

    def detach(self, name: str) -> None:
        """Remove a surface. Missing names are ignored."""
        self._elements.pop(name, None)

    def get_surface(self, name: str) -> DrawingSurface:
        """
        Resolve a surface by name.

        Args:
            name: Element identifier

        Returns:
            The registered DrawingSurface

        Raises:
            SurfaceNotFoundError: Nothing is registered under the name
            InvalidSurfaceError: The registered object cannot paint
        """
        try:
            element = self._elements[name]
        except KeyError:
            raise SurfaceNotFoundError(name) from None
        if not isinstance(element, DrawingSurface):
            raise InvalidSurfaceError(name, element)
        logger.debug(f"Resolved surface '{name}' ({type(element).__name__})")
        return element

    def __contains__(self, name: object) -> bool:
        return name in self._elements
