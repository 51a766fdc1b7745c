"""
Drawing surface protocol - the primitives a frame is rendered with
"""

from typing import Protocol

from ping_pong.utils.config import Color

Point = tuple[float, float]


class DrawingSurface(Protocol):
    """
    Protocol for raster 2D drawing targets.

    Enables multiple backends: a pygame window, a recording surface for
    headless runs and tests, etc. Coordinates are in pixels with the origin
    at the top-left corner.
    """

    width: int
    height: int

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """Fill an axis-aligned rectangle"""
        ...

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        """Fill a circle centred on (x, y)"""
        ...

    def fill_text(self, x: float, y: float, text: str, color: Color, size: int) -> None:
        """
        Draw text.

        Args:
            x: Left edge of the text
            y: Baseline of the text
            text: Text to draw
            color: Fill color
            size: Font size in pixels
        """
        ...

    def dashed_line(
        self,
        start: Point,
        end: Point,
        dash: float,
        gap: float,
        line_width: int,
        color: Color,
    ) -> None:
        """Stroke a dashed line from start to end"""
        ...
