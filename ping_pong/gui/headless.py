"""
Headless drawing surface for Ping Pong
"""

from typing import Any

from ping_pong.utils.config import Color
from ping_pong.utils.config import game_config


class HeadlessSurface:
    """
    Surface that draws nothing and records every command instead.

    Used to run the game without a display and to inspect frames in tests.
    Only the commands of the current frame are kept: a full-surface
    `fill_rect` starts a new frame.
    """

    def __init__(self, width: int | None = None, height: int | None = None):
        self.width = width or game_config.FIELD_WIDTH
        self.height = height or game_config.FIELD_HEIGHT
        self.commands: list[tuple[Any, ...]] = []
        self.frames = 0

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        if (x, y, width, height) == (0, 0, self.width, self.height):
            self.commands = []
            self.frames += 1
        self.commands.append(("fill_rect", x, y, width, height, color))

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        self.commands.append(("fill_circle", x, y, radius, color))

    def fill_text(self, x: float, y: float, text: str, color: Color, size: int) -> None:
        self.commands.append(("fill_text", x, y, text, color, size))

    def dashed_line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        dash: float,
        gap: float,
        line_width: int,
        color: Color,
    ) -> None:
        self.commands.append(("dashed_line", start, end, dash, gap, line_width, color))

    def commands_named(self, name: str) -> list[tuple[Any, ...]]:
        """Commands of the current frame with the given primitive name"""
        return [command for command in self.commands if command[0] == name]
