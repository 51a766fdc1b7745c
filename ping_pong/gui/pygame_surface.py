"""
PyGame drawing surface for Ping Pong
"""

import pygame

from ping_pong.core.entities import Vector2D
from ping_pong.utils.config import Color
from ping_pong.utils.config import game_config


class PygameSurface:
    """DrawingSurface backed by a PyGame display window"""

    def __init__(self, width: int | None = None, height: int | None = None):
        """Initialize PyGame and open the window"""
        self.width = width or game_config.FIELD_WIDTH
        self.height = height or game_config.FIELD_HEIGHT

        # Initialize PyGame
        pygame.init()

        # Create the display
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(game_config.WINDOW_CAPTION)

        self._fonts: dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        """Fonts are loaded once per size"""
        if size not in self._fonts:
            name = game_config.SCORE_FONT_NAME
            if name:
                self._fonts[size] = pygame.font.SysFont(name, size)
            else:
                self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        rect = pygame.Rect(int(x), int(y), int(width), int(height))
        pygame.draw.rect(self.screen, color, rect)

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        pygame.draw.circle(self.screen, color, (int(x), int(y)), int(radius))

    def fill_text(self, x: float, y: float, text: str, color: Color, size: int) -> None:
        """Draw text with its baseline at y"""
        font = self._font(size)
        text_surface = font.render(text, True, color)
        self.screen.blit(text_surface, (int(x), int(y - font.get_ascent())))

    def dashed_line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        dash: float,
        gap: float,
        line_width: int,
        color: Color,
    ) -> None:
        """Stroke a dashed line, dash by dash"""
        origin = Vector2D(*start)
        segment = Vector2D(*end) - origin
        length = segment.magnitude()
        direction = segment.normalize()

        travelled = 0.0
        while travelled < length:
            dash_end = min(travelled + dash, length)
            p1 = origin + direction * travelled
            p2 = origin + direction * dash_end
            pygame.draw.line(
                self.screen,
                color,
                (int(p1.x), int(p1.y)),
                (int(p2.x), int(p2.y)),
                line_width,
            )
            travelled = dash_end + gap

    def present(self) -> None:
        """Present the rendered frame"""
        pygame.display.flip()

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
