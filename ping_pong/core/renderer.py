"""
Frame renderer for Ping Pong
"""

from ping_pong.core.entities import Ball
from ping_pong.core.entities import Paddle
from ping_pong.core.interfaces.surface import DrawingSurface
from ping_pong.core.physics import PhysicsEngine
from ping_pong.utils.config import game_config


class FrameRenderer:
    """Draws one frame of the game on any DrawingSurface"""

    def __init__(self) -> None:
        self.background_color = game_config.BACKGROUND_COLOR
        self.net_color = game_config.NET_COLOR
        self.text_color = game_config.TEXT_COLOR
        self.font_size = game_config.SCORE_FONT_SIZE

    def clear_screen(self, surface: DrawingSurface) -> None:
        """Clear the screen with background color"""
        surface.fill_rect(0, 0, surface.width, surface.height, self.background_color)

    def draw_net(self, surface: DrawingSurface) -> None:
        """Draw the dashed centre line"""
        center_x = surface.width / 2
        surface.dashed_line(
            (center_x, 0),
            (center_x, surface.height),
            game_config.NET_DASH_LENGTH,
            game_config.NET_GAP_LENGTH,
            game_config.NET_LINE_WIDTH,
            self.net_color,
        )

    def draw_score(self, surface: DrawingSurface, score: tuple[int, int]) -> None:
        """Draw each side's score over its half of the field"""
        y = surface.height / 5
        surface.fill_text(surface.width / 4, y, str(score[0]), self.text_color, self.font_size)
        surface.fill_text(3 * surface.width / 4, y, str(score[1]), self.text_color, self.font_size)

    def draw_ball(self, surface: DrawingSurface, ball: Ball) -> None:
        surface.fill_circle(ball.position.x, ball.position.y, ball.radius, ball.color)

    def draw_paddle(self, surface: DrawingSurface, paddle: Paddle) -> None:
        x, y, width, height = paddle.get_rect()
        surface.fill_rect(x, y, width, height, paddle.color)

    def render(self, engine: PhysicsEngine, surface: DrawingSurface) -> None:
        """Render the complete game state"""
        self.clear_screen(surface)
        self.draw_net(surface)
        self.draw_score(surface, engine.score)
        self.draw_ball(surface, engine.ball)
        self.draw_paddle(surface, engine.player)
        self.draw_paddle(surface, engine.opponent)
