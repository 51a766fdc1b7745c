"""
Simple opponent AIs for Ping Pong
"""

from ping_pong.core.entities import Ball
from ping_pong.core.entities import Paddle

# Fraction of the vertical gap to the ball closed on each frame
DEFAULT_GAIN = 0.1


class ProportionalAI:
    """
    AI that chases the ball height with a proportional controller.

    Each frame the paddle centre moves `gain` of the way towards the ball,
    so it lags behind fast vertical movement and never fully locks on.
    """

    def __init__(self, name: str = "ProportionalAI", gain: float = DEFAULT_GAIN):
        if not 0 < gain <= 1:
            raise ValueError(f"gain must be in (0, 1], got {gain}")
        self.name = name
        self.gain = gain

    def get_offset(self, paddle_center_y: float, ball_y: float) -> float:
        """Vertical displacement to apply this frame"""
        return (ball_y - paddle_center_y) * self.gain

    def update(self, paddle: Paddle, ball: Ball) -> None:
        paddle.position.y += self.get_offset(paddle.center_y, ball.position.y)


class StaticAI:
    """AI that never moves"""

    def __init__(self, name: str = "StaticAI"):
        self.name = name

    def update(self, paddle: Paddle, ball: Ball) -> None:
        return None
