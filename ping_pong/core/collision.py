"""
Collision detection system for Ping Pong
"""

import math

from ping_pong.core.entities import Ball
from ping_pong.core.entities import Paddle

# Widest deflection off a paddle edge, in radians (45 degrees)
MAX_BOUNCE_ANGLE = math.pi / 4


def rects_overlap(
    a: tuple[float, float, float, float], b: tuple[float, float, float, float]
) -> bool:
    """Strict overlap of two (x, y, width, height) rectangles; touching edges do not count"""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax + aw > bx and ay + ah > by and ax < bx + bw and ay < by + bh


def ball_paddle_overlap(ball: Ball, paddle: Paddle) -> bool:
    """
    Axis-aligned test between the ball's bounding square and a paddle.

    Only the current frame is inspected, so a ball travelling further than
    the paddle width in one frame can skip over it entirely.
    """
    return rects_overlap(ball.get_rect(), paddle.get_rect())


def collide_point(ball: Ball, paddle: Paddle) -> float:
    """Where the ball struck the paddle: -1 at the top edge, 0 at the centre, 1 at the bottom"""
    return (ball.position.y - paddle.center_y) / (paddle.height / 2)


def bounce_angle(ball: Ball, paddle: Paddle) -> float:
    """Outgoing angle in radians, proportional to the strike offset"""
    return collide_point(ball, paddle) * MAX_BOUNCE_ANGLE


def apply_paddle_bounce(ball: Ball, paddle: Paddle, direction: int) -> float:
    """
    Sends the ball back off a paddle.

    The new velocity has the ball's current speed and the angle given by
    `bounce_angle`; `direction` is +1 to send it right, -1 to send it left.
    Returns the angle used.
    """
    angle = bounce_angle(ball, paddle)
    ball.velocity.x = direction * ball.speed * math.cos(angle)
    ball.velocity.y = ball.speed * math.sin(angle)
    return angle


class CollisionDetector:
    """Main collision manager"""

    def check_ball_walls(self, ball: Ball, field_height: float) -> str:
        """Checks collisions with the top and bottom walls. Returns the collision type."""
        if ball.bottom > field_height:
            return "bottom"
        elif ball.top < 0:
            return "top"
        return "none"

    def check_ball_paddle(self, ball: Ball, paddle: Paddle) -> bool:
        return ball_paddle_overlap(ball, paddle)

    def check_goal(self, ball: Ball, field_width: float) -> str:
        """Checks whether the ball crossed a goal line"""
        if ball.left < 0:
            return "left_goal"
        elif ball.right > field_width:
            return "right_goal"
        return "none"
