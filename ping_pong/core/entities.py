"""
Ping Pong game entities: ball, paddles, state snapshot
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from ping_pong.utils.config import Color
from ping_pong.utils.config import game_config

# Serve speed of the ball, restored on every reset
INITIAL_BALL_SPEED = 5.0


class Side(Enum):
    """Side of the field a paddle defends"""

    LEFT = "left"  # pointer-controlled player
    RIGHT = "right"  # AI-controlled opponent


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def normalize(self) -> "Vector2D":
        mag = self.magnitude()
        if mag == 0:
            return Vector2D(0, 0)
        return Vector2D(self.x / mag, self.y / mag)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class Ball:
    """Game ball"""

    def __init__(
        self,
        x: float,
        y: float,
        vx: float = INITIAL_BALL_SPEED,
        vy: float = INITIAL_BALL_SPEED,
        radius: float | None = None,
        speed: float = INITIAL_BALL_SPEED,
        color: Color | None = None,
    ):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self.radius = radius if radius is not None else game_config.BALL_RADIUS
        self.speed = speed
        self.color = color or game_config.BALL_COLOR

    @property
    def left(self) -> float:
        return self.position.x - self.radius

    @property
    def right(self) -> float:
        return self.position.x + self.radius

    @property
    def top(self) -> float:
        return self.position.y - self.radius

    @property
    def bottom(self) -> float:
        return self.position.y + self.radius

    def advance(self) -> None:
        """Moves the ball by one frame of velocity"""
        self.position += self.velocity

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.velocity.y = -self.velocity.y

    def reset_to_center(self, center_x: float, center_y: float) -> None:
        """
        Puts the ball back on the centre spot at serve speed.

        The horizontal velocity is mirrored so the next serve heads to the
        side that just conceded; the vertical velocity is left untouched.
        """
        self.position = Vector2D(center_x, center_y)
        self.speed = INITIAL_BALL_SPEED
        self.velocity.x = -self.velocity.x

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the bounding square (x, y, width, height)"""
        return (self.left, self.top, 2 * self.radius, 2 * self.radius)


class Paddle:
    """Player or opponent paddle"""

    def __init__(
        self,
        x: float,
        y: float,
        side: Side,
        width: float | None = None,
        height: float | None = None,
        color: Color | None = None,
    ):
        self.position = Vector2D(x, y)
        self.side = side
        self.width = width if width is not None else game_config.PADDLE_WIDTH
        self.height = height if height is not None else game_config.PADDLE_HEIGHT
        self.color = color or game_config.PADDLE_COLOR
        self.score = 0

    @property
    def left(self) -> float:
        return self.position.x

    @property
    def right(self) -> float:
        return self.position.x + self.width

    @property
    def top(self) -> float:
        return self.position.y

    @property
    def bottom(self) -> float:
        return self.position.y + self.height

    @property
    def center_y(self) -> float:
        return self.position.y + self.height / 2

    def add_point(self) -> int:
        """Credits one point and returns the new score"""
        self.score += 1
        return self.score

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle (x, y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)


@dataclass(frozen=True)
class GameState:
    """Snapshot of the simulation, safe to hand out"""

    ball_position: tuple[float, float]
    ball_velocity: tuple[float, float]
    ball_speed: float
    player_position: tuple[float, float]
    opponent_position: tuple[float, float]
    score: tuple[int, int]
    frame: int
    field_bounds: tuple[float, float, float, float] = (0, 800, 0, 600)
