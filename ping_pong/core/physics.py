"""
Physics system for Ping Pong
"""

from ping_pong.ai.simple_ai import ProportionalAI
from ping_pong.core.collision import CollisionDetector
from ping_pong.core.collision import apply_paddle_bounce
from ping_pong.core.entities import INITIAL_BALL_SPEED
from ping_pong.core.entities import Ball
from ping_pong.core.entities import GameState
from ping_pong.core.entities import Paddle
from ping_pong.core.entities import Side
from ping_pong.core.interfaces.opponent import OpponentController
from ping_pong.utils.config import game_config

# Added to the ball speed on every paddle hit, never undone until a reset
BALL_SPEED_INCREMENT = 0.6


class PhysicsEngine:
    """Main physics engine, owner of the ball and both paddles"""

    def __init__(
        self,
        field_width: float | None = None,
        field_height: float | None = None,
        opponent_ai: OpponentController | None = None,
    ):
        self.field_width = field_width or game_config.FIELD_WIDTH
        self.field_height = field_height or game_config.FIELD_HEIGHT
        self.collision_detector = CollisionDetector()
        self.opponent_ai: OpponentController = opponent_ai or ProportionalAI()

        paddle_y = self.field_height / 2 - game_config.PADDLE_HEIGHT / 2
        self.player = Paddle(0, paddle_y, Side.LEFT)
        self.opponent = Paddle(self.field_width - game_config.PADDLE_WIDTH, paddle_y, Side.RIGHT)
        self.ball = Ball(self.field_width / 2, self.field_height / 2)

        self.frame_count = 0

    @property
    def score(self) -> tuple[int, int]:
        return (self.player.score, self.opponent.score)

    def move_player_to(self, pointer_y: float) -> None:
        """Centres the player paddle on a pointer height measured from the field top"""
        y = pointer_y - self.player.height / 2
        if game_config.CLAMP_PLAYER_PADDLE:
            y = max(0.0, min(self.field_height - self.player.height, y))
        self.player.position.y = y

    def active_paddle(self) -> Paddle:
        """Paddle on the half of the field the ball is in"""
        if self.ball.position.x < self.field_width / 2:
            return self.player
        return self.opponent

    def reset_ball(self) -> None:
        """Resets the ball to center"""
        self.ball.reset_to_center(self.field_width / 2, self.field_height / 2)

    def update(self) -> dict:
        """Advances the simulation by one frame and returns the events that occurred"""
        events: dict[str, list] = {
            "wall_bounces": [],
            "paddle_hits": [],
            "goals": [],
        }
        self.frame_count += 1

        self.ball.advance()
        self.opponent_ai.update(self.opponent, self.ball)

        wall = self.collision_detector.check_ball_walls(self.ball, self.field_height)
        if wall != "none":
            self.ball.bounce_vertical()
            if game_config.CORRECT_WALL_OVERSHOOT:
                self._push_ball_inside(wall)
            events["wall_bounces"].append(wall)

        paddle = self.active_paddle()
        if self.collision_detector.check_ball_paddle(self.ball, paddle):
            direction = 1 if paddle.side is Side.LEFT else -1
            angle = apply_paddle_bounce(self.ball, paddle, direction)
            self.ball.speed += BALL_SPEED_INCREMENT
            events["paddle_hits"].append(
                {"side": paddle.side.value, "angle": angle, "speed": self.ball.speed}
            )

        goal = self.collision_detector.check_goal(self.ball, self.field_width)
        if goal == "left_goal":
            self.opponent.add_point()
            events["goals"].append({"side": Side.RIGHT.value, "score": self.score})
            self.reset_ball()
        elif goal == "right_goal":
            self.player.add_point()
            events["goals"].append({"side": Side.LEFT.value, "score": self.score})
            self.reset_ball()

        return events

    def _push_ball_inside(self, wall: str) -> None:
        if wall == "top":
            self.ball.position.y = self.ball.radius
        else:
            self.ball.position.y = self.field_height - self.ball.radius

    def get_game_state(self) -> GameState:
        """Returns the complete game state"""
        return GameState(
            ball_position=self.ball.position.to_tuple(),
            ball_velocity=self.ball.velocity.to_tuple(),
            ball_speed=self.ball.speed,
            player_position=self.player.position.to_tuple(),
            opponent_position=self.opponent.position.to_tuple(),
            score=self.score,
            frame=self.frame_count,
            field_bounds=(0, self.field_width, 0, self.field_height),
        )

    def reset_game(self) -> None:
        """Resets the game to zero"""
        self.player.score = 0
        self.opponent.score = 0
        self.frame_count = 0

        paddle_y = self.field_height / 2 - game_config.PADDLE_HEIGHT / 2
        self.player.position.y = paddle_y
        self.opponent.position.y = paddle_y

        self.ball.position.x = self.field_width / 2
        self.ball.position.y = self.field_height / 2
        self.ball.velocity.x = INITIAL_BALL_SPEED
        self.ball.velocity.y = INITIAL_BALL_SPEED
        self.ball.speed = INITIAL_BALL_SPEED
