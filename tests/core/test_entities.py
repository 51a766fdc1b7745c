"""
Unit tests for game entities
"""

import dataclasses
import math

import pytest

from ping_pong.core.entities import INITIAL_BALL_SPEED, Ball, GameState, Paddle, Side, Vector2D


class TestVector2D:
    """Test the 2D vector helper"""

    def test_arithmetic(self):
        a = Vector2D(1, 2)
        b = Vector2D(3, 5)

        assert a + b == Vector2D(4, 7)
        assert b - a == Vector2D(2, 3)
        assert a * 2 == Vector2D(2, 4)
        assert -a == Vector2D(-1, -2)

    def test_in_place_add_keeps_identity(self):
        """Test that += mutates the vector instead of replacing it"""
        position = Vector2D(10, 10)
        alias = position
        position += Vector2D(5, -5)

        assert alias is position
        assert alias == Vector2D(15, 5)

    def test_magnitude_and_normalize(self):
        v = Vector2D(3, 4)

        assert v.magnitude() == pytest.approx(5.0)
        assert v.normalize().magnitude() == pytest.approx(1.0)
        assert Vector2D(0, 0).normalize() == Vector2D(0, 0)

    def test_copy_is_independent(self):
        v = Vector2D(1, 1)
        c = v.copy()
        c.x = 9

        assert v.x == 1


class TestBall:
    """Test ball behaviour"""

    def test_defaults(self):
        """Test the default serve speed, velocity and radius"""
        ball = Ball(400, 300)

        assert ball.speed == INITIAL_BALL_SPEED == 5
        assert ball.velocity.to_tuple() == (5, 5)
        assert ball.radius == 15

    def test_edges(self):
        ball = Ball(100, 200, radius=10)

        assert (ball.left, ball.right, ball.top, ball.bottom) == (90, 110, 190, 210)
        assert ball.get_rect() == (90, 190, 20, 20)

    def test_advance_adds_velocity(self):
        ball = Ball(400, 300, 5, -3)
        ball.advance()

        assert ball.position.to_tuple() == (405, 297)

    def test_bounce_vertical_only_flips_y(self):
        ball = Ball(400, 300, 4, 6)
        ball.bounce_vertical()

        assert ball.velocity.to_tuple() == (4, -6)

    def test_reset_to_center(self):
        """Test that a reset re-centres the ball, restores speed and mirrors vx"""
        ball = Ball(10, 50, -7.5, 2.0, speed=8.0)
        ball.reset_to_center(400, 300)

        assert ball.position.to_tuple() == (400, 300)
        assert ball.speed == 5
        assert ball.velocity.x == 7.5, "Horizontal velocity should be mirrored"
        assert ball.velocity.y == 2.0, "Vertical velocity should be kept"


class TestPaddle:
    """Test paddle geometry and scoring"""

    def test_defaults_and_edges(self):
        paddle = Paddle(0, 250, Side.LEFT)

        assert paddle.width == 20
        assert paddle.height == 200
        assert paddle.score == 0
        assert (paddle.left, paddle.right, paddle.top, paddle.bottom) == (0, 20, 250, 450)
        assert paddle.center_y == 350

    def test_add_point(self):
        paddle = Paddle(780, 200, Side.RIGHT)

        assert paddle.add_point() == 1
        assert paddle.add_point() == 2
        assert paddle.score == 2


class TestGameState:
    def test_snapshot_is_frozen(self):
        state = GameState(
            ball_position=(400, 300),
            ball_velocity=(5, 5),
            ball_speed=5,
            player_position=(0, 200),
            opponent_position=(780, 200),
            score=(0, 0),
            frame=0,
        )

        with pytest.raises(dataclasses.FrozenInstanceError):
            state.frame = 1  # type: ignore[misc]

        assert math.isclose(state.field_bounds[1], 800)
