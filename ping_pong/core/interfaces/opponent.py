"""
Opponent protocol - defines interface for whatever steers the right paddle
"""

from typing import Protocol

from ping_pong.core.entities import Ball
from ping_pong.core.entities import Paddle


class OpponentController(Protocol):
    """
    Protocol for paddle controllers driven by the simulation itself.

    The physics engine calls `update` once per frame, after the ball has
    moved, and the controller mutates the paddle in place.
    """

    name: str

    def update(self, paddle: Paddle, ball: Ball) -> None:
        """
        Move the paddle for the current frame.

        Args:
            paddle: Paddle under control, mutated in place
            ball: Current ball, read only
        """
        ...
