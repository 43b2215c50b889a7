"""
Human paddle controller for Rally Pong.
"""

from __future__ import annotations

from rally_pong.entities import Paddle
from rally_pong.geometry import WorldBounds


class PlayerPaddleController:
    """Moves the human paddle from the held up/down keys."""

    def __init__(self, paddle: Paddle, bounds: WorldBounds):
        self.paddle = paddle
        self.bounds = bounds

    def update(self, dt: float, move_up: bool, move_down: bool):
        """
        Apply this frame's input. Both keys held cancel out.

        :param dt: Elapsed seconds since the last frame.
        :type dt: float

        :param move_up: Whether "move up" is held.
        :type move_up: bool

        :param move_down: Whether "move down" is held.
        :type move_down: bool
        """
        paddle = self.paddle
        if move_up:
            paddle.position.y -= paddle.speed * dt
        if move_down:
            paddle.position.y += paddle.speed * dt

        paddle.position.y = self.bounds.clamp_y(
            paddle.position.y, paddle.half_height
        )
