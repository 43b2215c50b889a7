"""
Predictive CPU paddle controller for Rally Pong.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Literal, Optional

from mini_arcade_core.spaces.d2.geometry2d import Position2D

from rally_pong.config import CpuConfig
from rally_pong.constants import PROJECTION_LENGTH
from rally_pong.entities import Ball, Paddle
from rally_pong.geometry import WorldBounds, segment_intersection

Side = Literal["LEFT", "RIGHT"]


class MoveState(Enum):
    """Discrete movement decision of the CPU paddle."""

    UP = "up"
    DOWN = "down"
    STOPPED = "stopped"


# Justification: the AI state bundle is the point of this class
# pylint: disable=too-many-instance-attributes
class CpuPaddleController:
    """
    Predictive CPU:
    - Projects the ball's heading onto the paddle's vertical line.
    - Only refreshes that prediction once per reaction time.
    - Adds a random aim error, then moves up/down toward the guess.
    """

    def __init__(
        self,
        paddle: Paddle,
        ball: Ball,
        bounds: WorldBounds,
        *,
        side: Side = "LEFT",
        config: CpuConfig | None = None,
        rng: random.Random | None = None,
    ):
        """
        :param paddle: The paddle to control.
        :type paddle: Paddle

        :param ball: The ball to track.
        :type ball: Ball

        :param bounds: Play field bounds.
        :type bounds: WorldBounds

        :param side: Side of the board the paddle defends.
        :type side: Side

        :param config: The CPU configuration settings.
        :type config: CpuConfig, optional

        :param rng: Random source for the aim error.
        :type rng: random.Random, optional
        """
        self.paddle = paddle
        self.ball = ball
        self.bounds = bounds
        self.side = side
        self.config = config or CpuConfig()
        self.rng = rng or random.Random()

        # Make sure paddle speed matches CPU config so movement feels consistent
        self.paddle.speed = self.config.speed

        self.state = MoveState.STOPPED
        self.prediction: Optional[Position2D] = None
        self.reaction_time: float = self.config.reaction_time
        self.last_predicted_at: float = 0.0
        self.aim_error: int = self.config.aim_error

    def ball_approaching(self) -> bool:
        """Whether the ball is heading toward this paddle's side."""
        vx = self.ball.direction.vx
        if self.side == "LEFT":
            return vx < 0
        return vx > 0

    def update(self, dt: float, now: float):
        """
        Move the paddle for this frame and refresh the prediction when the
        reaction time allows it.

        :param dt: Elapsed seconds since the last frame.
        :type dt: float

        :param now: Total elapsed game time in seconds.
        :type now: float
        """
        if not self.ball_approaching():
            self.state = MoveState.STOPPED
            return

        self._move(dt)

        if (
            self.prediction is not None
            and now - self.last_predicted_at < self.reaction_time
        ):
            return

        self.prediction = self.predict()
        if self.prediction is None:
            return

        self.last_predicted_at = now
        self.prediction = Position2D(
            self.prediction.x,
            self.prediction.y
            + self.rng.randint(-self.aim_error, self.aim_error),
        )
        self.state = self._decide(self.prediction.y)

    def predict(self) -> Optional[Position2D]:
        """
        Where the ball's current heading crosses the paddle's vertical
        line, if it does.

        :return: The intercept point, or None.
        :rtype: Optional[Position2D]
        """
        x = self.paddle.position.x
        ball_pos = self.ball.position
        direction = self.ball.direction

        return segment_intersection(
            Position2D(x, -PROJECTION_LENGTH),
            Position2D(x, PROJECTION_LENGTH),
            Position2D(ball_pos.x, ball_pos.y),
            Position2D(
                ball_pos.x + direction.vx * PROJECTION_LENGTH,
                ball_pos.y + direction.vy * PROJECTION_LENGTH,
            ),
        )

    def _move(self, dt: float):
        paddle = self.paddle
        if self.state is MoveState.UP:
            paddle.position.y -= paddle.speed * dt
        elif self.state is MoveState.DOWN:
            paddle.position.y += paddle.speed * dt

        paddle.position.y = self.bounds.clamp_y(
            paddle.position.y, paddle.half_height
        )

    def _decide(self, target_y: float) -> MoveState:
        paddle = self.paddle
        if paddle.top <= target_y <= paddle.bottom:
            return MoveState.STOPPED
        if target_y < paddle.position.y:
            return MoveState.UP
        return MoveState.DOWN


# pylint: enable=too-many-instance-attributes
