"""
Ball physics for Rally Pong: integration, wall and paddle bounces, and the
round outcome.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Protocol

from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from rally_pong.constants import SERVE_MAX_VERTICAL
from rally_pong.entities import Ball, Paddle
from rally_pong.geometry import WorldBounds, rect_overlap, remap_range


class Winner(Enum):
    """Outcome of the current rally."""

    PLAYER = "player"
    ENEMY = "enemy"
    NONE = "none"


class SoundPlayer(Protocol):
    """Anything that can play a pre-loaded sound by name."""

    def play(self, name: str):
        """Play the sound registered under ``name``."""


def serve_direction(rng: random.Random, toward_right: bool) -> Velocity2D:
    """
    Random heading for a fresh serve.

    The horizontal component is a full unit toward the chosen side; the
    vertical one is uniform in [-1, 1], clamped so the serve is never too
    steep.

    :param rng: Random source.
    :type rng: random.Random

    :param toward_right: Serve toward the right side of the board.
    :type toward_right: bool

    :return: The new heading.
    :rtype: Velocity2D
    """
    vx = 1.0 if toward_right else -1.0
    vy = rng.random() * 2 - 1
    vy = max(-SERVE_MAX_VERTICAL, min(SERVE_MAX_VERTICAL, vy))
    return Velocity2D(vx, vy)


class BallController:
    """
    Moves the ball and resolves its collisions once per frame.

    Reads both paddles but never writes them.
    """

    def __init__(
        self,
        ball: Ball,
        bounds: WorldBounds,
        audio: SoundPlayer,
        *,
        base_speed: float = 400.0,
        speed_increment: float = 2.0,
        rng: random.Random | None = None,
    ):
        """
        :param ball: The ball to drive.
        :type ball: Ball

        :param bounds: Play field bounds.
        :type bounds: WorldBounds

        :param audio: Sink for collision sounds.
        :type audio: SoundPlayer

        :param base_speed: Speed the ball is reset to on every serve.
        :type base_speed: float

        :param speed_increment: Speed gained on each paddle hit.
        :type speed_increment: float

        :param rng: Random source for serves and sound picks.
        :type rng: random.Random, optional
        """
        self.ball = ball
        self.bounds = bounds
        self.audio = audio
        self.base_speed = base_speed
        self.speed_increment = speed_increment
        self.rng = rng or random.Random()

    def update(self, dt: float, player: Paddle, enemy: Paddle):
        """
        Advance the ball by ``dt`` seconds and bounce it off walls and
        paddles.

        :param dt: Elapsed seconds since the last frame.
        :type dt: float

        :param player: Human paddle.
        :type player: Paddle

        :param enemy: CPU paddle.
        :type enemy: Paddle
        """
        ball = self.ball
        step = ball.speed * dt
        ball.position.x += ball.direction.vx * step
        ball.position.y += ball.direction.vy * step

        self._handle_walls()
        # CPU defends the left side, the player the right one
        self._handle_paddle(enemy, toward=-1.0)
        self._handle_paddle(player, toward=1.0)

    def winner(self) -> Winner:
        """
        Who won the rally, judged from the ball's current position only.

        :return: PLAYER when the ball left through the CPU side, ENEMY when
            it left through the player side, NONE otherwise.
        :rtype: Winner
        """
        if self.ball.left < self.bounds.minimum.x:
            return Winner.PLAYER
        if self.ball.right > self.bounds.maximum.x:
            return Winner.ENEMY
        return Winner.NONE

    def serve(self, toward_right: bool):
        """Reset the ball speed and give it a fresh random heading."""
        self.ball.speed = self.base_speed
        self.ball.direction = serve_direction(self.rng, toward_right)

    def _handle_walls(self):
        ball = self.ball
        direction = ball.direction
        lo, hi = self.bounds.minimum, self.bounds.maximum

        # only flip while still heading out, so a ball already on its way
        # back is not flipped again
        if (ball.top < lo.y and direction.vy < 0) or (
            ball.bottom > hi.y and direction.vy > 0
        ):
            direction.vy *= -1
            self._play_sound()

        if (ball.left < lo.x and direction.vx < 0) or (
            ball.right > hi.x and direction.vx > 0
        ):
            direction.vx *= -1
            self._play_sound()

    def _handle_paddle(self, paddle: Paddle, toward: float) -> bool:
        ball = self.ball
        direction = ball.direction

        # only a ball travelling toward the paddle's side can be returned
        if direction.vx * toward <= 0:
            return False

        if not rect_overlap(
            ball.top_left,
            ball.bottom_right,
            paddle.top_left,
            paddle.bottom_right,
        ):
            return False

        # outgoing angle depends only on where the paddle was struck
        direction.vx *= -1
        direction.vy = remap_range(
            ball.position.y, paddle.top, paddle.bottom, -1.0, 1.0
        )
        ball.speed += self.speed_increment
        self._play_sound()
        return True

    def _play_sound(self):
        sounds = self.ball.sounds
        if not sounds:
            raise ValueError("Ball has no collision sounds configured")
        self.audio.play(sounds[self.rng.randrange(len(sounds))])
