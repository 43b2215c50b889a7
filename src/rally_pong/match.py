"""
Round bookkeeping for Rally Pong.

A ``PongMatch`` owns the three entities and their controllers, steps them
in order every frame and reacts to the rally outcome: score, serve,
reaction-time drift, reset and pause.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D
from mini_arcade_core.utils import logger

from rally_pong.config import MatchConfig
from rally_pong.controllers import (
    BallController,
    CpuPaddleController,
    PlayerPaddleController,
    SoundPlayer,
    Winner,
    serve_direction,
)
from rally_pong.entities import Ball, Paddle
from rally_pong.geometry import WorldBounds


@dataclass
class ScoreState:
    """
    Score state of a match.

    :ivar player (int): Points of the human player.
    :ivar enemy (int): Points of the CPU.
    """

    player: int = 0
    enemy: int = 0

    def reset(self):
        """Zero both scores."""
        self.player = 0
        self.enemy = 0


# Justification: the match is the single owner of the whole game state
# pylint: disable=too-many-instance-attributes
class PongMatch:
    """
    A match between the human paddle (right) and the CPU paddle (left).
    """

    def __init__(
        self,
        width: float,
        height: float,
        audio: SoundPlayer,
        *,
        score_bar_height: float = 0.0,
        config: MatchConfig | None = None,
        rng: random.Random | None = None,
    ):
        """
        :param width: Window width.
        :type width: float

        :param height: Window height, score bar included.
        :type height: float

        :param audio: Sink for collision sounds.
        :type audio: SoundPlayer

        :param score_bar_height: Height of the score strip at the top.
        :type score_bar_height: float

        :param config: Match configuration.
        :type config: MatchConfig, optional

        :param rng: Shared random source, seed it for reproducible matches.
        :type rng: random.Random, optional
        """
        self.config = config or MatchConfig()
        self.rng = rng or random.Random()
        self.width = width
        self.height = height
        self.bounds = WorldBounds.from_window(width, height, score_bar_height)
        self._check_fits()

        ball_cfg = self.config.ball
        self.player = Paddle(
            position=Position2D(0.0, 0.0),
            size=Size2D(*self.config.player.size),
            speed=self.config.player.speed,
        )
        self.enemy = Paddle(
            position=Position2D(0.0, 0.0),
            size=Size2D(*self.config.cpu.size),
        )
        self.ball = Ball(
            position=Position2D(0.0, 0.0),
            size=Size2D(*ball_cfg.size),
            direction=serve_direction(self.rng, toward_right=False),
            speed=ball_cfg.base_speed,
            sounds=list(ball_cfg.sounds),
        )

        self.player_controller = PlayerPaddleController(
            self.player, self.bounds
        )
        self.cpu_controller = CpuPaddleController(
            self.enemy,
            self.ball,
            self.bounds,
            side="LEFT",
            config=self.config.cpu,
            rng=self.rng,
        )
        self.ball_controller = BallController(
            self.ball,
            self.bounds,
            audio,
            base_speed=ball_cfg.base_speed,
            speed_increment=ball_cfg.speed_increment,
            rng=self.rng,
        )

        self.score = ScoreState()
        self.paused = False
        self.reset_positions()

    def _check_fits(self):
        field_height = self.bounds.height
        for name, (_, h) in (
            ("player paddle", self.config.player.size),
            ("cpu paddle", self.config.cpu.size),
            ("ball", self.config.ball.size),
        ):
            if h >= field_height:
                raise ValueError(
                    f"{name} height {h} does not fit a {field_height} field"
                )

    def reset_positions(self):
        """Put all three entities back on their starting spots."""
        self.player.move_to(
            self.width - self.player.size.width, self.height / 2
        )
        self.enemy.move_to(self.enemy.size.width, self.height / 2)
        self.ball.move_to(self.width / 2, self.height / 2)
        self.ball.speed = self.config.ball.base_speed

    def step(
        self, dt: float, now: float, move_up: bool, move_down: bool
    ) -> Winner:
        """
        Run one frame of the match.

        :param dt: Elapsed seconds since the last frame.
        :type dt: float

        :param now: Total elapsed game time in seconds.
        :type now: float

        :param move_up: Whether the player's "move up" input is held.
        :type move_up: bool

        :param move_down: Whether the player's "move down" input is held.
        :type move_down: bool

        :return: The rally outcome for this frame.
        :rtype: Winner
        """
        if self.paused:
            return Winner.NONE

        self.player_controller.update(dt, move_up, move_down)
        self.cpu_controller.update(dt, now)
        self.ball_controller.update(dt, self.player, self.enemy)

        winner = self.ball_controller.winner()
        if winner is not Winner.NONE:
            self._end_round(winner)
        return winner

    def _end_round(self, winner: Winner):
        cpu_cfg = self.config.cpu
        cpu = self.cpu_controller

        if winner is Winner.PLAYER:
            self.score.player += 1
            drift = cpu_cfg.reaction_time_on_player_point
            toward_right = True
        else:
            self.score.enemy += 1
            drift = cpu_cfg.reaction_time_on_enemy_point
            toward_right = False

        cpu.reaction_time = max(0.0, cpu.reaction_time + drift)
        self.ball_controller.serve(toward_right)
        self.reset_positions()
        self.paused = True

        logger.info(
            f"Point for {winner.value}: "
            f"player {self.score.player} - {self.score.enemy} cpu "
            f"(cpu reaction {cpu.reaction_time:.2f}s)"
        )

    def resume(self):
        """Leave the pause entered at the end of a rally."""
        if self.paused:
            logger.info("Resuming match")
        self.paused = False

    def restart(self):
        """Zero the scores and put everything back, paused."""
        logger.info("Restarting match")
        self.score.reset()
        self.reset_positions()
        self.paused = True


# pylint: enable=too-many-instance-attributes
