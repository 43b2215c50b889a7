"""
Configuration for Rally Pong entities and the CPU opponent.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rally_pong.constants import (
    BALL_SIZE,
    BALL_SPEED,
    BALL_SPEED_INCREMENT,
    COLLISION_SOUNDS,
    ENEMY_REACTION_TIME,
    ENEMY_SPEED,
    PADDLE_SIZE,
    PLAYER_SPEED,
)


def _require_positive(name: str, value: float):
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


@dataclass
class BallConfig:
    """
    Ball tuning.

    - base_speed: speed of a freshly served ball (units/sec)
    - speed_increment: speed gained on every paddle hit
    - sounds: names of the collision sounds registered with the backend
    """

    size: tuple[int, int] = BALL_SIZE
    base_speed: float = BALL_SPEED
    speed_increment: float = BALL_SPEED_INCREMENT
    sounds: tuple[str, ...] = COLLISION_SOUNDS

    def __post_init__(self):
        _require_positive("ball width", self.size[0])
        _require_positive("ball height", self.size[1])
        _require_positive("ball base_speed", self.base_speed)
        if self.speed_increment < 0:
            raise ValueError("ball speed_increment must not be negative")
        if not self.sounds:
            raise ValueError("ball needs at least one collision sound")


@dataclass
class PaddleConfig:
    """Human paddle tuning."""

    size: tuple[int, int] = PADDLE_SIZE
    speed: float = PLAYER_SPEED

    def __post_init__(self):
        _require_positive("paddle width", self.size[0])
        _require_positive("paddle height", self.size[1])
        _require_positive("paddle speed", self.speed)


@dataclass
class CpuConfig:
    """
    CPU opponent tuning.

    - speed: how fast the CPU paddle can move (units/sec)
    - reaction_time: seconds between two predictions of the ball path
    - aim_error: max random offset (units) added to each prediction
    - reaction_time_on_player_point: drift applied when the player scores
    - reaction_time_on_enemy_point: drift applied when the CPU scores
    """

    size: tuple[int, int] = PADDLE_SIZE
    speed: float = ENEMY_SPEED
    reaction_time: float = ENEMY_REACTION_TIME
    aim_error: int = 0  # 0 = perfect aim
    reaction_time_on_player_point: float = -0.2
    reaction_time_on_enemy_point: float = 0.1

    def __post_init__(self):
        _require_positive("cpu paddle width", self.size[0])
        _require_positive("cpu paddle height", self.size[1])
        _require_positive("cpu speed", self.speed)
        if self.aim_error < 0:
            raise ValueError(
                f"cpu aim_error must not be negative, got {self.aim_error}"
            )
        if self.reaction_time < 0:
            raise ValueError("cpu reaction_time must not be negative")


@dataclass
class MatchConfig:
    """Everything needed to set up a match."""

    ball: BallConfig = field(default_factory=BallConfig)
    player: PaddleConfig = field(default_factory=PaddleConfig)
    cpu: CpuConfig = field(default_factory=CpuConfig)
