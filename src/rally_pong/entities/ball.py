"""
Ball entity for Rally Pong.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from rally_pong.entities.body import Body


@dataclass
class Ball(Body):
    """
    Ball entity.

    ``direction`` is a heading, not a velocity: it is not normalized and
    the ball actually travels at ``direction * speed``.

    :ivar position (Position2D): Center of the ball.
    :ivar size (Size2D): Size of the ball.
    :ivar direction (Velocity2D): Current heading.
    :ivar speed (float): Speed of the ball, grows on every paddle hit.
    :ivar sounds (list[str]): Collision sound names, one is picked per hit.
    """

    direction: Velocity2D = field(default_factory=lambda: Velocity2D(-1.0, 0.0))
    speed: float = 400.0
    sounds: list[str] = field(default_factory=list)
