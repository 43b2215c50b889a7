"""
Paddle entity for Rally Pong.
"""

from __future__ import annotations

from dataclasses import dataclass

from rally_pong.entities.body import Body


@dataclass
class Paddle(Body):
    """
    Paddle entity, used for both the player and the CPU side.

    :ivar position (Position2D): Center of the paddle.
    :ivar size (Size2D): Size of the paddle.
    :ivar speed (float): Movement speed of the paddle (units/sec).
    """

    speed: float = 500.0
