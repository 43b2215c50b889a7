"""
Controllers package for Rally Pong.
Each controller owns and mutates exactly one entity per frame.
"""

from __future__ import annotations

from .ball import BallController, SoundPlayer, Winner, serve_direction
from .cpu import CpuPaddleController, MoveState
from .player import PlayerPaddleController

__all__ = [
    "BallController",
    "CpuPaddleController",
    "MoveState",
    "PlayerPaddleController",
    "SoundPlayer",
    "Winner",
    "serve_direction",
]
