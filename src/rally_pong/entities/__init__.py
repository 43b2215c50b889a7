"""
Entities package for Rally Pong.
This package contains all entity definitions used in the game.
"""

from __future__ import annotations

from .ball import Ball
from .body import Body
from .paddle import Paddle

__all__ = [
    "Ball",
    "Body",
    "Paddle",
]
