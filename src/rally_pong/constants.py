"""
Constants for Rally Pong.
"""

from __future__ import annotations

from pathlib import Path

ASSETS_ROOT = Path(__file__).resolve().parent / "assets"

FPS = 60

# Board layout: a score bar strip on top, the play field below it
SCORE_BAR_HEIGHT = 47
BOARD_SIZE = (802, 455)
WINDOW_SIZE = (BOARD_SIZE[0], SCORE_BAR_HEIGHT + BOARD_SIZE[1])

PADDLE_SIZE = (20, 100)
BALL_SIZE = (16, 16)

PLAYER_SPEED = 500.0
ENEMY_SPEED = 500.0
BALL_SPEED = 400.0
BALL_SPEED_INCREMENT = 2.0

ENEMY_REACTION_TIME = 0.5

# Max |vy| of a freshly served ball
SERVE_MAX_VERTICAL = 0.7

# Half-length of the segments the CPU uses to project the ball path
PROJECTION_LENGTH = 10000.0

COLLISION_SOUNDS = (
    "pongblipf4",
    "pongblipg5",
    "pongblipa3",
    "pongblipa4",
)

BACKGROUND = (100, 149, 237)
BOARD_COLOR = (20, 20, 20)
SCORE_BAR_COLOR = (45, 45, 45)
WHITE = (255, 255, 255)
DIM = (200, 200, 200)
