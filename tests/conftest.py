"""
Shared fixtures for the Rally Pong tests.
"""

from __future__ import annotations

import random

import pytest
from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from rally_pong.entities import Ball, Paddle
from rally_pong.geometry import WorldBounds


class RecordingAudio:
    """Audio sink that remembers what it was asked to play."""

    def __init__(self):
        self.played: list[str] = []

    def play(self, name: str):
        self.played.append(name)


@pytest.fixture
def bounds() -> WorldBounds:
    # 800x500 window with a 50px score bar on top
    return WorldBounds.from_window(800, 500, 50)


@pytest.fixture
def audio() -> RecordingAudio:
    return RecordingAudio()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def make_ball():
    def _make(x, y, vx, vy, speed=400.0, sounds=("blip",)) -> Ball:
        return Ball(
            position=Position2D(x, y),
            size=Size2D(10, 10),
            direction=Velocity2D(vx, vy),
            speed=speed,
            sounds=list(sounds),
        )

    return _make


@pytest.fixture
def make_paddle():
    def _make(x, y, speed=500.0) -> Paddle:
        return Paddle(
            position=Position2D(x, y), size=Size2D(20, 100), speed=speed
        )

    return _make
