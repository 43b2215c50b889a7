"""
Pong scene Model
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    BaseIntent,
    BaseTickContext,
    BaseWorld,
)

from rally_pong.match import PongMatch


@dataclass
class PongWorld(BaseWorld):
    """
    Pong world state.

    :ivar viewport (tuple[float, float]): Viewport size (width, height).
    :ivar match (PongMatch): The running match.
    :ivar elapsed (float): Total game time in seconds, pauses included.
    """

    viewport: tuple[float, float]
    match: PongMatch
    elapsed: float = 0.0


@dataclass(frozen=True)
class PongIntent(BaseIntent):
    """
    Player intent for the Pong scene.

    :ivar move_up (bool): "Move up" is held.
    :ivar move_down (bool): "Move down" is held.
    :ivar resume (bool): Leave the end-of-rally pause.
    :ivar restart (bool): Zero the score and restart.
    :ivar quit (bool): Leave the game.
    """

    move_up: bool = False
    move_down: bool = False
    resume: bool = False
    restart: bool = False
    quit: bool = False


@dataclass
class PongTickContext(BaseTickContext[PongWorld, PongIntent]):
    """
    Context for a Pong scene tick.

    :ivar input_frame (InputFrame): Current input frame.
    :ivar dt (float): Delta time since last tick.

    :ivar world (PongWorld): Current Pong world state.
    :ivar commands (CommandQueue): Command queue.

    :ivar intent (Optional[PongIntent]): Player intent for this tick.
    """
