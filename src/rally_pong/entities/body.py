"""
Shared body record for every moving thing on the board.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D


@dataclass
class Body:
    """
    Position and sprite size of an entity.

    The bounding box is derived, always axis-aligned and centered on
    ``position``.

    :ivar position (Position2D): Center of the body.
    :ivar size (Size2D): Sprite size of the body.
    """

    position: Position2D
    size: Size2D

    @property
    def half_width(self) -> float:
        """Half of the sprite width."""
        return self.size.width / 2

    @property
    def half_height(self) -> float:
        """Half of the sprite height."""
        return self.size.height / 2

    @property
    def top_left(self) -> Position2D:
        """Top-left corner of the bounding box."""
        return Position2D(
            self.position.x - self.half_width,
            self.position.y - self.half_height,
        )

    @property
    def bottom_right(self) -> Position2D:
        """Bottom-right corner of the bounding box."""
        return Position2D(
            self.position.x + self.half_width,
            self.position.y + self.half_height,
        )

    @property
    def top(self) -> float:
        """Y of the top edge."""
        return self.position.y - self.half_height

    @property
    def bottom(self) -> float:
        """Y of the bottom edge."""
        return self.position.y + self.half_height

    @property
    def left(self) -> float:
        """X of the left edge."""
        return self.position.x - self.half_width

    @property
    def right(self) -> float:
        """X of the right edge."""
        return self.position.x + self.half_width

    def move_to(self, x: float, y: float):
        """Place the body's center at ``(x, y)``."""
        self.position.x = x
        self.position.y = y
