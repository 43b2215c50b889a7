"""
Geometry helpers for Rally Pong.

Plain functions over ``Position2D`` points: range remapping, segment
intersection and axis-aligned overlap, plus the immutable world bounds
every moving body is clamped against.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from mini_arcade_core.spaces.d2.geometry2d import Position2D


def remap_range(
    x: float, x_min: float, x_max: float, y_min: float, y_max: float
) -> float:
    """
    Linearly map ``x`` from ``[x_min, x_max]`` onto ``[y_min, y_max]``.

    Values outside the source interval extrapolate, nothing is clamped.

    :param x: Value to remap.
    :type x: float

    :param x_min: Start of the source interval.
    :type x_min: float

    :param x_max: End of the source interval.
    :type x_max: float

    :param y_min: Start of the target interval.
    :type y_min: float

    :param y_max: End of the target interval.
    :type y_max: float

    :return: The remapped value.
    :rtype: float

    :raises ValueError: If the source interval is empty.
    """
    if x_max == x_min:
        raise ValueError(
            f"Cannot remap from an empty interval [{x_min}, {x_max}]"
        )
    return y_min + ((y_max - y_min) * (x - x_min)) / (x_max - x_min)


def segment_intersection(
    a_start: Position2D,
    a_end: Position2D,
    b_start: Position2D,
    b_end: Position2D,
) -> Optional[Position2D]:
    """
    Intersection point of segments ``a`` and ``b``.

    Solved with the determinant form of the line-line intersection; the
    parametric coordinates ``t`` (along ``a``) and ``u`` (along ``b``) must
    both lie in ``[0, 1]`` for the point to be on the finite segments.

    :return: The intersection point, or None when the segments are
        parallel or do not reach each other.
    :rtype: Optional[Position2D]
    """
    denominator = (a_start.x - a_end.x) * (b_start.y - b_end.y) - (
        a_start.y - a_end.y
    ) * (b_start.x - b_end.x)

    # exact zero is the only parallel test
    if denominator == 0:
        return None

    t = (
        (a_start.x - b_start.x) * (b_start.y - b_end.y)
        - (a_start.y - b_start.y) * (b_start.x - b_end.x)
    ) / denominator
    u = (
        -(
            (a_start.x - a_end.x) * (a_start.y - b_start.y)
            - (a_start.y - a_end.y) * (a_start.x - b_start.x)
        )
        / denominator
    )

    if 0 <= t <= 1 and 0 <= u <= 1:
        return Position2D(
            a_start.x + t * (a_end.x - a_start.x),
            a_start.y + t * (a_end.y - a_start.y),
        )

    return None


def rect_overlap(
    a_min: Position2D,
    a_max: Position2D,
    b_min: Position2D,
    b_max: Position2D,
) -> bool:
    """
    Whether two axis-aligned boxes overlap.

    Boxes whose edges merely coincide do not overlap.
    """
    return (
        a_min.x < b_max.x
        and a_max.x > b_min.x
        and a_min.y < b_max.y
        and a_max.y > b_min.y
    )


@dataclass(frozen=True)
class WorldBounds:
    """
    Playable rectangle of the board.

    :ivar minimum (Position2D): Top-left corner of the play field.
    :ivar maximum (Position2D): Bottom-right corner of the play field.
    """

    minimum: Position2D
    maximum: Position2D

    def __post_init__(self):
        if (
            self.minimum.x >= self.maximum.x
            or self.minimum.y >= self.maximum.y
        ):
            raise ValueError(
                "Degenerate world bounds: "
                f"min={self.minimum.to_tuple()} max={self.maximum.to_tuple()}"
            )

    @classmethod
    def from_window(
        cls, width: float, height: float, score_bar_height: float = 0.0
    ) -> "WorldBounds":
        """
        Build the bounds of a window whose top strip is taken by the
        score bar.

        :param width: Window width.
        :type width: float

        :param height: Window height, score bar included.
        :type height: float

        :param score_bar_height: Height reserved at the top.
        :type score_bar_height: float

        :return: The play field bounds.
        :rtype: WorldBounds
        """
        return cls(
            minimum=Position2D(0.0, float(score_bar_height)),
            maximum=Position2D(float(width), float(height)),
        )

    @property
    def width(self) -> float:
        """Width of the play field."""
        return self.maximum.x - self.minimum.x

    @property
    def height(self) -> float:
        """Height of the play field."""
        return self.maximum.y - self.minimum.y

    def clamp_y(self, y: float, half_height: float) -> float:
        """
        Clamp a body's center Y so its box stays between the walls.

        :param y: Center Y of the body.
        :type y: float

        :param half_height: Half of the body's height.
        :type half_height: float

        :return: The clamped center Y.
        :rtype: float
        """
        low = self.minimum.y + half_height
        high = self.maximum.y - half_height
        return max(low, min(high, y))
