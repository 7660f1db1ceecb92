"""Geometry models: normalized points and axis-aligned rectangles.

Usage:
    p = Point(0.25, 0.5)
    region = Rect(x=0.2, y=0.4, width=0.1, height=0.2)
    region.top_left  # Point(0.2, 0.4)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A 2D point or vector in normalized viewport units."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def of(cls, value: Point | tuple[float, float]) -> Point:
        """Coerce an (x, y) pair into a Point. Points pass through unchanged."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle anchored at its top-left corner.

    Zero width or height is valid: a single contact produces a degenerate
    rectangle at that point.
    """

    x: float
    y: float
    width: float = 0.0
    height: float = 0.0

    @property
    def top_left(self) -> Point:
        return Point(self.x, self.y)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    def contains(self, point: Point) -> bool:
        """Check if point lies inside or on the edge of this rectangle."""
        return self.x <= point.x <= self.right and self.y <= point.y <= self.bottom
