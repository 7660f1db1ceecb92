"""Pure geometry operations over Points and Rects."""

from __future__ import annotations

import math
from collections.abc import Iterable

from touchfield.core.geometry.models import Point, Rect


def add(a: Point, b: Point) -> Point:
    """Component-wise sum of two vectors."""
    return Point(a.x + b.x, a.y + b.y)


def subtract(a: Point, b: Point) -> Point:
    """Component-wise difference ``a - b``."""
    return Point(a.x - b.x, a.y - b.y)


def scale(v: Point, factor: float) -> Point:
    return Point(v.x * factor, v.y * factor)


def magnitude(v: Point) -> float:
    return math.hypot(v.x, v.y)


def distance(a: Point, b: Point) -> float:
    return magnitude(subtract(a, b))


def vector_between(start: Point, end: Point) -> Point:
    """Convert the line from start to end into its cartesian vector."""
    return subtract(end, start)


def clamp(value: float, lower: float = 0.0, upper: float = 1.0) -> float:
    return max(lower, min(upper, value))


def clamp_point(point: Point, lower: float = 0.0, upper: float = 1.0) -> Point:
    """Clamp each axis of point into [lower, upper]."""
    return Point(clamp(point.x, lower, upper), clamp(point.y, lower, upper))


def is_finite(point: Point) -> bool:
    return math.isfinite(point.x) and math.isfinite(point.y)


def bounding_box(points: Iterable[Point]) -> Rect:
    """Smallest axis-aligned rectangle enclosing every point.

    Args:
        points: At least one point.

    Returns:
        Rect spanning min/max x and min/max y. A single point yields a
        zero-size Rect at that point.

    Raises:
        ValueError: If points is empty.
    """
    xs: list[float] = []
    ys: list[float] = []
    for p in points:
        xs.append(p.x)
        ys.append(p.y)
    if not xs:
        raise ValueError("Cannot compute bounding box of no points")
    left, top = min(xs), min(ys)
    return Rect(x=left, y=top, width=max(xs) - left, height=max(ys) - top)


def square_around(center: Point, half_extent: float) -> Rect:
    """Square Rect centred on center with the given half side length."""
    return Rect(
        x=center.x - half_extent,
        y=center.y - half_extent,
        width=half_extent * 2,
        height=half_extent * 2,
    )


def rects_intersect(a: Rect, b: Rect) -> bool:
    """Check if two rectangles overlap. Touching edges count as overlap."""
    return a.x <= b.right and b.x <= a.right and a.y <= b.bottom and b.y <= a.bottom

