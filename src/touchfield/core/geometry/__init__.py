"""Geometry primitives: points, rectangles and the pure operations over them."""

from touchfield.core.geometry.models import ORIGIN, Point, Rect
from touchfield.core.geometry.operations import (
    add,
    bounding_box,
    clamp,
    clamp_point,
    distance,
    is_finite,
    magnitude,
    rects_intersect,
    scale,
    square_around,
    subtract,
    vector_between,
)

__all__ = [
    "ORIGIN",
    "Point",
    "Rect",
    "add",
    "bounding_box",
    "clamp",
    "clamp_point",
    "distance",
    "is_finite",
    "magnitude",
    "rects_intersect",
    "scale",
    "square_around",
    "subtract",
    "vector_between",
]
