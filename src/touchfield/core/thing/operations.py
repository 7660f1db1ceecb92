"""Thing operations: creation, intersection and movement.

All functions are pure and return new Things rather than mutating.
"""

from __future__ import annotations

import random

from touchfield.core.geometry import (
    Point,
    Rect,
    add,
    clamp_point,
    distance,
    rects_intersect,
)
from touchfield.core.thing.models import Thing
from touchfield.core.types import ThingId


def create_thing(thing_id: ThingId, radius: float, rng: random.Random) -> Thing:
    """Create a Thing at a uniformly random position with random mass.

    Args:
        thing_id: Identifier to assign.
        radius: Fixed radius in normalized units.
        rng: Random source, so pools can be reproduced from a seed.

    Returns:
        Unselected Thing with zero velocity and acceleration.
    """
    position = Point(rng.random(), rng.random())
    return Thing(id=thing_id, position=position, radius=radius, mass=rng.random())


def intersects(thing: Thing, region: Rect | None) -> bool:
    """Check if the Thing's square bound overlaps region.

    Returns:
        False when there is no region, otherwise the box-vs-box overlap result.
    """
    if region is None:
        return False
    return rects_intersect(thing.bounds(), region)


def touches(thing: Thing, point: Point) -> bool:
    """Check if point falls within the Thing's circle."""
    return distance(thing.position, point) <= thing.radius


def move_by(thing: Thing, offset: Point) -> Thing:
    """Translate thing by offset, clamping the result into the unit square."""
    return thing.with_position(clamp_point(add(thing.position, offset)))
