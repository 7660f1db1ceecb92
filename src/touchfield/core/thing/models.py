"""Thing model: one manipulable object in the pool.

Usage:
    thing = Thing(id=0, position=Point(0.5, 0.5), radius=0.05)
    moved = thing.with_position(Point(0.6, 0.5))  # thing is unchanged
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from touchfield.core.geometry import ORIGIN, Point, Rect, square_around
from touchfield.core.types import ThingId


@dataclass(frozen=True, slots=True)
class Thing:
    """Immutable Thing record.

    Only ``position`` and ``selected`` ever change after creation, always by
    building a new Thing. ``velocity``, ``mass`` and ``acceleration`` are
    passive data: nothing integrates them.
    """

    id: ThingId
    position: Point
    radius: float
    selected: bool = False
    velocity: Point = field(default=ORIGIN)
    mass: float = 0.0
    acceleration: Point = field(default=ORIGIN)

    def bounds(self) -> Rect:
        """Square bound of this Thing, using radius as half side length."""
        return square_around(self.position, self.radius)

    def with_position(self, position: Point) -> Thing:
        return replace(self, position=position)

    def with_selected(self, selected: bool) -> Thing:
        if selected == self.selected:
            return self
        return replace(self, selected=selected)
