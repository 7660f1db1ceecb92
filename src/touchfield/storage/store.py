"""Object store: the fixed pool of Things and the operations over it.

The store creates the pool once and then works on Things tuples taken from
the current WorldState, returning new tuples. It never adds or removes a
Thing after creation.

Usage:
    store = ObjectStore(radius=0.05, seed=7)
    things = store.create_pool(50)
    things = store.recompute_selection(things, region)
    things, offset = store.apply_offset(things, offset, accumulator.leak)
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from touchfield.config import GestureSettings
from touchfield.core.geometry import Point, Rect
from touchfield.core.thing import Thing, create_thing, intersects, move_by, touches
from touchfield.rendering.models import RenderRecord

logger = logging.getLogger(__name__)


class ObjectStore:
    """Creates and updates the Thing pool.

    Args:
        radius: Radius given to every Thing.
        seed: Seed for the random source used by create_pool.
    """

    def __init__(self, radius: float = 0.05, seed: int | None = None) -> None:
        if radius <= 0:
            raise ValueError(f"Radius must be positive, got {radius}")
        self._radius = radius
        self._rng = random.Random(seed)

    @classmethod
    def from_settings(cls, settings: GestureSettings) -> ObjectStore:
        return cls(radius=settings.thing_radius, seed=settings.seed)

    def create_pool(self, size: int) -> tuple[Thing, ...]:
        """Create size Things with ids 0..size-1 at random positions."""
        if size < 0:
            raise ValueError(f"Pool size must be non-negative, got {size}")
        things = tuple(create_thing(i, self._radius, self._rng) for i in range(size))
        logger.debug("Created pool of %d things", size)
        return things

    def recompute_selection(
        self, things: tuple[Thing, ...], region: Rect | None
    ) -> tuple[Thing, ...]:
        """Select exactly the Things intersecting region. None deselects all."""
        return tuple(t.with_selected(intersects(t, region)) for t in things)

    def apply_offset(
        self,
        things: tuple[Thing, ...],
        offset: Point,
        leak: Callable[[Point], Point] | None = None,
    ) -> tuple[tuple[Thing, ...], Point]:
        """Move every selected Thing by the running offset.

        Selected Things are visited in pool order. Each one moves by the
        current offset (clamped into the unit square), then the offset is
        passed through leak before the next one.

        Args:
            things: Current pool.
            offset: Offset for the first selected Thing.
            leak: Decay applied after each selected Thing. None keeps the
                offset constant.

        Returns:
            Tuple of (updated pool, offset after the last leak).
        """
        moved: list[Thing] = []
        for thing in things:
            if thing.selected:
                thing = move_by(thing, offset)
                if leak is not None:
                    offset = leak(offset)
            moved.append(thing)
        return tuple(moved), offset

    def things_at(self, things: tuple[Thing, ...], point: Point) -> tuple[Thing, ...]:
        """Things whose circle contains point."""
        return tuple(t for t in things if touches(t, point))

    def render_records(self, things: tuple[Thing, ...]) -> tuple[RenderRecord, ...]:
        """One record per Thing, selected or not."""
        return tuple(RenderRecord.from_thing(t) for t in things)
