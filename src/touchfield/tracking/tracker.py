"""Pointer tracking service.

PointerTracker is a stateful service that holds the live set of contacts.

Usage:
    tracker = PointerTracker()
    tracker.start(1, Point(0.5, 0.5))
    tracker.move(1, Point(0.6, 0.5))
    tracker.positions()  # (Point(0.6, 0.5),)
    tracker.end(1)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from touchfield.core.geometry import Point, clamp_point, is_finite
from touchfield.core.types import ContactId
from touchfield.tracking.models import PointerSample

logger = logging.getLogger(__name__)


class PointerTracker:
    """Live map of contact id to most recent position, in insertion order.

    No history is kept: each sample replaces the previous one for its id.
    Unknown ids are upserted on move and ignored on end, so out-of-order
    input never raises.
    """

    def __init__(self) -> None:
        self._positions: dict[ContactId, Point] = {}

    def start(self, contact_id: ContactId, position: Point) -> bool:
        """Record a new contact, overwriting the position if id is already held.

        Returns:
            True if the sample was accepted, False if it was discarded.
        """
        return self._store(contact_id, position)

    def move(self, contact_id: ContactId, position: Point) -> bool:
        """Update a contact's position, inserting it if the id is unknown.

        Returns:
            True if the sample was accepted, False if it was discarded.
        """
        return self._store(contact_id, position)

    def end(self, contact_id: ContactId) -> bool:
        """Forget a contact. Idempotent.

        Returns:
            True if the contact was being tracked.
        """
        return self._positions.pop(contact_id, None) is not None

    def count(self) -> int:
        return len(self._positions)

    def positions(self) -> tuple[Point, ...]:
        """Snapshot of current positions, oldest contact first."""
        return tuple(self._positions.values())

    def samples(self) -> tuple[PointerSample, ...]:
        """Snapshot of current samples, oldest contact first."""
        return tuple(PointerSample(cid, pos) for cid, pos in self._positions.items())

    def _store(self, contact_id: ContactId, position: Point) -> bool:
        if not is_finite(position):
            logger.debug("Discarding non-finite sample %r for contact %r", position, contact_id)
            return False
        self._positions[contact_id] = clamp_point(position)
        return True

    def __len__(self) -> int:
        return len(self._positions)

    def __contains__(self, contact_id: object) -> bool:
        return contact_id in self._positions

    def __iter__(self) -> Iterator[ContactId]:
        return iter(tuple(self._positions))
