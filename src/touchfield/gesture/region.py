"""Gesture region: bounding box over every active contact."""

from __future__ import annotations

from collections.abc import Sequence

from touchfield.core.geometry import Point, Rect, bounding_box


def compute_region(positions: Sequence[Point], min_contacts: int = 1) -> Rect | None:
    """Compute the gesture region for the current contacts.

    Args:
        positions: Current contact positions, any order.
        min_contacts: Fewest contacts that still form a gesture.

    Returns:
        Bounding box over all positions, or None when fewer than
        min_contacts are present. One contact gives a zero-size box.
    """
    if len(positions) < min_contacts or not positions:
        return None
    return bounding_box(positions)
