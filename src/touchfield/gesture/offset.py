"""Gesture offset accumulator: the IDLE/ACTIVE state machine behind dragging.

The anchor is the region's top-left corner, captured when a gesture starts.
While ACTIVE, each frame's offset is the vector from the anchor to the current
corner. Every time the offset moves a selected Thing it leaks a fixed fraction
of itself, so the leak compounds with the number of selected Things.

Usage:
    accumulator = GestureOffsetAccumulator(decay=0.01)
    state = accumulator.transition(state, region)
    offset = accumulator.instantaneous(state.region, state.anchor)
"""

from __future__ import annotations

import logging

from touchfield.config import AnchorPolicy, GestureSettings
from touchfield.core.geometry import Point, Rect, scale, subtract, vector_between
from touchfield.core.state import GesturePhase, WorldState

logger = logging.getLogger(__name__)


class GestureOffsetAccumulator:
    """Derives the drag vector from anchor movement.

    Args:
        decay: Fraction of the offset removed per application (0.01 = 1%).
        policy: Whether the anchor rolls forward each active frame or stays
            at the gesture origin.
    """

    def __init__(
        self,
        decay: float = 0.01,
        policy: AnchorPolicy = AnchorPolicy.ROLL_FORWARD,
    ) -> None:
        if not 0.0 <= decay < 1.0:
            raise ValueError(f"Decay must be in [0.0, 1.0), got {decay}")
        self._decay = decay
        self._policy = policy

    @classmethod
    def from_settings(cls, settings: GestureSettings) -> GestureOffsetAccumulator:
        return cls(decay=settings.offset_decay, policy=settings.anchor_policy)

    @property
    def decay(self) -> float:
        return self._decay

    @property
    def policy(self) -> AnchorPolicy:
        return self._policy

    def transition(
        self,
        state: WorldState,
        region: Rect | None,
        recapture: bool = False,
    ) -> WorldState:
        """Move the state machine to match the new region.

        IDLE -> ACTIVE captures the region's top-left as anchor. ACTIVE -> IDLE
        clears the anchor but leaves the offset at its last value. Staying
        ACTIVE keeps the anchor unless recapture is set.

        Args:
            state: Current snapshot.
            region: Freshly computed gesture region, or None.
            recapture: Re-anchor at the region corner even when already ACTIVE.

        Returns:
            New snapshot carrying region and anchor.
        """
        if region is None:
            if state.phase is GesturePhase.ACTIVE:
                logger.debug("Gesture ended, offset held at %s", state.offset)
            return state.with_gesture(None, None)

        anchor = state.anchor
        if anchor is None:
            logger.debug("Gesture started at %s", region.top_left)
            anchor = region.top_left
        elif recapture:
            anchor = region.top_left
        return state.with_gesture(region, anchor)

    def instantaneous(self, region: Rect, anchor: Point) -> Point:
        """Vector from anchor to the region's current top-left corner."""
        return vector_between(anchor, region.top_left)

    def leak(self, offset: Point) -> Point:
        """Remove one decay step: ``offset - offset * decay``."""
        return subtract(offset, scale(offset, self._decay))

    def next_anchor(self, region: Rect, anchor: Point) -> Point:
        """Anchor to use for the following frame."""
        if self._policy is AnchorPolicy.ROLL_FORWARD:
            return region.top_left
        return anchor
