"""Gesture derivation: region over contacts and the drag offset state machine."""

from touchfield.gesture.offset import GestureOffsetAccumulator
from touchfield.gesture.region import compute_region

__all__ = [
    "GestureOffsetAccumulator",
    "compute_region",
]
