"""Pointer tracking: the live set of active contacts."""

from touchfield.tracking.models import PointerSample
from touchfield.tracking.tracker import PointerTracker

__all__ = [
    "PointerSample",
    "PointerTracker",
]
