"""Pointer tracking models."""

from __future__ import annotations

from dataclasses import dataclass

from touchfield.core.geometry import Point
from touchfield.core.types import ContactId


@dataclass(frozen=True, slots=True)
class PointerSample:
    """Latest normalized position of one active contact."""

    contact_id: ContactId
    position: Point
