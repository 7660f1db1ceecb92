"""Rendering models: per-frame output records and viewport conversion.

These are the only values that cross the output boundary. Hosts turn them
into pixels; the core never assumes how they are drawn.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from touchfield.core.geometry import Point
from touchfield.core.types import ThingId

if TYPE_CHECKING:
    from touchfield.core.thing import Thing


@dataclass(frozen=True, slots=True)
class RenderRecord:
    """What a Renderer needs to place one Thing for one frame."""

    id: ThingId
    position: Point
    radius: float
    selected: bool

    @classmethod
    def from_thing(cls, thing: Thing) -> RenderRecord:
        return cls(
            id=thing.id,
            position=thing.position,
            radius=thing.radius,
            selected=thing.selected,
        )


@dataclass(frozen=True, slots=True)
class PixelPlacement:
    """Absolute placement of a record's box, top-left corner first."""

    left: float
    top: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class Viewport:
    """Pixel dimensions of the input and drawing surface.

    Raises:
        ValueError: If either dimension is not positive.
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Viewport must have positive size, got {self.width}x{self.height}")

    def normalize(self, px: float, py: float) -> Point:
        """Convert pixel coordinates to normalized viewport units."""
        return Point(px / self.width, py / self.height)

    def place(self, record: RenderRecord) -> PixelPlacement:
        """Pixel box for record, centred on its position.

        The box is square: both sides are ``radius * width``.
        """
        size = record.radius * self.width
        cx = record.position.x * self.width
        cy = record.position.y * self.height
        return PixelPlacement(left=cx - size / 2, top=cy - size / 2, width=size, height=size)
