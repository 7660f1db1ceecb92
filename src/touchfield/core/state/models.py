"""World state snapshot: one immutable, versioned value.

Every mutation goes through one of the named ``with_*`` operations, each of
which returns a new WorldState with ``version`` incremented. Unchanged fields
(notably the Things tuple) are shared between versions, never copied.

Usage:
    state = WorldState.initial(things)
    state = state.with_gesture(region, anchor)
    state = state.with_offset(Point(0.1, 0.0))
    state.version  # 2
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto

from touchfield.core.geometry import ORIGIN, Point, Rect
from touchfield.core.thing import Thing


class GesturePhase(Enum):
    """Gesture state machine phase."""

    IDLE = auto()  # No region, no anchor
    ACTIVE = auto()  # Region and anchor both present


@dataclass(frozen=True, slots=True)
class WorldState:
    """Complete, consistent view of the world at one version.

    Raises:
        ValueError: If anchor and region are not both present or both absent.
    """

    version: int = 0
    things: tuple[Thing, ...] = ()
    region: Rect | None = None
    anchor: Point | None = None
    offset: Point = field(default=ORIGIN)
    frame: int = 0

    def __post_init__(self) -> None:
        if (self.region is None) != (self.anchor is None):
            raise ValueError(
                f"Gesture anchor must be defined exactly when region is: "
                f"region={self.region}, anchor={self.anchor}"
            )

    @classmethod
    def initial(cls, things: tuple[Thing, ...]) -> WorldState:
        return cls(things=things)

    @property
    def phase(self) -> GesturePhase:
        return GesturePhase.IDLE if self.region is None else GesturePhase.ACTIVE

    def selected(self) -> tuple[Thing, ...]:
        return tuple(t for t in self.things if t.selected)

    def with_things(self, things: tuple[Thing, ...]) -> WorldState:
        return replace(self, version=self.version + 1, things=things)

    def with_gesture(self, region: Rect | None, anchor: Point | None) -> WorldState:
        return replace(self, version=self.version + 1, region=region, anchor=anchor)

    def with_offset(self, offset: Point) -> WorldState:
        return replace(self, version=self.version + 1, offset=offset)

    def with_frame(
        self,
        things: tuple[Thing, ...],
        anchor: Point | None,
        offset: Point,
    ) -> WorldState:
        """Result of one frame tick, committed as a single version."""
        return replace(
            self,
            version=self.version + 1,
            things=things,
            anchor=anchor,
            offset=offset,
            frame=self.frame + 1,
        )
