"""Core functionalities: stateless primitives.

Architecture Note:
    core/ contains pure, stateless functionalities: geometry, the Thing model
    and the immutable WorldState snapshot. For stateful services, see
    tracking/, storage/, world/, and scheduling/.
"""

from touchfield.core.geometry import ORIGIN, Point, Rect
from touchfield.core.state import GesturePhase, WorldState
from touchfield.core.thing import Thing, create_thing, intersects, move_by, touches
from touchfield.core.types import ContactId, ThingId

__all__ = [
    # Types
    "ContactId",
    "ThingId",
    # Geometry
    "ORIGIN",
    "Point",
    "Rect",
    # Thing
    "Thing",
    "create_thing",
    "intersects",
    "move_by",
    "touches",
    # State
    "GesturePhase",
    "WorldState",
]
