"""Thing functionality: the manipulable object model and its pure operations."""

from touchfield.core.thing.models import Thing
from touchfield.core.thing.operations import create_thing, intersects, move_by, touches

__all__ = [
    "Thing",
    "create_thing",
    "intersects",
    "move_by",
    "touches",
]
