"""World state snapshot and gesture phase."""

from touchfield.core.state.models import GesturePhase, WorldState

__all__ = [
    "GesturePhase",
    "WorldState",
]
