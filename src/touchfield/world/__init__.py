"""World state ownership and input handling.

Architecture Note:
    world/ is a stateful service layer. It owns the current WorldState and
    coordinates tracking, gesture derivation, storage and rendering. Unlike
    core/ (stateless functionalities), world/ swaps snapshots at runtime.
"""

from touchfield.world.world import RendererMissingError, SetupError, World

__all__ = [
    "RendererMissingError",
    "SetupError",
    "World",
]
