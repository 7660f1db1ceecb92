"""touchfield: multi-touch gesture dragging for a pool of rendered Things.

Usage:
    from touchfield import GestureSettings, RecordingRenderer, World

    renderer = RecordingRenderer()
    world = World(renderer=renderer, settings=GestureSettings(pool_size=20, seed=1))

    # Pointer callbacks from the host, pre-normalized to [0, 1]
    world.contact_start("finger-1", (0.40, 0.40))
    world.contact_move("finger-1", (0.45, 0.42))

    # Once per display tick
    world.tick()
    for record in renderer.last():
        ...  # id, position, radius, selected
"""

__version__ = "0.1.0"

# Configuration
from touchfield.config import AnchorPolicy, GestureSettings

# Core primitives
from touchfield.core import (
    ORIGIN,
    ContactId,
    GesturePhase,
    Point,
    Rect,
    Thing,
    ThingId,
    WorldState,
)

# Gesture derivation
from touchfield.gesture import GestureOffsetAccumulator, compute_region

# Logging
from touchfield.logging_config import setup_logging

# Rendering boundary
from touchfield.rendering import (
    PixelPlacement,
    RecordingRenderer,
    Renderer,
    RenderRecord,
    Viewport,
)

# Scheduling
from touchfield.scheduling import FrameDriver, FrameLoop, FrameStrategy

# Storage
from touchfield.storage import ObjectStore

# Tracking
from touchfield.tracking import PointerSample, PointerTracker

# World
from touchfield.world import RendererMissingError, SetupError, World

__all__ = [
    # Version
    "__version__",
    # Config
    "AnchorPolicy",
    "GestureSettings",
    # Core
    "ORIGIN",
    "ContactId",
    "ThingId",
    "Point",
    "Rect",
    "Thing",
    "GesturePhase",
    "WorldState",
    # Tracking
    "PointerSample",
    "PointerTracker",
    # Gesture
    "GestureOffsetAccumulator",
    "compute_region",
    # Storage
    "ObjectStore",
    # Rendering
    "Renderer",
    "RenderRecord",
    "RecordingRenderer",
    "Viewport",
    "PixelPlacement",
    # Scheduling
    "FrameLoop",
    "FrameStrategy",
    "FrameDriver",
    # World
    "World",
    "SetupError",
    "RendererMissingError",
    # Logging
    "setup_logging",
]
