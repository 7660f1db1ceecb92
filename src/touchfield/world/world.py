"""World: single owner of state, input callbacks and the frame tick.

Usage:
    world = World(renderer=RecordingRenderer(), settings=GestureSettings(pool_size=10))

    # Input callbacks (positions pre-normalized to [0, 1])
    world.contact_start(1, (0.5, 0.5))
    world.contact_move(1, (0.6, 0.5))
    world.contact_end(1)

    # Once per display tick
    world.tick()

    # Readers always see one consistent snapshot
    state = world.state
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from touchfield.config import GestureSettings
from touchfield.core.geometry import Point
from touchfield.core.state import WorldState
from touchfield.core.thing import Thing
from touchfield.core.types import ContactId
from touchfield.gesture import GestureOffsetAccumulator, compute_region
from touchfield.rendering import Renderer
from touchfield.storage import ObjectStore
from touchfield.tracking import PointerSample, PointerTracker

if TYPE_CHECKING:
    from touchfield.scheduling import FrameStrategy

logger = logging.getLogger(__name__)


class SetupError(Exception):
    """Raised when a World cannot be constructed from its collaborators."""

    pass


class RendererMissingError(SetupError):
    """Raised when no usable renderer is supplied."""

    pass


class World:
    """Owns the WorldState snapshot and every service that derives it.

    Input callbacks and ticks each build a new snapshot and swap it in with a
    single assignment, so ``world.state`` never exposes a half-applied update.
    The per-frame logic is delegated to the injected frame strategy.

    Args:
        renderer: Output target receiving every Thing once per frame.
        settings: Startup configuration. Defaults to GestureSettings() which
            reads TOUCHFIELD_* environment variables.
        loop: Frame strategy. Defaults to FrameLoop.

    Raises:
        RendererMissingError: If renderer is None or lacks render_frame().
    """

    def __init__(
        self,
        renderer: Renderer | None = None,
        settings: GestureSettings | None = None,
        loop: FrameStrategy | None = None,
    ):
        if renderer is None:
            raise RendererMissingError("World requires a renderer")
        if not isinstance(renderer, Renderer):
            raise RendererMissingError(
                f"{type(renderer).__name__} does not implement the Renderer protocol"
            )
        self._renderer = renderer
        self._settings = settings or GestureSettings()
        # Import here to avoid circular dependency at module level
        if loop is None:
            from touchfield.scheduling import FrameLoop

            loop = FrameLoop()
        self._loop = loop

        self._tracker = PointerTracker()
        self._store = ObjectStore.from_settings(self._settings)
        self._accumulator = GestureOffsetAccumulator.from_settings(self._settings)

        self._pool_size = self._settings.pool_size
        self._state = WorldState.initial(self._store.create_pool(self._pool_size))
        logger.info(
            "World ready: %d things, min_contacts=%d, anchor_policy=%s",
            self._pool_size,
            self._settings.min_contacts,
            self._settings.anchor_policy.value,
        )
        self.publish()

    @property
    def state(self) -> WorldState:
        """Current snapshot. Never mutated; replaced on every change."""
        return self._state

    @property
    def settings(self) -> GestureSettings:
        return self._settings

    @property
    def store(self) -> ObjectStore:
        return self._store

    @property
    def accumulator(self) -> GestureOffsetAccumulator:
        return self._accumulator

    @property
    def pool_size(self) -> int:
        return self._pool_size

    def contact_start(self, contact_id: ContactId, position: Point | tuple[float, float]) -> None:
        """Handle a new contact: track it, re-anchor the gesture, reselect."""
        if not self._tracker.start(contact_id, Point.of(position)):
            return
        self._refresh(recapture=True, reselect=True)

    def contact_move(self, contact_id: ContactId, position: Point | tuple[float, float]) -> None:
        """Handle a contact moving. Unknown ids are treated as new contacts."""
        if not self._tracker.move(contact_id, Point.of(position)):
            return
        self._refresh(reselect=self._settings.reselect_on_move)

    def contact_end(self, contact_id: ContactId) -> None:
        """Handle a contact lifting. No-op for ids that are not tracked."""
        if not self._tracker.end(contact_id):
            return
        self._refresh(reselect=True)

    def active_contacts(self) -> tuple[PointerSample, ...]:
        return self._tracker.samples()

    def things_at(self, position: Point | tuple[float, float]) -> tuple[Thing, ...]:
        """Things whose circle contains position, from the current snapshot."""
        return self._store.things_at(self._state.things, Point.of(position))

    def tick(self) -> None:
        """Advance one frame. Delegates to the injected frame strategy."""
        self._loop.tick(self)

    def commit(self, state: WorldState) -> None:
        """Replace the current snapshot.

        Raises:
            ValueError: If state would change the pool size.
        """
        if len(state.things) != self._pool_size:
            raise ValueError(
                f"Pool size is fixed at {self._pool_size}, got {len(state.things)} things"
            )
        self._state = state

    def publish(self) -> None:
        """Send every Thing of the current snapshot to the renderer."""
        state = self._state
        self._renderer.render_frame(state.frame, self._store.render_records(state.things))

    def _refresh(self, recapture: bool = False, reselect: bool = True) -> None:
        region = compute_region(self._tracker.positions(), self._settings.min_contacts)
        state = self._accumulator.transition(self._state, region, recapture=recapture)
        if reselect:
            state = state.with_things(self._store.recompute_selection(state.things, region))
        self.commit(state)
