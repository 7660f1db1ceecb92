"""Frame loop: the per-tick update that drags selected Things.

Usage:
    world = World(renderer=renderer)              # uses FrameLoop by default
    world = World(renderer=renderer, loop=FrameLoop())
    world.tick()                                   # host calls once per display tick
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from touchfield.world.world import World


@runtime_checkable
class FrameStrategy(Protocol):
    """Protocol for pluggable per-frame update strategies.

    The strategy is injected into World and handles everything that happens
    in one tick. It must commit through ``world.commit`` and publish through
    ``world.publish`` so that the World stays the single owner of state.
    """

    def tick(self, world: World) -> None:
        """Advance world by one frame.

        Args:
            world: World providing state, store, accumulator, commit() and publish()
        """
        ...


class FrameLoop:
    """Default strategy: offset, move selected, roll anchor, render.

    With no gesture region the Things are re-rendered unchanged. Otherwise the
    offset is recomputed from the anchor, applied to every selected Thing
    (leaking once per Thing), the anchor is advanced per the anchor policy,
    and every Thing is rendered. Each tick commits exactly one new snapshot.
    """

    def tick(self, world: World) -> None:
        state = world.state

        if state.region is None or state.anchor is None:
            world.commit(state.with_frame(state.things, state.anchor, state.offset))
            world.publish()
            return

        accumulator = world.accumulator
        offset = accumulator.instantaneous(state.region, state.anchor)
        things, offset = world.store.apply_offset(state.things, offset, accumulator.leak)
        anchor = accumulator.next_anchor(state.region, state.anchor)

        world.commit(state.with_frame(things, anchor, offset))
        world.publish()
