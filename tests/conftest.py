"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from touchfield import GestureSettings, Point, RecordingRenderer, Thing, World


@pytest.fixture
def renderer():
    """Fresh RecordingRenderer."""
    return RecordingRenderer(max_frames=50)


@pytest.fixture
def make_world(renderer):
    """Factory building a World with explicit settings and the shared renderer."""

    def _make(**overrides) -> World:
        overrides.setdefault("seed", 0)
        return World(renderer=renderer, settings=GestureSettings(**overrides))

    return _make


@pytest.fixture
def world(make_world):
    """World with a small seeded pool."""
    return make_world(pool_size=5)


@pytest.fixture
def place_things():
    """Replace a world's pool with Things at known positions.

    The number of positions must match the world's pool size.
    """

    def _place(world: World, *positions: tuple[float, float], radius: float = 0.05) -> None:
        things = tuple(
            Thing(id=i, position=Point(x, y), radius=radius) for i, (x, y) in enumerate(positions)
        )
        world.commit(world.state.with_things(things))

    return _place
