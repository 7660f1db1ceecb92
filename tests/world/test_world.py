"""Tests for World: setup, input callbacks and snapshot ownership.

Critical Invariants:
- Missing collaborators fail fast at setup
- Pool size never changes across any input sequence
- Committed snapshots are replaced, never mutated
- Anchor is defined exactly when region is defined
"""

import pytest

from touchfield import (
    GesturePhase,
    GestureSettings,
    Point,
    Rect,
    RendererMissingError,
    SetupError,
    World,
)


def test_world_without_renderer_fails_fast():
    with pytest.raises(RendererMissingError, match="requires a renderer"):
        World(settings=GestureSettings(pool_size=1))


def test_world_with_non_renderer_fails_fast():
    with pytest.raises(SetupError, match="Renderer protocol"):
        World(renderer=object(), settings=GestureSettings(pool_size=1))  # type: ignore[arg-type]


def test_setup_publishes_initial_frame(make_world, renderer):
    world = make_world(pool_size=7)

    assert renderer.frame_numbers() == [0]
    assert len(renderer.last()) == 7
    assert world.pool_size == 7
    assert world.state.phase is GesturePhase.IDLE


def test_contact_start_activates_gesture_and_selects(make_world, place_things):
    world = make_world(pool_size=3)
    place_things(world, (0.0, 0.0), (0.5, 0.5), (0.9, 0.9))

    world.contact_start(1, (0.5, 0.5))

    state = world.state
    assert state.region == Rect(0.5, 0.5, 0.0, 0.0)
    assert state.anchor == Point(0.5, 0.5)
    assert [t.selected for t in state.things] == [False, True, False]


def test_contact_move_updates_region_but_not_anchor(world):
    world.contact_start(1, (0.5, 0.5))

    world.contact_move(1, (0.6, 0.5))

    assert world.state.region == Rect(0.6, 0.5, 0.0, 0.0)
    assert world.state.anchor == Point(0.5, 0.5)


def test_second_contact_recaptures_anchor(world):
    world.contact_start(1, (0.5, 0.5))
    world.contact_move(1, (0.6, 0.5))

    world.contact_start(2, (0.4, 0.7))

    assert world.state.region == Rect(0.4, 0.5, pytest.approx(0.2), pytest.approx(0.2))
    assert world.state.anchor == Point(0.4, 0.5)


def test_below_threshold_has_no_region_and_no_selection(make_world):
    world = make_world(pool_size=10, min_contacts=2, thing_radius=1.0)

    world.contact_start(1, (0.5, 0.5))

    assert world.state.region is None
    assert world.state.anchor is None
    assert not any(t.selected for t in world.state.things)

    world.contact_start(2, (0.6, 0.6))
    assert all(t.selected for t in world.state.things)

    world.contact_end(1)
    assert world.state.region is None
    assert not any(t.selected for t in world.state.things)


def test_move_on_unknown_contact_starts_gesture(world):
    world.contact_move("ghost", (0.3, 0.3))

    assert world.state.phase is GesturePhase.ACTIVE
    assert world.state.anchor == Point(0.3, 0.3)
    assert [s.contact_id for s in world.active_contacts()] == ["ghost"]


def test_end_on_unknown_contact_is_noop(world):
    before = world.state

    world.contact_end(99)

    assert world.state is before


def test_non_finite_sample_leaves_state_untouched(world):
    world.contact_start(1, (0.5, 0.5))
    before = world.state

    world.contact_move(1, (float("nan"), 0.5))
    world.contact_start(2, (0.1, float("inf")))

    assert world.state is before
    assert len(world.active_contacts()) == 1


def test_snapshots_are_replaced_not_mutated(world):
    first = world.state

    world.contact_start(1, (0.5, 0.5))
    second = world.state
    world.tick()

    assert first.region is None
    assert first.frame == 0
    assert first.version < second.version < world.state.version


def test_pool_size_is_invariant_across_events(world):
    events = [
        ("start", 1, (0.1, 0.1)),
        ("start", 2, (0.9, 0.9)),
        ("move", 1, (0.2, 0.3)),
        ("end", 2, None),
        ("move", 3, (0.5, 0.5)),
        ("end", 1, None),
        ("end", 1, None),
        ("end", 3, None),
    ]
    for kind, cid, pos in events:
        if kind == "start":
            world.contact_start(cid, pos)
        elif kind == "move":
            world.contact_move(cid, pos)
        else:
            world.contact_end(cid)
        world.tick()
        assert len(world.state.things) == 5

    assert world.active_contacts() == ()


def test_commit_rejects_pool_size_change(world):
    with pytest.raises(ValueError, match="Pool size is fixed"):
        world.commit(world.state.with_things(world.state.things[:-1]))


def test_reselect_on_move_disabled_keeps_selection_from_start(make_world, place_things):
    world = make_world(pool_size=2, reselect_on_move=False)
    place_things(world, (0.2, 0.2), (0.8, 0.8))

    world.contact_start(1, (0.2, 0.2))
    world.contact_move(1, (0.8, 0.8))

    assert [t.selected for t in world.state.things] == [True, False]


def test_reselect_on_move_enabled_follows_region(make_world, place_things):
    world = make_world(pool_size=2)
    place_things(world, (0.2, 0.2), (0.8, 0.8))

    world.contact_start(1, (0.2, 0.2))
    world.contact_move(1, (0.8, 0.8))

    assert [t.selected for t in world.state.things] == [False, True]


def test_things_at_hit_tests_current_snapshot(make_world, place_things):
    world = make_world(pool_size=2)
    place_things(world, (0.2, 0.2), (0.8, 0.8))

    assert [t.id for t in world.things_at((0.81, 0.79))] == [1]
    assert world.things_at(Point(0.5, 0.5)) == ()
