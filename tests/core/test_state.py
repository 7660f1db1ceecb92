"""Tests for the WorldState snapshot.

Critical Invariants:
- Anchor is defined if and only if region is defined
- Every mutation increments version and leaves the old snapshot untouched
- Unchanged fields are shared between versions
"""

import pytest

from touchfield.core.geometry import ORIGIN, Point, Rect
from touchfield.core.state import GesturePhase, WorldState
from touchfield.core.thing import Thing


@pytest.fixture
def things():
    return (
        Thing(id=0, position=Point(0.1, 0.1), radius=0.05),
        Thing(id=1, position=Point(0.9, 0.9), radius=0.05),
    )


def test_initial_state_is_idle(things):
    state = WorldState.initial(things)

    assert state.version == 0
    assert state.frame == 0
    assert state.phase is GesturePhase.IDLE
    assert state.offset == ORIGIN


def test_anchor_without_region_is_rejected():
    with pytest.raises(ValueError, match="anchor"):
        WorldState(anchor=Point(0.5, 0.5))


def test_region_without_anchor_is_rejected():
    with pytest.raises(ValueError, match="anchor"):
        WorldState(region=Rect(0.5, 0.5))


def test_with_gesture_activates_and_shares_things(things):
    state = WorldState.initial(things)

    active = state.with_gesture(Rect(0.5, 0.5), Point(0.5, 0.5))

    assert active.phase is GesturePhase.ACTIVE
    assert active.version == 1
    assert active.things is state.things
    assert state.region is None, "Old snapshot must not change"


def test_with_offset_and_things_increment_version(things):
    state = WorldState.initial(things)

    later = state.with_offset(Point(0.1, 0.0)).with_things(things[::-1])

    assert later.version == 2
    assert later.offset == Point(0.1, 0.0)
    assert later.things[0].id == 1
    assert state.offset == ORIGIN


def test_with_frame_advances_frame_counter(things):
    state = WorldState.initial(things).with_gesture(Rect(0.5, 0.5), Point(0.4, 0.5))

    ticked = state.with_frame(things, Point(0.5, 0.5), Point(0.1, 0.0))

    assert ticked.frame == 1
    assert ticked.version == state.version + 1
    assert ticked.anchor == Point(0.5, 0.5)
    assert ticked.region == state.region


def test_selected_lists_selected_things(things):
    state = WorldState.initial((things[0].with_selected(True), things[1]))

    assert [t.id for t in state.selected()] == [0]
