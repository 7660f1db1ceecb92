"""Tests for the rendering boundary."""

import pytest

from touchfield.config import GestureSettings
from touchfield.core.geometry import Point
from touchfield.core.thing import Thing
from touchfield.rendering import (
    PixelPlacement,
    RecordingRenderer,
    Renderer,
    RenderRecord,
    Viewport,
)


def record(i: int = 0, selected: bool = False) -> RenderRecord:
    return RenderRecord(id=i, position=Point(0.5, 0.5), radius=0.05, selected=selected)


def test_record_from_thing_copies_output_fields():
    thing = Thing(id=4, position=Point(0.2, 0.3), radius=0.05, selected=True, mass=0.9)

    assert RenderRecord.from_thing(thing) == RenderRecord(4, Point(0.2, 0.3), 0.05, True)


def test_viewport_normalizes_pixels():
    viewport = Viewport(width=200, height=100)

    assert viewport.normalize(50, 25) == Point(0.25, 0.25)


def test_viewport_places_square_box_centred_on_position():
    viewport = Viewport(width=1000, height=500)

    placement = viewport.place(record())

    assert placement == PixelPlacement(left=475.0, top=225.0, width=50.0, height=50.0)


@pytest.mark.parametrize("size", [(0, 100), (100, 0), (-1, 10)])
def test_viewport_rejects_non_positive_size(size):
    with pytest.raises(ValueError, match="positive"):
        Viewport(*size)


def test_recording_renderer_satisfies_protocol():
    assert isinstance(RecordingRenderer(), Renderer)


def test_recording_renderer_keeps_bounded_history():
    renderer = RecordingRenderer(max_frames=2)
    assert renderer.last() is None

    for frame in range(3):
        renderer.render_frame(frame, (record(frame),))

    assert renderer.frame_count == 2
    assert renderer.frame_numbers() == [1, 2]
    assert renderer.get_frame(0) is None
    assert renderer.get_frame(1) == (record(1),)
    assert renderer.last() == (record(2),)


def test_recording_renderer_clear():
    renderer = RecordingRenderer()
    renderer.render_frame(0, (record(),))

    renderer.clear()

    assert renderer.frame_count == 0


def test_recording_renderer_from_settings():
    renderer = RecordingRenderer.from_settings(GestureSettings(history_frames=3))

    for frame in range(5):
        renderer.render_frame(frame, ())

    assert renderer.frame_numbers() == [2, 3, 4]


def test_recording_renderer_rejects_empty_buffer():
    with pytest.raises(ValueError, match="max_frames"):
        RecordingRenderer(max_frames=0)
