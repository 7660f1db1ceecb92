"""Renderer protocol: the output boundary of the frame loop.

Usage:
    class CanvasRenderer:
        def render_frame(self, frame: int, records: tuple[RenderRecord, ...]) -> None:
            for record in records:
                draw(viewport.place(record), highlighted=record.selected)

    world = World(renderer=CanvasRenderer())
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from touchfield.rendering.models import RenderRecord


@runtime_checkable
class Renderer(Protocol):
    """Receives every Thing once per frame.

    Implementations own visual placement: converting normalized positions to
    pixels, reacting to viewport resizes, styling selection. Every Thing is
    published every frame, including ones that did not move.
    """

    def render_frame(self, frame: int, records: tuple[RenderRecord, ...]) -> None:
        """Draw one frame.

        Args:
            frame: Frame number, starting at 0 for the setup render.
            records: One record per Thing, in id order.
        """
        ...
