"""Rendering boundary: output records, the Renderer protocol and helpers.

Usage:
    from touchfield.rendering import RecordingRenderer, Viewport

    renderer = RecordingRenderer(max_frames=10)
    viewport = Viewport(1920, 1080)
    point = viewport.normalize(960, 540)  # Point(0.5, 0.5)
"""

from touchfield.rendering.models import PixelPlacement, RenderRecord, Viewport
from touchfield.rendering.protocol import Renderer
from touchfield.rendering.recorder import RecordingRenderer

__all__ = [
    "PixelPlacement",
    "RecordingRenderer",
    "RenderRecord",
    "Renderer",
    "Viewport",
]
