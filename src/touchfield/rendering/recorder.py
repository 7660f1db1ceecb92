"""In-memory renderer keeping a bounded buffer of recent frames."""

from __future__ import annotations

from collections import deque

from touchfield.config import GestureSettings
from touchfield.rendering.models import RenderRecord


class RecordingRenderer:
    """Renderer for tests and headless hosts.

    Args:
        max_frames: Frames to keep. Older frames are evicted first.
    """

    def __init__(self, max_frames: int = 120) -> None:
        if max_frames < 1:
            raise ValueError(f"max_frames must be at least 1, got {max_frames}")
        self._frames: deque[tuple[int, tuple[RenderRecord, ...]]] = deque(maxlen=max_frames)

    @classmethod
    def from_settings(cls, settings: GestureSettings) -> RecordingRenderer:
        return cls(max_frames=settings.history_frames)

    def render_frame(self, frame: int, records: tuple[RenderRecord, ...]) -> None:
        self._frames.append((frame, records))

    @property
    def frame_count(self) -> int:
        """Number of frames currently buffered."""
        return len(self._frames)

    def last(self) -> tuple[RenderRecord, ...] | None:
        """Records of the most recent frame, or None before the first frame."""
        if not self._frames:
            return None
        return self._frames[-1][1]

    def get_frame(self, frame: int) -> tuple[RenderRecord, ...] | None:
        for number, records in reversed(self._frames):
            if number == frame:
                return records
        return None

    def frame_numbers(self) -> list[int]:
        return [number for number, _ in self._frames]

    def clear(self) -> None:
        self._frames.clear()
