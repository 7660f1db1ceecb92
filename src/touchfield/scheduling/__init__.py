"""Frame scheduling: the per-tick strategy and host drivers."""

from touchfield.scheduling.driver import FrameDriver
from touchfield.scheduling.loop import FrameLoop, FrameStrategy

__all__ = [
    "FrameDriver",
    "FrameLoop",
    "FrameStrategy",
]
