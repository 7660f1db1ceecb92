"""Host driver: calls World.tick() on a schedule.

The core has no timer of its own. A windowed host calls ``world.tick()`` from
its display refresh callback; headless hosts and tests can use FrameDriver.

Usage:
    driver = FrameDriver(world)
    driver.run(10)                          # ten ticks, back to back
    await driver.run_async(fps=60, frames=120)
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from touchfield.world.world import World


class FrameDriver:
    """Drives a World's frame loop synchronously or at a fixed rate.

    Args:
        world: World to tick.
    """

    def __init__(self, world: World) -> None:
        self._world = world
        self._ticks = 0

    @property
    def ticks(self) -> int:
        """Total ticks issued by this driver."""
        return self._ticks

    def run(self, frames: int) -> int:
        """Tick frames times without waiting between ticks.

        Returns:
            Number of ticks issued.
        """
        if frames < 0:
            raise ValueError(f"Frame count must be non-negative, got {frames}")
        for _ in range(frames):
            self._tick()
        return frames

    async def run_async(self, fps: float = 60.0, frames: int | None = None) -> int:
        """Tick at roughly fps until frames ticks are done, or forever if None.

        Sleeps are scheduled against the event loop clock so slow ticks do not
        accumulate drift. Cancelling the task stops the loop between ticks.

        Returns:
            Number of ticks issued.
        """
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        interval = 1.0 / fps
        loop = asyncio.get_running_loop()
        next_at = loop.time()
        count = 0
        while frames is None or count < frames:
            self._tick()
            count += 1
            next_at += interval
            await asyncio.sleep(max(0.0, next_at - loop.time()))
        return count

    def _tick(self) -> None:
        self._world.tick()
        self._ticks += 1
