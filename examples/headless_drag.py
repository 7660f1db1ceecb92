"""Headless two-finger drag over a pool of Things.

Simulates a host: pointer events arrive in pixels, are normalized against the
viewport, and a fixed-rate driver ticks the world while a renderer prints the
pixel placement of every selected Thing.

Run with:
    python examples/headless_drag.py
"""

import asyncio
import logging

from touchfield import (
    FrameDriver,
    GestureSettings,
    RenderRecord,
    Viewport,
    World,
    setup_logging,
)

VIEWPORT = Viewport(width=1280, height=720)


class PixelPrinter:
    """Renderer that prints where selected Things would be drawn."""

    def __init__(self, viewport: Viewport) -> None:
        self._viewport = viewport

    def render_frame(self, frame: int, records: tuple[RenderRecord, ...]) -> None:
        selected = [r for r in records if r.selected]
        if not selected:
            return
        placements = []
        for record in selected:
            box = self._viewport.place(record)
            placements.append(f"#{record.id}@({box.left:.0f},{box.top:.0f})")
        print(f"frame {frame}: {', '.join(placements)}")


async def drag(world: World) -> None:
    """Press two fingers around the centre and sweep them to the right."""
    driver = FrameDriver(world)
    world.contact_start(1, VIEWPORT.normalize(560, 300))
    world.contact_start(2, VIEWPORT.normalize(720, 420))
    await driver.run_async(fps=60, frames=2)

    for step in range(1, 11):
        dx = step * 20
        world.contact_move(1, VIEWPORT.normalize(560 + dx, 300))
        world.contact_move(2, VIEWPORT.normalize(720 + dx, 420))
        await driver.run_async(fps=60, frames=1)

    world.contact_end(1)
    world.contact_end(2)
    await driver.run_async(fps=60, frames=2)
    print(f"{driver.ticks} ticks, final offset {world.state.offset}")


def main() -> None:
    setup_logging(logging.DEBUG)
    settings = GestureSettings(pool_size=30, seed=3)
    world = World(renderer=PixelPrinter(VIEWPORT), settings=settings)
    asyncio.run(drag(world))


if __name__ == "__main__":
    main()
