from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, List, Optional

from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

if TYPE_CHECKING:
    from animations.engine import AnimationEngine

log = get_logger().for_category(LogCategory.SHUTDOWN)


class AnimationShutdownHandler(IShutdownHandler):
    """
    Stops every animation task (and other pixel writers such as the
    startup sequence) before the LEDs are cleared.

    Priority: 130 (runs first)
    """

    def __init__(self, engine: AnimationEngine, pixel_tasks: Optional[List[asyncio.Task]] = None):
        self.engine = engine
        self.pixel_tasks = pixel_tasks or []

    @property
    def shutdown_priority(self) -> int:
        return 130

    async def shutdown(self) -> None:
        pending = [t for t in self.pixel_tasks if not t.done()]
        for t in pending:
            t.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
            log.debug(f"Cancelled {len(pending)} pixel task(s)")

        if not self.engine.tasks:
            log.debug("No animations running")
            return

        log.info(f"Stopping {len(self.engine.tasks)} animation(s)...")
        await self.engine.stop_all()
