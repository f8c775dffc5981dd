"""
Startup Sequence

Timed whole-robot colors shown once on boot (red, green, blue, off, blue
with the default schedule). Runs regardless of serial traffic; a command
arriving meanwhile is simply overwritten by the next step.
"""

import asyncio
from typing import Callable, List

from models.color import Color
from models.config import StartupStep
from services.palette import Palette
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.ANIMATION)


class StartupSequence:
    """
    Steps are absolute offsets from start (ms), applied in order.

    Colors are looked up without touching the palette's last used color.
    """

    def __init__(self, steps: List[StartupStep], palette: Palette, apply: Callable[[Color], None]):
        self.steps = sorted(steps, key=lambda s: s.at_ms)
        self.palette = palette
        self._apply = apply
        self.applied: List[str] = []

    async def run(self) -> None:
        loop = asyncio.get_running_loop()
        started = loop.time()

        for step in self.steps:
            delay = started + step.at_ms / 1000.0 - loop.time()
            if delay > 0:
                await asyncio.sleep(delay)

            color = self.palette.get(step.color)
            log.debug(f"Startup step {step.color}", at_ms=step.at_ms)
            self._apply(color)
            self.applied.append(step.color)

        log.info("Startup sequence finished", steps=len(self.steps))
