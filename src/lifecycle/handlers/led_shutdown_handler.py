from __future__ import annotations

from typing import TYPE_CHECKING

from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

if TYPE_CHECKING:
    from services.strip_service import StripService

log = get_logger().for_category(LogCategory.SHUTDOWN)


class LEDShutdownHandler(IShutdownHandler):
    """
    Turns every strip off so nothing is left lit after exit.

    Runs AFTER animations stop. A strip that fails to clear is logged
    and the rest are still cleared.

    Priority: 100
    """

    def __init__(self, strip_service: StripService):
        self.strip_service = strip_service

    @property
    def shutdown_priority(self) -> int:
        return 100

    async def shutdown(self) -> None:
        log.info("Clearing LEDs on all strips...")

        failed = 0
        for strip in self.strip_service.get_all():
            try:
                strip.clear()
                strip.show()
                log.debug(f"Cleared {strip.name}")
            except Exception as e:
                failed += 1
                log.error(f"Error clearing {strip.name}: {e}")

        if failed:
            log.warn(f"{failed} strip(s) could not be cleared")
        else:
            log.info("All LEDs cleared")
