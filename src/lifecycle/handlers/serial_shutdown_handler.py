from __future__ import annotations

from typing import Protocol

from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)


class _Closable(Protocol):
    def close(self) -> None: ...


class SerialShutdownHandler(IShutdownHandler):
    """
    Closes the serial link (device reader or host writer).

    Priority: 80 (after LEDs, so the last frame is already on the strips)
    """

    def __init__(self, link: _Closable):
        self.link = link

    @property
    def shutdown_priority(self) -> int:
        return 80

    async def shutdown(self) -> None:
        log.info("Closing serial link...")
        self.link.close()
