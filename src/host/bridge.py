"""
Host Bridge - fixed-rate tick loop: sample, encode, transmit

Every tick sends one command, whether or not anything changed; the link
is overwrite-latest, nothing is queued or retried.
"""

import asyncio

from host.command_encoder import CommandEncoder
from services.serial_command_writer import SerialCommandWriter
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HOST)


class HostBridge:

    def __init__(self, encoder: CommandEncoder, writer: SerialCommandWriter, tick_ms: int = 50):
        self.encoder = encoder
        self.writer = writer
        self.tick_interval = tick_ms / 1000.0
        self.ticks = 0
        self.last_color = None

    def tick(self) -> bool:
        command = self.encoder.next_command()
        if command.color != self.last_color:
            log.info(f"Robot color → {command.color}")
            self.last_color = command.color
        self.ticks += 1
        return self.writer.send(command)

    async def run(self) -> None:
        """Tick until cancelled; deadlines do not drift with tick duration"""
        loop = asyncio.get_running_loop()
        next_deadline = loop.time()
        log.info("Host bridge running", tick_ms=int(self.tick_interval * 1000))

        try:
            while True:
                try:
                    self.tick()
                except Exception as e:
                    log.error(f"Host tick failed: {e}", exc_info=True)

                next_deadline += self.tick_interval
                delay = next_deadline - loop.time()
                if delay < 0:
                    # fell behind, resync instead of bursting
                    next_deadline = loop.time()
                    delay = 0
                await asyncio.sleep(delay)
        except asyncio.CancelledError:
            log.debug(f"Host bridge stopped after {self.ticks} ticks")
            raise
