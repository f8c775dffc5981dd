"""
Serial Command Reader (device side)

Registers the port's file descriptor on the asyncio loop and feeds every
readable chunk into a FrameReceiver. Nothing on the device acknowledges a
frame; a lost link only means no new commands arrive.
"""

import asyncio
from typing import Callable, Optional

import serial

from hardware.serial.serial_port import open_serial_port
from models.config import SerialConfig
from protocol.framing import FrameReceiver
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SERIAL)

READ_CHUNK = 256


class SerialCommandReader:
    """
    Reader callback on the loop, no reader thread.

    run() keeps the link attached: when the port fails it is closed and
    reopened after reopen_delay seconds until close() is called.
    """

    def __init__(
        self,
        config: SerialConfig,
        receiver: FrameReceiver,
        port_factory: Callable[[SerialConfig], serial.Serial] = open_serial_port,
        reopen_delay: float = 2.0,
    ):
        self.config = config
        self.receiver = receiver
        self._port_factory = port_factory
        self._reopen_delay = reopen_delay

        self._port: Optional[serial.Serial] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._fd: Optional[int] = None
        self._flush_handle: Optional[asyncio.TimerHandle] = None
        self._link_lost = asyncio.Event()
        self._closing = False

        self.bytes_read = 0

    @property
    def is_open(self) -> bool:
        return self._port is not None

    def open(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        """
        Open the port and start reading.

        Raises:
            serial.SerialException / OSError when the port cannot be opened
        """
        self._loop = loop or asyncio.get_running_loop()
        self._port = self._port_factory(self.config)
        self._fd = self._port.fileno()
        self._loop.add_reader(self._fd, self._on_readable)

        # boot noise on the line is dropped once, shortly after open
        self._flush_handle = self._loop.call_later(
            self.config.flush_after_open_ms / 1000.0,
            self._flush_boot_noise,
        )
        log.info("Listening for commands", port=self.config.port)

    async def run(self) -> None:
        """Keep the link attached until close()"""
        while not self._closing:
            try:
                self.open()
            except (serial.SerialException, OSError) as e:
                log.error(f"Cannot open {self.config.port}: {e}", retry_in=f"{self._reopen_delay}s")
                await asyncio.sleep(self._reopen_delay)
                continue

            await self._link_lost.wait()
            self._link_lost.clear()
            if not self._closing:
                await asyncio.sleep(self._reopen_delay)

    def close(self) -> None:
        self._closing = True
        self._detach()
        self._link_lost.set()

    # ------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------

    def _on_readable(self) -> None:
        if self._port is None:
            return
        try:
            data = self._port.read(self._port.in_waiting or READ_CHUNK)
        except (serial.SerialException, OSError) as e:
            log.error(f"Serial read failed: {e}", port=self.config.port)
            self._detach()
            self._link_lost.set()
            return

        if data:
            self.bytes_read += len(data)
            self.receiver.feed(data)

    def _flush_boot_noise(self) -> None:
        self._flush_handle = None
        self.receiver.reset()
        log.debug("Receive buffer flushed after open")

    def _detach(self) -> None:
        if self._flush_handle is not None:
            self._flush_handle.cancel()
            self._flush_handle = None

        if self._loop is not None and self._fd is not None:
            self._loop.remove_reader(self._fd)
        self._fd = None

        if self._port is not None:
            try:
                self._port.close()
            except (serial.SerialException, OSError) as e:
                log.warn(f"Error closing {self.config.port}: {e}")
            self._port = None
            log.info("Serial port closed", port=self.config.port)
