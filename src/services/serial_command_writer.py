"""
Serial Command Writer (host side)

Fire-and-forget transmit of encoded commands. The port is opened lazily
and reopened on the next send after any failure; failed writes are dropped.
"""

from typing import Callable, Optional

import serial

from hardware.serial.serial_port import open_serial_port
from models.command import Command
from models.config import SerialConfig
from protocol.codec import encode_command
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SERIAL)


class SerialCommandWriter:
    """
    send() never raises for link problems.

    Link up/down transitions are logged once each, not on every tick.
    """

    def __init__(
        self,
        config: SerialConfig,
        port_factory: Callable[[SerialConfig], serial.Serial] = open_serial_port,
    ):
        self.config = config
        self._port_factory = port_factory
        self._port: Optional[serial.Serial] = None
        self._link_up: Optional[bool] = None

        self.frames_sent = 0
        self.frames_dropped = 0

    @property
    def is_open(self) -> bool:
        return self._port is not None

    def send(self, command: Command) -> bool:
        """Encode and write one frame. Returns False when it was dropped."""
        data = encode_command(command, self.config.terminator)

        if self._port is None:
            try:
                self._port = self._port_factory(self.config)
            except (serial.SerialException, OSError) as e:
                self._mark_down(f"open failed: {e}")
                self.frames_dropped += 1
                return False

        try:
            self._port.write(data)
        except (serial.SerialException, OSError) as e:
            self._mark_down(f"write failed: {e}")
            self._close_port()
            self.frames_dropped += 1
            return False

        self._mark_up()
        self.frames_sent += 1
        return True

    def close(self) -> None:
        self._close_port()
        log.info("Serial writer closed", sent=self.frames_sent, dropped=self.frames_dropped)

    # ------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------

    def _mark_up(self) -> None:
        if self._link_up is not True:
            log.info("Serial link up", port=self.config.port)
        self._link_up = True

    def _mark_down(self, reason: str) -> None:
        if self._link_up is not False:
            log.warn("Serial link down, dropping frames", port=self.config.port, reason=reason)
        self._link_up = False

    def _close_port(self) -> None:
        if self._port is None:
            return
        try:
            self._port.close()
        except (serial.SerialException, OSError) as e:
            log.debug(f"Error closing {self.config.port}: {e}")
        self._port = None
