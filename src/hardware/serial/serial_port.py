# hardware/serial/serial_port.py
"""
Serial port opening for both ends of the link (pyserial).

8 data bits, no parity, 1 stop bit, no flow control. Non-blocking reads
(timeout=0): the device side polls the fd from the asyncio loop.
"""

from __future__ import annotations

import serial

from models.config import SerialConfig
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SERIAL)

_BYTESIZES = {
    5: serial.FIVEBITS,
    6: serial.SIXBITS,
    7: serial.SEVENBITS,
    8: serial.EIGHTBITS,
}

_STOPBITS = {
    1: serial.STOPBITS_ONE,
    2: serial.STOPBITS_TWO,
}


def open_serial_port(config: SerialConfig) -> serial.Serial:
    """
    Open the configured port.

    Raises:
        serial.SerialException: port missing / busy
        ValueError: unsupported data or stop bits
    """
    if config.data_bits not in _BYTESIZES:
        raise ValueError(f"Unsupported data bits: {config.data_bits}")
    if config.stop_bits not in _STOPBITS:
        raise ValueError(f"Unsupported stop bits: {config.stop_bits}")

    port = serial.Serial(
        port=config.port,
        baudrate=config.baudrate,
        bytesize=_BYTESIZES[config.data_bits],
        parity=serial.PARITY_NONE,
        stopbits=_STOPBITS[config.stop_bits],
        xonxoff=False,
        rtscts=False,
        dsrdtr=False,
        timeout=0,
        write_timeout=config.write_timeout,
    )

    log.info(
        "Serial port opened",
        port=config.port,
        baud=config.baudrate,
        framing=f"{config.data_bits}N{config.stop_bits}",
    )
    return port
