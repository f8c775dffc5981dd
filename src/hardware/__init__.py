"""
Hardware Layer

Low-level device access only:

- LED strip drivers (IPhysicalStrip, VirtualStrip, WS281xStrip)
- Serial port opening (pyserial)

WS281xStrip is imported lazily by the strip factory, rpi_ws281x only exists on a Pi.
"""
from .led.strip_interface import IPhysicalStrip
from .led.virtual_strip import VirtualStrip
from .led.led_strip import LedStrip
from .led.strip_factory import create_strip
from .serial.serial_port import open_serial_port

__all__ = [
    "IPhysicalStrip",
    "VirtualStrip",
    "LedStrip",
    "create_strip",
    "open_serial_port",
]
