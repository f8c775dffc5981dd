# hardware/led/strip_interface.py
"""
IPhysicalStrip Protocol
========================
Hardware abstraction for one LED strip output.
Minimal contract for any pixel driver (WS281x, virtual, ...).
"""

from __future__ import annotations
from typing import Protocol, List
from models.color import Color


class IPhysicalStrip(Protocol):
    """
    Protocol defining the strip capability used by the device.

    - led_count: total pixels
    - set_pixel: buffer single pixel (no immediate show)
    - get_pixel / get_frame: read buffered pixel state
    - clear: set every buffered pixel to off (no show)
    - show: flush buffer to hardware
    """

    @property
    def led_count(self) -> int:
        """Total number of addressable pixels."""
        ...

    def set_pixel(self, index: int, color: Color) -> None:
        """
        Set pixel color in buffer (does not push to hardware).
        Call show() to render.
        """
        ...

    def get_pixel(self, index: int) -> Color:
        ...

    def get_frame(self) -> List[Color]:
        ...

    def clear(self) -> None:
        """Set all buffered pixels to off (call show() to render)."""
        ...

    def show(self) -> None:
        """Push buffered pixels to hardware."""
        ...
