"""
LedStrip - a named strip: fixed config + pixel driver

Length and pin identity come from StripConfig and never change.
"""

from __future__ import annotations
from typing import List

from hardware.led.strip_interface import IPhysicalStrip
from models.color import Color
from models.enums import StripID
from models.hardware import StripConfig


class LedStrip:

    def __init__(self, config: StripConfig, driver: IPhysicalStrip):
        if driver.led_count != config.pixel_count:
            raise ValueError(
                f"Driver for {config.name} has {driver.led_count} pixels, config says {config.pixel_count}"
            )
        self.config = config
        self.driver = driver

    @property
    def id(self) -> StripID:
        return self.config.id

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def length(self) -> int:
        return self.config.pixel_count

    def set_pixel(self, index: int, color: Color) -> None:
        self.driver.set_pixel(index, color)

    def get_pixel(self, index: int) -> Color:
        return self.driver.get_pixel(index)

    def get_frame(self) -> List[Color]:
        return self.driver.get_frame()

    def clear(self) -> None:
        self.driver.clear()

    def show(self) -> None:
        self.driver.show()

    def fill(self, color: Color) -> None:
        """Set every pixel to color and flush"""
        for i in range(self.length):
            self.driver.set_pixel(i, color)
        self.driver.show()

    def __repr__(self) -> str:
        return f"LedStrip({self.name}, gpio={self.config.gpio}, length={self.length})"
