# hardware/led/ws281x_strip.py
"""
WS281xStrip - rpi_ws281x hardware driver
==========================================
Concrete implementation of IPhysicalStrip for one WS281x strip.

- Color order remapping (RGB/GRB/BRG/...)
- Internal buffer (_buffer) as source of truth for reads
- Hardware buffer written on set_pixel, pushed on show()
"""

from __future__ import annotations
from typing import List

from rpi_ws281x import PixelStrip, ws

from hardware.led.strip_interface import IPhysicalStrip
from models.color import Color
from models.hardware import StripConfig
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)


# Color order channel mapping
COLOR_ORDER_MAP = {
    "RGB": (0, 1, 2),
    "RBG": (0, 2, 1),
    "GRB": (1, 0, 2),
    "GBR": (1, 2, 0),
    "BRG": (2, 0, 1),
    "BGR": (2, 1, 0),
}

FREQUENCY_HZ = 800_000


class WS281xStrip(IPhysicalStrip):
    """
    WS281x hardware driver using rpi_ws281x.

    We remap channels ourselves and always hand the library RGB order.
    """

    def __init__(self, config: StripConfig) -> None:
        self.config = config

        order = config.color_order.upper()
        if order not in COLOR_ORDER_MAP:
            raise ValueError(f"Unsupported color order: {config.color_order}")
        self._order_map = COLOR_ORDER_MAP[order]

        self._pixel_strip = PixelStrip(
            config.pixel_count,
            config.gpio,
            FREQUENCY_HZ,
            config.dma_channel,
            False,
            config.brightness,
            config.pwm_channel,
            ws.WS2811_STRIP_RGB,
        )
        self._pixel_strip.begin()

        self._buffer: List[Color] = [Color.black() for _ in range(config.pixel_count)]

        log.info(
            "WS281xStrip initialized",
            strip=config.name,
            gpio=config.gpio,
            count=config.pixel_count,
            order=order,
            dma=config.dma_channel,
            pwm=config.pwm_channel,
        )

    # ==================== IPhysicalStrip API ====================

    @property
    def led_count(self) -> int:
        return self.config.pixel_count

    def set_pixel(self, index: int, color: Color) -> None:
        if not 0 <= index < self.config.pixel_count:
            log.debug("set_pixel: index out of range", strip=self.config.name, index=index)
            return
        self._buffer[index] = color
        self._write_hw(index, color)

    def get_pixel(self, index: int) -> Color:
        if 0 <= index < self.config.pixel_count:
            return self._buffer[index]
        return Color.black()

    def get_frame(self) -> List[Color]:
        return list(self._buffer)

    def clear(self) -> None:
        black = Color.black()
        for i in range(self.config.pixel_count):
            self._buffer[i] = black
            self._write_hw(i, black)

    def show(self) -> None:
        try:
            self._pixel_strip.show()
        except Exception as ex:
            log.error("show failed", strip=self.config.name, error=str(ex))

    # ==================== Helpers ====================

    def _write_hw(self, index: int, color: Color) -> None:
        r_i, g_i, b_i = self._order_map
        ordered = [0, 0, 0]
        ordered[r_i], ordered[g_i], ordered[b_i] = color.to_rgb()
        try:
            self._pixel_strip.setPixelColorRGB(index, ordered[0], ordered[1], ordered[2])
        except Exception as ex:
            log.error("setPixel failed", strip=self.config.name, index=index, error=str(ex))
