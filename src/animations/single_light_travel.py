"""
Single Light Travel Animation

One lit pixel walks along the strip and wraps to the start.
"""

from animations.base import BaseAnimation
from hardware.led.led_strip import LedStrip
from models.color import Color
from models.enums import AnimationID
from services.palette import Palette


class SingleLightTravelAnimation(BaseAnimation):
    """
    Traveling pixel

    Parameters:
        color: fixed pixel color (ignored when random is set)
        time_ms: tick interval
        position: starting pixel index
        shift_color_index: starting palette index (random mode)
        random: take the color from the palette, advancing one entry per wrap

    Each tick: wrap position if it ran off the end, clear the strip, light
    the pixel at position, flush, advance position.
    """

    ANIMATION_ID = AnimationID.SINGLE_LIGHT_TRAVEL

    def __init__(
        self,
        strip: LedStrip,
        palette: Palette,
        color: Color,
        time_ms: float = 70,
        position: int = 0,
        shift_color_index: int = 0,
        random: bool = False,
    ):
        super().__init__(strip, time_ms)
        self.palette = palette
        self.color = color
        self.position = max(0, int(position))
        self.shift_color_index = int(shift_color_index) % len(palette)
        self.random = bool(random)

    def current_color(self) -> Color:
        if self.random:
            return self.palette.at(self.shift_color_index)
        return self.color

    def step(self) -> None:
        if self.position >= self.strip.length:
            self.position = 0
            if self.random:
                self.shift_color_index = (self.shift_color_index + 1) % len(self.palette)

        self.strip.clear()
        self.strip.set_pixel(self.position, self.current_color())
        self.strip.show()
        self.position += 1
