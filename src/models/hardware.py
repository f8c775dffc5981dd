"""
Hardware Configuration Models

These are PURE DATA MODELS that mirror hardware.yaml.
They contain:
- no logic beyond small lookups
- no external dependencies

They serve as typed containers for HardwareManager to populate.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, Any, List, Optional, Tuple

from models.enums import StripID, StripDriver


# GPIO -> (peripheral, PWM channel) that rpi_ws281x can drive; one strip per peripheral
WS281X_PINS: Dict[int, Tuple[str, int]] = {
    12: ("PWM0", 0),
    18: ("PWM0", 0),
    13: ("PWM1", 1),
    19: ("PWM1", 1),
    21: ("PCM", 0),
    10: ("SPI", 0),
}


# ============================================================
#  LED Strips
# ============================================================

@dataclass(frozen=True)
class StripConfig:
    """One physical strip: pin identity and pixel count are fixed at startup"""
    id: StripID
    gpio: int
    pixel_count: int
    color_order: str = "GRB"
    dma_channel: int = 10
    pwm_channel: int = 0
    brightness: int = 255
    driver: Optional[StripDriver] = None   # None: use the global strip_driver

    @property
    def name(self) -> str:
        """Wire name (e.g. 'pillarFL')"""
        return self.id.value

    @property
    def ws281x_peripheral(self) -> Optional[str]:
        """PWM0 / PWM1 / PCM / SPI for drivable pins, None otherwise"""
        pin = WS281X_PINS.get(self.gpio)
        return pin[0] if pin else None

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class HardwareConfig:
    """All strips defined in hardware.yaml, in configured order"""
    strips: List[StripConfig]
    driver: StripDriver = StripDriver.AUTO

    def get_strip(self, strip_id: StripID) -> StripConfig:
        for strip in self.strips:
            if strip.id == strip_id:
                return strip
        raise KeyError(strip_id)

    def driver_for(self, strip: StripConfig) -> StripDriver:
        return strip.driver or self.driver
