"""Strip service - the six named strips of the robot"""

from typing import Dict, List, Optional

from hardware.led.led_strip import LedStrip
from hardware.led.strip_factory import create_strip
from models.enums import StripID
from models.hardware import HardwareConfig
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)


class StripService:
    """Lookup and bulk operations over the configured strips"""

    def __init__(self, strips: List[LedStrip]):
        self._strips = list(strips)
        self._by_id: Dict[StripID, LedStrip] = {strip.id: strip for strip in self._strips}

        log.info(
            f"StripService initialized with {len(self._strips)} strips",
            strips=", ".join(f"{s.name}({s.length})" for s in self._strips),
        )

    @classmethod
    def from_config(cls, config: HardwareConfig) -> "StripService":
        return cls([LedStrip(cfg, create_strip(cfg, config.driver_for(cfg))) for cfg in config.strips])

    def get(self, strip_id: StripID) -> LedStrip:
        return self._by_id[strip_id]

    def resolve(self, name: Optional[str]) -> Optional[LedStrip]:
        """Strip by wire name, None when unknown"""
        if name is None:
            return None
        strip_id = StripID.from_wire(name)
        if strip_id is None:
            return None
        return self._by_id.get(strip_id)

    def get_all(self) -> List[LedStrip]:
        """All strips in configured order"""
        return list(self._strips)

    def get_total_pixel_count(self) -> int:
        return sum(strip.length for strip in self._strips)

    def clear_all(self) -> None:
        """Turn every strip off and flush"""
        for strip in self._strips:
            strip.clear()
            strip.show()
