# strip_factory.py

from models.enums import StripDriver
from models.hardware import StripConfig
from runtime.runtime_info import RuntimeInfo
from hardware.led.strip_interface import IPhysicalStrip
from hardware.led.virtual_strip import VirtualStrip
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)


def create_strip(config: StripConfig, driver: StripDriver = StripDriver.AUTO) -> IPhysicalStrip:
    """
    Build the pixel driver for one strip.

    AUTO never crashes the app off-target: it only tries rpi_ws281x on a Pi
    with the library installed, and falls back to a VirtualStrip otherwise.
    WS281X is strict and lets driver errors propagate.
    """
    if driver == StripDriver.VIRTUAL:
        return VirtualStrip(config.pixel_count)

    if driver == StripDriver.WS281X:
        from hardware.led.ws281x_strip import WS281xStrip
        return WS281xStrip(config)

    if RuntimeInfo.is_raspberry_pi():
        # on a Pi a virtual strip means a dark physical one
        if config.ws281x_peripheral is None:
            log.error("GPIO not drivable by rpi_ws281x, strip stays dark", strip=config.name, gpio=config.gpio)
        elif not RuntimeInfo.has_ws281x():
            log.error("rpi_ws281x not installed, strip stays dark", strip=config.name)
        else:
            try:
                from hardware.led.ws281x_strip import WS281xStrip
                return WS281xStrip(config)
            except Exception as ex:
                log.error(
                    "WS281x init failed, strip stays dark",
                    strip=config.name,
                    gpio=config.gpio,
                    error=str(ex),
                )

    log.debug("Using virtual strip", strip=config.name, count=config.pixel_count)
    return VirtualStrip(config.pixel_count)
