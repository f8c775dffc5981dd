"""
HardwareManager
===============

- Does NOT load YAML.
- ConfigManager hands over the merged raw dict
- HardwareManager converts dict → typed HardwareConfig
- Validates the strip set (all six, unique pins)
- Validates rpi_ws281x constraints for strips driven by WS281X
"""

from __future__ import annotations

from typing import Dict, Any, Optional

from models.enums import StripID, StripDriver
from models.hardware import HardwareConfig, StripConfig, WS281X_PINS
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)


class HardwareManager:

    def __init__(self, data: Dict[str, Any]):
        self.data = data
        self.config: Optional[HardwareConfig] = None

        self.config = self._process_data()

    # ------------------------------------------------------
    # ENTRY POINT
    # ------------------------------------------------------

    def _process_data(self) -> HardwareConfig:
        config = self._parse()
        self._validate(config)

        log.info(
            "HardwareManager initialized",
            strips=len(config.strips),
            driver=config.driver.name,
        )
        return config

    # ------------------------------------------------------
    # PARSER
    # ------------------------------------------------------

    def _parse(self) -> HardwareConfig:
        raw_strips = self.data.get("led_strips", [])
        driver = self._parse_driver(self.data.get("strip_driver", "AUTO"))

        strips = [self._parse_strip(entry) for entry in raw_strips]
        return HardwareConfig(strips=strips, driver=driver)

    def _parse_strip(self, entry: Dict[str, Any]) -> StripConfig:
        name = entry.get("id")
        strip_id = StripID.from_wire(name) if isinstance(name, str) else None
        if strip_id is None:
            raise ValueError(f"Invalid strip id: {name}")

        gpio = int(entry["gpio"])
        pin_pwm = WS281X_PINS.get(gpio, ("", 0))[1]
        driver = entry.get("driver")

        return StripConfig(
            id=strip_id,
            gpio=gpio,
            pixel_count=int(entry["pixel_count"]),
            color_order=entry.get("color_order", "GRB"),
            dma_channel=int(entry.get("dma_channel", 10)),
            pwm_channel=int(entry.get("pwm_channel", pin_pwm)),
            brightness=int(entry.get("brightness", 255)),
            driver=self._parse_driver(driver) if driver is not None else None,
        )

    @staticmethod
    def _parse_driver(name: Any) -> StripDriver:
        try:
            return StripDriver[str(name).upper()]
        except KeyError:
            raise ValueError(f"Invalid strip_driver: {name}")

    # ------------------------------------------------------
    # VALIDATION
    # ------------------------------------------------------

    def _validate(self, config: HardwareConfig) -> None:
        ids = [s.id for s in config.strips]
        missing = [sid.value for sid in StripID if sid not in ids]
        if missing:
            raise ValueError(f"Missing strip definitions: {missing}")
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate strip definitions")

        pins = [s.gpio for s in config.strips]
        if len(pins) != len(set(pins)):
            raise ValueError(f"Duplicate GPIO pins in led_strips: {pins}")

        for strip in config.strips:
            if strip.pixel_count <= 0:
                raise ValueError(f"Strip {strip.name} must have at least one pixel")

        for strip in config.strips:
            if config.driver_for(strip) == StripDriver.AUTO and strip.ws281x_peripheral is None:
                log.warn(
                    "Strip pin is not drivable by rpi_ws281x, it will be virtual on a Pi",
                    strip=strip.name,
                    gpio=strip.gpio,
                )

        ws281x = [s for s in config.strips if config.driver_for(s) == StripDriver.WS281X]
        if ws281x:
            self._validate_ws281x(ws281x)

    def _validate_ws281x(self, strips) -> None:
        """rpi_ws281x drives one strip per PWM0 / PWM1 / PCM / SPI, each on its own DMA channel"""
        usable = ", ".join(str(p) for p in sorted(WS281X_PINS))
        peripherals = {}
        dma_channels = {}

        for strip in strips:
            peripheral = strip.ws281x_peripheral
            if peripheral is None:
                raise ValueError(
                    f"Strip {strip.name}: GPIO {strip.gpio} cannot be driven by rpi_ws281x (usable: {usable})"
                )
            expected_pwm = WS281X_PINS[strip.gpio][1]
            if peripheral.startswith("PWM") and strip.pwm_channel != expected_pwm:
                raise ValueError(
                    f"Strip {strip.name}: GPIO {strip.gpio} needs pwm_channel {expected_pwm}, got {strip.pwm_channel}"
                )
            if peripheral in peripherals:
                raise ValueError(f"Strips {peripherals[peripheral]} and {strip.name} both use {peripheral}")
            if strip.dma_channel in dma_channels:
                raise ValueError(
                    f"Strips {dma_channels[strip.dma_channel]} and {strip.name} share DMA channel {strip.dma_channel}"
                )
            peripherals[peripheral] = strip.name
            dma_channels[strip.dma_channel] = strip.name

    # ------------------------------------------------------
    # ACCESS
    # ------------------------------------------------------

    def get_strip(self, strip_id: StripID) -> StripConfig:
        assert self.config is not None
        return self.config.get_strip(strip_id)
