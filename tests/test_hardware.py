"""
Strips: virtual driver, LedStrip wrapper, factory, StripService
"""

from unittest.mock import patch

import pytest

from hardware.led.led_strip import LedStrip
from hardware.led.strip_factory import create_strip
from hardware.led.virtual_strip import VirtualStrip
from models.color import Color
from models.enums import StripDriver, StripID
from models.hardware import StripConfig

from conftest import PALETTE, make_strip

RED = PALETTE["red"]


def test_virtual_strip_separates_buffer_from_flushed():
    strip = VirtualStrip(3)

    strip.set_pixel(1, RED)
    assert strip.get_pixel(1) == RED
    assert strip.shown == [Color.black()] * 3

    strip.show()
    assert strip.shown == [Color.black(), RED, Color.black()]
    assert strip.show_count == 1


def test_virtual_strip_ignores_out_of_range():
    strip = VirtualStrip(2)
    strip.set_pixel(5, RED)
    strip.set_pixel(-1, RED)
    assert strip.get_frame() == [Color.black()] * 2


def test_clear_only_touches_buffer():
    strip = make_strip(length=2)
    strip.fill(RED)

    strip.clear()

    assert strip.get_frame() == [Color.black()] * 2
    assert strip.driver.shown == [RED, RED]


def test_fill_flushes_once():
    strip = make_strip(length=4)
    strip.fill(RED)
    assert strip.driver.shown == [RED] * 4
    assert strip.driver.show_count == 1


def test_led_strip_rejects_length_mismatch():
    config = StripConfig(id=StripID.PILLAR_BL, gpio=18, pixel_count=13)
    with pytest.raises(ValueError):
        LedStrip(config, VirtualStrip(12))


def test_factory_virtual_driver():
    config = StripConfig(id=StripID.CORNER_L, gpio=9, pixel_count=30)
    strip = create_strip(config, StripDriver.VIRTUAL)
    assert isinstance(strip, VirtualStrip)
    assert strip.led_count == 30


def test_factory_auto_falls_back_off_target():
    config = StripConfig(id=StripID.CORNER_R, gpio=5, pixel_count=30)
    with patch("hardware.led.strip_factory.RuntimeInfo.is_raspberry_pi", return_value=False):
        strip = create_strip(config, StripDriver.AUTO)
    assert isinstance(strip, VirtualStrip)


def test_factory_auto_on_pi_skips_undrivable_pin_and_logs_error():
    config = StripConfig(id=StripID.CORNER_L, gpio=9, pixel_count=30)
    with patch("hardware.led.strip_factory.RuntimeInfo.is_raspberry_pi", return_value=True), \
            patch("hardware.led.strip_factory.RuntimeInfo.has_ws281x", return_value=True), \
            patch("hardware.led.strip_factory.log") as log:
        strip = create_strip(config, StripDriver.AUTO)

    assert isinstance(strip, VirtualStrip)
    log.error.assert_called_once()


def test_factory_auto_on_pi_logs_error_when_init_fails():
    config = StripConfig(id=StripID.PILLAR_BL, gpio=18, pixel_count=13)
    with patch("hardware.led.strip_factory.RuntimeInfo.is_raspberry_pi", return_value=True), \
            patch("hardware.led.strip_factory.RuntimeInfo.has_ws281x", return_value=True), \
            patch.dict("sys.modules", {"hardware.led.ws281x_strip": None}), \
            patch("hardware.led.strip_factory.log") as log:
        strip = create_strip(config, StripDriver.AUTO)

    assert isinstance(strip, VirtualStrip)
    log.error.assert_called_once()


def test_strip_service_lookup(strip_service):
    assert strip_service.resolve("pillarFL").id == StripID.PILLAR_FL
    assert strip_service.resolve("roof") is None
    assert strip_service.resolve(None) is None
    assert strip_service.get_total_pixel_count() == 25 + 25 + 13 + 13 + 30 + 30
    assert [s.id for s in strip_service.get_all()] == list(StripID)


def test_strip_service_clear_all(strip_service):
    for strip in strip_service.get_all():
        strip.fill(RED)

    strip_service.clear_all()

    for strip in strip_service.get_all():
        assert all(c.is_off() for c in strip.driver.shown)


def test_color_validation():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    assert str(Color(0, 0, 255)) == "RGB(0,0,255)"
    assert Color.from_sequence([255, 165, 0]).to_rgb() == (255, 165, 0)
