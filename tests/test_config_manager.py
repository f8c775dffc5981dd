"""
ConfigManager: include-based YAML, section parsing, factory-defaults fallback
"""

import pytest

from managers.config_manager import ConfigManager, SRC_DIR
from managers.color_manager import ColorManager
from managers.hardware_manager import HardwareManager
from models.color import Color
from models.enums import LogLevel, StripDriver, StripID

FACTORY_DEFAULTS = SRC_DIR / "config" / "factory_defaults.yaml"


@pytest.fixture
def config():
    cm = ConfigManager()
    cm.load()
    return cm


def test_strips_loaded_in_configured_order(config):
    hw = config.hardware_manager.config

    assert [s.id for s in hw.strips] == list(StripID)
    assert [(s.gpio, s.pixel_count) for s in hw.strips] == [
        (27, 25), (22, 25), (18, 13), (13, 13), (9, 30), (5, 30),
    ]
    assert hw.driver == StripDriver.AUTO


def test_palette_loaded(config):
    colors = config.color_manager.colors

    assert len(colors) == 12
    assert colors["pink"] == Color(255, 170, 203)
    assert colors["redLow"] == Color(25, 0, 0)
    assert config.color_manager.fallback_color == "pink"
    assert config.color_manager.palette_order[0] == "red"


def test_serial_section(config):
    assert config.serial.port == "/dev/ttyS0"
    assert config.serial.baudrate == 115200
    assert config.serial.terminator == "/r"
    assert config.serial.max_buffer_bytes == 4096


def test_device_section(config):
    steps = config.device.startup_sequence

    assert [(s.at_ms, s.color) for s in steps] == [
        (0, "red"), (3000, "green"), (6000, "blue"), (9000, "black"), (11000, "blue"),
    ]
    assert config.device.animation_defaults.travel_time_ms == 70
    assert config.device.animation_defaults.rainbow_speed_ms == 250


def test_host_section(config):
    assert config.host.tick_ms == 50
    assert config.host.topics.control_word == "/FMSInfo/FMSControlData"
    assert config.host.blink_period_ticks == 40
    assert config.host.sticky_control_word is False
    assert config.host.stdin_feed is False


def test_logging_section(config):
    assert config.logging.level == LogLevel.INFO


def test_factory_defaults_match_included_config(config):
    defaults = ConfigManager(config_path=str(FACTORY_DEFAULTS))
    defaults.load()

    assert defaults.serial == config.serial
    assert defaults.device == config.device
    assert defaults.host == config.host
    assert defaults.hardware_manager.config == config.hardware_manager.config


def test_missing_config_falls_back_to_factory_defaults(tmp_path):
    cm = ConfigManager(config_path=str(tmp_path / "nope.yaml"))
    cm.load()

    assert len(cm.hardware_manager.config.strips) == 6


def test_broken_config_falls_back_to_factory_defaults(tmp_path):
    broken = FACTORY_DEFAULTS.read_text(encoding="utf-8").replace(
        "{at_ms: 3000, color: green}", "{at_ms: 3000, color: chartreuse}"
    )
    path = tmp_path / "config.yaml"
    path.write_text(broken, encoding="utf-8")

    cm = ConfigManager(config_path=str(path))
    cm.load()

    assert cm.device.startup_sequence[1].color == "green"


def test_include_list_merges_files(tmp_path):
    text = FACTORY_DEFAULTS.read_text(encoding="utf-8")
    (tmp_path / "all.yaml").write_text(text, encoding="utf-8")
    (tmp_path / "override.yaml").write_text("serial:\n  port: /dev/ttyUSB0\n", encoding="utf-8")
    (tmp_path / "config.yaml").write_text("include:\n  - all.yaml\n  - override.yaml\n", encoding="utf-8")

    cm = ConfigManager(config_path=str(tmp_path / "config.yaml"))
    cm.load()

    assert cm.serial.port == "/dev/ttyUSB0"
    assert cm.serial.baudrate == 115200


def test_invalid_log_level_rejected():
    with pytest.raises(ValueError):
        ConfigManager._parse_logging({"level": "LOUD"})


# ---------------------------------------------------------------------------
# Sub-managers
# ---------------------------------------------------------------------------

def strips_data(**overrides):
    strips = [
        {"id": "pillarFL", "gpio": 27, "pixel_count": 25},
        {"id": "pillarFR", "gpio": 22, "pixel_count": 25},
        {"id": "pillarBL", "gpio": 18, "pixel_count": 13},
        {"id": "pillarBR", "gpio": 13, "pixel_count": 13},
        {"id": "cornerL", "gpio": 9, "pixel_count": 30},
        {"id": "cornerR", "gpio": 5, "pixel_count": 30},
    ]
    data = {"strip_driver": "VIRTUAL", "led_strips": strips}
    data.update(overrides)
    return data


def test_hardware_manager_parses_driver():
    hm = HardwareManager(strips_data())
    assert hm.config.driver == StripDriver.VIRTUAL
    assert hm.get_strip(StripID.CORNER_R).gpio == 5


def test_hardware_manager_rejects_duplicate_gpio():
    data = strips_data()
    data["led_strips"][1]["gpio"] = 27
    with pytest.raises(ValueError):
        HardwareManager(data)


def test_hardware_manager_rejects_missing_strip():
    data = strips_data()
    data["led_strips"].pop()
    with pytest.raises(ValueError):
        HardwareManager(data)


def test_hardware_manager_rejects_unknown_strip_id():
    data = strips_data()
    data["led_strips"][0]["id"] = "roof"
    with pytest.raises(ValueError):
        HardwareManager(data)


def test_color_manager_rejects_unknown_fallback():
    with pytest.raises(ValueError):
        ColorManager({"palette": {"red": [255, 0, 0]}, "fallback_color": "pink"})


def test_color_manager_rejects_bad_channel():
    with pytest.raises(ValueError):
        ColorManager({"palette": {"red": [300, 0, 0]}})


def test_shipped_layout_gives_pwm_strips_their_own_channels(config):
    hw = config.hardware_manager.config

    bl = hw.get_strip(StripID.PILLAR_BL)
    br = hw.get_strip(StripID.PILLAR_BR)
    assert (bl.ws281x_peripheral, bl.pwm_channel, bl.dma_channel) == ("PWM0", 0, 10)
    assert (br.ws281x_peripheral, br.pwm_channel, br.dma_channel) == ("PWM1", 1, 11)
    assert hw.get_strip(StripID.PILLAR_FL).ws281x_peripheral is None


def ws281x_data():
    strips = [
        {"id": "pillarFL", "gpio": 18, "pixel_count": 25, "dma_channel": 10},
        {"id": "pillarFR", "gpio": 13, "pixel_count": 25, "dma_channel": 11},
        {"id": "pillarBL", "gpio": 21, "pixel_count": 13, "dma_channel": 12},
        {"id": "pillarBR", "gpio": 10, "pixel_count": 13, "dma_channel": 13},
        {"id": "cornerL", "gpio": 9, "pixel_count": 30, "driver": "virtual"},
        {"id": "cornerR", "gpio": 5, "pixel_count": 30, "driver": "VIRTUAL"},
    ]
    return {"strip_driver": "WS281X", "led_strips": strips}


def test_ws281x_layout_with_virtual_overrides_accepted():
    hw = HardwareManager(ws281x_data()).config

    assert hw.driver_for(hw.get_strip(StripID.PILLAR_FR)) == StripDriver.WS281X
    assert hw.driver_for(hw.get_strip(StripID.CORNER_L)) == StripDriver.VIRTUAL
    assert hw.get_strip(StripID.PILLAR_FR).pwm_channel == 1


def test_ws281x_rejects_harness_pins():
    data = strips_data(strip_driver="WS281X")
    with pytest.raises(ValueError, match="cannot be driven by rpi_ws281x"):
        HardwareManager(data)


def test_ws281x_rejects_shared_peripheral():
    data = ws281x_data()
    data["led_strips"][1]["gpio"] = 12
    with pytest.raises(ValueError, match="PWM0"):
        HardwareManager(data)


def test_ws281x_rejects_shared_dma_channel():
    data = ws281x_data()
    data["led_strips"][1]["dma_channel"] = 10
    with pytest.raises(ValueError, match="DMA"):
        HardwareManager(data)


def test_ws281x_rejects_wrong_pwm_channel():
    data = ws281x_data()
    data["led_strips"][1]["pwm_channel"] = 0
    with pytest.raises(ValueError, match="pwm_channel"):
        HardwareManager(data)


def test_invalid_per_strip_driver_rejected():
    data = strips_data()
    data["led_strips"][0]["driver"] = "laser"
    with pytest.raises(ValueError):
        HardwareManager(data)
