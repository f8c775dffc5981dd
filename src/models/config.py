"""
Runtime configuration models (serial link, device, host, logging)

Populated by ConfigManager from serial.yaml, device.yaml, host.yaml and logging.yaml.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from models.enums import LogLevel


@dataclass(frozen=True)
class SerialConfig:
    """Serial link settings (both ends use the same framing)"""
    port: str = "/dev/ttyS0"
    baudrate: int = 115200
    data_bits: int = 8
    stop_bits: int = 1
    write_timeout: float = 1.0
    terminator: str = "/r"
    max_buffer_bytes: int = 4096
    flush_after_open_ms: int = 1000   # drop boot noise this long after opening


@dataclass(frozen=True)
class StartupStep:
    """Whole-robot color applied at_ms after boot"""
    at_ms: int
    color: str


@dataclass(frozen=True)
class AnimationDefaults:
    """Values used when a command omits animation parameters"""
    travel_time_ms: float = 70
    travel_position: int = 0
    travel_shift_color_index: int = 0
    travel_random: bool = False
    rainbow_segment_length: int = 1
    rainbow_speed_ms: float = 250


@dataclass(frozen=True)
class DeviceConfig:
    startup_sequence: List[StartupStep] = field(default_factory=list)
    animation_defaults: AnimationDefaults = field(default_factory=AnimationDefaults)


@dataclass(frozen=True)
class TelemetryTopics:
    """Telemetry table keys read by the host"""
    is_red_alliance: str = "/FMSInfo/IsRedAlliance"
    control_word: str = "/FMSInfo/FMSControlData"
    game_piece: str = "/Boat/Gas"
    remaining_time: str = "/Boat/GasTime"


@dataclass(frozen=True)
class HostConfig:
    tick_ms: int = 50
    topics: TelemetryTopics = field(default_factory=TelemetryTopics)
    endgame_seconds: float = 30.0
    blink_period_ticks: int = 40      # endgame counter modulus
    low_phase_after_ticks: int = 20   # counter > this -> low-brightness color
    sticky_control_word: bool = False
    default_remaining_time: float = 300.0
    disconnected_color: str = "white"
    stdin_feed: bool = False          # bench mode: "topic=value" lines on stdin


@dataclass(frozen=True)
class LoggingConfig:
    level: LogLevel = LogLevel.INFO
    use_colors: bool = True
