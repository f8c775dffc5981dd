"""
Config Manager

Main configuration manager with include system support.
Loads modular YAML files and initializes sub-managers.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from models.config import (
    AnimationDefaults,
    DeviceConfig,
    HostConfig,
    LoggingConfig,
    SerialConfig,
    StartupStep,
    TelemetryTopics,
)
from models.enums import LogLevel
from utils.logger import get_logger, LogCategory

if TYPE_CHECKING:
    from managers.hardware_manager import HardwareManager
    from managers.color_manager import ColorManager

log = get_logger().for_category(LogCategory.CONFIG)

SRC_DIR = Path(__file__).resolve().parent.parent


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes the include: directive to load modular YAML files.
    Initializes sub-managers (HardwareManager, ColorManager) and parses the
    serial / device / host / logging sections into frozen dataclasses.

    Example:
        config = ConfigManager()
        config.load()

        strips = config.hardware_manager.config.strips
        palette = config.color_manager.colors
        port = config.serial.port
    """

    def __init__(self, config_path="config/config.yaml", defaults_path="config/factory_defaults.yaml"):
        """
        Args:
            config_path: Path to main config.yaml (relative to src/ unless absolute)
            defaults_path: Path to factory defaults fallback
        """
        self.config_path = Path(config_path)
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict[str, Any] = {}

        # Set by load()
        self.hardware_manager: 'HardwareManager'
        self.color_manager: 'ColorManager'
        self.serial: SerialConfig = SerialConfig()
        self.device: DeviceConfig = DeviceConfig()
        self.host: HostConfig = HostConfig()
        self.logging: LoggingConfig = LoggingConfig()

    def load(self) -> Dict[str, Any]:
        """
        Load YAML configuration with include system support

        Process:
        1. Load main config.yaml
        2. If it has 'include:' list, load and merge those files
        3. Otherwise treat as monolithic config
        4. Parse sections and build sub-managers
        5. On any failure in 1-4, repeat with factory defaults

        Returns:
            Merged config data dict
        """
        try:
            self.data = self._read(SRC_DIR / self.config_path)
            self._initialize_managers()
        except Exception as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")

            self.data = self._read(SRC_DIR / self.factory_defaults_path)
            self._initialize_managers()

        return self.data

    def _read(self, full_path: Path) -> Dict[str, Any]:
        with open(full_path, "r", encoding="utf-8") as f:
            main_config = yaml.safe_load(f) or {}

        if 'include' in main_config:
            log.info("Using include-based configuration", file=full_path.name)
            return self._load_with_includes(main_config['include'], full_path.parent)

        log.info("Using monolithic configuration", file=full_path.name)
        return main_config

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict[str, Any]:
        """
        Load and merge multiple YAML files from include list (later files win)
        """
        merged: Dict[str, Any] = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                with open(filepath, 'r', encoding='utf-8') as f:
                    file_data = yaml.safe_load(f)
                    if file_data:
                        merged.update(file_data)
                        log.debug(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise

        log.info("Config merge complete", total_keys=len(merged))
        return merged

    def _initialize_managers(self) -> None:
        from managers.hardware_manager import HardwareManager
        from managers.color_manager import ColorManager

        self.hardware_manager = HardwareManager(self.data)
        self.color_manager = ColorManager({
            'palette': self.data.get('palette', {}),
            'palette_order': self.data.get('palette_order', []),
            'fallback_color': self.data.get('fallback_color'),
        })

        self.serial = self._parse_serial(self.data.get('serial') or {})
        self.device = self._parse_device(self.data.get('device') or {})
        self.host = self._parse_host(self.data.get('host') or {})
        self.logging = self._parse_logging(self.data.get('logging') or {})

        for step in self.device.startup_sequence:
            if step.color not in self.color_manager.colors:
                raise ValueError(f"Startup color '{step.color}' is not in the palette")

    # ===== Section parsers =====

    @staticmethod
    def _parse_serial(raw: Dict[str, Any]) -> SerialConfig:
        defaults = SerialConfig()
        return SerialConfig(
            port=raw.get('port', defaults.port),
            baudrate=int(raw.get('baudrate', defaults.baudrate)),
            data_bits=int(raw.get('data_bits', defaults.data_bits)),
            stop_bits=int(raw.get('stop_bits', defaults.stop_bits)),
            write_timeout=float(raw.get('write_timeout', defaults.write_timeout)),
            terminator=raw.get('terminator', defaults.terminator),
            max_buffer_bytes=int(raw.get('max_buffer_bytes', defaults.max_buffer_bytes)),
            flush_after_open_ms=int(raw.get('flush_after_open_ms', defaults.flush_after_open_ms)),
        )

    @staticmethod
    def _parse_device(raw: Dict[str, Any]) -> DeviceConfig:
        steps = [
            StartupStep(at_ms=int(entry['at_ms']), color=str(entry['color']))
            for entry in raw.get('startup_sequence', [])
        ]
        steps.sort(key=lambda s: s.at_ms)

        anim_raw = raw.get('animation_defaults') or {}
        d = AnimationDefaults()
        anim = AnimationDefaults(
            travel_time_ms=float(anim_raw.get('travel_time_ms', d.travel_time_ms)),
            travel_position=int(anim_raw.get('travel_position', d.travel_position)),
            travel_shift_color_index=int(anim_raw.get('travel_shift_color_index', d.travel_shift_color_index)),
            travel_random=bool(anim_raw.get('travel_random', d.travel_random)),
            rainbow_segment_length=int(anim_raw.get('rainbow_segment_length', d.rainbow_segment_length)),
            rainbow_speed_ms=float(anim_raw.get('rainbow_speed_ms', d.rainbow_speed_ms)),
        )
        return DeviceConfig(startup_sequence=steps, animation_defaults=anim)

    @staticmethod
    def _parse_host(raw: Dict[str, Any]) -> HostConfig:
        d = HostConfig()
        topics_raw = raw.get('topics') or {}
        t = TelemetryTopics()
        topics = TelemetryTopics(
            is_red_alliance=topics_raw.get('is_red_alliance', t.is_red_alliance),
            control_word=topics_raw.get('control_word', t.control_word),
            game_piece=topics_raw.get('game_piece', t.game_piece),
            remaining_time=topics_raw.get('remaining_time', t.remaining_time),
        )
        host = HostConfig(
            tick_ms=int(raw.get('tick_ms', d.tick_ms)),
            topics=topics,
            endgame_seconds=float(raw.get('endgame_seconds', d.endgame_seconds)),
            blink_period_ticks=int(raw.get('blink_period_ticks', d.blink_period_ticks)),
            low_phase_after_ticks=int(raw.get('low_phase_after_ticks', d.low_phase_after_ticks)),
            sticky_control_word=bool(raw.get('sticky_control_word', d.sticky_control_word)),
            default_remaining_time=float(raw.get('default_remaining_time', d.default_remaining_time)),
            disconnected_color=raw.get('disconnected_color', d.disconnected_color),
            stdin_feed=bool(raw.get('stdin_feed', d.stdin_feed)),
        )
        if host.tick_ms <= 0 or host.blink_period_ticks <= 0:
            raise ValueError("host.tick_ms and host.blink_period_ticks must be positive")
        return host

    @staticmethod
    def _parse_logging(raw: Dict[str, Any]) -> LoggingConfig:
        level_name = str(raw.get('level', 'INFO')).upper()
        try:
            level = LogLevel[level_name]
        except KeyError:
            raise ValueError(f"Invalid log level: {level_name}")
        return LoggingConfig(level=level, use_colors=bool(raw.get('use_colors', True)))

    # ===== Convenience =====

    def get_raw(self, key: str, default: Optional[Any] = None) -> Any:
        return self.data.get(key, default)
