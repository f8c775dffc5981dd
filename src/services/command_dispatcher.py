"""
Command Dispatcher - maps decoded Commands onto strip fills and animations

Every handler runs synchronously on the event loop thread: a static fill
cancels the strip's animation before touching pixels, so the two never
interleave.
"""

from typing import Callable, Dict, List, Optional

from animations.engine import AnimationEngine
from hardware.led.led_strip import LedStrip
from models.color import Color
from models.command import Command
from models.config import AnimationDefaults
from models.enums import AnimationID, CommandType
from services.palette import Palette
from services.strip_service import StripService
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.DISPATCH)


class CommandDispatcher:
    """
    Explicit CommandType → handler table.

    Soft validation: an unknown strip is a logged no-op, an unknown color
    resolves to the palette's last used color.
    """

    def __init__(
        self,
        strip_service: StripService,
        palette: Palette,
        engine: AnimationEngine,
        defaults: Optional[AnimationDefaults] = None,
    ):
        self.strip_service = strip_service
        self.palette = palette
        self.engine = engine
        self.defaults = defaults or AnimationDefaults()

        self._handlers: Dict[CommandType, Callable[[Command], None]] = {
            CommandType.SET_WHOLE_STRIP: self._handle_set_whole_strip,
            CommandType.SET_WHOLE_ROBOT: self._handle_set_whole_robot,
            CommandType.SINGLE_LIGHT_TRAVEL: self._handle_single_light_travel,
            CommandType.SHUFFLING_RAINBOW: self._handle_shuffling_rainbow,
            CommandType.STOP_ANIMATION: self._handle_stop_animation,
        }
        self.dispatched = 0
        self.ignored = 0

    def dispatch(self, command: Command) -> bool:
        """Run one command. Returns False when the command name is unknown."""
        command_type = command.command_type
        handler = self._handlers.get(command_type) if command_type else None
        if handler is None:
            self.ignored += 1
            log.warn("Unknown command ignored", command=command.command)
            return False

        log.debug(f"Dispatching {command.command}", strip=command.strip, color=command.color)
        handler(command)
        self.dispatched += 1
        return True

    # ------------------------------------------------------------
    # Public actions (also used by the startup sequence)
    # ------------------------------------------------------------

    def set_whole_strip(self, strip: LedStrip, color: Color) -> None:
        """Cancel the strip's animation, fill every pixel, flush once"""
        self.engine.stop_for_strip(strip.id)
        strip.fill(color)

    def set_whole_robot(self, color: Color) -> None:
        """Same color on every strip, in configured order"""
        for strip in self.strip_service.get_all():
            self.set_whole_strip(strip, color)

    # ------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------

    def _handle_set_whole_strip(self, command: Command) -> None:
        color = self.palette.resolve(command.color)
        strip = self._resolve_strip(command)
        if strip is None:
            return
        self.set_whole_strip(strip, color)

    def _handle_set_whole_robot(self, command: Command) -> None:
        color = self.palette.resolve(command.color)
        self.set_whole_robot(color)

    def _handle_single_light_travel(self, command: Command) -> None:
        color = self.palette.resolve(command.color)
        strip = self._resolve_strip(command)
        if strip is None:
            return

        d = self.defaults
        self.engine.start_for_strip(
            strip.id,
            AnimationID.SINGLE_LIGHT_TRAVEL,
            color=color,
            time_ms=_pick(command.time, d.travel_time_ms),
            position=_pick(command.position, d.travel_position),
            shift_color_index=_pick(command.shift_color_index, d.travel_shift_color_index),
            random=_pick(command.random, d.travel_random),
        )

    def _handle_shuffling_rainbow(self, command: Command) -> None:
        strips = self._target_strips(command)
        d = self.defaults
        for strip in strips:
            self.engine.start_for_strip(
                strip.id,
                AnimationID.SHUFFLING_RAINBOW,
                segment_length=_pick(command.segment_length, d.rainbow_segment_length),
                speed_ms=_pick(command.speed, d.rainbow_speed_ms),
            )

    def _handle_stop_animation(self, command: Command) -> None:
        for strip in self._target_strips(command):
            self.engine.stop_for_strip(strip.id)

    # ------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------

    def _resolve_strip(self, command: Command) -> Optional[LedStrip]:
        strip = self.strip_service.resolve(command.strip)
        if strip is None:
            log.warn("Unknown strip, command ignored", command=command.command, strip=command.strip)
        return strip

    def _target_strips(self, command: Command) -> List[LedStrip]:
        """One strip when named, every strip when omitted"""
        if command.strip is None:
            return self.strip_service.get_all()
        strip = self._resolve_strip(command)
        return [strip] if strip else []


def _pick(value, default):
    return default if value is None else value
