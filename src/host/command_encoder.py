"""
Command Encoder - robot state to one setWholeRobot command per tick

Color precedence (first match wins):
    1. game piece "NONE", red alliance   -> red / redLow
    2. game piece "NONE", blue alliance  -> blue / blueLow
    3. game piece "CONE"                 -> yellow / yellowLow
    4. game piece "CUBE"                 -> magenta / magentaLow
    5. anything else                     -> white (state not published yet)

The *Low variant is the endgame blink phase.
"""

from dataclasses import dataclass
from typing import Any

from host.control_word import ControlFlags, ControlWordLatch
from host.telemetry_table import TelemetryTable
from models.command import Command
from models.config import HostConfig
from models.enums import GamePiece
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HOST)

_PIECE_COLORS = {
    GamePiece.CONE.value: ("yellow", "yellowLow"),
    GamePiece.CUBE.value: ("magenta", "magentaLow"),
}


@dataclass(frozen=True)
class RobotSnapshot:
    """One sample of the telemetry table, defaults already substituted"""
    is_red_alliance: bool = False
    control_word: int = 0
    game_piece: str = ""
    remaining_time: float = 300.0
    flags: ControlFlags = ControlFlags()


class CommandEncoder:
    """
    Samples the table and picks the whole-robot color.

    The endgame counter advances once per endgame tick, modulo
    blink_period_ticks, and is left where it is when endgame ends.
    """

    def __init__(self, table: TelemetryTable, config: HostConfig):
        self.table = table
        self.config = config
        self.latch = ControlWordLatch()
        self.counter = 0

    def sample(self) -> RobotSnapshot:
        topics = self.config.topics
        word = _as_int(self.table.get(topics.control_word, 0))
        latched = self.latch.update(word)
        flag_source = latched if self.config.sticky_control_word else word

        return RobotSnapshot(
            is_red_alliance=bool(self.table.get(topics.is_red_alliance, False)),
            control_word=word,
            game_piece=str(self.table.get(topics.game_piece, "")),
            remaining_time=_as_float(
                self.table.get(topics.remaining_time, self.config.default_remaining_time),
                self.config.default_remaining_time,
            ),
            flags=ControlFlags.from_word(flag_source),
        )

    def is_endgame(self, snapshot: RobotSnapshot) -> bool:
        return (
            0 < snapshot.remaining_time < self.config.endgame_seconds
            and not snapshot.flags.autonomous
            and snapshot.flags.enabled
        )

    def next_command(self) -> Command:
        """Sample, advance the blink counter, build the tick's command"""
        snapshot = self.sample()
        endgame = self.is_endgame(snapshot)
        if endgame:
            self.counter = (self.counter + 1) % self.config.blink_period_ticks

        low = endgame and self.counter > self.config.low_phase_after_ticks
        color = self.select_color(snapshot, low, self.config.disconnected_color)
        return Command.set_whole_robot(color)

    @staticmethod
    def select_color(snapshot: RobotSnapshot, low: bool, fallback: str = "white") -> str:
        piece = snapshot.game_piece
        if piece == GamePiece.NONE.value:
            if snapshot.is_red_alliance:
                return "redLow" if low else "red"
            return "blueLow" if low else "blue"

        pair = _PIECE_COLORS.get(piece)
        if pair is None:
            return fallback
        return pair[1] if low else pair[0]


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        log.debug("Non-integer control word, using 0", value=value)
        return 0


def _as_float(value: Any, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        log.debug("Non-numeric remaining time, using default", value=value)
        return default
