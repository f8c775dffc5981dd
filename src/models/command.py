"""
Command schema - Pydantic model for one decoded serial frame

Field names on the wire are camelCase (shiftColorIndex, segmentLength);
Python code uses the snake_case attribute names.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from models.enums import CommandType, StripID

# parameter keys (wire and attribute names) each command reads
_PARAMETER_FIELDS = {
    CommandType.SINGLE_LIGHT_TRAVEL: {"time", "position", "shiftColorIndex", "shift_color_index", "random"},
    CommandType.SHUFFLING_RAINBOW: {"segmentLength", "segment_length", "speed"},
}
_ALL_PARAMETER_FIELDS = set().union(*_PARAMETER_FIELDS.values())


class Command(BaseModel):
    """
    One lighting command.

    strip/color stay plain strings: unknown names are NOT a decode error,
    they are resolved softly by the dispatcher (no-op strip, last-used color).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    command: str = Field(description="Wire command name (e.g. 'setWholeRobot')")
    strip: Optional[str] = Field(None, description="Strip name (e.g. 'pillarFL')")
    color: Optional[str] = Field(None, description="Palette color name (e.g. 'blue')")

    # singleLightTravel
    time: Optional[float] = Field(None, description="Tick interval in ms")
    position: Optional[int] = Field(None, description="Starting pixel index")
    shift_color_index: Optional[int] = Field(None, alias="shiftColorIndex")
    random: Optional[bool] = Field(None, description="Cycle palette instead of fixed color")

    # shufflingRainbow
    segment_length: Optional[int] = Field(None, alias="segmentLength")
    speed: Optional[float] = Field(None, description="Tick interval in ms")

    @model_validator(mode="before")
    @classmethod
    def _drop_unused_parameters(cls, data: Any) -> Any:
        """Parameters of other commands are ignored, not type-checked"""
        if not isinstance(data, dict):
            return data
        used = _PARAMETER_FIELDS.get(CommandType.from_wire(data.get("command")), set())
        return {k: v for k, v in data.items() if k not in _ALL_PARAMETER_FIELDS or k in used}

    @property
    def command_type(self) -> Optional[CommandType]:
        return CommandType.from_wire(self.command)

    def to_wire(self) -> Dict[str, Any]:
        """Dict ready for json.dumps (camelCase keys, unset fields omitted)"""
        return self.model_dump(by_alias=True, exclude_none=True)

    # ------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------

    @classmethod
    def set_whole_robot(cls, color: str) -> "Command":
        return cls(command=CommandType.SET_WHOLE_ROBOT.value, color=color)

    @classmethod
    def set_whole_strip(cls, strip: StripID, color: str) -> "Command":
        return cls(command=CommandType.SET_WHOLE_STRIP.value, strip=strip.value, color=color)

    @classmethod
    def single_light_travel(
        cls,
        strip: StripID,
        color: Optional[str] = None,
        time: float = 70,
        position: int = 0,
        shift_color_index: int = 0,
        random: bool = False,
    ) -> "Command":
        return cls(
            command=CommandType.SINGLE_LIGHT_TRAVEL.value,
            strip=strip.value,
            color=color,
            time=time,
            position=position,
            shift_color_index=shift_color_index,
            random=random,
        )
