"""
Wire codec for lighting commands.

A frame is UTF-8 JSON followed by the literal two characters '/' 'r'
(printable marker, not a carriage return):

    {"command":"setWholeRobot","color":"blue"}/r
"""

import json

from pydantic import ValidationError

from models.command import Command

TERMINATOR = "/r"


class ProtocolError(ValueError):
    """Payload could not be turned into a Command"""


def encode_command(command: Command, terminator: str = TERMINATOR) -> bytes:
    """Command -> compact JSON + terminator, UTF-8 encoded"""
    text = json.dumps(command.to_wire(), separators=(",", ":"))
    return (text + terminator).encode("utf-8")


def decode_payload(payload: bytes) -> Command:
    """
    Decode one frame body (terminator already stripped).

    Invalid UTF-8 sequences are replaced rather than rejected; JSON parsing
    decides whether the frame is usable.

    Raises:
        ProtocolError: not JSON, nested too deeply, not an object, or fields of the wrong type
    """
    text = payload.decode("utf-8", errors="replace")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as ex:
        raise ProtocolError(f"payload is not valid JSON: {ex.msg}") from ex
    except RecursionError as ex:
        raise ProtocolError("payload nesting too deep") from ex

    if not isinstance(data, dict):
        raise ProtocolError(f"payload must be a JSON object, got {type(data).__name__}")

    try:
        return Command.model_validate(data)
    except ValidationError as ex:
        raise ProtocolError(f"invalid command fields: {ex.error_count()} error(s)") from ex
