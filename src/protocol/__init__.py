"""
Serial command protocol: wire codec + framing receiver
"""

from .codec import TERMINATOR, ProtocolError, encode_command, decode_payload
from .framing import FrameReceiver

__all__ = [
    "TERMINATOR",
    "ProtocolError",
    "encode_command",
    "decode_payload",
    "FrameReceiver",
]
