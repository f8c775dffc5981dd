"""
Framing Receiver

Accumulates raw serial bytes and cuts them into terminator-delimited frames.

The terminator is searched anywhere in the buffer, so a chunk holding several
frames yields all of them in order; bytes after the last terminator stay
buffered until the rest of that frame arrives.
"""

from typing import Callable, Optional

from models.command import Command
from protocol.codec import TERMINATOR, ProtocolError, decode_payload
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.PROTOCOL)

DEFAULT_MAX_BUFFER = 4096


class FrameReceiver:
    """
    Byte-stream to Command adapter.

    Every completed frame is removed from the buffer BEFORE it is handed
    to on_command, whether it decoded or not.
    """

    def __init__(
        self,
        on_command: Callable[[Command], None],
        terminator: str = TERMINATOR,
        max_buffer: int = DEFAULT_MAX_BUFFER,
    ):
        if not terminator:
            raise ValueError("terminator must not be empty")
        self._on_command = on_command
        self._terminator = terminator.encode("utf-8")
        self._max_buffer = max_buffer
        self._buffer = bytearray()

        # counters
        self.frames_ok = 0
        self.frames_invalid = 0
        self.overflows = 0

    @property
    def pending(self) -> bytes:
        """Bytes of the current partial frame"""
        return bytes(self._buffer)

    def reset(self) -> None:
        """Drop any partial frame"""
        if self._buffer:
            log.debug("Discarding pending bytes", bytes=len(self._buffer))
        self._buffer.clear()

    def feed(self, chunk: bytes) -> int:
        """
        Append a chunk and process every complete frame in the buffer.

        Returns:
            Number of frames that decoded into a Command
        """
        self._buffer.extend(chunk)
        decoded = 0

        while True:
            end = self._buffer.find(self._terminator)
            if end < 0:
                break
            payload = bytes(self._buffer[:end])
            del self._buffer[:end + len(self._terminator)]
            if self._handle_frame(payload):
                decoded += 1

        if len(self._buffer) > self._max_buffer:
            self.overflows += 1
            log.warn(
                "Receive buffer overflow without terminator, discarding",
                bytes=len(self._buffer),
                limit=self._max_buffer,
            )
            self._buffer.clear()

        return decoded

    def _handle_frame(self, payload: bytes) -> bool:
        if not payload.strip():
            return False

        command = self._decode(payload)
        if command is None:
            return False

        self.frames_ok += 1
        log.debug("Frame received", command=command.command, bytes=len(payload))
        try:
            self._on_command(command)
        except Exception as ex:
            log.error("Command handler failed", command=command.command, error=str(ex), exc_info=True)
        return True

    def _decode(self, payload: bytes) -> Optional[Command]:
        try:
            return decode_payload(payload)
        except ProtocolError as ex:
            self.frames_invalid += 1
            log.warn("Discarding malformed frame", bytes=len(payload), error=str(ex))
            return None
