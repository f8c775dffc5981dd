"""
Stdin telemetry feed (bench mode)

Reads "topic=value" lines from stdin and writes them into the telemetry
table, for driving the host without a robot:

    /FMSInfo/IsRedAlliance=true
    /FMSInfo/FMSControlData=33
    /Boat/Gas=NONE
    /Boat/GasTime=25

Values are parsed as YAML scalars (true/false, ints, floats, plain strings).
"""

import asyncio
import sys
import threading
from typing import Any, Optional, TextIO, Tuple

import yaml

from host.telemetry_table import TelemetryTable
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HOST)


def parse_line(line: str) -> Optional[Tuple[str, Any]]:
    """'key=value' → (key, value); None for blank, comment or malformed lines"""
    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None

    key, raw = line.split("=", 1)
    key = key.strip()
    if not key:
        return None

    raw = raw.strip()
    try:
        value = yaml.safe_load(raw) if raw else ""
    except yaml.YAMLError:
        value = raw
    if isinstance(value, (list, dict)):
        value = raw
    return key, value


class StdinTelemetryFeed:

    def __init__(self, table: TelemetryTable, stream: Optional[TextIO] = None):
        self.table = table
        self.stream = stream or sys.stdin

    def feed_line(self, line: str) -> bool:
        parsed = parse_line(line)
        if parsed is None:
            if line.strip() and not line.strip().startswith("#"):
                log.warn("Ignoring malformed telemetry line", line=line.strip())
            return False

        key, value = parsed
        self.table.put(key, value)
        log.debug(f"{key} = {value!r}")
        return True

    async def run(self) -> None:
        """
        Read until EOF.

        Blocking reads happen on a daemon thread, so a pending readline()
        never holds up interpreter exit.
        """
        loop = asyncio.get_running_loop()
        finished = loop.create_future()

        def _finish() -> None:
            if not finished.done():
                finished.set_result(None)

        def _reader() -> None:
            try:
                for line in iter(self.stream.readline, ""):
                    loop.call_soon_threadsafe(self.feed_line, line)
                loop.call_soon_threadsafe(_finish)
            except RuntimeError:
                # loop already closed
                return

        log.info("Reading telemetry from stdin (topic=value per line)")
        threading.Thread(target=_reader, name="stdin-telemetry", daemon=True).start()
        await finished
        log.info("Stdin closed, telemetry feed finished")
