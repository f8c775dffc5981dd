"""
Host side: telemetry sampling, command encoding, fixed-rate transmit
"""

from .control_word import ControlFlags, ControlWordLatch
from .telemetry_table import TelemetryTable
from .command_encoder import CommandEncoder, RobotSnapshot
from .bridge import HostBridge
from .stdin_feed import StdinTelemetryFeed

__all__ = [
    "ControlFlags",
    "ControlWordLatch",
    "TelemetryTable",
    "CommandEncoder",
    "RobotSnapshot",
    "HostBridge",
    "StdinTelemetryFeed",
]
