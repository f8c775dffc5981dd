"""
Telemetry Table - in-process key/value view of the robot's shared state

A telemetry client (or the stdin bench feed) writes values with put();
the command encoder reads them with get() once per tick. Only the latest
value per key is kept.
"""

from collections import defaultdict
from typing import Any, Callable, Dict, List

from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HOST)

Subscriber = Callable[[str, Any], None]


class TelemetryTable:
    """
    Latest-value store with per-key subscriptions.

    Subscribers run synchronously inside put(); a failing subscriber is
    logged and the remaining ones still run.
    """

    def __init__(self):
        self._values: Dict[str, Any] = {}
        self._subscribers: Dict[str, List[Subscriber]] = defaultdict(list)

    def get(self, key: str, default: Any = None) -> Any:
        value = self._values.get(key)
        return default if value is None else value

    def put(self, key: str, value: Any) -> None:
        self._values[key] = value
        for callback in list(self._subscribers.get(key, [])):
            try:
                callback(key, value)
            except Exception as e:
                log.error(f"Telemetry subscriber failed for {key}: {e}", exc_info=True)

    def subscribe(self, key: str, callback: Subscriber) -> Callable[[], None]:
        """Register callback(key, value); returns an unsubscribe function"""
        self._subscribers[key].append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers.get(key, []):
                self._subscribers[key].remove(callback)

        return unsubscribe

    def keys(self) -> List[str]:
        return list(self._values.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._values
