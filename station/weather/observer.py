"""Threshold observers notified on every new reading."""

import logging
from collections.abc import Callable
from typing import Protocol

from station.models.weather import Reading

logger = logging.getLogger(__name__)

AlertSink = Callable[[str], None]


class Observer(Protocol):
    def update(self, reading: Reading) -> None: ...


def log_alert(message: str) -> None:
    logger.warning(message)


class ThresholdObserver:
    """Warns when a reading's temperature drops below a Celsius threshold."""

    def __init__(self, threshold_c: float, sink: AlertSink | None = None):
        self.threshold_c = threshold_c
        self.sink = sink or log_alert
        self.alerts = 0

    def update(self, reading: Reading) -> None:
        if reading.temperature_c < self.threshold_c:
            self.alerts += 1
            self.sink(f"Temperature is below {self.threshold_c:.2f}°C. Warning!")

    def __repr__(self) -> str:
        return f"ThresholdObserver(threshold_c={self.threshold_c})"
