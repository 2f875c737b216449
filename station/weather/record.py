"""Shared weather record: latest reading, derived condition, observers."""

import logging
import threading

from station.models.common import utc_now_iso
from station.models.weather import Condition, Reading, RecordSnapshot
from station.weather.condition import classify
from station.weather.observer import AlertSink, Observer, ThresholdObserver

logger = logging.getLogger(__name__)


class WeatherRecord:
    """Holds the current reading and notifies observers when it changes.

    Construct one per process and pass it to whatever needs it. The lock
    keeps reading and condition consistent if callers share the record
    across threads; observers run outside the lock.
    """

    def __init__(self, alert_sink: AlertSink | None = None):
        self._lock = threading.Lock()
        self._reading: Reading | None = None
        self._condition: Condition | None = None
        self._observers: list[Observer] = []
        self._alert_sink = alert_sink

    def current_reading(self) -> Reading | None:
        with self._lock:
            return self._reading

    def current_condition(self) -> Condition | None:
        with self._lock:
            return self._condition

    @property
    def observers(self) -> tuple[Observer, ...]:
        with self._lock:
            return tuple(self._observers)

    def set_reading(self, reading: Reading) -> None:
        """Replace the reading, reclassify, then notify observers in order."""
        with self._lock:
            self._reading = reading
            self._condition = classify(reading.temperature_c)
            observers = list(self._observers)

        for observer in observers:
            try:
                observer.update(reading)
            except Exception:
                logger.exception("Observer %r failed, continuing", observer)

    def add_observer(self, threshold_c: float) -> ThresholdObserver:
        """Register a threshold observer. Past readings are not replayed."""
        observer = ThresholdObserver(threshold_c, sink=self._alert_sink)
        self.attach(observer)
        return observer

    def attach(self, observer: Observer) -> None:
        with self._lock:
            self._observers.append(observer)
        logger.debug("Attached observer %r", observer)

    def snapshot(self) -> RecordSnapshot | None:
        """Capture the current reading and condition, or None if empty."""
        with self._lock:
            if self._reading is None or self._condition is None:
                return None
            return RecordSnapshot(
                reading=self._reading,
                condition=self._condition,
                taken_at=utc_now_iso(),
            )

    def restore(self, snapshot: RecordSnapshot) -> None:
        """Put back a snapshotted state. Observers are not notified."""
        with self._lock:
            self._reading = snapshot.reading
            self._condition = snapshot.condition
