"""Station service: the actions the user interface triggers on the core."""

import logging
import random

from station.config.schema import StationConfig
from station.ingest.collectors import parse_source, select_collector
from station.models.common import DataSource, TemperatureScale, time_key
from station.models.storage import LoadResult, SaveResult
from station.models.weather import Reading, RecordSnapshot
from station.reporting.formatters import (
    NO_DATA_TEXT,
    format_condition_text,
    format_reading_text,
)
from station.storage.gateway import PersistenceGateway
from station.weather.observer import ThresholdObserver
from station.weather.record import WeatherRecord
from station.weather.units import parse_scale, to_celsius

logger = logging.getLogger(__name__)

MAX_HISTORY = 50


class WeatherStation:
    def __init__(
        self,
        config: StationConfig,
        record: WeatherRecord,
        gateway: PersistenceGateway,
        rng: random.Random | None = None,
    ):
        self.config = config
        self.record = record
        self.gateway = gateway
        self.rng = rng
        self.source: DataSource = config.collection.source
        self.scale: TemperatureScale = config.display.scale
        self._history: list[RecordSnapshot] = []

        for threshold in config.alerts.thresholds_c:
            self.record.add_observer(threshold)

    def set_source(self, source: str | DataSource) -> DataSource:
        self.source = parse_source(source)
        return self.source

    def set_scale(self, scale: str | TemperatureScale) -> TemperatureScale:
        self.scale = parse_scale(scale)
        return self.scale

    def collect(self, source: str | DataSource | None = None) -> Reading:
        """Collect a reading, push it into the record and autosave it."""
        collector = select_collector(source or self.source, self.rng)

        previous = self.record.snapshot()
        if previous is not None:
            self._history.append(previous)
            del self._history[:-MAX_HISTORY]

        reading = collector.collect()
        self.record.set_reading(reading)
        logger.info(
            "Collected from %s: %.2f°C, %.2f%%, %.2f hPa (%s)",
            collector.source,
            reading.temperature_c,
            reading.humidity,
            reading.pressure,
            self.record.current_condition(),
        )

        if self.config.storage.autosave:
            self.save()

        if reading.temperature_c < self.config.alerts.freezing_threshold_c:
            logger.warning(
                "Temperature is below %.2f°C. Warning!",
                self.config.alerts.freezing_threshold_c,
            )
        return reading

    def add_threshold(
        self, value: float, scale: str | TemperatureScale | None = None
    ) -> ThresholdObserver:
        """Watch for temperatures below value, given in scale (default: current)."""
        threshold_c = to_celsius(value, scale or self.scale)
        observer = self.record.add_observer(threshold_c)
        logger.info("Added temperature threshold %.2f°C", threshold_c)
        return observer

    def display(self, scale: str | TemperatureScale | None = None) -> str:
        return format_reading_text(self.record.current_reading(), scale or self.scale)

    def display_condition(self) -> str:
        return format_condition_text(self.record.current_condition())

    def save(self, time: str | None = None) -> SaveResult:
        reading = self.record.current_reading()
        key = time or time_key()
        if reading is None:
            return SaveResult(time=key, ok=False, error_message=NO_DATA_TEXT)
        return self.gateway.save(key, reading)

    def load(self, time: str) -> LoadResult:
        """Fetch a stored reading. The shared record is left untouched."""
        return self.gateway.load(time)

    def undo(self) -> bool:
        """Roll the record back to the state before the last collect."""
        if not self._history:
            return False
        self.record.restore(self._history.pop())
        return True
