"""Simulated data sources producing weather readings."""

import logging
import random
from typing import Protocol

from station.models.common import DataSource
from station.models.weather import Reading

logger = logging.getLogger(__name__)

TEMPERATURE_RANGE_C = (-10.0, 40.0)
HUMIDITY_RANGE = (50.0, 100.0)
PRESSURE_RANGE_HPA = (1013.0, 1023.0)


class Collector(Protocol):
    source: DataSource

    def collect(self) -> Reading: ...


class _RandomCollector:
    source: DataSource

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def collect(self) -> Reading:
        reading = Reading(
            temperature_c=self.rng.uniform(*TEMPERATURE_RANGE_C),
            humidity=self.rng.uniform(*HUMIDITY_RANGE),
            pressure=self.rng.uniform(*PRESSURE_RANGE_HPA),
        )
        logger.debug("%s collected %s", self.source, reading)
        return reading


class ApiCollector(_RandomCollector):
    source = DataSource.API


class SensorCollector(_RandomCollector):
    source = DataSource.SENSOR


_COLLECTORS: dict[DataSource, type[_RandomCollector]] = {
    DataSource.API: ApiCollector,
    DataSource.SENSOR: SensorCollector,
}


def parse_source(name: str | DataSource) -> DataSource:
    """Resolve a data source name, defaulting to the API."""
    if isinstance(name, DataSource):
        return name
    key = str(name).strip().lower()
    for source in DataSource:
        if key == source.value.lower():
            return source
    logger.warning("Unknown data source %r, defaulting to API", name)
    return DataSource.API


def select_collector(
    source: str | DataSource, rng: random.Random | None = None
) -> Collector:
    return _COLLECTORS[parse_source(source)](rng)
