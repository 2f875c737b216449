"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from enum import StrEnum

TIME_KEY_FORMAT = "%Y-%m-%d %H:%M:%S"


class TemperatureScale(StrEnum):
    CELSIUS = "Celsius"
    FAHRENHEIT = "Fahrenheit"
    KELVIN = "Kelvin"

    @property
    def label(self) -> str:
        return _SCALE_LABELS[self]


_SCALE_LABELS = {
    TemperatureScale.CELSIUS: "°C",
    TemperatureScale.FAHRENHEIT: "°F",
    TemperatureScale.KELVIN: "K",
}


class DataSource(StrEnum):
    API = "API"
    SENSOR = "Sensor"


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()


def time_key(dt: datetime | None = None) -> str:
    """Format a timestamp as the key used for stored readings."""
    if dt is None:
        dt = utc_now()
    return dt.strftime(TIME_KEY_FORMAT)
