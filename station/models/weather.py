"""Weather reading and condition models."""

from dataclasses import dataclass
from enum import StrEnum


class Condition(StrEnum):
    SUNNY = "Sunny"
    CLOUDY = "Cloudy"
    RAINY = "Rainy"
    SNOWY = "Snowy"


@dataclass(frozen=True)
class Reading:
    temperature_c: float
    humidity: float  # percent, 50-100 from collectors
    pressure: float  # hPa, 1013-1023 from collectors


@dataclass(frozen=True)
class RecordSnapshot:
    """Saved state of a weather record, used to roll it back."""

    reading: Reading
    condition: Condition
    taken_at: str
