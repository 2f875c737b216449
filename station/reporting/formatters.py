"""Output formatters for readings and conditions."""

import json

from station.models.common import TemperatureScale
from station.models.weather import Condition, Reading
from station.weather.units import convert, parse_scale

NO_DATA_TEXT = "No weather data collected yet."


def format_temperature(temperature_c: float, scale: str | TemperatureScale) -> str:
    s = parse_scale(scale)
    value = convert(temperature_c, TemperatureScale.CELSIUS, s)
    return f"Temperature ({s}): {value:.2f}{s.label}"


def format_reading_text(
    reading: Reading | None, scale: str | TemperatureScale
) -> str:
    """Plain text block shown for 'display weather data'."""
    if reading is None:
        return NO_DATA_TEXT
    lines = [
        format_temperature(reading.temperature_c, scale),
        f"Humidity: {reading.humidity:.2f}%",
        f"Pressure: {reading.pressure:.2f} hPa",
    ]
    return "\n".join(lines)


def format_condition_text(condition: Condition | None) -> str:
    if condition is None:
        return NO_DATA_TEXT
    return f"Weather: {condition}"


def format_reading_json(
    reading: Reading, condition: Condition, scale: str | TemperatureScale
) -> str:
    """JSON rendering for programmatic consumption."""
    s = parse_scale(scale)
    data = {
        "temperature": round(convert(reading.temperature_c, TemperatureScale.CELSIUS, s), 4),
        "scale": s.value,
        "temperature_c": reading.temperature_c,
        "humidity": reading.humidity,
        "pressure": reading.pressure,
        "condition": condition.value,
    }
    return json.dumps(data, indent=2)
