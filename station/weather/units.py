"""Temperature scale conversion.

Unknown scale names are not rejected: they are logged as a warning and
treated as Celsius, matching how the display path falls back.
"""

import logging

from station.models.common import TemperatureScale

logger = logging.getLogger(__name__)

_ALIASES = {
    "c": TemperatureScale.CELSIUS,
    "f": TemperatureScale.FAHRENHEIT,
    "k": TemperatureScale.KELVIN,
}


def parse_scale(name: str | TemperatureScale) -> TemperatureScale:
    """Resolve a scale name or symbol, defaulting to Celsius."""
    if isinstance(name, TemperatureScale):
        return name
    key = str(name).strip().lower()
    for scale in TemperatureScale:
        if key == scale.value.lower():
            return scale
    if key in _ALIASES:
        return _ALIASES[key]
    logger.warning(
        "Invalid temperature scale %r, using the default scale (Celsius)", name
    )
    return TemperatureScale.CELSIUS


def scale_label(scale: str | TemperatureScale) -> str:
    return parse_scale(scale).label


def convert(
    value: float,
    from_scale: str | TemperatureScale,
    to_scale: str | TemperatureScale,
) -> float:
    """Convert a temperature between Celsius, Fahrenheit and Kelvin."""
    src = parse_scale(from_scale)
    dst = parse_scale(to_scale)
    if src == dst:
        return value

    if src == TemperatureScale.CELSIUS:
        if dst == TemperatureScale.FAHRENHEIT:
            return value * 9 / 5 + 32
        return value + 273.15

    if src == TemperatureScale.FAHRENHEIT:
        if dst == TemperatureScale.CELSIUS:
            return (value - 32) * 5 / 9
        return (value + 459.67) * 5 / 9

    # Kelvin
    if dst == TemperatureScale.CELSIUS:
        return value - 273.15
    return value * 9 / 5 - 459.67


def to_celsius(value: float, scale: str | TemperatureScale) -> float:
    return convert(value, scale, TemperatureScale.CELSIUS)
