"""Temperature-based weather condition classifier."""

from station.models.weather import Condition

SUNNY_ABOVE_C = 25.0
CLOUDY_ABOVE_C = 15.0
RAINY_ABOVE_C = 0.0


def classify(temperature_c: float) -> Condition:
    """Map a Celsius temperature to a weather condition.

    Thresholds are exclusive: exactly 25.0 is Cloudy, exactly 0.0 is Snowy.
    """
    if temperature_c > SUNNY_ABOVE_C:
        return Condition.SUNNY
    elif temperature_c > CLOUDY_ABOVE_C:
        return Condition.CLOUDY
    elif temperature_c > RAINY_ABOVE_C:
        return Condition.RAINY
    return Condition.SNOWY
