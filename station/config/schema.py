"""Pydantic v2 configuration schema with strict validation.

Unknown scale and source names are not errors: they fall back to Celsius
and API with a logged warning, the same as at the command line.
"""

from pydantic import BaseModel, Field, field_validator

from station.ingest.collectors import parse_source
from station.models.common import DataSource, TemperatureScale
from station.weather.units import parse_scale


class StorageConfig(BaseModel):
    model_config = {"extra": "forbid"}

    db_path: str = "data/station.db"
    autosave: bool = True


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    scale: TemperatureScale = TemperatureScale.CELSIUS

    @field_validator("scale", mode="before")
    @classmethod
    def _fallback_scale(cls, v):
        return parse_scale(v)


class CollectionConfig(BaseModel):
    model_config = {"extra": "forbid"}

    source: DataSource = DataSource.API

    @field_validator("source", mode="before")
    @classmethod
    def _fallback_source(cls, v):
        return parse_source(v)


class AlertConfig(BaseModel):
    model_config = {"extra": "forbid"}

    freezing_threshold_c: float = 0.0
    # Celsius thresholds registered as observers at startup
    thresholds_c: list[float] = Field(default_factory=list)


class StationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    storage: StorageConfig = StorageConfig()
    display: DisplayConfig = DisplayConfig()
    collection: CollectionConfig = CollectionConfig()
    alerts: AlertConfig = AlertConfig()
