"""Shared test fixtures."""

import random
from pathlib import Path

import pytest
import yaml

from station.app import WeatherStation
from station.config.schema import StationConfig, StorageConfig
from station.storage.gateway import PersistenceGateway
from station.weather.record import WeatherRecord


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "station.db"


@pytest.fixture
def gateway(db_path: Path) -> PersistenceGateway:
    return PersistenceGateway(db_path)


@pytest.fixture
def station_config(db_path: Path) -> StationConfig:
    return StationConfig(storage=StorageConfig(db_path=str(db_path)))


@pytest.fixture
def station(
    station_config: StationConfig, gateway: PersistenceGateway, rng: random.Random
) -> WeatherStation:
    return WeatherStation(station_config, WeatherRecord(), gateway, rng=rng)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "display": {"scale": "Fahrenheit"},
        "collection": {"source": "Sensor"},
        "alerts": {"thresholds_c": [-5.0, 10.0]},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
