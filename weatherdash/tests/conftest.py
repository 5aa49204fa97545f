"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from weatherdash.models.weather import CurrentConditions, WeatherSnapshot
from weatherdash.storage.kv_store import InMemoryKeyValueStore
from weatherdash.tests.helpers import hourly_times


@pytest.fixture
def snapshot_24h() -> WeatherSnapshot:
    times = hourly_times(24)
    return WeatherSnapshot(
        time=tuple(times),
        hourly={
            "temperature_2m": tuple(float(i) for i in range(24)),
            "windspeed_10m": tuple(10.0 for _ in range(24)),
            "relativehumidity_2m": tuple(60 + i for i in range(24)),
        },
        current=CurrentConditions(temperature=12.0, windspeed=15.0, winddirection=180),
    )


@pytest.fixture
def memory_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "display": {"time_range": 48, "metric": False},
        "alerts": {"heat_c": 30.0},
        "storage": {"db_path": str(tmp_path / "dash.db")},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
