"""Parse raw Open-Meteo payloads into snapshots."""

import logging

from weatherdash.config.defaults import VARIABLE_KEYS
from weatherdash.errors import NetworkError
from weatherdash.models.weather import AirQualitySnapshot, CurrentConditions, WeatherSnapshot

logger = logging.getLogger(__name__)


def build_weather_snapshot(raw: dict, time_range: int) -> WeatherSnapshot:
    """Slice the hourly series to the first ``time_range`` hours.

    Catalog variables missing from the payload are left out of ``hourly``.
    """
    if not isinstance(raw, dict):
        raise NetworkError(f"Unexpected forecast body: {type(raw).__name__}")
    hourly = raw.get("hourly")
    if not isinstance(hourly, dict) or not isinstance(hourly.get("time"), list):
        raise NetworkError("Unexpected forecast shape: missing hourly.time")

    times = tuple(hourly["time"][:time_range])
    series: dict[str, tuple[float | None, ...]] = {}
    for key in VARIABLE_KEYS:
        values = hourly.get(key)
        if values is None:
            continue
        if not isinstance(values, list):
            logger.warning("Dropping %s: expected a list, got %s", key, type(values).__name__)
            continue
        sliced = tuple(values[:time_range])
        if len(sliced) != len(times):
            logger.warning(
                "Dropping %s: %d values for %d timestamps", key, len(sliced), len(times)
            )
            continue
        series[key] = sliced

    return WeatherSnapshot(
        time=times,
        hourly=series,
        current=parse_current(raw.get("current_weather")),
    )


def parse_current(raw: dict | None) -> CurrentConditions | None:
    if not raw:
        return None
    if not isinstance(raw, dict):
        raise NetworkError(f"Unexpected current_weather: {type(raw).__name__}")
    return CurrentConditions(
        temperature=raw.get("temperature"),
        windspeed=raw.get("windspeed"),
        winddirection=raw.get("winddirection"),
    )


def build_air_quality(raw: dict) -> AirQualitySnapshot | None:
    if not isinstance(raw, dict):
        raise NetworkError(f"Unexpected air quality body: {type(raw).__name__}")
    current = raw.get("current")
    if not current:
        return None
    if not isinstance(current, dict):
        raise NetworkError(f"Unexpected air quality current: {type(current).__name__}")
    return AirQualitySnapshot(
        us_aqi=current.get("us_aqi"),
        european_aqi=current.get("european_aqi"),
    )
