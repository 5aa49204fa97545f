"""Shared test data: sample cities, forecast payloads and a scripted client."""

import asyncio
from datetime import datetime, timedelta

from weatherdash.config.defaults import VARIABLE_KEYS
from weatherdash.models.weather import City

BERLIN = City(name="Berlin", lat=52.52, lon=13.405)
PARIS = City(name="Paris", lat=48.8566, lon=2.3522)
ROME = City(name="Rome", lat=41.9028, lon=12.4964)
OSLO = City(name="Oslo", lat=59.9139, lon=10.7522)


def hourly_times(hours: int, start: str = "2024-01-01T00:00") -> list[str]:
    first = datetime.fromisoformat(start)
    return [(first + timedelta(hours=i)).strftime("%Y-%m-%dT%H:%M") for i in range(hours)]


def forecast_payload(
    hours: int = 168,
    temperature: float = 20.0,
    windspeed: float = 10.0,
    base_temp: float = 5.0,
) -> dict:
    """Open-Meteo shaped forecast body with ``hours`` hourly points."""
    hourly: dict = {"time": hourly_times(hours)}
    for n, key in enumerate(VARIABLE_KEYS):
        hourly[key] = [base_temp + n + i * 0.5 for i in range(hours)]
    return {
        "latitude": 52.52,
        "longitude": 13.41,
        "timezone": "Europe/Berlin",
        "current_weather": {
            "temperature": temperature,
            "windspeed": windspeed,
            "winddirection": 270,
        },
        "hourly": hourly,
    }


class FakeClient:
    """Scripted stand-in for OpenMeteoClient.

    ``gates`` hold one forecast request for a city until the event is set.
    """

    def __init__(self):
        self.forecasts: dict[str, dict] = {}
        self.failures: dict[str, Exception] = {}
        self.gates: dict[str, asyncio.Event] = {}
        self.air_quality: dict | list | Exception | None = {"current": {"us_aqi": 57, "european_aqi": 38}}
        self.forecast_calls: list[str] = []
        self.air_quality_calls: list[str] = []

    async def get_forecast(self, city: City) -> dict:
        self.forecast_calls.append(city.name)
        gate = self.gates.pop(city.name, None)
        if gate is not None:
            await gate.wait()
        if city.name in self.failures:
            raise self.failures[city.name]
        return self.forecasts.get(city.name) or forecast_payload()

    async def get_air_quality(self, city: City) -> dict:
        self.air_quality_calls.append(city.name)
        if isinstance(self.air_quality, Exception):
            raise self.air_quality
        return self.air_quality

    async def aclose(self) -> None:
        pass
