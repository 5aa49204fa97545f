"""City, catalog and weather snapshot models."""

from dataclasses import dataclass

from weatherdash.models.common import UnitClass


@dataclass(frozen=True)
class City:
    name: str  # unique key
    lat: float
    lon: float

    def to_dict(self) -> dict:
        return {"name": self.name, "lat": self.lat, "lon": self.lon}


@dataclass(frozen=True)
class VariableDescriptor:
    key: str
    label: str
    unit_class: UnitClass
    color: str


@dataclass(frozen=True)
class TimeRangeOption:
    label: str
    hours: int


@dataclass(frozen=True)
class CurrentConditions:
    temperature: float | None
    windspeed: float | None
    winddirection: float | None

    def to_dict(self) -> dict:
        return {
            "temperature": self.temperature,
            "windspeed": self.windspeed,
            "winddirection": self.winddirection,
        }


@dataclass(frozen=True)
class WeatherSnapshot:
    """Hourly series and current conditions for one city, metric units.

    Every sequence in ``hourly`` has the same length as ``time``.
    """

    time: tuple[str, ...]
    hourly: dict[str, tuple[float | None, ...]]
    current: CurrentConditions | None

    def __post_init__(self) -> None:
        for key, values in self.hourly.items():
            if len(values) != len(self.time):
                raise ValueError(
                    f"hourly[{key!r}] has {len(values)} values, expected {len(self.time)}"
                )

    def __len__(self) -> int:
        return len(self.time)


@dataclass(frozen=True)
class AirQualitySnapshot:
    us_aqi: float | None
    european_aqi: float | None


@dataclass(frozen=True)
class ComparisonResult:
    city: City
    snapshot: WeatherSnapshot
