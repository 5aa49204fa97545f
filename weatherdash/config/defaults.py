"""Fixed catalogs: chart variables, time ranges and a fallback city list."""

from weatherdash.models.common import UnitClass
from weatherdash.models.weather import City, TimeRangeOption, VariableDescriptor

VARIABLE_OPTIONS: tuple[VariableDescriptor, ...] = (
    VariableDescriptor("temperature_2m", "Temperature", UnitClass.TEMPERATURE, "#FF6384"),
    VariableDescriptor("relativehumidity_2m", "Humidity (%)", UnitClass.NONE, "#36A2EB"),
    VariableDescriptor("apparent_temperature", "Feels Like", UnitClass.TEMPERATURE, "#FF9F40"),
    VariableDescriptor("windspeed_10m", "Wind Speed", UnitClass.SPEED, "#4BC0C0"),
    VariableDescriptor("precipitation_probability", "Rain Chance (%)", UnitClass.NONE, "#66CCFF"),
)

VARIABLES_BY_KEY: dict[str, VariableDescriptor] = {v.key: v for v in VARIABLE_OPTIONS}
VARIABLE_KEYS: tuple[str, ...] = tuple(VARIABLES_BY_KEY)

TIME_RANGES: tuple[TimeRangeOption, ...] = (
    TimeRangeOption("1 Day", 24),
    TimeRangeOption("2 Days", 48),
    TimeRangeOption("3 Days", 72),
    TimeRangeOption("7 Days", 168),
)

TIME_RANGE_HOURS: tuple[int, ...] = tuple(r.hours for r in TIME_RANGES)

# Used when no catalog file is configured.
DEFAULT_CITIES: tuple[City, ...] = (
    City(name="Berlin", lat=52.52, lon=13.405),
    City(name="London", lat=51.5074, lon=-0.1278),
    City(name="New York", lat=40.7128, lon=-74.006),
    City(name="Sydney", lat=-33.8688, lon=151.2093),
    City(name="Tokyo", lat=35.6762, lon=139.6503),
)


def variable_label(key: str) -> str:
    """Catalog label for a variable key, or the key itself when unknown."""
    descriptor = VARIABLES_BY_KEY.get(key)
    return descriptor.label if descriptor is not None else key
