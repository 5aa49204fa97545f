"""Top-level dashboard state and the pure update functions that replace it.

Every update returns a new ``AppState``; snapshots inside it are swapped
whole, so a reader never sees a half-applied fetch.
"""

from dataclasses import dataclass, replace

from weatherdash.config.defaults import TIME_RANGE_HOURS, VARIABLES_BY_KEY
from weatherdash.models.alert import Alert
from weatherdash.models.weather import (
    AirQualitySnapshot,
    City,
    ComparisonResult,
    WeatherSnapshot,
)


@dataclass(frozen=True)
class AppState:
    selected_city: City | None = None
    time_range: int = 24
    selected_variables: tuple[str, ...] = ("temperature_2m", "relativehumidity_2m")
    is_metric: bool = True
    weather: WeatherSnapshot | None = None
    air_quality: AirQualitySnapshot | None = None
    alerts: tuple[Alert, ...] = ()
    loading: bool = False
    error: str | None = None
    comparison_enabled: bool = False
    comparison_cities: tuple[City, ...] = ()
    comparison_results: tuple[ComparisonResult, ...] = ()

    def comparison_key(self) -> tuple:
        """Inputs whose change makes comparison results stale."""
        return (
            self.comparison_enabled,
            tuple(c.name for c in self.comparison_cities),
            self.time_range,
            self.selected_variables,
        )

    def fetch_key(self) -> tuple | None:
        """Inputs whose change starts a new primary fetch cycle."""
        if self.selected_city is None:
            return None
        return (self.selected_city.name, self.time_range)


# --- Selection events ---

def select_city(state: AppState, city: City) -> AppState:
    if state.selected_city is not None and state.selected_city.name == city.name:
        return replace(state, selected_city=city)
    # Air quality belongs to the previous city; the forecast stays until replaced.
    return replace(state, selected_city=city, air_quality=None)


def set_time_range(state: AppState, hours: int) -> AppState:
    if hours not in TIME_RANGE_HOURS:
        raise ValueError(f"Unsupported time range: {hours}h")
    return replace(state, time_range=hours)


def toggle_variable(state: AppState, key: str) -> AppState:
    if key not in VARIABLES_BY_KEY:
        raise ValueError(f"Unknown variable: {key}")
    if key in state.selected_variables:
        selected = tuple(v for v in state.selected_variables if v != key)
    else:
        selected = (*state.selected_variables, key)
    return replace(state, selected_variables=selected)


def set_units(state: AppState, metric: bool) -> AppState:
    return replace(state, is_metric=metric)


def set_comparison_enabled(state: AppState, enabled: bool) -> AppState:
    return replace(state, comparison_enabled=enabled)


def set_comparison_cities(state: AppState, cities: tuple[City, ...]) -> AppState:
    return replace(state, comparison_cities=tuple(cities))


# --- Fetch cycle results ---

def begin_fetch(state: AppState) -> AppState:
    return replace(state, error=None)


def show_loading(state: AppState) -> AppState:
    return replace(state, loading=True)


def apply_weather(
    state: AppState, snapshot: WeatherSnapshot, alerts: list[Alert]
) -> AppState:
    return replace(
        state, weather=snapshot, alerts=tuple(alerts), loading=False, error=None
    )


def apply_weather_error(state: AppState, message: str) -> AppState:
    """Record a failed cycle. The previous snapshot and alerts are kept."""
    return replace(state, loading=False, error=message)


def apply_air_quality(state: AppState, snapshot: AirQualitySnapshot | None) -> AppState:
    return replace(state, air_quality=snapshot)


def apply_comparison(
    state: AppState, results: tuple[ComparisonResult, ...]
) -> AppState:
    return replace(state, comparison_results=tuple(results))
