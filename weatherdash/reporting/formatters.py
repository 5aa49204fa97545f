"""Display text for current conditions, air quality and chart titles."""

from weatherdash.models.weather import City, ComparisonResult, CurrentConditions
from weatherdash.processing.units import format_speed, format_temperature


def aqi_description(aqi: float | None) -> str:
    if not aqi:
        return "Unknown"
    if aqi <= 50:
        return "Good"
    if aqi <= 100:
        return "Moderate"
    if aqi <= 150:
        return "Unhealthy for Sensitive Groups"
    if aqi <= 200:
        return "Unhealthy"
    if aqi <= 300:
        return "Very Unhealthy"
    return "Hazardous"


def format_share_message(city: City, current: CurrentConditions, is_metric: bool) -> str:
    """Plain text summary handed to the platform share sheet."""
    to_imperial = not is_metric
    temperature = (
        "-" if current.temperature is None
        else format_temperature(current.temperature, to_imperial)
    )
    wind = "-" if current.windspeed is None else format_speed(current.windspeed, to_imperial)
    lines = [
        f"Weather in {city.name}:",
        f"Temperature: {temperature}",
        f"Wind: {wind}",
        f"Direction: {format_number_plain(current.winddirection)}°",
    ]
    return "\n".join(lines)


def format_number_plain(value: float | None) -> str:
    if value is None:
        return "-"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def forecast_title(city_name: str | None, time_range: int) -> str:
    days, hours = divmod(time_range, 24)
    if days > 0 and hours > 0:
        span = f"{days}d {hours}h Forecast"
    elif days > 0:
        span = f"{days} day{'s' if days > 1 else ''} Forecast"
    else:
        span = f"{hours} hour{'s' if hours > 1 else ''} Forecast"
    return f"{city_name or 'Weather'} - {span}"


def comparison_rows(results: tuple[ComparisonResult, ...], is_metric: bool) -> list[dict]:
    """One display row per compared city, current conditions only."""
    to_imperial = not is_metric
    rows = []
    for result in results:
        current = result.snapshot.current
        rows.append(
            {
                "city": result.city.name,
                "temperature": (
                    format_temperature(current.temperature, to_imperial)
                    if current and current.temperature is not None
                    else "-"
                ),
                "wind": (
                    format_speed(current.windspeed, to_imperial)
                    if current and current.windspeed is not None
                    else "-"
                ),
            }
        )
    return rows
