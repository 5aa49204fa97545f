"""CSV and JSON export payloads for the current dataset."""

import json
from datetime import datetime

from weatherdash.config.defaults import variable_label
from weatherdash.models.common import utc_now_iso
from weatherdash.models.weather import City, WeatherSnapshot


def format_local_timestamp(iso_ts: str) -> str:
    """US-English local rendering, e.g. ``1/1/2024, 12:00:00 AM``.

    The timestamp is treated as wall-clock time at the city.
    """
    dt = datetime.fromisoformat(iso_ts)
    hour12 = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return (
        f"{dt.month}/{dt.day}/{dt.year}, "
        f"{hour12}:{dt.minute:02d}:{dt.second:02d} {meridiem}"
    )


def format_number(value: float | int | None) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_csv(snapshot: WeatherSnapshot, selected_variables: list[str], city: City | None = None) -> str:
    """Header ``Time,<labels>`` then one row per timestamp, raw metric values.

    ``city`` is accepted for symmetry with the export file name; it does not
    appear in the payload.
    """
    header = ["Time", *(variable_label(key) for key in selected_variables)]
    rows = [",".join(header)]
    for i, ts in enumerate(snapshot.time):
        row = [format_local_timestamp(ts)]
        for key in selected_variables:
            values = snapshot.hourly.get(key)
            row.append(format_number(values[i]) if values is not None else "")
        rows.append(",".join(row))
    return "\n".join(rows)


def to_json(
    snapshot: WeatherSnapshot,
    city: City,
    time_range: int,
    export_time: str | None = None,
) -> str:
    data = {
        "city": city.name,
        "export_time": export_time or utc_now_iso(),
        "time_range": time_range,
        "data": {
            "time": list(snapshot.time),
            "hourly": {key: list(values) for key, values in snapshot.hourly.items()},
            "current": snapshot.current.to_dict() if snapshot.current else None,
        },
    }
    return json.dumps(data, indent=2, ensure_ascii=False)
