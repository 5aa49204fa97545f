"""Turn a weather snapshot into chart labels and unit-converted datasets."""

import logging
from datetime import datetime

from weatherdash.config.defaults import VARIABLES_BY_KEY
from weatherdash.models.chart import ChartData, ChartSeries
from weatherdash.models.common import UnitClass
from weatherdash.models.weather import WeatherSnapshot
from weatherdash.processing.units import convert_speed, convert_temperature

logger = logging.getLogger(__name__)

WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def label_skip(time_range: int) -> int:
    """Stride used when thinning labels for a time range."""
    if time_range <= 24:
        return 2
    if time_range <= 72:
        return 4
    if time_range <= 168:
        return 6
    return 8


def format_label(ts: datetime, index: int, time_range: int) -> str:
    """Axis label for one point; empty for points the tier leaves unlabeled.

    Timestamps are location-local wall-clock times and are formatted as-is.
    """
    if time_range <= 24:
        return f"{ts.hour:02d}:00"
    if time_range <= 72:
        # isoweekday: Mon=1 .. Sun=7
        return f"{WEEKDAYS[ts.isoweekday() % 7]} {ts.hour}h"
    if time_range <= 168:
        if index % 3 == 0:
            return f"{ts.month}/{ts.day} {ts.hour}h"
        return ""
    if index % 6 == 0:
        return f"{ts.month}/{ts.day}"
    return ""


def generate_labels(times: tuple[str, ...] | list[str], time_range: int) -> list[str]:
    """One label per timestamp, using the tier selected by ``time_range``."""
    return [
        format_label(datetime.fromisoformat(t), i, time_range)
        for i, t in enumerate(times)
    ]


def thin_labels(labels: list[str], time_range: int) -> list[str]:
    """Drop labels for rendering density.

    A label survives when its index is on the skip stride or when the tier
    already made it non-empty.
    """
    skip = label_skip(time_range)
    return [label for i, label in enumerate(labels) if i % skip == 0 or label != ""]


def convert_series(
    values: tuple[float | None, ...], unit_class: UnitClass, to_imperial: bool
) -> tuple[float | None, ...]:
    if not to_imperial or unit_class == UnitClass.NONE:
        return tuple(values)
    convert = convert_temperature if unit_class == UnitClass.TEMPERATURE else convert_speed
    return tuple(None if v is None else convert(v, True) for v in values)


def build_datasets(
    snapshot: WeatherSnapshot, selected_variables: list[str], to_imperial: bool
) -> list[ChartSeries]:
    datasets = []
    for key in selected_variables:
        descriptor = VARIABLES_BY_KEY.get(key)
        if descriptor is None:
            logger.debug("Skipping unknown variable %s", key)
            continue
        values = snapshot.hourly.get(key, ())
        datasets.append(
            ChartSeries(
                key=key,
                label=descriptor.label,
                points=convert_series(values, descriptor.unit_class, to_imperial),
                color=descriptor.color,
            )
        )
    return datasets


def build_chart_data(
    snapshot: WeatherSnapshot | None,
    time_range: int,
    selected_variables: list[str],
    to_imperial: bool,
) -> ChartData | None:
    """Build chart data for the renderer. ``None`` means not ready."""
    if snapshot is None:
        return None
    labels = generate_labels(snapshot.time, time_range)
    return ChartData(
        labels=tuple(thin_labels(labels, time_range)),
        axis_labels=tuple(labels),
        datasets=tuple(build_datasets(snapshot, selected_variables, to_imperial)),
    )
