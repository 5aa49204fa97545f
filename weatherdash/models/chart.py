"""Chart-ready series models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChartSeries:
    key: str
    label: str
    points: tuple[float | None, ...]
    color: str


@dataclass(frozen=True)
class ChartData:
    labels: tuple[str, ...]  # thinned for display
    axis_labels: tuple[str, ...]  # one per data point
    datasets: tuple[ChartSeries, ...]
