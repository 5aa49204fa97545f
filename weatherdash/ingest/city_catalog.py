"""City catalog loading and search."""

import json
import logging
from pathlib import Path

import yaml

from weatherdash.config.defaults import DEFAULT_CITIES
from weatherdash.models.weather import City

logger = logging.getLogger(__name__)


def sort_cities(cities) -> list[City]:
    """Sort by name, case-insensitively, ties broken by exact name."""
    return sorted(cities, key=lambda c: (c.name.casefold(), c.name))


def load_cities(path: str | Path | None = None) -> list[City]:
    """Load ``{name, lat, lon}`` records from a JSON or YAML file.

    Falls back to DEFAULT_CITIES when no path is given.
    """
    if path is None:
        return sort_cities(DEFAULT_CITIES)

    path = Path(path)
    with open(path) as f:
        if path.suffix in (".yaml", ".yml"):
            raw = yaml.safe_load(f) or []
        else:
            raw = json.load(f)

    cities = [
        City(name=str(r["name"]), lat=float(r["lat"]), lon=float(r["lon"]))
        for r in raw
    ]
    logger.info("Loaded %d cities from %s", len(cities), path)
    return sort_cities(cities)


def filter_cities(cities: list[City], query: str, limit: int = 20) -> list[City]:
    """Case-insensitive substring search.

    An empty query returns the first ``limit`` cities.
    """
    query = query.strip().casefold()
    if not query:
        return cities[:limit]
    return [c for c in cities if query in c.name.casefold()]


def find_city(cities: list[City], name: str) -> City | None:
    for city in cities:
        if city.name == name:
            return city
    return None
