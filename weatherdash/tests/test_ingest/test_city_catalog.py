"""Tests for city catalog loading and search."""

from pathlib import Path

import yaml

from weatherdash.config.defaults import DEFAULT_CITIES
from weatherdash.ingest.city_catalog import (
    filter_cities,
    find_city,
    load_cities,
    sort_cities,
)
from weatherdash.models.weather import City


class TestLoadCities:
    def test_json_sorted_by_name(self, fixtures_dir: Path):
        cities = load_cities(fixtures_dir / "cities.json")
        assert [c.name for c in cities] == ["Amsterdam", "Athens", "Berlin", "Bern", "zurich"]
        assert cities[0].lat == 52.3676

    def test_yaml(self, tmp_path: Path):
        path = tmp_path / "cities.yaml"
        path.write_text(yaml.dump([{"name": "Lima", "lat": -12.05, "lon": -77.04}]))
        assert load_cities(path) == [City(name="Lima", lat=-12.05, lon=-77.04)]

    def test_defaults_without_path(self):
        cities = load_cities(None)
        assert len(cities) == len(DEFAULT_CITIES)
        assert cities == sort_cities(cities)


class TestFilterCities:
    def _cities(self) -> list[City]:
        return [City(name=f"City {i:02d}", lat=0.0, lon=0.0) for i in range(30)]

    def test_empty_query_limited(self):
        cities = self._cities()
        assert filter_cities(cities, "", limit=20) == cities[:20]

    def test_case_insensitive_substring(self, fixtures_dir: Path):
        cities = load_cities(fixtures_dir / "cities.json")
        assert [c.name for c in filter_cities(cities, "BER")] == ["Berlin", "Bern"]

    def test_query_not_limited(self):
        cities = self._cities()
        assert len(filter_cities(cities, "city", limit=5)) == 30

    def test_no_match(self):
        assert filter_cities(self._cities(), "xyz") == []


class TestFindCity:
    def test_by_exact_name(self, fixtures_dir: Path):
        cities = load_cities(fixtures_dir / "cities.json")
        assert find_city(cities, "Bern").lat == 46.948
        assert find_city(cities, "bern") is None
