"""Tests for the bounded comparison set."""

import pytest

from weatherdash.errors import CapacityError
from weatherdash.models.weather import City
from weatherdash.state.comparison import ComparisonSetManager
from weatherdash.tests.helpers import BERLIN, OSLO, PARIS, ROME


@pytest.fixture
def full_set() -> ComparisonSetManager:
    manager = ComparisonSetManager()
    for city in (BERLIN, PARIS, ROME):
        manager.add(city)
    return manager


class TestAdd:
    def test_appends_in_order(self):
        manager = ComparisonSetManager()
        assert manager.add(PARIS) is True
        assert manager.add(BERLIN) is True
        assert manager.cities == (PARIS, BERLIN)

    def test_fourth_city_rejected(self, full_set: ComparisonSetManager):
        with pytest.raises(CapacityError) as exc_info:
            full_set.add(OSLO)
        assert len(full_set) == 3
        assert exc_info.value.capacity == 3
        assert "up to 3 cities" in str(exc_info.value)

    def test_duplicate_name_rejected(self):
        manager = ComparisonSetManager()
        manager.add(BERLIN)
        assert manager.add(City(name="Berlin", lat=1.0, lon=1.0)) is False
        assert manager.cities == (BERLIN,)

    def test_custom_capacity(self):
        manager = ComparisonSetManager(capacity=1)
        manager.add(BERLIN)
        assert manager.is_full()
        with pytest.raises(CapacityError):
            manager.add(PARIS)


class TestRemove:
    def test_by_index(self, full_set: ComparisonSetManager):
        removed = full_set.remove(1)
        assert removed == PARIS
        assert full_set.cities == (BERLIN, ROME)

    def test_frees_capacity(self, full_set: ComparisonSetManager):
        full_set.remove(0)
        assert full_set.add(OSLO) is True
        assert full_set.cities == (PARIS, ROME, OSLO)

    @pytest.mark.parametrize("index", [3, -1, 10])
    def test_out_of_range(self, full_set: ComparisonSetManager, index: int):
        with pytest.raises(IndexError):
            full_set.remove(index)
        assert len(full_set) == 3
