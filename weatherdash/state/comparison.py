"""Bounded set of cities selected for side-by-side comparison."""

from weatherdash.errors import CapacityError
from weatherdash.models.weather import City

MAX_COMPARISON_CITIES = 3


class ComparisonSetManager:
    """Ordered, name-unique, capped list of cities. Not persisted."""

    def __init__(self, capacity: int = MAX_COMPARISON_CITIES):
        self.capacity = capacity
        self._cities: list[City] = []

    @property
    def cities(self) -> tuple[City, ...]:
        return tuple(self._cities)

    def __len__(self) -> int:
        return len(self._cities)

    def is_full(self) -> bool:
        return len(self._cities) >= self.capacity

    def contains(self, city: City) -> bool:
        return any(c.name == city.name for c in self._cities)

    def add(self, city: City) -> bool:
        """Append ``city``.

        Raises CapacityError when the set is full. A duplicate name is a
        silent no-op and returns False.
        """
        if self.is_full():
            raise CapacityError(self.capacity)
        if self.contains(city):
            return False
        self._cities = [*self._cities, city]
        return True

    def remove(self, index: int) -> City:
        if not 0 <= index < len(self._cities):
            raise IndexError(
                f"comparison index {index} out of range (size {len(self._cities)})"
            )
        removed = self._cities[index]
        self._cities = self._cities[:index] + self._cities[index + 1:]
        return removed
