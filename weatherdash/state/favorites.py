"""Favorite cities, unique by name and persisted as one JSON document."""

import json
import logging

from weatherdash.errors import StorageError
from weatherdash.models.weather import City
from weatherdash.storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

FAVORITES_KEY = "favorites"


class FavoritesStore:
    def __init__(self, store: KeyValueStore, key: str = FAVORITES_KEY):
        self.store = store
        self.key = key
        self._cities: list[City] = []

    @property
    def cities(self) -> tuple[City, ...]:
        return tuple(self._cities)

    def __len__(self) -> int:
        return len(self._cities)

    def load(self) -> tuple[City, ...]:
        """Replace the in-memory list with the persisted one (empty if none)."""
        self._cities = []
        try:
            raw = self.store.get(self.key)
        except StorageError:
            logger.exception("Failed to read favorites, starting empty")
            return self.cities
        if raw:
            try:
                self._cities = _dedupe(
                    City(name=r["name"], lat=float(r["lat"]), lon=float(r["lon"]))
                    for r in json.loads(raw)
                )
            except (ValueError, KeyError, TypeError):
                logger.exception("Failed to load favorites, starting empty")
                self._cities = []
        return self.cities

    def contains(self, city: City) -> bool:
        return any(c.name == city.name for c in self._cities)

    def toggle(self, city: City) -> bool:
        """Remove ``city`` if a same-named city is present, else append it.

        Returns True if the city is a favorite afterwards.
        """
        if self.contains(city):
            self._cities = [c for c in self._cities if c.name != city.name]
            added = False
        else:
            self._cities = [*self._cities, city]
            added = True
        self._persist()
        return added

    def _persist(self) -> None:
        payload = json.dumps([c.to_dict() for c in self._cities])
        try:
            self.store.set(self.key, payload)
        except StorageError:
            logger.exception("Failed to save %d favorites", len(self._cities))
            return
        logger.debug("Persisted %d favorites", len(self._cities))


def _dedupe(cities) -> list[City]:
    seen: set[str] = set()
    result = []
    for city in cities:
        if city.name not in seen:
            seen.add(city.name)
            result.append(city)
    return result
