"""Fetch orchestration: primary forecast, air quality and comparison batches.

All work runs on one event loop. Superseded cycles are not aborted; their
results are dropped at apply time when a newer cycle has started.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from weatherdash.config.schema import AlertThresholds
from weatherdash.errors import ComparisonFetchError, NetworkError, SecondaryFetchError
from weatherdash.ingest.open_meteo_client import OpenMeteoClient
from weatherdash.ingest.snapshot_builder import build_air_quality, build_weather_snapshot
from weatherdash.models.weather import (
    AirQualitySnapshot,
    City,
    ComparisonResult,
    WeatherSnapshot,
)
from weatherdash.processing.alerts import DEFAULT_THRESHOLDS, evaluate_alerts
from weatherdash.state import app_state
from weatherdash.state.app_state import AppState
from weatherdash.state.comparison import ComparisonSetManager

logger = logging.getLogger(__name__)

DEFAULT_LOADING_DELAY = 0.2  # seconds

Listener = Callable[[AppState], None]


class WeatherFetchOrchestrator:
    def __init__(
        self,
        client: OpenMeteoClient,
        state: AppState | None = None,
        comparison: ComparisonSetManager | None = None,
        thresholds: AlertThresholds = DEFAULT_THRESHOLDS,
        loading_delay: float = DEFAULT_LOADING_DELAY,
    ):
        self.client = client
        self.comparison = comparison or ComparisonSetManager()
        self.thresholds = thresholds
        self.loading_delay = loading_delay
        self._state = state or AppState()
        self._listeners: list[Listener] = []
        self._generation = 0
        self._comparison_generation = 0

    @property
    def state(self) -> AppState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with every new state. Returns an unsubscribe hook."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _set_state(self, new_state: AppState) -> None:
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)

    # --- Events ---

    async def dispatch(self, update: Callable[[AppState], AppState]) -> None:
        """Apply a state update, then run whatever fetches it made stale.

        Cycles are started before the first suspension point, so a later
        event always supersedes an earlier one.
        """
        before = self._state
        self._set_state(update(before))
        after = self._state

        jobs: list[Awaitable[None] | None] = []
        if after.fetch_key() is not None and after.fetch_key() != before.fetch_key():
            jobs.append(self._start_weather_cycle())
        if after.comparison_key() != before.comparison_key():
            jobs.append(self._start_comparison_cycle())
        jobs = [job for job in jobs if job is not None]
        if jobs:
            await asyncio.gather(*jobs)

    async def select_city(self, city: City) -> None:
        await self.dispatch(lambda s: app_state.select_city(s, city))

    async def set_time_range(self, hours: int) -> None:
        await self.dispatch(lambda s: app_state.set_time_range(s, hours))

    async def toggle_variable(self, key: str) -> None:
        await self.dispatch(lambda s: app_state.toggle_variable(s, key))

    async def set_units(self, metric: bool) -> None:
        await self.dispatch(lambda s: app_state.set_units(s, metric))

    async def set_comparison_enabled(self, enabled: bool) -> None:
        await self.dispatch(lambda s: app_state.set_comparison_enabled(s, enabled))

    async def add_comparison_city(self, city: City) -> bool:
        """Add a city to the comparison set. Raises CapacityError when full."""
        added = self.comparison.add(city)
        if added:
            await self._sync_comparison_cities()
        return added

    async def remove_comparison_city(self, index: int) -> City:
        removed = self.comparison.remove(index)
        await self._sync_comparison_cities()
        return removed

    async def _sync_comparison_cities(self) -> None:
        cities = self.comparison.cities
        await self.dispatch(lambda s: app_state.set_comparison_cities(s, cities))

    # --- Primary fetch cycle ---

    async def fetch_weather(self) -> None:
        """Re-run the fetch cycle for the selected city and time range."""
        cycle = self._start_weather_cycle()
        if cycle is not None:
            await cycle

    def _start_weather_cycle(self) -> Awaitable[None] | None:
        city = self._state.selected_city
        if city is None:
            return None
        self._generation += 1
        self._set_state(app_state.begin_fetch(self._state))
        return self._run_weather_cycle(self._generation, city, self._state.time_range)

    def _is_current(self, generation: int, city: City, time_range: int) -> bool:
        return (
            generation == self._generation
            and self._state.fetch_key() == (city.name, time_range)
        )

    def _show_loading(self, generation: int) -> None:
        if generation == self._generation and not self._state.loading:
            self._set_state(app_state.show_loading(self._state))

    async def _run_weather_cycle(self, generation: int, city: City, time_range: int) -> None:
        loading_timer = asyncio.get_running_loop().call_later(
            self.loading_delay, self._show_loading, generation
        )
        air_quality_task = asyncio.create_task(
            self._fetch_air_quality(generation, city, time_range)
        )

        try:
            snapshot = await self._load_weather(city, time_range)
        except NetworkError as e:
            if self._is_current(generation, city, time_range):
                logger.error("Weather fetch failed for %s: %s", city.name, e)
                self._set_state(app_state.apply_weather_error(self._state, str(e)))
            else:
                logger.info("Ignoring failure of superseded fetch for %s", city.name)
        else:
            if self._is_current(generation, city, time_range):
                alerts = evaluate_alerts(snapshot.current, self.thresholds)
                self._set_state(app_state.apply_weather(self._state, snapshot, alerts))
                logger.info(
                    "Loaded %d hours for %s (%d alerts)",
                    len(snapshot), city.name, len(alerts),
                )
            else:
                logger.info("Discarding superseded result for %s", city.name)
        finally:
            loading_timer.cancel()
            await air_quality_task

    async def _load_weather(self, city: City, time_range: int) -> WeatherSnapshot:
        raw = await self.client.get_forecast(city)
        try:
            return build_weather_snapshot(raw, time_range)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise NetworkError(f"Malformed forecast for {city.name}: {e}") from e

    # --- Air quality ---

    async def _fetch_air_quality(self, generation: int, city: City, time_range: int) -> None:
        try:
            snapshot = await self._load_air_quality(city)
        except SecondaryFetchError as e:
            logger.warning("Air quality unavailable for %s: %s", city.name, e)
            return
        if self._is_current(generation, city, time_range):
            self._set_state(app_state.apply_air_quality(self._state, snapshot))

    async def _load_air_quality(self, city: City) -> AirQualitySnapshot | None:
        try:
            raw = await self.client.get_air_quality(city)
            return build_air_quality(raw)
        except NetworkError as e:
            raise SecondaryFetchError(str(e)) from e
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise SecondaryFetchError(f"Malformed air quality for {city.name}: {e}") from e

    # --- Comparison ---

    def _start_comparison_cycle(self) -> Awaitable[None] | None:
        """Disabled or empty comparison clears results without a network call."""
        self._comparison_generation += 1
        state = self._state
        if not state.comparison_enabled or not state.comparison_cities:
            if state.comparison_results:
                self._set_state(app_state.apply_comparison(state, ()))
            return None
        return self._run_comparison_cycle(
            self._comparison_generation, state.comparison_cities, state.time_range
        )

    async def _run_comparison_cycle(
        self, generation: int, cities: tuple[City, ...], time_range: int
    ) -> None:
        """Publish the batch only if every city succeeds."""
        try:
            results = await self._fetch_comparison_batch(cities, time_range)
        except ComparisonFetchError as e:
            logger.error("Comparison batch discarded: %s", e)
            return

        if generation != self._comparison_generation:
            logger.info("Discarding superseded comparison batch")
            return
        self._set_state(app_state.apply_comparison(self._state, results))

    async def _fetch_comparison_batch(
        self, cities: tuple[City, ...], time_range: int
    ) -> tuple[ComparisonResult, ...]:
        outcomes = await asyncio.gather(
            *(self._load_weather(city, time_range) for city in cities),
            return_exceptions=True,
        )
        for city, outcome in zip(cities, outcomes):
            if isinstance(outcome, NetworkError):
                raise ComparisonFetchError(
                    f"Failed to fetch data for {city.name}: {outcome}"
                ) from outcome
            if isinstance(outcome, BaseException):
                raise outcome
        return tuple(
            ComparisonResult(city=city, snapshot=snapshot)
            for city, snapshot in zip(cities, outcomes)
        )
