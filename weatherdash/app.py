"""Headless dashboard session: the state and actions a view layer drives."""

import logging
from datetime import datetime
from pathlib import Path

from weatherdash.config.loader import config_hash, load_config
from weatherdash.config.schema import DashboardConfig
from weatherdash.export.serializer import to_csv, to_json
from weatherdash.export.writer import ExportWriter, ShareHook, export_filename
from weatherdash.ingest.city_catalog import filter_cities, load_cities
from weatherdash.ingest.open_meteo_client import OpenMeteoClient
from weatherdash.models.chart import ChartData
from weatherdash.models.weather import City
from weatherdash.pipeline.orchestrator import WeatherFetchOrchestrator
from weatherdash.processing.series import build_chart_data
from weatherdash.reporting.formatters import (
    comparison_rows,
    forecast_title,
    format_share_message,
)
from weatherdash.state.app_state import AppState
from weatherdash.state.comparison import ComparisonSetManager
from weatherdash.state.favorites import FavoritesStore
from weatherdash.storage.database import connect, run_migrations
from weatherdash.storage.kv_store import KeyValueStore, SqliteKeyValueStore

logger = logging.getLogger(__name__)


def configure_logging(level: int | str = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


class DashboardApp:
    def __init__(
        self,
        config: DashboardConfig,
        cities: list[City],
        favorites: FavoritesStore,
        orchestrator: WeatherFetchOrchestrator,
        exporter: ExportWriter,
    ):
        self.config = config
        self.cities = cities
        self.favorites = favorites
        self.orchestrator = orchestrator
        self.exporter = exporter

    @classmethod
    def create(
        cls,
        config: DashboardConfig | None = None,
        store: KeyValueStore | None = None,
        client: OpenMeteoClient | None = None,
        share: ShareHook | None = None,
    ) -> "DashboardApp":
        """Wire a session from config; SQLite storage unless ``store`` is given."""
        config = config or DashboardConfig()
        logger.info("Creating session with config %s", config_hash(config))
        if store is None:
            conn = connect(config.storage.db_path)
            run_migrations(conn)
            store = SqliteKeyValueStore(conn)

        display = config.display
        initial = AppState(
            time_range=display.time_range,
            selected_variables=tuple(display.selected_variables),
            is_metric=display.metric,
        )
        orchestrator = WeatherFetchOrchestrator(
            client or OpenMeteoClient.from_config(config.api),
            state=initial,
            comparison=ComparisonSetManager(display.max_comparison_cities),
            thresholds=config.alerts,
            loading_delay=display.loading_delay_ms / 1000,
        )
        return cls(
            config=config,
            cities=load_cities(config.storage.cities_path),
            favorites=FavoritesStore(store, key=config.storage.favorites_key),
            orchestrator=orchestrator,
            exporter=ExportWriter(config.storage.export_dir, share=share),
        )

    @classmethod
    def from_config_file(cls, path: str | Path | None, **kwargs) -> "DashboardApp":
        return cls.create(load_config(path), **kwargs)

    @property
    def state(self) -> AppState:
        return self.orchestrator.state

    async def start(self) -> None:
        """Load favorites and select the first catalog city."""
        self.favorites.load()
        logger.info(
            "Session started: %d cities, %d favorites",
            len(self.cities), len(self.favorites),
        )
        if self.state.selected_city is None and self.cities:
            await self.orchestrator.select_city(self.cities[0])

    async def close(self) -> None:
        await self.orchestrator.client.aclose()

    def search(self, query: str) -> list[City]:
        return filter_cities(self.cities, query, self.config.display.city_list_limit)

    # --- Favorites ---

    def is_favorite(self) -> bool:
        city = self.state.selected_city
        return city is not None and self.favorites.contains(city)

    def toggle_favorite(self) -> bool:
        """Toggle the selected city. Returns True if it is now a favorite."""
        city = self.state.selected_city
        if city is None:
            return False
        return self.favorites.toggle(city)

    # --- Derived views ---

    def chart_data(self) -> ChartData | None:
        state = self.state
        return build_chart_data(
            state.weather,
            state.time_range,
            list(state.selected_variables),
            not state.is_metric,
        )

    def title(self) -> str:
        city = self.state.selected_city
        return forecast_title(city.name if city else None, self.state.time_range)

    def share_message(self) -> str | None:
        state = self.state
        if state.selected_city is None or state.weather is None or state.weather.current is None:
            return None
        return format_share_message(state.selected_city, state.weather.current, state.is_metric)

    def comparison_summary(self) -> list[dict]:
        return comparison_rows(self.state.comparison_results, self.state.is_metric)

    # --- Export ---

    def export_csv(self, now: datetime | None = None) -> Path | None:
        state = self.state
        if state.weather is None or state.selected_city is None:
            return None
        payload = to_csv(state.weather, list(state.selected_variables), state.selected_city)
        return self.exporter.write(export_filename(state.selected_city, "csv", now), payload)

    def export_json(self, now: datetime | None = None) -> Path | None:
        state = self.state
        if state.weather is None or state.selected_city is None:
            return None
        export_time = now.isoformat() if now is not None else None
        payload = to_json(state.weather, state.selected_city, state.time_range, export_time)
        return self.exporter.write(export_filename(state.selected_city, "json", now), payload)
