"""Open-Meteo forecast and air-quality API client with optional retry."""

import asyncio
import logging

import httpx

from weatherdash.config.defaults import VARIABLE_KEYS
from weatherdash.config.schema import AIR_QUALITY_URL, FORECAST_URL, ApiConfig
from weatherdash.errors import NetworkError
from weatherdash.models.weather import City

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "weatherdash/0.1.0"
RETRY_STATUSES = (429, 503)


class OpenMeteoClient:
    def __init__(
        self,
        forecast_url: str = FORECAST_URL,
        air_quality_url: str = AIR_QUALITY_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 0,
        retry_base_delay: float = 1.0,
        http: httpx.AsyncClient | None = None,
    ):
        self.forecast_url = forecast_url
        self.air_quality_url = air_quality_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay
        self._http = http
        self._owns_http = http is None

    @classmethod
    def from_config(cls, api: ApiConfig) -> "OpenMeteoClient":
        return cls(
            forecast_url=api.forecast_url,
            air_quality_url=api.air_quality_url,
            user_agent=api.user_agent,
            timeout=api.timeout,
            max_retries=api.max_retries,
            retry_base_delay=api.retry_base_delay,
        )

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(
                headers={"User-Agent": self.user_agent}, timeout=self.timeout
            )
        return self._http

    async def aclose(self) -> None:
        if self._http is not None and self._owns_http:
            await self._http.aclose()
            self._http = None

    async def get_forecast(self, city: City) -> dict:
        """Hourly series for every catalog variable plus current conditions."""
        params = {
            "latitude": city.lat,
            "longitude": city.lon,
            "hourly": ",".join(VARIABLE_KEYS),
            "timezone": "auto",
            "current_weather": "true",
        }
        return await self._get_json(self.forecast_url, params)

    async def get_air_quality(self, city: City) -> dict:
        params = {
            "latitude": city.lat,
            "longitude": city.lon,
            "current": "european_aqi,us_aqi",
            "hourly": "pm10,pm2_5",
        }
        return await self._get_json(self.air_quality_url, params)

    async def _get_json(self, url: str, params: dict) -> dict:
        """GET a JSON document, raising NetworkError on any failure.

        Retries on 503/429 and transport errors with exponential backoff
        when ``max_retries`` is set.
        """
        for attempt in range(self.max_retries + 1):
            try:
                resp = await self._client().get(url, params=params)
            except httpx.RequestError as e:
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "Request error for %s, retrying in %.1fs: %s", url, delay, e
                    )
                    await asyncio.sleep(delay)
                    continue
                raise NetworkError(f"Request failed: {e}") from e

            if resp.status_code in RETRY_STATUSES and attempt < self.max_retries:
                delay = self.retry_base_delay * (2**attempt)
                logger.warning(
                    "%s returned %d, retrying in %.1fs (attempt %d/%d)",
                    url, resp.status_code, delay, attempt + 1, self.max_retries,
                )
                await asyncio.sleep(delay)
                continue

            if not resp.is_success:
                raise NetworkError(f"HTTP {resp.status_code}", status_code=resp.status_code)
            try:
                return resp.json()
            except ValueError as e:
                raise NetworkError(f"Invalid JSON from {url}: {e}") from e

        raise NetworkError(f"Retries exhausted for {url}")
