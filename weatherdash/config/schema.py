"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, field_validator

from weatherdash.config.defaults import TIME_RANGE_HOURS, VARIABLE_KEYS

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
AIR_QUALITY_URL = "https://air-quality-api.open-meteo.com/v1/air-quality"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    forecast_url: str = FORECAST_URL
    air_quality_url: str = AIR_QUALITY_URL
    user_agent: str = "weatherdash/0.1.0"
    timeout: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=0, ge=0)
    retry_base_delay: float = Field(default=1.0, ge=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    time_range: int = 24
    selected_variables: list[str] = ["temperature_2m", "relativehumidity_2m"]
    metric: bool = True
    loading_delay_ms: int = Field(default=200, ge=0)
    max_comparison_cities: int = Field(default=3, ge=1)
    city_list_limit: int = Field(default=20, ge=1)

    @field_validator("time_range")
    @classmethod
    def _known_time_range(cls, v: int) -> int:
        if v not in TIME_RANGE_HOURS:
            raise ValueError(f"time_range must be one of {TIME_RANGE_HOURS}, got {v}")
        return v

    @field_validator("selected_variables")
    @classmethod
    def _known_variables(cls, v: list[str]) -> list[str]:
        unknown = [key for key in v if key not in VARIABLE_KEYS]
        if unknown:
            raise ValueError(f"unknown variables: {', '.join(unknown)}")
        return v


class AlertThresholds(BaseModel):
    """Alert thresholds, always metric."""

    model_config = {"extra": "forbid"}

    heat_c: float = 35.0
    cold_c: float = -10.0
    wind_kph: float = Field(default=60.0, ge=0.0)


class StorageConfig(BaseModel):
    model_config = {"extra": "forbid"}

    db_path: str = "data/weatherdash.db"
    favorites_key: str = "favorites"
    export_dir: str = "exports"
    cities_path: str | None = None


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    display: DisplayConfig = DisplayConfig()
    alerts: AlertThresholds = AlertThresholds()
    storage: StorageConfig = StorageConfig()
