"""12-factor configuration adapter using environment variables."""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = (
    "https://sedeaplicaciones.minetur.gob.es/ServiciosRESTCarburantes/PreciosCarburantes"
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_prefix="GASOPRICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Fuel price API configuration
    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="Base URL of the Ministry fuel price REST service",
    )
    aggregator_url: str | None = Field(
        default=None,
        description="Optional caching endpoint serving GET /fuel_stations; "
        "used instead of the Ministry station list when set",
    )
    api_timeout_seconds: float = Field(
        default=60.0,
        description="Total timeout for a single API request in seconds",
    )

    # Local cache
    cache_path: str = Field(
        default="~/.cache/gasoprice/snapshot.sqlite3",
        description="Path to the SQLite file holding the cached station list",
    )
    staleness_minutes: int = Field(
        default=30,
        description="Minutes after which the cached station list is refetched",
    )

    # Search radius (meters)
    default_radius_m: float = Field(default=4000.0, description="Initial search radius")
    min_radius_m: float = Field(default=1000.0, description="Smallest allowed search radius")
    max_radius_m: float = Field(
        default=10_000_000.0, description="Largest allowed search radius"
    )

    # Location
    location_retry_seconds: float = Field(
        default=5.0,
        description="Delay before restarting location updates after a location error",
    )

    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator("api_base_url", "aggregator_url")
    @classmethod
    def strip_trailing_slash(cls, v: str | None) -> str | None:
        """Normalize URLs so endpoint paths can be appended."""
        return v.rstrip("/") if v else v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    @field_validator("staleness_minutes")
    @classmethod
    def validate_staleness(cls, v: int) -> int:
        """Validate staleness window is positive."""
        if v <= 0:
            raise ValueError("staleness_minutes must be positive")
        return v

    @model_validator(mode="after")
    def validate_radius_bounds(self) -> "AppConfig":
        """Validate the radius range and that the default lies within it."""
        if self.min_radius_m <= 0 or self.min_radius_m > self.max_radius_m:
            raise ValueError("radius bounds must satisfy 0 < min_radius_m <= max_radius_m")
        if not self.min_radius_m <= self.default_radius_m <= self.max_radius_m:
            raise ValueError("default_radius_m must lie between min_radius_m and max_radius_m")
        return self

    @property
    def resolved_cache_path(self) -> Path:
        """Cache path with ~ expanded."""
        return Path(self.cache_path).expanduser()

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a config that does not read any .env file."""
        return cls(_env_file=None, **overrides)  # type: ignore[call-arg]
