"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# TOML section -> {key in section: AppConfig field}
TOML_SECTIONS: dict[str, dict[str, str]] = {
    "transport": {
        "base_url": "transport_api_base_url",
        "app_id": "transport_api_app_id",
        "app_key": "transport_api_app_key",
        "timeout": "transport_api_timeout",
    },
    "search": {
        "bus_stop_radius_meters": "bus_stop_radius_meters",
        "train_station_radius_meters": "train_station_radius_meters",
        "default_radius_meters": "default_radius_meters",
    },
    "places": {"url": "places_api_url"},
    "auth": {"url": "auth_api_url"},
    "storage": {"path": "storage_path"},
}


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # TransportAPI configuration
    transport_api_base_url: str = Field(
        default="https://transportapi.com/v3/uk", description="TransportAPI base URL"
    )
    transport_api_app_id: str = Field(default="", description="TransportAPI app_id credential")
    transport_api_app_key: str = Field(default="", description="TransportAPI app_key credential")
    transport_api_timeout: float = Field(
        default=10.0, description="Timeout for each remote API request in seconds"
    )

    # Other remote APIs
    places_api_url: str = Field(
        default="https://6926adf126e7e41498fb2320.mockapi.io/api",
        description="Base URL of the mock places API",
    )
    auth_api_url: str = Field(
        default="https://dummyjson.com", description="Base URL of the demo auth API"
    )

    # Nearby search radii
    bus_stop_radius_meters: float = Field(
        default=2000.0, description="Radius for nearby bus stops in meters"
    )
    train_station_radius_meters: float = Field(
        default=5000.0, description="Radius for nearby train stations in meters"
    )
    default_radius_meters: float = Field(
        default=5000.0, description="Radius for single-type nearby searches in meters"
    )

    # Local storage
    storage_path: str = Field(
        default="~/.wandermate/storage.json",
        description="JSON file holding favorites, users and the session",
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # Optional TOML config file; values in it override env/defaults
    config_file: str | None = Field(
        default=None, description="Path to TOML configuration file"
    )

    @field_validator(
        "transport_api_timeout",
        "bus_stop_radius_meters",
        "train_station_radius_meters",
        "default_radius_meters",
    )
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """Validate timeouts and radii are positive."""
        if v <= 0:
            raise ValueError("must be greater than 0")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load TOML configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def apply_toml_overrides(self) -> "AppConfig":
        """Return a copy with values from the TOML file applied.

        Does nothing when no config file is set. Overridden values go through
        the same validation as environment values.
        """
        if not self.config_file:
            return self

        toml_data = self._load_toml_data()
        updates: dict[str, Any] = {}
        for section_name, mapping in TOML_SECTIONS.items():
            section = toml_data.get(section_name)
            if not isinstance(section, dict):
                continue
            for key, field_name in mapping.items():
                if key in section:
                    updates[field_name] = section[key]

        if not updates:
            return self
        return type(self)(**{**self.model_dump(), **updates})
