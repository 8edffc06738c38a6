"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, PrivateAttr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles.

    When config_file is set, the TOML file is read once on construction and
    its [fares] table overrides the fare fields. Overrides go through the same
    validation as environment values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Fare configuration
    base_fare: float = Field(
        default=3.0, ge=0, allow_inf_nan=False, description="Base fare in yuan"
    )
    increment_rate: float = Field(
        default=0.5,
        ge=0,
        allow_inf_nan=False,
        description="Fare added per travelled km in yuan",
    )
    vip_discount: float = Field(
        default=0.8,
        gt=0,
        le=1,
        allow_inf_nan=False,
        description="Factor the fare is multiplied by for VIP passengers",
    )

    # Console configuration
    max_prompt_attempts: int = Field(
        default=3,
        ge=1,
        description="How often the interactive session re-prompts after invalid input",
    )
    log_level: str = Field(default="WARNING", description="Log level: DEBUG, INFO, WARNING or ERROR")

    # TOML config file path
    # If not set, the built-in station table and the defaults above are used
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file for fares and the station table",
    )

    _toml_data: dict[str, Any] = PrivateAttr(default_factory=dict)

    @field_validator("base_fare", "increment_rate", "vip_discount", mode="before")
    @classmethod
    def validate_fare_is_number(cls, v: Any) -> Any:
        """Reject booleans, which would otherwise be read as 0.0 or 1.0."""
        if isinstance(v, bool):
            raise ValueError("fare values must be numbers, not booleans")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the supported levels."""
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError("log_level must be one of 'DEBUG', 'INFO', 'WARNING' or 'ERROR'")
        return v.upper()

    def model_post_init(self, context: Any) -> None:
        """Load the TOML file, if any, and apply its fare overrides."""
        self._toml_data = self._load_toml_data()

        fares = self._toml_data.get("fares", {})
        if not isinstance(fares, dict):
            raise ValueError("TOML config 'fares' must be a table")
        for name in ("base_fare", "increment_rate", "vip_discount"):
            if name in fares:
                setattr(self, name, fares[name])

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file."""
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def get_stations_config(self) -> list[dict[str, Any]] | None:
        """Return the station table as a list of dicts from the TOML file.

        Returns None when no config file is set or the file defines no
        [[stations]], meaning the built-in table should be used.
        """
        stations = self._toml_data.get("stations")
        if stations is None:
            return None
        if not isinstance(stations, list):
            raise ValueError("TOML config 'stations' must be a list")
        return stations
