"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import DEMO_API_KEY, EnumEnvironment, EnumLogFormat, EnumLogLevel
from src.shared.consts import DONKI_BASE_URL
from src.shared.env import load_secret_file_variables  # noqa: F401


class GESettings(BaseSettings):
    """Service identity and HTTP server settings."""

    title: str = Field(default="Cosmic Forecast", description="Service title")
    description: str = Field(
        default="Space weather snapshots, history and 7-day outlook "
        "derived from NASA DONKI",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("GE_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("GE_BUILD_TIME", "BUILD_TIME"),
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="GE_", case_sensitive=False, extra="ignore"
    )


class DonkiSettings(BaseSettings):
    """NASA DONKI API settings."""

    base_url: str = Field(default=DONKI_BASE_URL, description="DONKI base URL")
    api_key: str = Field(
        default=DEMO_API_KEY,
        description="api.nasa.gov key (NASA_API_KEY_FILE is also honoured)",
        validation_alias=AliasChoices("DONKI_API_KEY", "NASA_API_KEY"),
    )
    timeout: Optional[float] = Field(
        default=30.0, description="HTTP timeout in seconds, empty for none"
    )

    model_config = SettingsConfigDict(
        env_prefix="DONKI_", case_sensitive=False, extra="ignore"
    )


class SpaceWeatherSettings(BaseSettings):
    """Snapshot pipeline settings."""

    offline: bool = Field(
        default=False,
        description="Serve synthetic snapshots without querying DONKI",
    )

    model_config = SettingsConfigDict(
        env_prefix="SPACE_WEATHER_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: EnumLogFormat = Field(
        default=EnumLogFormat.AUTO,
        description="Renderer: console, json, or auto (json in production)",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    ge: GESettings = Field(default_factory=GESettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    donki: DonkiSettings = Field(default_factory=DonkiSettings)
    space_weather: SpaceWeatherSettings = Field(default_factory=SpaceWeatherSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on environment.
    """
    return AppSettings()
