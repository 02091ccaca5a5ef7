"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the defaults used by
the importer, the renderer and logging. Command-line flags take
precedence over these values.

Configuration can be overridden via environment variables:
- NETDRAW_IMPORT_ANALYSIS_PERIOD=2.0
- NETDRAW_RENDER_FORMAT=PDF
- NETDRAW_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

OutputFormat = Literal["PDF", "PNG", "SVG"]


class ImportConfig(BaseSettings):
    """CSV network import configuration.

    Environment variables prefixed with NETDRAW_IMPORT_.
    """

    model_config = SettingsConfigDict(env_prefix="NETDRAW_IMPORT_")

    analysis_period: float = 1.0  # hours; capacity is in vehicles/period
    vertices_file: str = "vertices.csv"
    edges_file: str = "edges.csv"

    @field_validator("analysis_period")
    @classmethod
    def _period_must_be_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError(f"analysis period must be positive, got {value}")
        return value


class RenderConfig(BaseSettings):
    """Graphic output configuration.

    Environment variables prefixed with NETDRAW_RENDER_.
    """

    model_config = SettingsConfigDict(env_prefix="NETDRAW_RENDER_")

    width_cm: float = Field(default=14.0, gt=0)
    height_cm: float = Field(default=14.0, gt=0)
    format: OutputFormat = "PNG"
    dpi: int = Field(default=300, gt=0)
    draw_intermediates: bool = False


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with NETDRAW_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="NETDRAW_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.importing.analysis_period)
        print(config.render.format)

    Environment variables prefixed with NETDRAW_.
    """

    model_config = SettingsConfigDict(env_prefix="NETDRAW_")

    importing: ImportConfig = Field(default_factory=ImportConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
