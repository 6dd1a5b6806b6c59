"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for configuration:
seed data locations, suggestion tuning and logging.

Configuration can be overridden via environment variables:
- NAVX_GRAPH_DATA_DIR=/path/to/data
- NAVX_SUGGEST_LIMIT=5
- NAVX_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class GraphConfig(BaseSettings):
    """Graph seed data configuration.

    Environment variables prefixed with NAVX_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="NAVX_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    locations_file: str = "locations.csv"
    edges_file: str = "edges.csv"

    @property
    def locations_path(self) -> Path:
        """Full path to locations CSV file."""
        return self.data_dir / self.locations_file

    @property
    def edges_path(self) -> Path:
        """Full path to edges CSV file."""
        return self.data_dir / self.edges_file


class SuggestionConfig(BaseSettings):
    """Fuzzy name suggestion configuration.

    Environment variables prefixed with NAVX_SUGGEST_.
    """

    model_config = SettingsConfigDict(env_prefix="NAVX_SUGGEST_")

    limit: int = Field(default=3, ge=1)
    score_cutoff: float = Field(default=60.0, ge=0.0, le=100.0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with NAVX_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="NAVX_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.edges_path)
        print(config.suggestions.limit)

    Environment variables prefixed with NAVX_.
    """

    model_config = SettingsConfigDict(env_prefix="NAVX_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    suggestions: SuggestionConfig = Field(default_factory=SuggestionConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the configured level and format to the root logger.

    Raises:
        ConfigurationError: If the level is not a known logging level.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="NAVX_LOG_LEVEL",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )
    logging.basicConfig(level=level, format=config.format)
