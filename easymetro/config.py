"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the package's
configuration: the default routing costs used when a caller does not
pass its own, and the logging setup.

Configuration can be overridden via environment variables:
- EMT_ROUTING_COST_PER_STATION=2
- EMT_ROUTING_COST_PER_LINE_SWITCH=5
- EMT_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RoutingConfig(BaseSettings):
    """Default costs for shortest-path queries.

    Environment variables prefixed with EMT_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="EMT_ROUTING_")

    cost_per_station: float = Field(default=1.0, ge=0)
    cost_per_line_switch: float = Field(default=1.0, ge=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with EMT_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="EMT_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.routing.cost_per_station)

    Environment variables prefixed with EMT_.
    """

    model_config = SettingsConfigDict(env_prefix="EMT_")

    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
