"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for configuration. The
route graph itself is a configuration value: a plain list of
``(origin, destination, distance)`` triples that defaults to the
academy dataset and is handed to the graph store at construction time.

Configuration can be overridden via environment variables:
- RP_GRAPH_ROUTES='[["A", "B", 5], ["B", "C", 4]]'
- RP_QUERY_MAX_EXPANDED_STATES=50000
- RP_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

RouteTriple = Tuple[str, str, int]

DEFAULT_ROUTES: Tuple[RouteTriple, ...] = (
    ("A", "B", 5),
    ("A", "D", 5),
    ("A", "E", 7),
    ("B", "C", 4),
    ("C", "D", 8),
    ("C", "E", 2),
    ("D", "C", 8),
    ("D", "E", 6),
    ("E", "B", 3),
)


class GraphConfig(BaseSettings):
    """Route graph configuration.

    Environment variables prefixed with RP_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_GRAPH_")

    routes: List[RouteTriple] = Field(default_factory=lambda: list(DEFAULT_ROUTES))


class QueryConfig(BaseSettings):
    """Query engine limits.

    Environment variables prefixed with RP_QUERY_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_QUERY_")

    max_expanded_states: int = Field(default=1_000_000, gt=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.routes)
        print(config.query.max_expanded_states)

    Environment variables prefixed with RP_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
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
