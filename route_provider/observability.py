"""Logging setup driven by the observability settings."""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

logger = logging.getLogger("route_provider")


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply level and format from the observability settings to the root logger."""
    config = config or get_config().observability

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="RP_LOG_LEVEL",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )

    logging.basicConfig(level=level, format=config.format, force=True)
    logger.debug("Logging configured", extra={"level": config.level.upper()})
