"""Logging setup driven by ObservabilityConfig.

Modules log through the standard library (``logging.getLogger``) and
attach context with ``extra={...}``. This module only decides how those
records are rendered: plain text using the configured format, or JSON
lines through structlog's ProcessorFormatter when ``structured`` is set.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from .config import ObservabilityConfig, get_config


def _build_formatter(config: ObservabilityConfig) -> logging.Formatter:
    if not config.structured:
        return logging.Formatter(config.format)

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.ExtraAdder(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
    )


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Handler:
    """Install a stdout handler on the ``easymetro`` logger.

    Calling it again replaces the handler installed previously, so the
    configuration can be re-applied after ``reset_config()``.

    Args:
        config: Optional override; defaults to ``get_config().observability``.

    Returns:
        The handler that was installed.
    """
    config = config or get_config().observability

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter(config))

    package_logger = logging.getLogger("easymetro")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(config.level.upper())
    return handler
