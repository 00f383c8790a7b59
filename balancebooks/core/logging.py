"""
Structured logging setup.
"""

import logging
from typing import Optional

import structlog

from balancebooks.core.config import ConfigManager, get_config


def configure_logging(
    level: Optional[str] = None,
    fmt: Optional[str] = None,
    config_manager: Optional[ConfigManager] = None,
) -> None:
    """
    Configure structlog for the process.

    Args:
        level: Log level name (defaults to logging config)
        fmt: "json" or "console" (defaults to logging config)
        config_manager: Optional config manager (defaults to global instance)
    """
    if level is None or fmt is None:
        settings = (config_manager or get_config()).get_logging_config()
        level = level or settings.level
        fmt = fmt or settings.format

    renderer = (
        structlog.dev.ConsoleRenderer()
        if fmt == "console"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
    )
