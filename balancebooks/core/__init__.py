"""
Core infrastructure for the bookkeeping engine.

This module provides:
- Config: Configuration management
- Logging: structlog setup
"""

from .config import ConfigManager, get_config
from .logging import configure_logging

__all__ = ["ConfigManager", "get_config", "configure_logging"]
