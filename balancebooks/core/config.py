"""
Configuration management for the bookkeeping engine.

Handles loading and accessing:
- Business configuration (config.yaml)
- Environment variables
"""

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CompanyInfo(BaseModel):
    """Company details printed on statement headers."""

    name: str = "COMPANY NAME"
    address: str = ""
    phone: str = ""


class PayStatementConfig(BaseModel):
    """Pay statement generation settings."""

    id_prefix: str = "ps"


class LoggingConfig(BaseModel):
    """Structured logging settings."""

    level: str = "INFO"
    format: str = "json"  # "json" or "console"


class EnvironmentSettings(BaseSettings):
    """Environment variables configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    config_dir: Optional[Path] = Field(None, alias="BALANCEBOOKS_CONFIG_DIR")
    log_level: Optional[str] = Field(None, alias="LOG_LEVEL")
    log_format: Optional[str] = Field(None, alias="LOG_FORMAT")


class ConfigManager:
    """
    Central configuration manager.

    Loads and provides access to:
    - Business configuration from config/config.yaml
    - Environment variables from .env
    """

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_dir: Optional path to config directory. Defaults to
                BALANCEBOOKS_CONFIG_DIR, then project root/config.
        """
        self._env_settings: Optional[EnvironmentSettings] = None
        if config_dir is None:
            config_dir = self.env.config_dir
        if config_dir is None:
            project_root = Path(__file__).parent.parent.parent
            config_dir = project_root / "config"

        self.config_dir = Path(config_dir)
        self._business_config: Optional[dict[str, Any]] = None

    @property
    def business_config(self) -> dict[str, Any]:
        """Load and return business configuration from config.yaml."""
        if self._business_config is None:
            config_path = self.config_dir / "config.yaml"
            with open(config_path, "r") as f:
                self._business_config = yaml.safe_load(f) or {}
        return self._business_config

    @property
    def env(self) -> EnvironmentSettings:
        """Load and return environment settings."""
        if self._env_settings is None:
            self._env_settings = EnvironmentSettings()
        return self._env_settings

    def get_company_info(self) -> CompanyInfo:
        """Get company information from business config."""
        return CompanyInfo(**self.business_config.get("company", {}))

    def get_pay_statement_config(self) -> PayStatementConfig:
        """Get pay statement settings from business config."""
        return PayStatementConfig(**self.business_config.get("pay_statements", {}))

    def get_logging_config(self) -> LoggingConfig:
        """
        Get logging settings.

        LOG_LEVEL and LOG_FORMAT environment variables override config.yaml.
        """
        settings = dict(self.business_config.get("logging", {}))
        if self.env.log_level:
            settings["level"] = self.env.log_level
        if self.env.log_format:
            settings["format"] = self.env.log_format
        return LoggingConfig(**settings)


# Global config instance
_config_manager: Optional[ConfigManager] = None


def get_config() -> ConfigManager:
    """
    Get the global configuration manager instance.

    Returns:
        ConfigManager singleton instance
    """
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
