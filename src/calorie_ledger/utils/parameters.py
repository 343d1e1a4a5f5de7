"""
Configuration and parameter loading using Pydantic.

This module provides centralized configuration management for the entire application.
Parameters are loaded from YAML and validated using Pydantic models. Every section
has defaults, so the application also runs without a configuration file.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from calorie_ledger.utils.exceptions import ConfigurationError

DEFAULT_CONFIG_PATH = "config/config.yaml"


class StorageConfig(BaseModel):
    """Calorie data file configuration."""

    data_file: str = "calories_data.txt"
    encoding: str = "utf-8"


class ReportingConfig(BaseModel):
    """Report rendering and estimate configuration."""

    unit: str = "cal"
    days_per_week: int = Field(default=7, gt=0)
    days_per_month: int = Field(default=30, gt=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="WARNING", pattern="(?i)^(debug|info|warning|error|critical)$"
    )
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str | None = None
    console: bool = True


class AppConfig(BaseSettings):
    """Main application configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    reporting: ReportingConfig = Field(default_factory=ReportingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="CALORIE_LEDGER_", env_nested_delimiter="__", case_sensitive=False
    )


class ParameterLoader:
    """
    Centralized parameter loader for the application.

    Loads and validates configuration from YAML files using Pydantic models.
    Provides type-safe access to all configuration parameters.
    """

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH, required: bool = True) -> None:
        """
        Initialize parameter loader.

        Args:
            config_path: Path to the YAML configuration file.
            required: If False, a missing file falls back to default configuration.

        Raises:
            ConfigurationError: If configuration file cannot be loaded or is invalid.
        """
        self.config_path = Path(config_path)
        self.required = required
        self.config: AppConfig
        self._load_config()

    def _load_config(self) -> None:
        """
        Load configuration from YAML file.

        Raises:
            ConfigurationError: If configuration file cannot be loaded or is invalid.
        """
        if not self.config_path.exists():
            if self.required:
                raise ConfigurationError(f"Configuration file not found: {self.config_path}")
            self.config = AppConfig()
            return

        try:
            with open(self.config_path, encoding="utf-8") as f:
                config_dict = yaml.safe_load(f) or {}

            if not isinstance(config_dict, dict):
                raise ConfigurationError(
                    f"Configuration root must be a mapping: {self.config_path}"
                )

            self.config = AppConfig(**config_dict)

        except ConfigurationError:
            raise
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML configuration: {e}") from e
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

    def get_storage_config(self) -> StorageConfig:
        """Get calorie data file configuration."""
        return self.config.storage

    def get_reporting_config(self) -> ReportingConfig:
        """Get reporting configuration."""
        return self.config.reporting

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.config.logging
