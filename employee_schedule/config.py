"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path
from typing import List, Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .adapters.http_store import HttpScheduleStore
from .adapters.json_store import JsonScheduleStore
from .services.schedule_service import EmployeeScheduleService

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class StoreConfig(BaseModel):
    """Where employee templates and holidays come from."""
    backend: Literal["file", "http"] = "file"
    data_file: Optional[Path] = None  # None: bundled sample data
    base_url: Optional[str] = None
    timeout_seconds: float = 10

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        """Ensure the request timeout is positive."""
        if value <= 0:
            raise ValueError("timeout_seconds must be greater than zero")
        return value

    @model_validator(mode="after")
    def validate_backend(self) -> "StoreConfig":
        """Ensure the http backend knows where to connect."""
        if self.backend == "http" and not self.base_url:
            raise ValueError("base_url is required when backend is 'http'")
        return self


class ServerConfig(BaseModel):
    """HTTP server settings."""
    host: str = "127.0.0.1"
    port: int = 8000

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 1 <= value <= 65535:
            raise ValueError(f"Port must be between 1 and 65535, got {value}")
        return value


class AppConfig(BaseModel):
    """Application configuration."""
    weekend_days: List[int] = Field(default_factory=lambda: [5, 6])  # Saturday, Sunday
    log_level: str = "INFO"
    store: StoreConfig = Field(default_factory=StoreConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    @field_validator("weekend_days")
    @classmethod
    def validate_weekend_days(cls, value: List[int]) -> List[int]:
        """Ensure weekdays are in valid range and deduplicated."""
        invalid_days = [day for day in value if day not in range(7)]
        if invalid_days:
            raise ValueError(f"weekend_days must be between 0 and 6, got {invalid_days}")
        # Preserve order while removing duplicates
        seen: set[int] = set()
        deduped: List[int] = []
        for day in value:
            if day not in seen:
                deduped.append(day)
                seen.add(day)
        return deduped

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load the configuration for the CLI and the API.

    An explicit path must exist. Without one, the default location is tried
    and built-in defaults are used when no file is there.
    """
    if config_path is not None:
        return AppConfig.load_from_yaml(config_path)

    default_path = get_default_config_path()
    if default_path.exists():
        return AppConfig.load_from_yaml(default_path)
    return AppConfig()


def build_store(config: AppConfig) -> JsonScheduleStore | HttpScheduleStore:
    """Create the configured template and holiday store."""
    if config.store.backend == "http":
        return HttpScheduleStore(
            base_url=config.store.base_url,
            timeout_seconds=config.store.timeout_seconds,
        )
    return JsonScheduleStore(data_file=config.store.data_file)


def build_service(config: AppConfig) -> EmployeeScheduleService:
    """Wire the configured store into a schedule service."""
    store = build_store(config)
    return EmployeeScheduleService(
        template_store=store,
        holiday_source=store,
        weekend_days=config.weekend_days,
    )
