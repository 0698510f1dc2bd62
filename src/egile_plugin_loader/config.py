"""Configuration management for Egile Plugin Loader."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

from egile_plugin_loader.utils.logging import LOG_LEVELS


class LoaderConfig(BaseSettings):
    """Configuration settings loaded from environment variables."""

    # Plugin root and directory markers
    plugin_root: Path = Path("./commands")
    command_marker: str = "cmd"
    middleware_marker: str = "mid"

    # Files expected inside each plugin directory
    entry_point_filename: str = "plugin.py"
    factory_name: str = "create"
    command_manifest_filename: str = "command.json"
    middleware_manifest_filename: str = "middleware.json"

    # Server settings
    server_host: str = "0.0.0.0"
    server_port: int = 8000

    # Logging
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "EGILE_PLUGINS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("command_marker", "middleware_marker")
    @classmethod
    def _check_marker(cls, value: str) -> str:
        if not value or "." in value:
            raise ValueError("markers must be non-empty and contain no '.'")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        if value.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value.upper()


# Global config instance
_config: LoaderConfig | None = None


def get_config() -> LoaderConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = LoaderConfig()
    return _config


def set_config(config: LoaderConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
