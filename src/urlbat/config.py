"""
Settings Management Module

Provides pydantic-based configuration management with:
- YAML configuration file loading
- Environment variable overrides (URLBAT_*)
- Multi-environment support (config.<environment>.yaml overlays)
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .exceptions import UrlbatConfigError


class BuilderSettings(BaseModel):
    """Defaults for a bound UrlBuilder."""

    model_config = ConfigDict(extra="allow")

    base_url: str = ""
    base_params: dict[str, Any] = Field(default_factory=dict)


class Settings(BaseSettings):
    """
    Main package settings.

    Configuration hierarchy (lowest to highest precedence):
    1. settings/config.yaml (base)
    2. settings/config.{environment}.yaml (environment-specific)
    3. Environment variables (URLBAT_*)

    Examples:
        >>> settings = get_settings()
        >>> settings.builder.base_url
        ''
    """

    model_config = SettingsConfigDict(
        env_prefix="URLBAT_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="allow",
    )

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = False

    builder: BuilderSettings = Field(default_factory=BuilderSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment variables override values loaded from YAML
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def load_from_yaml(cls, config_path: Path | None = None) -> "Settings":
        """
        Load settings from a YAML configuration file.

        Args:
            config_path: Path to config file (default: $URLBAT_CONFIG or
                ./settings/config.yaml)

        Returns:
            Settings instance

        Raises:
            UrlbatConfigError: The file exists but cannot be read or parsed
        """
        if config_path is None:
            env_path = os.getenv("URLBAT_CONFIG")
            config_path = (
                Path(env_path) if env_path else Path.cwd() / "settings" / "config.yaml"
            )

        if not config_path.exists():
            return cls()

        config_data = _read_yaml(config_path)

        env = os.getenv("URLBAT_ENVIRONMENT", config_data.get("environment", "development"))
        env_config_path = config_path.parent / f"config.{env}.yaml"

        if env_config_path.exists():
            config_data = cls._deep_merge(config_data, _read_yaml(env_config_path))

        return cls(**config_data)

    @staticmethod
    def _deep_merge(base: dict, override: dict) -> dict:
        """Deep merge two dictionaries."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = Settings._deep_merge(result[key], value)
            else:
                result[key] = value
        return result


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise UrlbatConfigError(
            f"Failed to load settings file: {e}", config_path=str(path)
        ) from e

    if not isinstance(data, dict):
        raise UrlbatConfigError(
            "Settings file must contain a mapping", config_path=str(path)
        )
    return data


@lru_cache
def get_settings(config_path: Path | None = None) -> Settings:
    """
    Get cached settings instance.

    Args:
        config_path: Optional path to config file

    Returns:
        Settings instance
    """
    return Settings.load_from_yaml(config_path)


def reload_settings() -> Settings:
    """Reload settings by clearing cache."""
    get_settings.cache_clear()
    return get_settings()


__all__ = [
    "Settings",
    "BuilderSettings",
    "get_settings",
    "reload_settings",
]
