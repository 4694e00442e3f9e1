"""
Settings master configuration and global helpers.
"""

from __future__ import annotations

import dataclasses
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
from dotenv import find_dotenv, load_dotenv

from ..config_schema import CONFIG_SCHEMA
from ..errors import InvalidConfigError
from .client import ClientConfig
from .logging import LoggingConfig


@dataclass
class Settings:
    """
    Master configuration for ovpn-cloud.

    This aggregates all configuration sections into a single object
    that can be loaded from environment variables, files, or constructed
    programmatically.
    """

    client: ClientConfig = field(default_factory=ClientConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, prefix: str = "OVPN_") -> Settings:
        """
        Load settings from environment variables.

        Prefixed variables override the unprefixed ``OPENVPN_*`` defaults
        picked up by ``ClientConfig``.

        Example:
            OVPN_CLOUD_ID=acme
            OVPN_CLIENT_ID=...
            OVPN_LOG_LEVEL=DEBUG
        """
        settings = cls()

        if cloud_id := os.getenv(f"{prefix}CLOUD_ID"):
            settings.client.cloud_id = cloud_id
        if base_url := os.getenv(f"{prefix}BASE_URL"):
            settings.client.base_url = base_url
        if client_id := os.getenv(f"{prefix}CLIENT_ID"):
            settings.client.client_id = client_id
        if client_secret := os.getenv(f"{prefix}CLIENT_SECRET"):
            settings.client.client_secret = client_secret
        if timeout := os.getenv(f"{prefix}TIMEOUT"):
            settings.client = dataclasses.replace(settings.client, timeout=float(timeout))

        if level := os.getenv(f"{prefix}LOG_LEVEL"):
            settings.logging = dataclasses.replace(settings.logging, level=level.upper())
        if log_format := os.getenv(f"{prefix}LOG_FORMAT"):
            settings.logging = dataclasses.replace(settings.logging, format=log_format.lower())

        return settings

    @classmethod
    def from_file(cls, path: str | Path) -> Settings:
        """
        Load settings from a YAML or TOML file.

        Args:
            path: Path to configuration file (.yaml, .yml, or .toml)

        Returns:
            Settings object with values from file
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        suffix = path.suffix.lower()

        if suffix in (".yaml", ".yml"):
            try:
                import yaml  # type: ignore[import-untyped]
            except ImportError as exc:
                raise ImportError("PyYAML is required for YAML config files: pip install pyyaml") from exc
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        elif suffix == ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {suffix}")

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> Settings:
        """
        Create Settings from a dictionary.

        The dictionary is validated against the configuration schema before
        any section is applied.
        """
        try:
            jsonschema.validate(instance=data, schema=CONFIG_SCHEMA)
        except jsonschema.ValidationError as e:
            raise InvalidConfigError(f"Configuration validation failed: {e.message}", cause=e) from e

        settings = cls()

        if "client" in data:
            settings.client = dataclasses.replace(settings.client, **data["client"])

        if "logging" in data:
            settings.logging = dataclasses.replace(settings.logging, **data["logging"])

        return settings

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to dictionary."""

        def convert(obj):
            if dataclasses.is_dataclass(obj):
                return {k: convert(v) for k, v in dataclasses.asdict(obj).items()}
            elif isinstance(obj, Path):
                return str(obj)
            return obj

        return convert(self)


# =============================================================================
# Global Settings & Helpers
# =============================================================================

_global_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance, creating with defaults if needed."""
    global _global_settings
    if _global_settings is None:
        _global_settings = Settings.from_env()
    return _global_settings


def configure(settings: Settings | None = None, **kwargs) -> Settings:
    """
    Configure global settings.

    Args:
        settings: Settings object to use globally
        **kwargs: Override specific top-level sections (``client``, ``logging``)

    Returns:
        The configured Settings object
    """
    global _global_settings

    if settings is not None:
        _global_settings = settings
    elif _global_settings is None:
        _global_settings = Settings.from_env()

    for key, value in kwargs.items():
        if not hasattr(_global_settings, key):
            raise InvalidConfigError(f"Unknown settings section: {key}")
        setattr(_global_settings, key, value)

    return _global_settings


def load_env(path: str | None = None, *, override: bool = False) -> bool:
    """
    Load environment variables from a .env file.

    Args:
        path: Optional path to a .env file. If not provided, uses find_dotenv().
        override: Whether to override existing environment variables.

    Returns:
        True if a .env file was found and loaded, False otherwise.
    """
    env_path = path or find_dotenv(usecwd=True)
    if not env_path:
        return False
    return load_dotenv(env_path, override=override)


__all__ = ["Settings", "get_settings", "configure", "load_env"]
