"""Configuration management.

Loads from an optional TOML file + environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from .enums import LogFormat

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class ObservabilityConfig(BaseModel):
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.JSON


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Process-wide pico type settings.

    Loaded from TOML config files, overridden by environment variables.
    """

    # Rendered in place of secret values, identical for empty and populated
    mask_token: str = "*******"

    # Reject values whose Python type does not match the family's kind.
    # When off, families coerce common primitives (str -> UUID, etc).
    strict_types: bool = True

    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "PICOTYPES_", "env_nested_delimiter": "__"}


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional).
        overrides: Dict of overrides to apply on top.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            from .errors import ConfigError

            try:
                with open(path, "rb") as f:
                    data = tomli.load(f)
            except tomli.TOMLDecodeError as exc:
                raise ConfigError(f"{path}: {exc}") from exc
            logger.info("Loaded settings from %s", path)

    if overrides:
        data.update(overrides)

    return Settings(**data)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the active settings, loading them from the environment once."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def configure(settings: Settings | None) -> None:
    """Replace the active settings. ``None`` reloads from the environment."""
    global _settings
    _settings = settings
