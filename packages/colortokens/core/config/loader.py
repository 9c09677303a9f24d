"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from colortokens.core.config.models import AppConfig, NamingConfig
from colortokens.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)

ENV_PATTERN = "COLORTOKENS_PATTERN"
ENV_CUSTOM_PREFIX = "COLORTOKENS_PREFIX"


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("colortokens.json")
        'json'
        >>> detect_format("colortokens.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Supports both JSON and YAML formats. Format is auto-detected
    from file extension.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    An explicit path must exist. Without one, colortokens.yaml is read if
    present and defaults are used otherwise. Environment variables override
    the naming defaults.

    Args:
        path: Path to app config file (.json, .yaml, or .yml).
              Defaults to colortokens.yaml when present

    Returns:
        Validated AppConfig instance with defaults for missing values

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValidationError: If config is invalid
    """
    if path is None and not AppConfig.default_path().exists():
        logger.debug("No config at %s, using defaults", AppConfig.default_path())
        config = AppConfig()
    else:
        config = AppConfig.load_or_default(path)

    return _apply_env_overrides(config)


def _apply_env_overrides(config: AppConfig) -> AppConfig:
    """Return a copy of config with naming defaults taken from the environment."""
    updates: dict[str, Any] = {}

    pattern = os.getenv(ENV_PATTERN)
    if pattern:
        logger.debug("Loaded %s from environment", ENV_PATTERN)
        updates["pattern"] = pattern

    prefix = os.getenv(ENV_CUSTOM_PREFIX)
    if prefix is not None:
        logger.debug("Loaded %s from environment", ENV_CUSTOM_PREFIX)
        updates["custom_prefix"] = prefix

    if not updates:
        return config

    naming = NamingConfig.model_validate({**config.naming.model_dump(), **updates})
    return config.model_copy(update={"naming": naming})


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )


__all__ = [
    "ENV_CUSTOM_PREFIX",
    "ENV_PATTERN",
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
]
