"""Configuration models for colortokens."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from colortokens.core.models import DEFAULT_CUSTOM_PREFIX, DEFAULT_PATTERN, NamingPattern


class ConfigBase(BaseModel):
    """Base class for colortokens configurations.

    Provides common functionality for loading from files with defaults.
    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type.

        Subclasses must override this to provide their default location.

        Returns:
            Path to the default config file
        """
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path, falling back to the default path.

        Args:
            path: Path to config file, or None to use default

        Returns:
            Loaded config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValidationError: If config is invalid
        """
        from colortokens.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
        raw = load_config(path)
        return cls.model_validate(raw)


class NamingConfig(BaseModel):
    """Defaults applied when a request omits the pattern or custom prefix."""

    pattern: NamingPattern = Field(default=DEFAULT_PATTERN, description="Default naming pattern")
    custom_prefix: str = Field(
        default=DEFAULT_CUSTOM_PREFIX,
        description="Prefix for the custom pattern (blank falls back to 'color')",
    )


class ExportConfig(BaseModel):
    """JSON token file output settings."""

    output_path: str = Field(default="tokens.json", description="Default token file path")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON-lines log records")
    filename: str | None = Field(default=None, description="Log file (stderr when unset)")


class AppConfig(ConfigBase):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")
    naming: NamingConfig = NamingConfig()
    export: ExportConfig = ExportConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("colortokens.yaml")


__all__ = [
    "AppConfig",
    "ConfigBase",
    "ExportConfig",
    "LoggingConfig",
    "NamingConfig",
]
