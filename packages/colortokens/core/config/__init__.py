"""Configuration management for colortokens."""

from colortokens.core.config.loader import (
    configure_logging,
    load_app_config,
    load_config,
)
from colortokens.core.config.models import (
    AppConfig,
    ExportConfig,
    LoggingConfig,
    NamingConfig,
)

__all__ = [
    # Loaders
    "configure_logging",
    "load_app_config",
    "load_config",
    # Models
    "AppConfig",
    "ExportConfig",
    "LoggingConfig",
    "NamingConfig",
]
