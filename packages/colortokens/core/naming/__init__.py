"""Token naming: per-pattern strategies and collision-safe assignment."""

from colortokens.core.naming.engine import assign_token_names
from colortokens.core.naming.registry import TokenNameRegistry
from colortokens.core.naming.strategies import (
    DEFAULT_REGISTRY,
    AntDesignStrategy,
    CustomStrategy,
    MaterialStrategy,
    NamingStrategy,
    StrategyRegistry,
    TailwindStrategy,
    WcagStrategy,
    build_default_registry,
)

__all__ = [
    "DEFAULT_REGISTRY",
    "AntDesignStrategy",
    "CustomStrategy",
    "MaterialStrategy",
    "NamingStrategy",
    "StrategyRegistry",
    "TailwindStrategy",
    "TokenNameRegistry",
    "WcagStrategy",
    "assign_token_names",
    "build_default_registry",
]
