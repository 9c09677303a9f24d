"""Naming strategies, one per naming pattern.

Each strategy turns a ColorProfile into a raw candidate token name.
Collision handling is not a strategy concern (see TokenNameRegistry).
"""

from __future__ import annotations

import logging
from typing import ClassVar, Protocol

from colortokens.core.color.profile import ColorProfile
from colortokens.core.color.roles import ColorRole
from colortokens.core.models import DEFAULT_CUSTOM_PREFIX, NamingPattern

logger = logging.getLogger(__name__)


class NamingStrategy(Protocol):
    """Protocol for pattern-specific candidate name builders."""

    @property
    def pattern(self) -> NamingPattern:
        """Naming pattern this strategy implements."""
        ...

    def candidate(self, profile: ColorProfile, custom_prefix: str) -> str:
        """Build the raw (possibly colliding) token name for one color.

        Args:
            profile: Role and lightness quantization of the color.
            custom_prefix: User prefix; only the custom pattern reads it.

        Returns:
            Non-empty candidate name.
        """
        ...


class MaterialStrategy:
    """Material Design 3 roles: ``color-primary``, ``color-error-700``."""

    pattern = NamingPattern.MATERIAL

    SEMANTICS: ClassVar[dict[ColorRole, str]] = {
        ColorRole.RED: "error",
        ColorRole.ORANGE: "warning",
        ColorRole.YELLOW: "warning",
        ColorRole.GREEN: "success",
        ColorRole.CYAN: "secondary",
        ColorRole.BLUE: "primary",
        ColorRole.PURPLE: "tertiary",
        ColorRole.PINK: "secondary",
        ColorRole.GRAY: "surface",
    }

    def candidate(self, profile: ColorProfile, custom_prefix: str) -> str:
        semantic = self.SEMANTICS[profile.role]
        if profile.shade == 500:
            return f"color-{semantic}"
        return f"color-{semantic}-{profile.shade}"


class TailwindStrategy:
    """Tailwind palette names: ``blue-500``."""

    pattern = NamingPattern.TAILWIND

    def candidate(self, profile: ColorProfile, custom_prefix: str) -> str:
        return f"{profile.role.value}-{profile.shade}"


class AntDesignStrategy:
    """Ant Design semantic names with a 1-10 level: ``primary-6``."""

    pattern = NamingPattern.ANTD

    SEMANTICS: ClassVar[dict[ColorRole, str]] = {
        ColorRole.RED: "error",
        ColorRole.ORANGE: "warning",
        ColorRole.YELLOW: "warning",
        ColorRole.GREEN: "success",
        ColorRole.CYAN: "info",
        ColorRole.BLUE: "primary",
        ColorRole.PURPLE: "primary",
        ColorRole.PINK: "error",
        ColorRole.GRAY: "neutral",
    }

    def candidate(self, profile: ColorProfile, custom_prefix: str) -> str:
        return f"{self.SEMANTICS[profile.role]}-{profile.level}"


class WcagStrategy:
    """Accessibility-oriented names: ``color-info``, ``color-neutral-dark``.

    Grays split on lightness 0.5 (exactly 0.5 counts as dark).
    """

    pattern = NamingPattern.WCAG

    SEMANTICS: ClassVar[dict[ColorRole, str]] = {
        ColorRole.RED: "error",
        ColorRole.ORANGE: "warning",
        ColorRole.YELLOW: "warning",
        ColorRole.GREEN: "success",
        ColorRole.CYAN: "info",
        ColorRole.BLUE: "info",
        ColorRole.PURPLE: "info",
        ColorRole.PINK: "error",
    }

    def candidate(self, profile: ColorProfile, custom_prefix: str) -> str:
        if profile.role is ColorRole.GRAY:
            semantic = "neutral-light" if profile.lightness > 0.5 else "neutral-dark"
        else:
            semantic = self.SEMANTICS[profile.role]
        return f"color-{semantic}"


class CustomStrategy:
    """User-prefixed names: ``brand-blue-500``."""

    pattern = NamingPattern.CUSTOM

    def candidate(self, profile: ColorProfile, custom_prefix: str) -> str:
        prefix = custom_prefix.strip() or DEFAULT_CUSTOM_PREFIX
        return f"{prefix}-{profile.role.value}-{profile.shade}"


class StrategyRegistry:
    """Registry mapping naming patterns to strategy instances.

    Example:
        >>> registry = StrategyRegistry()
        >>> registry.register(TailwindStrategy())
        >>> registry.get(NamingPattern.TAILWIND).candidate(profile, "")
        'blue-500'
    """

    def __init__(self) -> None:
        self._strategies: dict[NamingPattern, NamingStrategy] = {}

    def register(self, strategy: NamingStrategy) -> None:
        """Register a strategy for its pattern.

        Args:
            strategy: Strategy implementation to register.
        """
        pattern = strategy.pattern
        if pattern in self._strategies:
            logger.warning(
                "Overwriting strategy for pattern '%s' (old=%s, new=%s)",
                pattern.value,
                type(self._strategies[pattern]).__name__,
                type(strategy).__name__,
            )
        self._strategies[pattern] = strategy

    def get(self, pattern: NamingPattern | str) -> NamingStrategy:
        """Get the strategy for a pattern.

        Args:
            pattern: Pattern enum or its string value.

        Returns:
            Registered strategy.

        Raises:
            UnknownPatternError: If the string is not a known pattern.
            KeyError: If the pattern is known but has no strategy registered.
        """
        resolved = NamingPattern(pattern)
        try:
            return self._strategies[resolved]
        except KeyError:
            raise KeyError(f"No naming strategy registered for pattern '{resolved.value}'") from None

    @property
    def registered_patterns(self) -> list[NamingPattern]:
        """List all registered patterns."""
        return list(self._strategies)

    def __len__(self) -> int:
        return len(self._strategies)


def build_default_registry() -> StrategyRegistry:
    """Create a registry with the five built-in strategies."""
    registry = StrategyRegistry()
    for strategy in (
        MaterialStrategy(),
        TailwindStrategy(),
        AntDesignStrategy(),
        WcagStrategy(),
        CustomStrategy(),
    ):
        registry.register(strategy)
    return registry


DEFAULT_REGISTRY = build_default_registry()


__all__ = [
    "DEFAULT_REGISTRY",
    "AntDesignStrategy",
    "CustomStrategy",
    "MaterialStrategy",
    "NamingStrategy",
    "StrategyRegistry",
    "TailwindStrategy",
    "WcagStrategy",
    "build_default_registry",
]
