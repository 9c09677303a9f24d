"""Token naming for a batch of deduplicated colors."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from colortokens.core.color.profile import profile_color
from colortokens.core.models import DEFAULT_CUSTOM_PREFIX, ColorSample, NamingPattern
from colortokens.core.naming.registry import TokenNameRegistry
from colortokens.core.naming.strategies import DEFAULT_REGISTRY, StrategyRegistry

logger = logging.getLogger(__name__)


def assign_token_names(
    colors: Iterable[ColorSample],
    pattern: NamingPattern | str,
    custom_prefix: str | None = None,
    *,
    strategies: StrategyRegistry | None = None,
) -> list[ColorSample]:
    """Assign a token name to every color.

    Names are unique within the batch via TokenNameRegistry; suffix numbers
    depend on input order, so the same ordered input always produces the
    same names. Input colors are not modified.

    Args:
        colors: Colors with unique hex values, in display order.
        pattern: Naming pattern (enum or string value).
        custom_prefix: Prefix for the custom pattern. None, empty or
            whitespace-only falls back to ``"color"``.
        strategies: Strategy registry (defaults to the built-in strategies).

    Returns:
        New ColorSample instances with ``token_name`` set, in input order.

    Raises:
        UnknownPatternError: If ``pattern`` is not a supported pattern.

    Example:
        >>> blue = ColorSample(r=0.0, g=0.0, b=1.0)
        >>> [c.token_name for c in assign_token_names([blue], "tailwind")]
        ['blue-500']
    """
    strategy = (strategies or DEFAULT_REGISTRY).get(pattern)
    prefix = DEFAULT_CUSTOM_PREFIX if custom_prefix is None else custom_prefix
    registry = TokenNameRegistry()

    named: list[ColorSample] = []
    for color in colors:
        profile = profile_color(color.r, color.g, color.b)
        token_name = registry.register(strategy.candidate(profile, prefix))
        named.append(color.model_copy(update={"token_name": token_name}))

    logger.debug(
        "Named %d color(s) with pattern '%s' (%d distinct candidates)",
        len(named),
        strategy.pattern.value,
        len(registry),
    )
    return named


__all__ = [
    "assign_token_names",
]
