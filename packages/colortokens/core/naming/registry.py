"""Token name collision registry.

Scoped to a single naming call. The first use of a candidate name keeps it
unchanged; each later use gets ``-1``, ``-2``, ... appended. Suffixed names
are not registered themselves, so a suffixed name can still equal another
color's unsuffixed candidate.
"""

from __future__ import annotations


class TokenNameRegistry:
    """Registry that makes repeated candidate names distinct by suffixing.

    Example:
        >>> reg = TokenNameRegistry()
        >>> reg.register("blue-500")
        'blue-500'
        >>> reg.register("blue-500")
        'blue-500-1'
        >>> reg.register("blue-500")
        'blue-500-2'
    """

    def __init__(self) -> None:
        self._counters: dict[str, int] = {}

    def register(self, candidate: str) -> str:
        """Register a candidate name, returning the name to use.

        Args:
            candidate: Raw name produced by a naming strategy.

        Returns:
            ``candidate`` on first use, ``candidate-<n>`` on the n-th repeat.
        """
        if candidate not in self._counters:
            self._counters[candidate] = 0
            return candidate

        self._counters[candidate] += 1
        return f"{candidate}-{self._counters[candidate]}"

    def __contains__(self, candidate: object) -> bool:
        return candidate in self._counters

    def __len__(self) -> int:
        return len(self._counters)


__all__ = [
    "TokenNameRegistry",
]
