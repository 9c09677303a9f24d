"""Exception types raised by the token pipeline."""

from __future__ import annotations

from collections.abc import Iterable


class UnknownPatternError(ValueError):
    """Raised when a naming pattern value is not one of the supported patterns."""

    def __init__(self, value: object, supported: Iterable[str]) -> None:
        self.value = value
        self.supported = tuple(supported)
        super().__init__(
            f"Unknown naming pattern {value!r}; expected one of: {', '.join(self.supported)}"
        )


class VariableExportError(Exception):
    """Raised when writing colors to the variable store fails part-way.

    Variables written before the failure are not rolled back.

    Attributes:
        message: Human-readable description including progress.
        exported: Number of colors written before the failure.
        total: Number of colors in the batch.
        cause: Original exception raised by the store.
    """

    def __init__(
        self,
        *,
        reason: str,
        exported: int,
        total: int,
        cause: BaseException | None = None,
    ) -> None:
        self.reason = reason
        self.exported = exported
        self.total = total
        self.cause = cause
        self.message = f"{reason} (exported {exported} of {total} colors before the failure)"
        super().__init__(self.message)


class SessionClosedError(RuntimeError):
    """Raised when a request is sent to a session that has been closed."""


__all__ = [
    "SessionClosedError",
    "UnknownPatternError",
    "VariableExportError",
]
