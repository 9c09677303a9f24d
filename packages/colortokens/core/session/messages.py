"""Request and reply messages exchanged with the host panel.

Requests form a tagged union on ``type``; wire field names are camelCase
(``customPrefix``, ``tokenName``) and are accepted in snake_case as well.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from colortokens.core.models import ColorSample, NamingPattern


class _Message(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    def to_message(self) -> dict[str, Any]:
        """Serialize with wire field names."""
        return self.model_dump(mode="json", by_alias=True)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class ExtractColorsRequest(_Message):
    """Extract, deduplicate and name colors from the current selection.

    ``pattern`` and ``custom_prefix`` fall back to the session defaults.
    """

    type: Literal["extract-colors"] = "extract-colors"
    pattern: NamingPattern | None = None
    custom_prefix: str | None = Field(default=None, alias="customPrefix")


class ApplyNamingRequest(_Message):
    """Rename previously extracted colors with another pattern."""

    type: Literal["apply-naming"] = "apply-naming"
    colors: list[ColorSample]
    pattern: NamingPattern
    custom_prefix: str | None = Field(default=None, alias="customPrefix")


class ExportVariablesRequest(_Message):
    """Write named colors to the host variable store."""

    type: Literal["export-variables"] = "export-variables"
    colors: list[ColorSample]
    pattern: NamingPattern


class ExportJsonRequest(_Message):
    """Serialize named colors as a JSON token document."""

    type: Literal["export-json"] = "export-json"
    colors: list[ColorSample]
    pattern: NamingPattern


class CloseRequest(_Message):
    """End the session. Has no reply."""

    type: Literal["close"] = "close"


Request = Annotated[
    ExtractColorsRequest
    | ApplyNamingRequest
    | ExportVariablesRequest
    | ExportJsonRequest
    | CloseRequest,
    Field(discriminator="type"),
]

REQUEST_ADAPTER: TypeAdapter[Request] = TypeAdapter(Request)


def parse_request(raw: dict[str, Any]) -> Request:
    """Validate a raw panel message into a typed request.

    Raises:
        pydantic.ValidationError: On unknown ``type``, unknown pattern or
            malformed colors.
    """
    return REQUEST_ADAPTER.validate_python(raw)


# ---------------------------------------------------------------------------
# Replies
# ---------------------------------------------------------------------------


class ColorsExtractedReply(_Message):
    """Named colors, from a fresh extraction or a rename."""

    type: Literal["colors-extracted"] = "colors-extracted"
    colors: list[ColorSample]
    source: Literal["extract", "rename"]


class NoSelectionReply(_Message):
    """Extraction was requested with nothing selected."""

    type: Literal["no-selection"] = "no-selection"


class ExportDoneReply(_Message):
    """Variable export finished."""

    type: Literal["export-done"] = "export-done"
    target: Literal["variables"] = "variables"
    count: int = Field(ge=0)


class ExportErrorReply(_Message):
    """Variable export failed; ``message`` says how far it got."""

    type: Literal["export-error"] = "export-error"
    message: str


class JsonReadyReply(_Message):
    """Serialized JSON token document."""

    type: Literal["json-ready"] = "json-ready"
    json_text: str = Field(alias="json")


class RequestErrorReply(_Message):
    """A raw message failed validation and was not processed."""

    type: Literal["request-error"] = "request-error"
    message: str


Reply = (
    ColorsExtractedReply
    | NoSelectionReply
    | ExportDoneReply
    | ExportErrorReply
    | JsonReadyReply
    | RequestErrorReply
)


__all__ = [
    "REQUEST_ADAPTER",
    "ApplyNamingRequest",
    "CloseRequest",
    "ColorsExtractedReply",
    "ExportDoneReply",
    "ExportErrorReply",
    "ExportJsonRequest",
    "ExportVariablesRequest",
    "ExtractColorsRequest",
    "JsonReadyReply",
    "NoSelectionReply",
    "Reply",
    "Request",
    "RequestErrorReply",
    "parse_request",
]
