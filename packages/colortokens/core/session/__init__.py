"""Panel session: typed request/reply messages and their dispatch."""

from colortokens.core.session.handler import TokenSession
from colortokens.core.session.messages import (
    ApplyNamingRequest,
    CloseRequest,
    ColorsExtractedReply,
    ExportDoneReply,
    ExportErrorReply,
    ExportJsonRequest,
    ExportVariablesRequest,
    ExtractColorsRequest,
    JsonReadyReply,
    NoSelectionReply,
    Reply,
    Request,
    RequestErrorReply,
    parse_request,
)

__all__ = [
    "TokenSession",
    # Requests
    "ApplyNamingRequest",
    "CloseRequest",
    "ExportJsonRequest",
    "ExportVariablesRequest",
    "ExtractColorsRequest",
    "Request",
    "parse_request",
    # Replies
    "ColorsExtractedReply",
    "ExportDoneReply",
    "ExportErrorReply",
    "JsonReadyReply",
    "NoSelectionReply",
    "Reply",
    "RequestErrorReply",
]
