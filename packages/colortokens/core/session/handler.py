"""Request dispatch for a panel session.

One handler method per request kind, dispatched on the request ``type``.
The session depends only on the host capability protocols.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from colortokens.core.config.models import NamingConfig
from colortokens.core.errors import (
    SessionClosedError,
    UnknownPatternError,
    VariableExportError,
)
from colortokens.core.export.json_export import build_json
from colortokens.core.export.variables import export_to_variables
from colortokens.core.extraction.dedupe import deduplicate_colors
from colortokens.core.extraction.extractor import extract_colors
from colortokens.core.host.protocols import SelectionProvider, VariableStore
from colortokens.core.models import NamingPattern
from colortokens.core.naming.engine import assign_token_names
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

logger = logging.getLogger(__name__)


class TokenSession:
    """Handles panel requests against one host.

    Args:
        selection: Source of the selected nodes.
        store: Host variable store.
        naming: Defaults for requests that omit pattern or prefix.
        on_close: Called once when a close request is handled.

    Example:
        >>> session = TokenSession(StaticSelection([node]), InMemoryVariableStore())
        >>> reply = await session.handle(ExtractColorsRequest())
        >>> [c.token_name for c in reply.colors]
        ['blue-500']
    """

    def __init__(
        self,
        selection: SelectionProvider,
        store: VariableStore,
        naming: NamingConfig | None = None,
        on_close: Callable[[], None] | None = None,
    ) -> None:
        self._selection = selection
        self._store = store
        self._naming = naming or NamingConfig()
        self._on_close = on_close
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _resolve_naming(
        self, pattern: NamingPattern | None, custom_prefix: str | None
    ) -> tuple[NamingPattern, str]:
        return (
            pattern if pattern is not None else self._naming.pattern,
            custom_prefix if custom_prefix is not None else self._naming.custom_prefix,
        )

    async def handle(self, request: Request) -> Reply | None:
        """Handle a typed request.

        Returns:
            The reply, or None for ``close``.

        Raises:
            SessionClosedError: If the session has been closed.
        """
        if self._closed:
            raise SessionClosedError(f"Session closed; cannot handle '{request.type}'")

        logger.debug("Handling request '%s'", request.type)
        if isinstance(request, ExtractColorsRequest):
            return self._extract(request)
        if isinstance(request, ApplyNamingRequest):
            return self._apply_naming(request)
        if isinstance(request, ExportVariablesRequest):
            return await self._export_variables(request)
        if isinstance(request, ExportJsonRequest):
            return self._export_json(request)
        if isinstance(request, CloseRequest):
            self._close()
            return None
        raise TypeError(f"Unsupported request: {type(request).__name__}")

    async def handle_message(self, raw: dict[str, Any]) -> dict[str, Any] | None:
        """Validate and handle a raw panel message.

        Invalid messages produce a ``request-error`` reply instead of raising.

        Returns:
            Serialized reply, or None for ``close``.
        """
        try:
            request = parse_request(raw)
        except ValidationError as e:
            logger.warning("Rejected message of type %r: %s", raw.get("type"), e)
            return RequestErrorReply(message=_validation_message(e)).to_message()
        except UnknownPatternError as e:
            logger.warning("Rejected message of type %r: %s", raw.get("type"), e)
            return RequestErrorReply(message=str(e)).to_message()

        reply = await self.handle(request)
        return reply.to_message() if reply is not None else None

    def _extract(self, request: ExtractColorsRequest) -> Reply:
        nodes = self._selection.get_selection()
        if not nodes:
            return NoSelectionReply()

        pattern, prefix = self._resolve_naming(request.pattern, request.custom_prefix)
        unique = deduplicate_colors(extract_colors(nodes))
        named = assign_token_names(unique, pattern, prefix)
        logger.info(
            "Extracted %d unique color(s) from %d node(s)", len(named), len(nodes)
        )
        return ColorsExtractedReply(colors=named, source="extract")

    def _apply_naming(self, request: ApplyNamingRequest) -> Reply:
        pattern, prefix = self._resolve_naming(request.pattern, request.custom_prefix)
        renamed = assign_token_names(request.colors, pattern, prefix)
        return ColorsExtractedReply(colors=renamed, source="rename")

    async def _export_variables(self, request: ExportVariablesRequest) -> Reply:
        try:
            count = await export_to_variables(request.colors, request.pattern, self._store)
        except VariableExportError as e:
            logger.warning("Variable export failed: %s", e.message)
            return ExportErrorReply(message=e.message)
        return ExportDoneReply(count=count)

    def _export_json(self, request: ExportJsonRequest) -> Reply:
        return JsonReadyReply(json_text=build_json(request.colors, request.pattern))

    def _close(self) -> None:
        self._closed = True
        logger.debug("Session closed")
        if self._on_close is not None:
            self._on_close()


def _validation_message(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"Invalid request ({location}): {first['msg']}"
    return f"Invalid request: {first['msg']}"


__all__ = [
    "TokenSession",
]
