"""Command-line interface for colortokens.

Runs the panel session against a design-file JSON document instead of a
live design tool: the document (or the nodes picked with --node) is the
selection, and results are printed or written as a token file.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from colortokens.core.config.loader import configure_logging, load_app_config
from colortokens.core.config.models import AppConfig, LoggingConfig
from colortokens.core.export.json_export import write_token_json
from colortokens.core.host.document import load_document, select_nodes
from colortokens.core.host.memory import InMemoryVariableStore, StaticSelection
from colortokens.core.models import ColorSample, NamingPattern
from colortokens.core.session.handler import TokenSession
from colortokens.core.session.messages import ColorsExtractedReply, ExtractColorsRequest
from colortokens.core.utils.logging import get_logger

console = Console()
logger = logging.getLogger(__name__)


async def extract_named_colors(
    document_path: Path,
    node_ids: list[str],
    pattern: NamingPattern | None,
    custom_prefix: str | None,
    config: AppConfig,
) -> list[ColorSample]:
    """Run an extract request over a document and return the named colors.

    Raises:
        FileNotFoundError: If the document does not exist
        KeyError: If a requested node id is not in the document
        ValueError: If the document is malformed or nothing is selected
    """
    roots = load_document(document_path)
    selection = select_nodes(roots, node_ids)
    session = TokenSession(StaticSelection(selection), InMemoryVariableStore(), config.naming)

    reply = await session.handle(
        ExtractColorsRequest(pattern=pattern, custom_prefix=custom_prefix)
    )
    if not isinstance(reply, ColorsExtractedReply):
        raise ValueError("Nothing selected: the document has no nodes")
    return reply.colors


def _print_colors(colors: list[ColorSample]) -> None:
    table = Table(title=f"{len(colors)} color token(s)")
    table.add_column("Token", style="bold")
    table.add_column("Hex")
    table.add_column("Source")
    table.add_column("Alpha", justify="right")
    for color in colors:
        table.add_row(
            color.token_name,
            f"[on {color.hex}]    [/] {color.hex}",
            color.source.value,
            f"{color.a:.2f}",
        )
    console.print(table)


async def run_extract_async(args: argparse.Namespace, config: AppConfig) -> int:
    """Print the named colors of a document.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        colors = await extract_named_colors(
            Path(args.document), args.node, args.pattern, args.prefix, config
        )
    except (FileNotFoundError, KeyError, ValueError) as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1

    if not colors:
        console.print("[yellow]No solid colors found in the selection[/yellow]")
        return 1

    _print_colors(colors)
    return 0


async def run_export_async(args: argparse.Namespace, config: AppConfig) -> int:
    """Write the named colors of a document as a JSON token file.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    pattern = args.pattern or config.naming.pattern
    try:
        colors = await extract_named_colors(
            Path(args.document), args.node, pattern, args.prefix, config
        )
    except (FileNotFoundError, KeyError, ValueError) as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1

    if not colors:
        console.print("[yellow]No solid colors found in the selection[/yellow]")
        return 1

    out_path = write_token_json(args.out or config.export.output_path, colors, pattern)
    get_logger(__name__, document=args.document, pattern=pattern.value).info(
        "Wrote %d token(s) to %s", len(colors), out_path
    )

    console.print(f"[green]Wrote {len(colors)} token(s) to[/green] {out_path}")
    return 0


def _pattern_arg(value: str) -> NamingPattern:
    try:
        return NamingPattern(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="colortokens",
        description="colortokens - name the solid colors of a design document as tokens",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to config file (default: colortokens.yaml if present)",
    )
    p.add_argument("--log-level", default=None, help="Override the configured log level")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_common(cmd: argparse.ArgumentParser) -> None:
        cmd.add_argument("document", help="Path to design-file JSON document")
        cmd.add_argument(
            "--node",
            action="append",
            default=[],
            metavar="ID",
            help="Node id to select (repeatable; default: whole document)",
        )
        cmd.add_argument(
            "--pattern",
            type=_pattern_arg,
            default=None,
            help="Naming pattern: " + ", ".join(p.value for p in NamingPattern),
        )
        cmd.add_argument("--prefix", default=None, help="Prefix for the custom pattern")

    extract = sub.add_parser("extract", help="Print named colors of a document")
    add_common(extract)

    export = sub.add_parser("export", help="Write named colors as a JSON token file")
    add_common(export)
    export.add_argument("--out", default=None, help="Output path (default: from config)")

    return p


def main() -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args()

    try:
        config = load_app_config(args.config)
    except Exception as e:
        console.print(f"[red]ERROR: Could not load config: {e}[/red]")
        sys.exit(1)

    try:
        if args.log_level:
            config.logging = LoggingConfig(
                **{**config.logging.model_dump(), "level": args.log_level.upper()}
            )
    except ValidationError:
        console.print(f"[red]ERROR: Invalid log level: {args.log_level}[/red]")
        sys.exit(1)
    configure_logging(config)
    logger.debug("Configuration loaded (pattern=%s)", config.naming.pattern.value)

    if args.cmd == "extract":
        sys.exit(asyncio.run(run_extract_async(args, config)))
    elif args.cmd == "export":
        sys.exit(asyncio.run(run_export_async(args, config)))


if __name__ == "__main__":
    main()
