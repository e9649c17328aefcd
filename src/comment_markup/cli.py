"""CLI entry point and subcommand definitions."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console

from comment_markup.config import ConfigError, get_config_path, load_config
from comment_markup.document import FormatKind
from comment_markup.mutator import SelectionError, apply_format
from comment_markup.parser import parse
from comment_markup.tui.widgets.formatted_display import render_document

logger = logging.getLogger(__name__)


def _read_input(source: str | None) -> str:
    """Read text from a file, or from stdin for None or "-"."""
    if source is None or source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text()
    except OSError as e:
        print(f"Cannot read {source}: {e}", file=sys.stderr)
        sys.exit(1)


def _cmd_parse(args: argparse.Namespace) -> None:
    """Print the document parsed from the input as JSON."""
    content = parse(_read_input(args.file))
    print(json.dumps(content.to_dict(), indent=2))


def _cmd_render(args: argparse.Namespace) -> None:
    """Print the input rendered with its formatting."""
    text = _read_input(args.file)
    Console().print(render_document(text, parse(text)))


def _cmd_format(args: argparse.Namespace) -> None:
    """Apply a formatting command to a selection of the input."""
    text = _read_input(args.file)
    try:
        result = apply_format(args.kind, text, args.start, args.end)
    except SelectionError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    if result is None:
        logger.debug("Empty selection, leaving text unchanged")
        payload = {"new_text": text, "new_cursor_position": args.end}
    else:
        payload = {
            "new_text": result.new_text,
            "new_cursor_position": result.new_cursor_position,
        }
    print(json.dumps(payload, indent=2))


def _launch_tui(args: argparse.Namespace) -> None:
    """Launch the editor and print the submitted comment's document.

    Imports are deferred to avoid loading Textual for CLI-only commands.
    """
    from comment_markup.tui.app import CommentApp  # noqa: PLC0415

    try:
        config = load_config(get_config_path())
    except ConfigError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    text = _read_input(args.text) if args.text else ""
    app = CommentApp(text=text, config=config)
    submitted = app.run()
    if submitted is not None:
        print(json.dumps(parse(submitted).to_dict(), indent=2))


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate subcommand."""
    parser = argparse.ArgumentParser(
        prog="comment-markup",
        description="Write comments with lightweight markup and render them",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--text", metavar="FILE", help="Preload the editor with this file")
    subparsers = parser.add_subparsers(dest="command")

    # parse
    parse_parser = subparsers.add_parser("parse", help="Print the parsed document as JSON")
    parse_parser.add_argument("file", nargs="?", help="Input file (default: stdin)")

    # render
    render_parser = subparsers.add_parser("render", help="Print the formatted text")
    render_parser.add_argument("file", nargs="?", help="Input file (default: stdin)")

    # format
    format_parser = subparsers.add_parser("format", help="Format a selection of the text")
    format_parser.add_argument("kind", choices=[k.value for k in FormatKind])
    format_parser.add_argument("start", type=int, help="Selection start offset")
    format_parser.add_argument("end", type=int, help="Selection end offset")
    format_parser.add_argument("file", nargs="?", help="Input file (default: stdin)")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        _launch_tui(args)
        return

    dispatch = {
        "parse": _cmd_parse,
        "render": _cmd_render,
        "format": _cmd_format,
    }
    dispatch[args.command](args)
