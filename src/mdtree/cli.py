"""Command-line interface for the mdtree Markdown parser.

The CLI parses one Markdown document and prints its tree, either as JSON or
as an indented outline. It only reads the tree; all parsing behaviour lives
in the library.

Examples
--------
Print the JSON tree of a file:
    $ mdtree README.md

Read from stdin and show an outline:
    $ cat notes.md | mdtree --format outline

Compact, ASCII-only JSON written to a file:
    $ mdtree README.md --indent 0 --ascii --out tree.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, get_args

from mdtree import __version__
from mdtree.ast.nodes import MarkdownDocument
from mdtree.ast.outline import OutlineFormatter
from mdtree.ast.serialization import ast_to_json
from mdtree.constants import (
    DEFAULT_JSON_INDENT,
    DEFAULT_OUTLINE_INDENT_WIDTH,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    OutputFormat,
)
from mdtree.exceptions import FileAccessError, FileError, MdtreeError, ValidationError
from mdtree.logging_utils import configure_logging
from mdtree.options import JsonOptions, OutlineOptions
from mdtree.parsers.markdown import MarkdownParser
from mdtree.utils.encoding import normalize_stream_to_text

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``mdtree`` command."""
    parser = argparse.ArgumentParser(
        prog="mdtree",
        description="Parse Markdown into a document tree and print it as JSON or as an outline.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Markdown file to parse; omit or use '-' to read stdin",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=list(get_args(OutputFormat)),
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help=(
            f"Indentation width: JSON spaces per level (default: {DEFAULT_JSON_INDENT}) "
            f"or outline spaces per level (default: {DEFAULT_OUTLINE_INDENT_WIDTH})"
        ),
    )
    parser.add_argument("--ascii", action="store_true", help="Escape non-ASCII characters in JSON output")
    parser.add_argument("--sort-keys", action="store_true", help="Sort JSON object keys")
    parser.add_argument("--no-text", action="store_true", help="Hide text payloads in outline output")
    parser.add_argument("--out", "-o", type=str, help="Write output to this file instead of stdout")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", type=str, help="Also write log records to this file")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Debug logging with timestamps, and tracebacks on errors",
    )
    parser.add_argument("--version", "-V", action="version", version=f"mdtree {__version__}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Configure logging from ``--log-level``, ``--log-file`` and ``--trace``."""
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _parse_input(md_parser: MarkdownParser, source: str) -> MarkdownDocument:
    """Parse a Markdown file, or stdin when ``source`` is '-'."""
    if source == "-":
        stream = getattr(sys.stdin, "buffer", sys.stdin)
        return md_parser.parse(normalize_stream_to_text(stream))
    return md_parser.parse_file(source)


def render_output(document: MarkdownDocument, parsed_args: argparse.Namespace) -> str:
    """Render ``document`` in the format selected on the command line."""
    if parsed_args.format == "outline":
        outline_options = OutlineOptions(show_text=not parsed_args.no_text)
        if parsed_args.indent is not None:
            outline_options = outline_options.create_updated(indent_width=parsed_args.indent)
        return OutlineFormatter(outline_options).format(document)

    json_options = JsonOptions(ensure_ascii=parsed_args.ascii, sort_keys=parsed_args.sort_keys)
    if parsed_args.indent is not None:
        json_options = json_options.create_updated(indent=parsed_args.indent)
    return ast_to_json(document, json_options)


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to a CLI exit code."""
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    return EXIT_ERROR


def main(args: Optional[list[str]] = None) -> int:
    """Run the ``mdtree`` command and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        document = _parse_input(MarkdownParser(), parsed_args.input)
        output = render_output(document, parsed_args)

        if parsed_args.out:
            try:
                Path(parsed_args.out).write_text(output + "\n", encoding="utf-8")
            except OSError as e:
                raise FileAccessError(parsed_args.out, message=f"Cannot write output file: {e}", original_error=e) from e
            logger.info("Wrote %s output to %s", parsed_args.format, parsed_args.out)
        else:
            print(output)
    except MdtreeError as e:
        if parsed_args.trace:
            logger.exception("mdtree failed")
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        if parsed_args.trace:
            logger.exception("Unexpected error")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
