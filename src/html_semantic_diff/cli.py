"""
Command-line interface for html-semantic-diff.

Reads one HTML document, normalizes it and prints the canonical tree as
JSON or as an indented tree.  Input comes from ``--file``, else ``--html``,
else piped standard input.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from html_semantic_diff.config import DEFAULT_PARSER, NormalizerConfig
from html_semantic_diff.errors import (
    HTMLSemanticDiffError,
    InputSourceError,
    OutputError,
)
from html_semantic_diff.tree.normalizer import TreeNormalizer
from html_semantic_diff.tree.parser import parse_html
from html_semantic_diff.tree.serialize import render

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html-semantic-diff",
        description="Normalize an HTML document into a canonical tree",
    )
    parser.add_argument("--file", type=Path, help="HTML file to parse")
    parser.add_argument("--html", type=str, help="HTML string to parse")
    parser.add_argument(
        "--output",
        type=Path,
        help="Output file for the rendered structure (defaults to stdout)",
    )
    parser.add_argument(
        "--format",
        default="json",
        help="Output format: json, tree (default: json)",
    )
    parser.add_argument(
        "--normalize-ws",
        action="store_true",
        default=True,
        help="Normalize whitespace in text nodes (default: True)",
    )
    parser.add_argument(
        "--no-normalize-ws",
        action="store_false",
        dest="normalize_ws",
        help="Keep text nodes verbatim",
    )
    parser.add_argument(
        "--parser",
        default=DEFAULT_PARSER,
        help=f"BeautifulSoup parser backend (default: {DEFAULT_PARSER})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def configure_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the package logger."""
    package_logger = logging.getLogger("html_semantic_diff")
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def read_input(
    file: Path | None,
    html: str | None,
    stdin: TextIO | None = None,
) -> str:
    """Return the HTML text from the highest-precedence source given.

    Raises:
        InputSourceError: If the file cannot be read, or no source is given
            and stdin is an interactive terminal.
    """
    if file is not None:
        try:
            return file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InputSourceError(str(file), str(exc)) from exc
    if html:
        return html

    stream = stdin if stdin is not None else sys.stdin
    if stream is None or stream.isatty():
        raise InputSourceError(
            "stdin",
            "no HTML input provided; use --file, --html, or pipe content to stdin",
        )
    try:
        return stream.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputSourceError("stdin", str(exc)) from exc


def write_output(text: str, output: Path | None, stdout: TextIO | None = None) -> None:
    """Write *text* to *output*, or to stdout when no path is given.

    Raises:
        OutputError: If the output file cannot be written.
    """
    if output is None:
        (stdout if stdout is not None else sys.stdout).write(text)
        return
    try:
        output.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"failed to write {output}: {exc}") from exc


def run(argv: list[str] | None = None) -> int:
    """Main CLI entry point.  Returns the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = NormalizerConfig(
            normalize_whitespace=args.normalize_ws,
            parser=args.parser,
        )
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        markup = read_input(args.file, args.html)
        root = TreeNormalizer(config=config).normalize_document(
            parse_html(markup, parser=config.parser)
        )
        write_output(render(root, args.format), args.output)
    except HTMLSemanticDiffError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    logger.debug("rendered canonical tree as %s", args.format)
    return 0


if __name__ == "__main__":
    sys.exit(run())
