"""Command-line interface for rendering an inline table of contents."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tocinline.config import DEFAULT_FROM_HEADING, DEFAULT_INDENT_DEPTH, DEFAULT_TO_HEADING
from tocinline.exceptions import TocinlineError
from tocinline.loader import load_headings
from tocinline.output_formatter import format_toc_outline
from tocinline.toc import TocOptions, build_toc

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tocinline",
        description="Render a nested table of contents from document headings.",
    )
    parser.add_argument(
        "input",
        type=Path,
        help="JSON list of {depth, value, url} records, or a rendered HTML page",
    )
    parser.add_argument("--from-heading", type=int, default=DEFAULT_FROM_HEADING, help="Shallowest depth to include")
    parser.add_argument("--to-heading", type=int, default=DEFAULT_TO_HEADING, help="Deepest depth to include")
    parser.add_argument("--indent-depth", type=int, default=DEFAULT_INDENT_DEPTH, help="Accepted for compatibility; no effect")
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Heading text to exclude (case-insensitive regex, repeatable)",
    )
    parser.add_argument(
        "--disclosure",
        action="store_true",
        help="Wrap the list in an open <details> element",
    )
    parser.add_argument(
        "--format",
        choices=("html", "markdown", "outline"),
        default="html",
        help="Output format (default: html)",
    )
    parser.add_argument("--output", type=Path, help="Write to this file instead of stdout")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("tocinline").setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    options = TocOptions(
        from_heading=args.from_heading,
        to_heading=args.to_heading,
        indent_depth=args.indent_depth,
        as_disclosure=args.disclosure,
        exclude=args.exclude,
    )
    try:
        headings = load_headings(args.input)
    except TocinlineError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    result = build_toc(headings, options)
    logger.debug("Rendered %d of %d headings", result.count, len(headings))

    if args.format == "markdown":
        text = result.markdown
    elif args.format == "outline":
        text = format_toc_outline(result.tree)
    else:
        text = result.html or ""

    if args.output:
        args.output.write_text(text + "\n" if text else "", encoding="utf-8")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
