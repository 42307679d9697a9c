"""Load heading records from JSON or rendered HTML files."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from tocinline.exceptions import HeadingInputError, ParseError
from tocinline.html_parser import extract_headings
from tocinline.schemas import Heading

_HEADING_LIST = TypeAdapter(list[Heading])


def load_headings(path: Path) -> list[Heading]:
    """Load headings from ``path``.

    Args:
        path: A ``.json`` file holding a list of ``{depth, value, url}``
            objects, or any other file, which is read as rendered HTML.

    Returns:
        Heading records in document order.

    Raises:
        HeadingInputError: If the file is missing, unreadable or its records
            are invalid.
        ParseError: If the file is not valid UTF-8 text.
    """
    if not path.is_file():
        raise HeadingInputError(f"Input file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"Input file is not valid UTF-8: {path}: {exc}") from exc
    except OSError as exc:
        raise HeadingInputError(f"Cannot read input file {path}: {exc}") from exc
    if path.suffix.lower() == ".json":
        return parse_heading_json(text)
    return extract_headings(text)


def parse_heading_json(text: str) -> list[Heading]:
    """Validate a JSON array of heading records."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise HeadingInputError(f"Invalid JSON: {exc}") from exc
    try:
        return _HEADING_LIST.validate_python(raw)
    except ValidationError as exc:
        raise HeadingInputError(f"Invalid heading records: {exc}") from exc
