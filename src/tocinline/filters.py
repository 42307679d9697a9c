"""Heading filtering by depth range and exclusion pattern."""

from __future__ import annotations

import logging
import re
from typing import Iterable, Sequence

from tocinline.config import DEFAULT_FROM_HEADING, DEFAULT_TO_HEADING
from tocinline.schemas import Heading

logger = logging.getLogger(__name__)

# Only ever fully matches the empty string.
_EMPTY_PATTERN = re.compile(r"(?:)", re.IGNORECASE)
# Never matches; stands in for a pattern that failed to compile.
_NEVER_PATTERN = re.compile(r"(?!)")


def compile_exclude_pattern(exclude: str | Sequence[str] | None) -> re.Pattern[str]:
    """Compile ``exclude`` into a case-insensitive whole-string matcher.

    A list is joined into one alternation, a string is used as the
    alternation body directly. Entries are not escaped, so regex
    metacharacters keep their regex meaning.

    Use ``pattern.fullmatch(text)`` to test a heading.
    """
    if exclude is None:
        return _EMPTY_PATTERN
    body = exclude if isinstance(exclude, str) else "|".join(exclude)
    if not body:
        return _EMPTY_PATTERN
    try:
        return re.compile(f"(?:{body})", re.IGNORECASE)
    except re.error as exc:
        logger.warning("Ignoring invalid exclude pattern %r: %s", body, exc)
        return _NEVER_PATTERN


def filter_headings(
    headings: Iterable[Heading],
    *,
    from_heading: int = DEFAULT_FROM_HEADING,
    to_heading: int = DEFAULT_TO_HEADING,
    exclude: str | Sequence[str] | None = "",
) -> list[Heading]:
    """Keep headings inside the depth range whose text is not excluded."""
    pattern = compile_exclude_pattern(exclude)
    return [
        heading
        for heading in headings
        if from_heading <= heading.depth <= to_heading
        and not pattern.fullmatch(heading.value)
    ]
