"""Extract heading records from rendered article HTML."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from tocinline.html_utils import find_document_root, slugify
from tocinline.schemas import Heading

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)

_HEADING_RE = re.compile(r"^h[1-6]$")


def extract_headings(html: str) -> list[Heading]:
    """Return the headings of a rendered document in document order."""
    soup = BeautifulSoup(html, "lxml")
    root = find_document_root(soup)

    headings: list[Heading] = []
    for tag in _iter_headings(root):
        value = re.sub(r"\s+", " ", tag.get_text(" ", strip=True))
        if not value:
            continue
        anchor = _anchor_for(tag, root) or slugify(value)
        headings.append(Heading(depth=int(tag.name[1]), value=value, url=f"#{anchor}"))

    logger.debug("Extracted %d headings", len(headings))
    return headings


def _iter_headings(root: Tag) -> Iterable[Tag]:
    for heading in root.find_all(_HEADING_RE):
        if heading.find_parent("nav"):
            continue
        yield heading


def _anchor_for(heading: Tag, root: Tag) -> str | None:
    if heading.get("id"):
        return heading["id"]
    # A wrapper id only names the heading that opens the wrapper.
    parent = heading.parent
    if parent is None or parent is root or not parent.get("id"):
        return None
    if parent.find(_HEADING_RE) is not heading:
        return None
    return parent["id"]
