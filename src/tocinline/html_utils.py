"""Shared HTML utilities for rendered article documents."""

from __future__ import annotations

import re
import unicodedata

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


def find_document_root(soup: BeautifulSoup) -> Tag:
    """Find the main content element of a rendered article.

    Searches in the following order:
    1. Any <article> element
    2. <body> element
    3. The soup itself as fallback
    """
    article = soup.find("article")
    if article:
        return article
    if soup.body:
        return soup.body
    return soup


def slugify(text: str) -> str:
    """Generate a GitHub-style anchor slug from heading text."""
    slug = unicodedata.normalize("NFKC", text).strip().lower()
    slug = re.sub(r"[^\w\s-]", "", slug)
    return re.sub(r"\s+", "-", slug)
