"""Render a table of contents tree as nested HTML lists."""

from __future__ import annotations

from tocinline.config import (
    DEFAULT_FROM_HEADING,
    DISCLOSURE_BODY_CLASS,
    DISCLOSURE_SUMMARY_CLASS,
    TOCINLINE_DISCLOSURE_LABEL,
    TOCINLINE_INDENT_UNIT_PX,
)
from tocinline.schemas import TocNode

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML rendering (pip install beautifulsoup4)."
    ) from exc


def render_toc(
    tree: list[TocNode],
    *,
    base_depth: int = DEFAULT_FROM_HEADING,
    as_disclosure: bool = False,
    indent_unit: int = TOCINLINE_INDENT_UNIT_PX,
    label: str = TOCINLINE_DISCLOSURE_LABEL,
) -> str | None:
    """Render ``tree`` as HTML, optionally inside an open ``<details>``.

    Returns None when the tree is empty, with or without the disclosure.
    """
    soup = BeautifulSoup("", "html.parser")
    toc_list = _build_list(soup, tree, base_depth=base_depth, indent_unit=indent_unit)
    if toc_list is None:
        return None
    if not as_disclosure:
        return str(toc_list)

    details = soup.new_tag("details", attrs={"open": ""})
    summary = soup.new_tag("summary", attrs={"class": DISCLOSURE_SUMMARY_CLASS})
    summary.string = label
    body = soup.new_tag("div", attrs={"class": DISCLOSURE_BODY_CLASS})
    body.append(toc_list)
    details.append(summary)
    details.append(body)
    return str(details)


def render_toc_list(
    tree: list[TocNode],
    base_depth: int = DEFAULT_FROM_HEADING,
    *,
    indent_unit: int = TOCINLINE_INDENT_UNIT_PX,
) -> str | None:
    """Render ``tree`` as a bare ``<ul>``, or None when it is empty."""
    soup = BeautifulSoup("", "html.parser")
    toc_list = _build_list(soup, tree, base_depth=base_depth, indent_unit=indent_unit)
    return str(toc_list) if toc_list is not None else None


def _build_list(
    soup: BeautifulSoup, tree: list[TocNode], *, base_depth: int, indent_unit: int
) -> Tag | None:
    if not tree:
        return None
    ul = soup.new_tag("ul")
    for node in tree:
        li = soup.new_tag("li")
        margin = (node.heading.depth - base_depth) * indent_unit
        if margin > 0:
            li["style"] = f"margin-left: {margin}px"
        link = soup.new_tag("a", href=node.heading.url)
        link.string = node.heading.value
        li.append(link)
        children = _build_list(
            soup, node.children, base_depth=base_depth, indent_unit=indent_unit
        )
        if children is not None:
            li.append(children)
        ul.append(li)
    return ul
