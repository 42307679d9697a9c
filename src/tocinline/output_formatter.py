"""Format a table of contents tree as Markdown or a plain outline."""

from __future__ import annotations

from tocinline.schemas import TocNode


def format_toc_markdown(tree: list[TocNode], indent: int = 0) -> str:
    """Render nested ``- [value](url)`` bullets, two spaces per level."""
    lines: list[str] = []
    for node in tree:
        prefix = "  " * indent + "- "
        text = _escape_link_text(node.heading.value)
        lines.append(f"{prefix}[{text}]({_link_destination(node.heading.url)})")
        if node.children:
            lines.append(format_toc_markdown(node.children, indent + 1))
    return "\n".join(lines)


def format_toc_outline(tree: list[TocNode]) -> str:
    """Render the tree as an indented outline under a ``Contents:`` title."""
    return "Contents:\n" + _create_outline(tree)


def _create_outline(tree: list[TocNode], indent: int = 0) -> str:
    lines: list[str] = []
    for node in tree:
        lines.append(" " * (indent * 4) + node.heading.value)
        if node.children:
            lines.append(_create_outline(node.children, indent + 1))
    return "\n".join(lines)


def _escape_link_text(text: str) -> str:
    return text.replace("[", r"\[").replace("]", r"\]")


def _link_destination(url: str) -> str:
    if not any(char in url for char in " ()<>"):
        return url
    return "<" + url.replace("<", r"\<").replace(">", r"\>") + ">"
