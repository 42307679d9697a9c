"""Inline table of contents pipeline: filter, build, render."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from tocinline.config import (
    DEFAULT_FROM_HEADING,
    DEFAULT_INDENT_DEPTH,
    DEFAULT_TO_HEADING,
)
from tocinline.filters import filter_headings
from tocinline.output_formatter import format_toc_markdown
from tocinline.renderer import render_toc
from tocinline.schemas import Heading, TocNode, TocResult
from tocinline.tree_builder import build_toc_tree, count_nodes


@dataclass
class TocOptions:
    """Options for rendering an inline table of contents.

    Attributes:
        from_heading: Shallowest heading depth to include. Also the depth the
            tree is rooted at and the base for indentation.
        to_heading: Deepest heading depth to include.
        indent_depth: Accepted for compatibility with existing callers.
            It does not affect filtering, nesting or indentation.
        as_disclosure: If True, wrap the list in an open ``<details>``.
        exclude: Heading texts to leave out. A string is used as a regular
            expression alternation, a list is joined with ``|``. Matching is
            case-insensitive against the whole heading text.
    """

    from_heading: int = DEFAULT_FROM_HEADING
    to_heading: int = DEFAULT_TO_HEADING
    indent_depth: int = DEFAULT_INDENT_DEPTH
    as_disclosure: bool = False
    exclude: str | list[str] = ""


def toc_inline(
    headings: Sequence[Heading], options: TocOptions | None = None
) -> str | None:
    """Render the inline table of contents for ``headings``.

    Returns None when no heading survives filtering.
    """
    opts = options or TocOptions()
    tree = _build_tree(headings, opts)
    return render_toc(tree, base_depth=opts.from_heading, as_disclosure=opts.as_disclosure)


def build_toc(
    headings: Sequence[Heading], options: TocOptions | None = None
) -> TocResult:
    """Run the pipeline and return the tree with its HTML and Markdown forms."""
    opts = options or TocOptions()
    tree = _build_tree(headings, opts)
    return TocResult(
        html=render_toc(tree, base_depth=opts.from_heading, as_disclosure=opts.as_disclosure),
        markdown=format_toc_markdown(tree),
        tree=tree,
        count=count_nodes(tree),
    )


def _build_tree(headings: Sequence[Heading], opts: TocOptions) -> list[TocNode]:
    filtered = filter_headings(
        headings,
        from_heading=opts.from_heading,
        to_heading=opts.to_heading,
        exclude=opts.exclude,
    )
    return build_toc_tree(filtered, opts.from_heading)
