"""Group a flat heading sequence into a tree by heading level."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from tocinline.config import DEFAULT_FROM_HEADING
from tocinline.schemas import Heading, TocNode

logger = logging.getLogger(__name__)


def build_toc_tree(
    headings: Sequence[Heading], depth: int = DEFAULT_FROM_HEADING
) -> list[TocNode]:
    """Build sibling nodes at ``depth`` from headings in document order.

    Each heading at ``depth`` takes the run of deeper headings that follows
    it as candidate children, which are grouped again at ``depth + 1``.
    Headings that do not sit at the expected level (a skipped level such as
    h2 followed directly by h4) are dropped rather than reparented.
    """
    items: list[TocNode] = []
    i = 0
    while i < len(headings):
        current = headings[i]
        if current.depth != depth:
            logger.debug(
                "Dropping heading %r: depth %d, expected %d",
                current.value,
                current.depth,
                depth,
            )
            i += 1
            continue

        j = i + 1
        while j < len(headings) and headings[j].depth > depth:
            j += 1
        items.append(
            TocNode(
                heading=current,
                children=build_toc_tree(headings[i + 1 : j], depth + 1),
            )
        )
        i = j
    return items


def count_nodes(tree: Iterable[TocNode]) -> int:
    """Count total nodes in the tree."""
    total = 0
    for node in tree:
        total += 1
        total += count_nodes(node.children)
    return total
