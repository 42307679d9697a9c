"""Shared schemas for tocinline."""

from tocinline.schemas.heading import Heading
from tocinline.schemas.tree import TocNode, TocResult

__all__ = ["Heading", "TocNode", "TocResult"]
