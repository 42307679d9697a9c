"""Heading record model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Heading(BaseModel):
    """One heading extracted from a rendered document.

    Attributes:
        depth: Heading level, 1 for ``<h1>`` through 6 for ``<h6>``.
        value: Display text of the heading.
        url: In-page anchor, usually a ``#fragment``.
    """

    model_config = ConfigDict(frozen=True)

    depth: int = Field(..., ge=1, le=6)
    value: str
    url: str
