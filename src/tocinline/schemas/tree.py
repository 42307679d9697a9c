"""Table of contents tree models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tocinline.schemas.heading import Heading


class TocNode(BaseModel):
    """A heading together with the headings nested one level below it."""

    model_config = ConfigDict(frozen=True)

    heading: Heading
    children: list["TocNode"] = Field(default_factory=list)


class TocResult(BaseModel):
    """Every rendition of one table of contents."""

    html: str | None = None
    markdown: str
    tree: list[TocNode]
    count: int
