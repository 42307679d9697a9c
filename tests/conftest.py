"""Test setup for tocinline."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tocinline.schemas import Heading  # noqa: E402


def make_headings(*specs: tuple[int, str]) -> list[Heading]:
    """Build headings from ``(depth, value)`` pairs with slug anchors."""
    return [
        Heading(depth=depth, value=value, url="#" + value.lower().replace(" ", "-"))
        for depth, value in specs
    ]


@pytest.fixture
def sample_headings() -> list[Heading]:
    """Intro > Sub, then Next, as in a short blog post."""
    return make_headings((1, "Intro"), (2, "Sub"), (1, "Next"))
