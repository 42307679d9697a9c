"""Local configuration for tocinline."""

from __future__ import annotations

import os


DEFAULT_FROM_HEADING = 1
DEFAULT_TO_HEADING = 6
DEFAULT_INDENT_DEPTH = 3
DEFAULT_INDENT_UNIT_PX = 24  # 1.5rem per level
DEFAULT_DISCLOSURE_LABEL = "Table of Contents"

# Classes carried over from the blog's Tailwind layout.
DISCLOSURE_SUMMARY_CLASS = "ml-6 pb-2 pt-2 text-xl font-bold"
DISCLOSURE_BODY_CLASS = "ml-6"

TOCINLINE_INDENT_UNIT_PX = int(os.getenv("TOCINLINE_INDENT_UNIT_PX", str(DEFAULT_INDENT_UNIT_PX)))
TOCINLINE_DISCLOSURE_LABEL = os.getenv("TOCINLINE_DISCLOSURE_LABEL", DEFAULT_DISCLOSURE_LABEL)
