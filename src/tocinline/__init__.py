"""tocinline: render nested tables of contents from document headings."""

from tocinline.exceptions import HeadingInputError, ParseError, TocinlineError
from tocinline.filters import compile_exclude_pattern, filter_headings
from tocinline.html_parser import extract_headings
from tocinline.loader import load_headings
from tocinline.renderer import render_toc, render_toc_list
from tocinline.schemas import Heading, TocNode, TocResult
from tocinline.toc import TocOptions, build_toc, toc_inline
from tocinline.tree_builder import build_toc_tree, count_nodes

__all__ = [
    "Heading",
    "HeadingInputError",
    "ParseError",
    "TocNode",
    "TocOptions",
    "TocResult",
    "TocinlineError",
    "build_toc",
    "build_toc_tree",
    "compile_exclude_pattern",
    "count_nodes",
    "extract_headings",
    "filter_headings",
    "load_headings",
    "render_toc",
    "render_toc_list",
    "toc_inline",
]
