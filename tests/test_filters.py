"""Tests for heading filtering."""

from __future__ import annotations

import logging

import pytest

from conftest import make_headings
from tocinline.filters import compile_exclude_pattern, filter_headings


class TestCompileExcludePattern:
    """Tests for compile_exclude_pattern."""

    def test_empty_string_matches_only_empty_text(self) -> None:
        pattern = compile_exclude_pattern("")
        assert pattern.fullmatch("")
        assert not pattern.fullmatch("Intro")

    def test_empty_list_matches_only_empty_text(self) -> None:
        pattern = compile_exclude_pattern([])
        assert not pattern.fullmatch("Intro")

    def test_list_is_joined_as_alternation(self) -> None:
        pattern = compile_exclude_pattern(["Intro", "Conclusion"])
        assert pattern.fullmatch("intro")
        assert pattern.fullmatch("CONCLUSION")
        assert not pattern.fullmatch("Summary")

    def test_string_is_used_as_alternation_body(self) -> None:
        pattern = compile_exclude_pattern("intro|outro")
        assert pattern.fullmatch("Outro")

    def test_partial_match_does_not_count(self) -> None:
        pattern = compile_exclude_pattern(["Sub"])
        assert not pattern.fullmatch("Subsection")
        assert not pattern.fullmatch("A Sub")

    def test_metacharacters_keep_regex_meaning(self) -> None:
        pattern = compile_exclude_pattern(["Part .*"])
        assert pattern.fullmatch("Part One")
        assert not pattern.fullmatch("Partial")

    def test_invalid_pattern_excludes_nothing(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="tocinline.filters"):
            pattern = compile_exclude_pattern(["Part (one"])
        assert not pattern.fullmatch("Part (one")
        assert not pattern.fullmatch("")
        assert "Ignoring invalid exclude pattern" in caplog.text


class TestFilterHeadings:
    """Tests for filter_headings."""

    def test_depth_range_is_inclusive(self) -> None:
        headings = make_headings((1, "A"), (2, "B"), (3, "C"), (4, "D"))
        result = filter_headings(headings, from_heading=2, to_heading=3)
        assert [h.value for h in result] == ["B", "C"]

    def test_order_is_preserved(self) -> None:
        headings = make_headings((3, "C"), (2, "B"), (3, "D"), (2, "A"))
        result = filter_headings(headings, from_heading=2, to_heading=3)
        assert [h.value for h in result] == ["C", "B", "D", "A"]

    def test_no_exclusions_returns_sequence_unchanged(self, sample_headings) -> None:
        assert filter_headings(sample_headings, exclude=[]) == sample_headings

    def test_exclude_removes_heading(self, sample_headings) -> None:
        result = filter_headings(sample_headings, exclude=["sub"])
        assert [h.value for h in result] == ["Intro", "Next"]

    def test_none_exclude_behaves_like_empty(self, sample_headings) -> None:
        assert filter_headings(sample_headings, exclude=None) == sample_headings

    def test_empty_input(self) -> None:
        assert filter_headings([]) == []
