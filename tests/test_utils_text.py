"""Tests for text utilities."""

from __future__ import annotations

from pathlib import PurePosixPath

import pytest

from docref.utils.text import (
    collapse_whitespace,
    extract_title,
    iter_prose_lines,
    normalize_target,
)


class TestExtractTitle:
    """Test extract_title function."""

    def test_first_h1(self) -> None:
        """Uses the first level-one heading."""
        assert extract_title("intro\n## Sub\n# Closures\n# Later", "fallback") == "Closures"

    def test_fallback(self) -> None:
        """Falls back when there is no level-one heading."""
        assert extract_title("## Only sub", "05_closures") == "05_closures"

    def test_ignores_code_comments(self) -> None:
        """Shell comments inside fences are not headings."""
        text = "```sh\n# not a title\n```\n# Real Title"

        assert extract_title(text, "x") == "Real Title"


class TestIterProseLines:
    """Test iter_prose_lines function."""

    def test_skips_fenced_blocks(self) -> None:
        """Lines between fences are dropped, including the fences."""
        text = "before\n```js\nconst a = 1;\n```\nafter\n~~~\nx\n~~~"

        assert list(iter_prose_lines(text)) == ["before", "after"]

    def test_mismatched_fence_stays_open(self) -> None:
        """A tilde fence does not close a backtick fence."""
        text = "```\n~~~\ninside\n```\nout"

        assert list(iter_prose_lines(text)) == ["out"]


class TestNormalizeTarget:
    """Test normalize_target function."""

    @pytest.mark.parametrize(
        "target,expected",
        [
            ("./01_variable&Datatypes.md", "01_variable&Datatypes.md"),
            ("01_variable%26Datatypes.md", "01_variable&Datatypes.md"),
            ("/react/02_hooks.md#rules", "react/02_hooks.md"),
            ("05_closures.html", "05_closures.md"),
            ("05_closures", "05_closures.md"),
            ("<12_dom.md>", "12_dom.md"),
        ],
    )
    def test_local_targets(self, target: str, expected: str) -> None:
        """Local targets become corpus-relative markdown paths."""
        assert normalize_target(target) == PurePosixPath(expected)

    @pytest.mark.parametrize(
        "target", ["https://developer.mozilla.org", "mailto:me@example.com", "#top", "", "//cdn.example.com/x.md"]
    )
    def test_ignored_targets(self, target: str) -> None:
        """External links and anchors are ignored."""
        assert normalize_target(target) is None


def test_collapse_whitespace() -> None:
    """Runs of whitespace collapse to single spaces."""
    assert collapse_whitespace(["  Async \n  Await ", "", "Basics"]) == "Async Await Basics"
