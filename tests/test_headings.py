from __future__ import annotations

import pytest

from folder_toc.headings import clamp_heading_depth, extract_headings
from folder_toc.models import Heading


def test_extracts_headings_in_document_order():
    content = "# Title\nSome text\n## Part\n### Detail\n## Other\n"

    assert extract_headings(content, 3) == [
        Heading(1, "Title"),
        Heading(2, "Part"),
        Heading(3, "Detail"),
        Heading(2, "Other"),
    ]


def test_skips_headings_deeper_than_max_depth():
    content = "# Top\n#### Deep\n## Middle\n"

    assert extract_headings(content, 2) == [Heading(1, "Top"), Heading(2, "Middle")]


def test_default_depth_is_three():
    content = "# One\n## Two\n### Three\n#### Four\n"

    assert [heading.level for heading in extract_headings(content)] == [1, 2, 3]


def test_heading_text_is_trimmed():
    assert extract_headings("##    Spaced out   \n", 6) == [Heading(2, "Spaced out")]


def test_tab_separates_hashes_from_text():
    assert extract_headings("#\tTabbed\n", 6) == [Heading(1, "Tabbed")]


@pytest.mark.parametrize(
    "line",
    [
        "#NoSpace",
        "# ",
        "#    ",
        "####### Seven hashes",
        " # Indented",
        "Text # not a heading",
    ],
)
def test_ignores_non_heading_lines(line: str):
    assert extract_headings(line, 6) == []


def test_trailing_hashes_are_kept():
    assert extract_headings("## Closed ##\n", 6) == [Heading(2, "Closed ##")]


def test_setext_headings_are_not_recognized():
    assert extract_headings("Title\n=====\n\nSub\n---\n", 6) == []


def test_handles_windows_line_endings():
    assert extract_headings("# A\r\n## B\r\n", 6) == [Heading(1, "A"), Heading(2, "B")]


def test_depth_is_clamped_before_filtering():
    content = "# One\n## Two\n###### Six\n"

    assert extract_headings(content, 0) == [Heading(1, "One")]
    assert extract_headings(content, 42)[-1] == Heading(6, "Six")


def test_code_blocks_are_scanned_by_default():
    content = "# Real\n```\n# comment\n```\n"

    assert extract_headings(content, 6) == [Heading(1, "Real"), Heading(1, "comment")]


def test_ignore_code_blocks_skips_fenced_lines():
    content = "# Real\n```bash\n# comment\n```\n## After\n~~~~\n# tilde\n~~~~\n"

    assert extract_headings(content, 6, ignore_code_blocks=True) == [
        Heading(1, "Real"),
        Heading(2, "After"),
    ]


def test_ignore_code_blocks_requires_matching_fence():
    content = "````\n```\n# still code\n````\n# Outside\n"

    assert extract_headings(content, 6, ignore_code_blocks=True) == [Heading(1, "Outside")]


def test_unclosed_fence_hides_the_rest_of_the_note():
    content = "# Before\n```\n# Inside\n"

    assert extract_headings(content, 6, ignore_code_blocks=True) == [Heading(1, "Before")]


@pytest.mark.parametrize(
    ("depth", "expected"),
    [
        (1, 1),
        (4, 4),
        (0, 1),
        (-3, 1),
        (7, 6),
        (2.7, 2),
        (float("nan"), 3),
        (None, 3),
        ("4", 3),
        (True, 3),
    ],
)
def test_clamp_heading_depth(depth, expected):
    assert clamp_heading_depth(depth) == expected
