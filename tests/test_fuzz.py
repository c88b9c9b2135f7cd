from __future__ import annotations

import os

import pytest

from folder_toc.headings import extract_headings
from folder_toc.sorting import compare_natural, sort_titles

atheris = pytest.importorskip("atheris")


def test_extract_headings_with_fuzzed_input():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    seen = 0

    for _ in range(128):
        if provider.remaining_bytes() == 0:
            break
        content = provider.ConsumeUnicodeNoSurrogates(128)
        depth = provider.ConsumeIntInRange(1, 6)
        for heading in extract_headings(content, depth):
            assert 1 <= heading.level <= depth
            assert heading.text.strip() == heading.text != ""
        seen += 1

    assert seen  # ensure we exercised the loop


def test_sort_titles_with_fuzzed_titles():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    titles: list[str] = []

    while provider.remaining_bytes() > 0 and len(titles) < 64:
        titles.append(provider.ConsumeUnicodeNoSurrogates(24))

    for mode in ("numeric", "alphabetic", "mixed"):
        ordered = sort_titles(titles, mode)
        assert sorted(ordered) == sorted(titles)
        for left, right in zip(ordered, ordered[1:]):
            assert compare_natural(left, left) == 0
            assert sort_titles([right, left], mode) == [left, right]
