"""Ordering of the notes listed in a TOC."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Callable, Iterable
from functools import cmp_to_key

from .config import SortMode
from .formatting import note_title
from .models import VaultFile

DIGIT_RUN_PATTERN = re.compile(r"[0-9]+|[^0-9]")
LEADING_NUMBER_PATTERN = re.compile(r"^\s*([0-9]+)")

# Character classes, in collation order
_RANK_OTHER = 0
_RANK_DIGITS = 1
_RANK_LETTER = 2

Comparator = Callable[[str, str], int]


def _primary_form(character: str) -> str:
    """Fold case and strip accents from a single character."""
    decomposed = unicodedata.normalize("NFKD", character.casefold())
    return "".join(part for part in decomposed if not unicodedata.combining(part))


def natural_sort_key(text: str) -> tuple:
    """Build a collation key for locale-aware natural ordering.

    Runs of digits compare by numeric value, so ``"Note 2"`` sorts before
    ``"Note 10"``. Other characters compare without regard to case or
    accents, with whitespace and punctuation ahead of digits and digits ahead
    of letters. Strings that tie on that primary level are ordered by accents,
    then by case (lowercase first), and finally by code point, so only
    identical strings produce equal keys.

    Args:
        text: String to build a key for.

    Returns:
        tuple: Key suitable for ``sorted(..., key=natural_sort_key)``.

    Examples:
        sorted(["b10", "B2", "a"], key=natural_sort_key)  # ["a", "B2", "b10"]
    """
    normalized = unicodedata.normalize("NFC", text)
    primary = []
    for token in DIGIT_RUN_PATTERN.findall(normalized):
        if "0" <= token[0] <= "9":
            primary.append((_RANK_DIGITS, int(token), ""))
            continue
        form = _primary_form(token)
        if not form:
            continue
        rank = _RANK_LETTER if token.isalpha() else _RANK_OTHER
        primary.append((rank, 0, form))

    secondary = normalized.casefold()
    tertiary = normalized.swapcase()
    return (tuple(primary), secondary, tertiary, text)


def compare_natural(left: str, right: str) -> int:
    """Compare two strings with `natural_sort_key`.

    Returns:
        int: Negative when `left` sorts first, positive when `right` does, and
            zero only for identical strings.

    Examples:
        compare_natural("2", "10")  # -1
    """
    left_key = natural_sort_key(left)
    right_key = natural_sort_key(right)
    return (left_key > right_key) - (left_key < right_key)


def leading_number(title: str) -> int | None:
    """Return the number a title starts with, ignoring leading whitespace."""
    match = LEADING_NUMBER_PATTERN.match(title)
    return int(match.group(1)) if match else None


def compare_numeric(left: str, right: str) -> int:
    """Order numbered titles by their leading number, ahead of unnumbered ones."""
    left_number = leading_number(left)
    right_number = leading_number(right)

    if left_number is not None and right_number is not None:
        if left_number != right_number:
            return -1 if left_number < right_number else 1
        return compare_natural(left, right)
    if left_number is not None:
        return -1
    if right_number is not None:
        return 1
    return compare_natural(left, right)


def character_class(title: str) -> int:
    """Rank a title by its first character: letter, then digit, then anything else."""
    if not title:
        return 2
    first = title[0]
    if first.isalpha():
        return 0
    if "0" <= first <= "9":
        return 1
    return 2


def compare_mixed(left: str, right: str) -> int:
    """Order letter-led titles first, then digit-led titles, then the rest."""
    left_class = character_class(left)
    right_class = character_class(right)
    if left_class != right_class:
        return -1 if left_class < right_class else 1
    return compare_natural(left, right)


COMPARATORS: dict[SortMode, Comparator] = {
    SortMode.ALPHABETIC: compare_natural,
    SortMode.NUMERIC: compare_numeric,
    SortMode.MIXED: compare_mixed,
}


def sort_files(
    files: Iterable[VaultFile], mode: SortMode | str = SortMode.MIXED
) -> list[VaultFile]:
    """Sort notes by title under the given sort mode.

    Titles are computed once per path for the duration of the call. Notes
    with identical titles are ordered by their full path, so the result never
    depends on input order.

    Args:
        files: Notes to sort.
        mode: Sort mode or its name.

    Returns:
        list[VaultFile]: Sorted notes.

    Raises:
        ConfigError: If `mode` does not name a sort mode.

    Examples:
        sort_files(selected, SortMode.NUMERIC)
    """
    compare = COMPARATORS[SortMode.parse(mode)]
    titles: dict[str, str] = {}

    def title_of(file: VaultFile) -> str:
        title = titles.get(file.path)
        if title is None:
            title = titles[file.path] = note_title(file)
        return title

    def compare_files(left: VaultFile, right: VaultFile) -> int:
        result = compare(title_of(left), title_of(right))
        if result:
            return result
        return compare_natural(left.path, right.path)

    return sorted(files, key=cmp_to_key(compare_files))


def sort_titles(titles: Iterable[str], mode: SortMode | str = SortMode.MIXED) -> list[str]:
    """Sort bare titles under the given sort mode."""
    return sorted(titles, key=cmp_to_key(COMPARATORS[SortMode.parse(mode)]))
