"""Heading extraction for vault notes."""

from __future__ import annotations

import math

from .constants import (
    CLOSING_FENCE_MAX_INDENT,
    CODE_FENCE_PATTERN,
    DEFAULT_MAX_HEADING_DEPTH,
    HEADING_PATTERN,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
)
from .models import Heading, ParserContext, ParserState


def clamp_heading_depth(depth: object) -> int:
    """Clamp a configured heading depth to the supported range.

    Values that are not numbers (including NaN and booleans) fall back to the
    default depth of 3. Fractional depths are truncated after clamping.

    Args:
        depth: Raw depth value, typically loaded from settings.

    Returns:
        int: Depth between 1 and 6 inclusive.

    Examples:
        clamp_heading_depth(9)  # 6
        clamp_heading_depth(0)  # 1
        clamp_heading_depth(float("nan"))  # 3
    """
    if isinstance(depth, bool) or not isinstance(depth, (int, float)):
        return DEFAULT_MAX_HEADING_DEPTH
    if isinstance(depth, float) and math.isnan(depth):
        return DEFAULT_MAX_HEADING_DEPTH
    return int(min(max(depth, MIN_HEADING_LEVEL), MAX_HEADING_LEVEL))


def _try_open_fence(ctx: ParserContext, line: str) -> bool:
    """Detect the start of a fenced code block.

    Args:
        ctx: Scanner context to update when a fence opens.
        line: Current line being scanned.

    Returns:
        bool: True when the line begins a fence and the context is updated.

    Examples:
        _try_open_fence(ParserContext(), "```python")  # True
    """
    if ctx.state is not ParserState.NORMAL:
        return False

    fence_match = CODE_FENCE_PATTERN.match(line)
    if not fence_match:
        return False

    fence_sequence = fence_match.group("fence")
    # Backtick fences cannot carry backticks in their info string
    if fence_sequence[0] == "`" and "`" in fence_match.group("info"):
        return False

    ctx.state = ParserState.IN_FENCED_CODE
    ctx.fence_char = fence_sequence[0]
    ctx.fence_length = len(fence_sequence)
    return True


def _try_close_fence(ctx: ParserContext, line: str) -> bool:
    """Attempt to close the active fenced code block.

    Args:
        ctx: Scanner context describing the active fence.
        line: Current line being scanned.

    Returns:
        bool: True when the line closes the fence; otherwise False.
    """
    if ctx.state is not ParserState.IN_FENCED_CODE or ctx.fence_char is None:
        return False

    stripped_line = line.lstrip(" ")
    if len(line) - len(stripped_line) > CLOSING_FENCE_MAX_INDENT:
        return False
    if not stripped_line or stripped_line[0] != ctx.fence_char:
        return False

    fence_run_length = len(stripped_line) - len(stripped_line.lstrip(ctx.fence_char))
    if fence_run_length < ctx.fence_length:
        return False

    if stripped_line[fence_run_length:].strip():
        return False

    ctx.state = ParserState.NORMAL
    ctx.fence_char = None
    ctx.fence_length = 0
    return True


def extract_headings(
    content: str, max_depth: object = DEFAULT_MAX_HEADING_DEPTH, ignore_code_blocks: bool = False
) -> list[Heading]:
    """Extract ATX headings from note content.

    A heading is a line starting with one to six ``#`` characters, at least
    one whitespace character, and some text. Headings deeper than
    `max_depth` are skipped. Trailing ``#`` characters are kept as part of
    the text, and setext headings are not recognized.

    Args:
        content: Full text of the note.
        max_depth: Deepest heading level to keep; clamped to the 1-6 range.
        ignore_code_blocks: When True, skip lines inside fenced code blocks.

    Returns:
        list[Heading]: Headings in document order.

    Examples:
        extract_headings("# Title\\n## Part\\n### Detail", max_depth=2)
        # [Heading(1, "Title"), Heading(2, "Part")]
    """
    depth = clamp_heading_depth(max_depth)
    headings: list[Heading] = []
    ctx = ParserContext()

    for line in content.splitlines():
        if ignore_code_blocks:
            if ctx.state is ParserState.IN_FENCED_CODE:
                _try_close_fence(ctx, line)
                continue
            if _try_open_fence(ctx, line):
                continue

        heading_match = HEADING_PATTERN.match(line)
        if not heading_match:
            continue

        level = len(heading_match.group(1))
        if level > depth:
            continue

        text = heading_match.group(2).strip()
        if text:
            headings.append(Heading(level=level, text=text))

    return headings
