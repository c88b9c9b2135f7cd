"""Constants used across the folder-toc package."""

from __future__ import annotations

import re

DEFAULT_TOC_TITLE = "Table of content"
DEFAULT_MAX_HEADING_DEPTH = 3
MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

MARKDOWN_EXTENSION = ".md"
SETTINGS_FILENAME = ".folder-toc.json"

# Markdown patterns
HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.+)$")
CODE_FENCE_PATTERN = re.compile(r"^(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
CLOSING_FENCE_MAX_INDENT = 3
MARKDOWN_SUFFIX_PATTERN = re.compile(r"\.md$", re.IGNORECASE)

# Characters that cannot appear in a note file name
UNSAFE_FILENAME_PATTERN = re.compile(r'[\\/:*?"<>|]')

# Rendering
INDENT_CHAR = "\t"
PRIMARY_FOLDER_SEPARATOR = " -> "
