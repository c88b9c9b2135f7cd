"""Data models for folder-toc."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


@dataclass(frozen=True)
class Heading:
    """A heading found in a note.

    Attributes:
        level: Heading level, from 1 (``#``) to 6 (``######``).
        text: Trimmed heading text, never empty.
    """

    level: int
    text: str


@dataclass(frozen=True)
class VaultFile:
    """Handle to a file stored in a vault.

    Attributes:
        path: Slash-separated path relative to the vault root.
        name: File name, including its extension.
    """

    path: str
    name: str

    @property
    def parent_path(self) -> str:
        return self.path.rpartition("/")[0]


@dataclass(frozen=True)
class VaultFolder:
    """Handle to a folder stored in a vault.

    Attributes:
        path: Slash-separated path relative to the vault root; empty for the root.
        name: Folder name; empty for the root.
    """

    path: str
    name: str

    @property
    def is_root(self) -> bool:
        return self.path == ""


@dataclass
class TocEntry:
    """One note listed in a generated TOC.

    Attributes:
        link_path: Link target of the note (path without the markdown extension).
        label: Text displayed for the note link.
        headings: Headings of the note, in document order.
    """

    link_path: str
    label: str
    headings: list[Heading] = field(default_factory=list)


class Outcome(Enum):
    """Terminal outcomes of a TOC generation run.

    The value of each member is the default notice shown to the user.
    """

    UPDATED = "Table of content updated."
    NO_TARGET = "No active file found."
    EMPTY_SELECTION = "No markdown files found in folder."
    READ_FAILURE = "Failed to read a note of the folder."
    INVALID_SETTINGS = "Invalid Table of content settings."
    PATH_CONFLICT = "A folder or non-markdown item blocks the TOC path."
    WRITE_FAILURE = "Failed to write Table of content note."

    @property
    def succeeded(self) -> bool:
        return self is Outcome.UPDATED


@dataclass
class TocResult:
    """Result of a TOC generation run.

    Attributes:
        outcome: Terminal outcome of the run.
        message: Notice to display to the user.
        toc_path: Destination path of the TOC note, or None when no folder was resolved.
        file_count: Number of notes listed in the TOC (zero unless written).
    """

    outcome: Outcome
    message: str
    toc_path: str | None = None
    file_count: int = 0

    @property
    def succeeded(self) -> bool:
        return self.outcome.succeeded


class ParserState(Enum):
    """Scanner states used while extracting headings.

    Attributes:
        NORMAL: Default state for regular text.
        IN_FENCED_CODE: Inside a fenced code block.
    """

    NORMAL = auto()
    IN_FENCED_CODE = auto()


@dataclass
class ParserContext:
    """Encapsulate scanner state while walking a note line by line.

    Attributes:
        state: Current scanner state.
        fence_char: Fence character that opened a fenced code block, if any.
        fence_length: Number of fence characters that opened the block.
    """

    state: ParserState = ParserState.NORMAL
    fence_char: str | None = None
    fence_length: int = 0
