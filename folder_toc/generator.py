"""Table of contents rendering for vault folders."""

from __future__ import annotations

from collections.abc import Iterable

from .config import TocSettings
from .constants import INDENT_CHAR
from .exceptions import ReadFailureError
from .formatting import format_display_label, link_path
from .headings import extract_headings
from .models import TocEntry, VaultFile, VaultFolder
from .vault import Vault


def render_toc(title: str, entries: Iterable[TocEntry]) -> str:
    """Render the TOC note from ordered entries.

    The note starts with a level-1 heading holding `title` and a blank line.
    Each entry becomes a bullet linking to the note, followed by one nested
    bullet per heading, indented by one tab per heading level.

    Args:
        title: Title of the TOC note.
        entries: Notes to list, already in display order.

    Returns:
        str: Lines of the TOC joined by newlines, without a trailing newline.

    Examples:
        render_toc("Index", [TocEntry("A", "A", [Heading(1, "Intro")])])
        # "# Index\\n\\n- [[A|A]]\\n\\t- [[A#Intro|Intro]]"
    """
    lines = [f"# {title}", ""]

    for entry in entries:
        lines.append(f"- [[{entry.link_path}|{entry.label}]]")
        for heading in entry.headings:
            indent = INDENT_CHAR * max(1, heading.level)
            lines.append(f"{indent}- [[{entry.link_path}#{heading.text}|{heading.text}]]")

    return "\n".join(lines)


def build_toc_entries(
    vault: Vault, folder: VaultFolder, files: Iterable[VaultFile], settings: TocSettings
) -> list[TocEntry]:
    """Read each note and collect its label, link target and headings.

    Args:
        vault: Vault used to read note contents.
        folder: Folder whose TOC is being generated.
        files: Notes in display order.
        settings: Settings controlling labels and heading depth.

    Returns:
        list[TocEntry]: One entry per note, in the order of `files`.

    Raises:
        ReadFailureError: If a note cannot be read.
    """
    entries = []
    for file in files:
        try:
            content = vault.read(file)
        except Exception as error:
            raise ReadFailureError(file.path) from error
        entries.append(
            TocEntry(
                link_path=link_path(file),
                label=format_display_label(folder, file, settings.show_primary_folder_name),
                headings=extract_headings(
                    content,
                    settings.max_heading_depth,
                    ignore_code_blocks=settings.ignore_code_blocks,
                ),
            )
        )
    return entries
