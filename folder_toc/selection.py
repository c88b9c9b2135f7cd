"""Selection of the notes listed in a folder TOC."""

from __future__ import annotations

from collections.abc import Iterable

from .constants import DEFAULT_TOC_TITLE, MARKDOWN_EXTENSION, UNSAFE_FILENAME_PATTERN
from .models import VaultFile, VaultFolder


def resolve_note_title(note_title: str | None) -> str:
    """Return the trimmed TOC title, or the default title when blank."""
    title = (note_title or "").strip()
    return title or DEFAULT_TOC_TITLE


def to_safe_file_name(name: str) -> str:
    """Replace characters that are not allowed in note file names.

    Args:
        name: Candidate file name, including its extension.

    Returns:
        str: File name with each of ``\\ / : * ? " < > |`` replaced by ``-``,
            or ``"Table of content.md"`` when nothing remains.

    Examples:
        to_safe_file_name("Index: A/B.md")  # "Index- A-B.md"
    """
    cleaned = UNSAFE_FILENAME_PATTERN.sub("-", name).strip()
    return cleaned or f"{DEFAULT_TOC_TITLE}{MARKDOWN_EXTENSION}"


def build_toc_path(folder: VaultFolder, note_title: str) -> str:
    """Compute the destination path of the TOC note inside `folder`.

    Examples:
        build_toc_path(VaultFolder("Projects", "Projects"), "Index")  # "Projects/Index.md"
        build_toc_path(VaultFolder("", ""), "Index")  # "Index.md"
    """
    filename = to_safe_file_name(f"{note_title}{MARKDOWN_EXTENSION}")
    return filename if folder.is_root else f"{folder.path}/{filename}"


def folder_prefix(folder: VaultFolder) -> str:
    """Return the path prefix shared by every descendant of `folder`."""
    return "" if folder.is_root else f"{folder.path}/"


def parse_exclude_patterns(raw_patterns: str | None) -> list[str]:
    """Split comma-separated exclusion patterns, dropping blank entries.

    Examples:
        parse_exclude_patterns(" img, assets,,")  # ["img", "assets"]
    """
    if not raw_patterns:
        return []
    return [pattern.strip() for pattern in raw_patterns.split(",") if pattern.strip()]


def matches_exclude(path: str, patterns: Iterable[str]) -> bool:
    """Check whether `path` contains any pattern, ignoring case."""
    lower_path = path.lower()
    return any(pattern.lower() in lower_path for pattern in patterns)


def select_files(
    files: Iterable[VaultFile],
    folder: VaultFolder,
    toc_path: str,
    exclude_patterns: str | list[str] | None = None,
) -> list[VaultFile]:
    """Select the notes that belong in the TOC of `folder`.

    Keeps files located in `folder` or any of its subfolders, then drops the
    TOC note itself and every file whose path contains an exclusion pattern.
    Input order is preserved; ordering is the sorter's job.

    Args:
        files: Candidate markdown files of the vault.
        folder: Folder whose TOC is being generated.
        toc_path: Destination path of the TOC note.
        exclude_patterns: Comma-separated string or list of substrings to skip.

    Returns:
        list[VaultFile]: Selected files. Empty when nothing qualifies.

    Examples:
        select_files(vault.get_markdown_files(), folder, "Projects/Index.md", "img,assets")
    """
    if isinstance(exclude_patterns, list):
        patterns = [pattern.strip() for pattern in exclude_patterns if pattern.strip()]
    else:
        patterns = parse_exclude_patterns(exclude_patterns)
    prefix = folder_prefix(folder)

    return [
        file
        for file in files
        if file.path.startswith(prefix)
        and file.path != toc_path
        and not matches_exclude(file.path, patterns)
    ]
