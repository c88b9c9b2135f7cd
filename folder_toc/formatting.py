"""Display labels and link targets for listed notes."""

from __future__ import annotations

from .constants import MARKDOWN_SUFFIX_PATTERN, PRIMARY_FOLDER_SEPARATOR
from .models import VaultFile, VaultFolder
from .selection import folder_prefix


def strip_markdown_extension(value: str) -> str:
    """Remove one trailing ``.md`` suffix, compared case-insensitively."""
    return MARKDOWN_SUFFIX_PATTERN.sub("", value, count=1)


def note_title(file: VaultFile) -> str:
    """Return the title of a note: its file name without the markdown extension.

    Examples:
        note_title(VaultFile("Projects/Plan.MD", "Plan.MD"))  # "Plan"
    """
    return strip_markdown_extension(file.name)


def link_path(file: VaultFile) -> str:
    """Return the wiki-link target of a note: its path without the markdown extension."""
    return strip_markdown_extension(file.path)


def relative_parts(root: VaultFolder, file: VaultFile) -> list[str]:
    """Split the path of `file` relative to `root` into its segments."""
    prefix = folder_prefix(root)
    relative = file.path[len(prefix) :] if file.path.startswith(prefix) else file.path
    return relative.split("/")


def primary_folder_name(root: VaultFolder, file: VaultFile) -> str:
    """Return the name of the folder that directly contains `file`.

    For files in a subfolder of `root` this is the second to last segment of
    the relative path. Otherwise the name of `root` itself is returned.

    Examples:
        primary_folder_name(VaultFolder("Projects", "Projects"),
                            VaultFile("Projects/Sub/Note.md", "Note.md"))  # "Sub"
    """
    parts = relative_parts(root, file)
    if len(parts) > 1:
        return parts[-2]
    return root.name


def format_display_label(
    root: VaultFolder, file: VaultFile, show_primary_folder_name: bool = True
) -> str:
    """Compute the label displayed for a note in the TOC.

    When `show_primary_folder_name` is enabled, notes located in a subfolder of
    `root` are prefixed with the name of their parent folder, as in
    ``"Sub -> Note"``. Notes directly inside `root` keep their bare title.

    Args:
        root: Folder whose TOC is being generated.
        file: Note to label.
        show_primary_folder_name: Whether to prefix the parent folder name.

    Returns:
        str: Display label for the note.

    Examples:
        format_display_label(VaultFolder("Projects", "Projects"),
                             VaultFile("Projects/Sub/Note.md", "Note.md"))  # "Sub -> Note"
    """
    title = note_title(file)
    if not show_primary_folder_name:
        return title

    if len(relative_parts(root, file)) <= 1:
        return title

    primary = primary_folder_name(root, file)
    if not primary:
        return title
    return f"{primary}{PRIMARY_FOLDER_SEPARATOR}{title}"
