"""Command-style actions that generate folder TOC notes.

These are the entry points a host application (or the CLI) invokes. They
run the whole pipeline and report a `TocResult` instead of raising.
"""

from __future__ import annotations

import logging

from .config import ConfigError, TocSettings, normalize_settings
from .exceptions import (
    EmptySelectionError,
    InvalidSettingsError,
    NoTargetError,
    PathConflictError,
    ReadFailureError,
    TocError,
    WriteFailureError,
)
from .generator import build_toc_entries, render_toc
from .models import Outcome, TocResult, VaultFile, VaultFolder
from .selection import build_toc_path, resolve_note_title, select_files
from .sorting import sort_files
from .vault import Vault
from .writer import write_toc

logger = logging.getLogger(__name__)

_OUTCOMES: dict[type[TocError], Outcome] = {
    NoTargetError: Outcome.NO_TARGET,
    EmptySelectionError: Outcome.EMPTY_SELECTION,
    ReadFailureError: Outcome.READ_FAILURE,
    InvalidSettingsError: Outcome.INVALID_SETTINGS,
    PathConflictError: Outcome.PATH_CONFLICT,
    WriteFailureError: Outcome.WRITE_FAILURE,
}


def resolve_folder(vault: Vault, folder_path: str | None) -> VaultFolder:
    """Look up the folder a TOC should be generated for.

    Args:
        vault: Vault holding the folder.
        folder_path: Slash-separated folder path; empty for the vault root.

    Returns:
        VaultFolder: The folder stored at `folder_path`.

    Raises:
        NoTargetError: If no path is given or no folder exists there.
    """
    if folder_path is None:
        raise NoTargetError("No folder selected.")

    folder_path = folder_path.strip("/")
    try:
        folder = vault.get_folder(folder_path)
    except Exception as error:
        raise NoTargetError(f"Folder not found: {folder_path}") from error
    if folder is None:
        raise NoTargetError(f"Folder not found: {folder_path}")
    return folder


def resolve_active_folder(vault: Vault, active_path: str | None) -> VaultFolder:
    """Return the folder containing the active note.

    Raises:
        NoTargetError: If there is no active note or it has no parent folder.
    """
    if not active_path:
        raise NoTargetError(Outcome.NO_TARGET.value)

    try:
        active = vault.get_entry(active_path.strip("/"))
    except Exception as error:
        raise NoTargetError(Outcome.NO_TARGET.value) from error
    if not isinstance(active, VaultFile):
        raise NoTargetError(Outcome.NO_TARGET.value)

    try:
        parent = vault.get_folder(active.parent_path)
    except Exception as error:
        raise NoTargetError("Active file has no parent folder.") from error
    if parent is None:
        raise NoTargetError("Active file has no parent folder.")
    return parent


def build_folder_toc(
    vault: Vault, folder: VaultFolder, settings: TocSettings
) -> tuple[str, str, list[VaultFile]]:
    """Select, sort and read the notes of `folder` and render its TOC.

    Args:
        vault: Vault holding the notes.
        folder: Folder whose TOC is generated.
        settings: Normalized settings for the run.

    Returns:
        tuple[str, str, list[VaultFile]]: Destination path of the TOC note,
            rendered content, and the listed notes in order.

    Raises:
        EmptySelectionError: If no note qualifies for the TOC.
        ReadFailureError: If the vault cannot be listed or a selected note
            cannot be read.
    """
    title = resolve_note_title(settings.note_title)
    toc_path = build_toc_path(folder, title)

    try:
        files = vault.get_markdown_files()
    except Exception as error:
        raise ReadFailureError(folder.path) from error

    selected = select_files(files, folder, toc_path, settings.exclude_patterns)
    if not selected:
        raise EmptySelectionError(folder.path)

    ordered = sort_files(selected, settings.sort_mode)
    logger.debug(
        "Listing %d notes of %r in %s order", len(ordered), folder.path, settings.sort_mode.value
    )

    entries = build_toc_entries(vault, folder, ordered, settings)
    return toc_path, render_toc(title, entries), ordered


def generate_folder_toc(
    vault: Vault, folder: VaultFolder, settings: TocSettings | None = None
) -> TocResult:
    """Generate or refresh the TOC note of `folder`.

    Runs selection, sorting, heading extraction, rendering and writing. Every
    failure of the run, invalid settings included, is reported through the
    returned result; nothing is raised.

    Args:
        vault: Vault holding the notes.
        folder: Folder whose TOC is generated.
        settings: Settings snapshot for the run; defaults when omitted.

    Returns:
        TocResult: Outcome of the run and the notice to show.

    Examples:
        result = generate_folder_toc(FilesystemVault(root), VaultFolder("Projects", "Projects"))
        print(result.message)
    """
    toc_path: str | None = None

    try:
        settings = _normalized(settings)
        toc_path, content, listed = build_folder_toc(vault, folder, settings)
        write_toc(vault, toc_path, content)
    except TocError as error:
        return _failure(error, toc_path)

    logger.info("Wrote %s listing %d notes", toc_path, len(listed))
    return TocResult(
        outcome=Outcome.UPDATED,
        message=Outcome.UPDATED.value,
        toc_path=toc_path,
        file_count=len(listed),
    )


def generate_for_folder_path(
    vault: Vault, folder_path: str | None, settings: TocSettings | None = None
) -> TocResult:
    """Generate the TOC of the folder stored at `folder_path`."""
    try:
        folder = resolve_folder(vault, folder_path)
    except NoTargetError as error:
        return _failure(error, None)
    return generate_folder_toc(vault, folder, settings)


def generate_for_active_file(
    vault: Vault, active_path: str | None, settings: TocSettings | None = None
) -> TocResult:
    """Generate the TOC of the folder containing the active note."""
    try:
        folder = resolve_active_folder(vault, active_path)
    except NoTargetError as error:
        return _failure(error, None)
    return generate_folder_toc(vault, folder, settings)


def _normalized(settings: TocSettings | None) -> TocSettings:
    try:
        return normalize_settings(settings or TocSettings())
    except ConfigError as error:
        raise InvalidSettingsError(str(error)) from error


def _failure(error: TocError, toc_path: str | None) -> TocResult:
    outcome = _OUTCOMES[type(error)]
    if outcome is Outcome.WRITE_FAILURE:
        logger.error("Could not write %s", toc_path, exc_info=error.__cause__ or error)
    else:
        logger.warning("%s", error)

    if outcome in (Outcome.NO_TARGET, Outcome.INVALID_SETTINGS):
        message = str(error)
    else:
        message = outcome.value
    return TocResult(outcome=outcome, message=message, toc_path=toc_path)
