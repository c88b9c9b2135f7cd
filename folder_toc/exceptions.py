"""Package-specific exception types."""

from __future__ import annotations


class TocError(Exception):
    """Base class for errors that end a TOC generation run.

    Each subclass maps to one user-facing outcome; the action layer converts
    them into a `TocResult` instead of letting them escape.
    """


class NoTargetError(TocError):
    """Raised when no folder can be resolved for the action."""


class EmptySelectionError(TocError):
    """Raised when the selected folder holds no markdown files to list.

    Args:
        folder_path: Path of the scanned folder (empty for the vault root).
    """

    def __init__(self, folder_path: str):
        self.folder_path = folder_path
        super().__init__(f"No markdown files found in {folder_path or 'vault root'}")


class PathConflictError(TocError):
    """Raised when a non-file entity occupies the TOC destination path.

    Args:
        path: Destination path of the TOC note.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"{path} is occupied by a folder or non-markdown item")


class WriteFailureError(TocError):
    """Raised when the vault fails to create or modify the TOC note.

    Args:
        path: Destination path of the TOC note.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Failed to write {path}")


class ReadFailureError(TocError):
    """Raised when the vault fails to list the folder or read one of its notes.

    Args:
        path: Path of the folder or note that could not be read.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Failed to read {path or 'vault root'}")


class InvalidSettingsError(TocError):
    """Raised when the settings of a run cannot be normalized."""


class VaultError(OSError):
    """Raised by vault implementations for invalid paths or store failures."""
