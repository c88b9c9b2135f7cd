"""
folder-toc: Table of Contents notes for folders of a markdown vault.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    folder-toc ~/notes Projects

Library Usage:
    from pathlib import Path
    from folder_toc import FilesystemVault, TocSettings, generate_for_folder_path

    vault = FilesystemVault(Path("~/notes").expanduser())
    result = generate_for_folder_path(vault, "Projects", TocSettings(max_heading_depth=2))
    print(result.message)
"""

__version__ = "0.1.0"

from .actions import (  # noqa: E402
    generate_folder_toc,
    generate_for_active_file,
    generate_for_folder_path,
)
from .config import ConfigError, SortMode, TocSettings, load_settings, save_settings  # noqa: E402
from .exceptions import (  # noqa: E402
    EmptySelectionError,
    NoTargetError,
    PathConflictError,
    InvalidSettingsError,
    ReadFailureError,
    TocError,
    VaultError,
    WriteFailureError,
)
from .generator import render_toc  # noqa: E402
from .headings import extract_headings  # noqa: E402
from .models import Heading, Outcome, TocEntry, TocResult, VaultFile, VaultFolder  # noqa: E402
from .selection import select_files  # noqa: E402
from .sorting import compare_natural, sort_files  # noqa: E402
from .vault import FilesystemVault, Vault  # noqa: E402

__all__ = [
    # Actions
    "generate_folder_toc",
    "generate_for_active_file",
    "generate_for_folder_path",
    # Core functionality
    "extract_headings",
    "select_files",
    "sort_files",
    "compare_natural",
    "render_toc",
    # Vault access
    "Vault",
    "FilesystemVault",
    # Data models
    "Heading",
    "VaultFile",
    "VaultFolder",
    "TocEntry",
    "TocResult",
    "Outcome",
    # Settings
    "TocSettings",
    "SortMode",
    "load_settings",
    "save_settings",
    # Exceptions
    "ConfigError",
    "TocError",
    "NoTargetError",
    "EmptySelectionError",
    "ReadFailureError",
    "InvalidSettingsError",
    "PathConflictError",
    "WriteFailureError",
    "VaultError",
    # Version
    "__version__",
]
