"""Writing the generated TOC note into the vault."""

from __future__ import annotations

import logging

from .exceptions import PathConflictError, WriteFailureError
from .models import VaultFile
from .vault import Vault

logger = logging.getLogger(__name__)


def write_toc(vault: Vault, toc_path: str, content: str) -> None:
    """Create or overwrite the TOC note at `toc_path`.

    Args:
        vault: Vault receiving the note.
        toc_path: Destination path of the TOC note.
        content: Rendered TOC.

    Returns:
        None.

    Raises:
        PathConflictError: If a folder or other non-file entity occupies
            `toc_path`; nothing is written.
        WriteFailureError: If the vault fails to look up, create or modify
            the note.

    Examples:
        write_toc(vault, "Projects/Table of content.md", rendered)
    """
    try:
        existing = vault.get_entry(toc_path)
    except Exception as error:
        raise WriteFailureError(toc_path) from error

    if existing is not None and not isinstance(existing, VaultFile):
        raise PathConflictError(toc_path)

    try:
        if existing is not None:
            vault.modify(existing, content)
            logger.info("Updated %s", toc_path)
        else:
            vault.create(toc_path, content)
            logger.info("Created %s", toc_path)
    except Exception as error:
        raise WriteFailureError(toc_path) from error
