"""Vault access: the file store that holds notes and receives the TOC."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path, PurePosixPath
from typing import Union

from .constants import MARKDOWN_EXTENSION
from .exceptions import VaultError
from .models import VaultFile, VaultFolder

logger = logging.getLogger(__name__)

VaultEntry = Union[VaultFile, VaultFolder, None]


class Vault:
    """Interface of the file store used to generate TOC notes.

    Paths are slash-separated and relative to the vault root; the root folder
    has the empty path.
    """

    def get_markdown_files(self) -> list[VaultFile]:
        """Return every markdown file of the vault."""
        raise NotImplementedError

    def read(self, file: VaultFile) -> str:
        """Return the full text of `file`, reflecting the last write."""
        raise NotImplementedError

    def get_entry(self, path: str) -> VaultEntry:
        """Return the file or folder stored at `path`, or None."""
        raise NotImplementedError

    def create(self, path: str, content: str) -> VaultFile:
        """Create a new file; fails when the parent folder is missing."""
        raise NotImplementedError

    def modify(self, file: VaultFile, content: str) -> None:
        """Replace the content of an existing file."""
        raise NotImplementedError

    def get_folder(self, path: str) -> VaultFolder | None:
        """Return the folder stored at `path`, or None when there is none."""
        entry = self.get_entry(path)
        return entry if isinstance(entry, VaultFolder) else None


def contains_symlink(path: Path, root: Path) -> bool:
    """Check whether `path` or any of its parents below `root` is a symlink.

    Args:
        path: Path to inspect.
        root: Directory where the check stops.

    Returns:
        bool: True when a symlink is encountered, otherwise False.
    """
    for candidate in (path, *path.parents):
        if candidate == root:
            break
        try:
            if candidate.is_symlink():
                return True
        except OSError:
            continue
    return False


class FilesystemVault(Vault):
    """Vault backed by a directory on the local filesystem.

    Hidden directories (such as ``.obsidian`` or ``.trash``) and symlinks are
    never listed. New files are opened in exclusive mode; existing files are
    replaced through a temporary file in the destination directory followed
    by an atomic rename.

    Args:
        root: Directory holding the vault.

    Raises:
        VaultError: If `root` is not an existing directory.

    Examples:
        vault = FilesystemVault(Path("~/notes").expanduser())
        files = vault.get_markdown_files()
    """

    def __init__(self, root: Path):
        try:
            resolved = Path(root).expanduser().resolve(strict=True)
        except (FileNotFoundError, RuntimeError) as error:
            raise VaultError(f"{root} does not exist.") from error
        if not resolved.is_dir():
            raise VaultError(f"{resolved} is not a directory.")
        self.root = resolved

    def __repr__(self) -> str:
        return f"FilesystemVault({str(self.root)!r})"

    def resolve(self, path: str) -> Path:
        """Map a vault path onto the filesystem, refusing paths outside the vault.

        Raises:
            VaultError: If the path is absolute, escapes the vault, or traverses
                a symlink.
        """
        vault_path = PurePosixPath(path)
        if vault_path.is_absolute() or ".." in vault_path.parts:
            raise VaultError(f"{path} is outside of the vault {self.root}.")

        target = self.root.joinpath(*vault_path.parts)
        if contains_symlink(target, self.root):
            raise VaultError(f"Symlinks are not supported: {path}")
        return target

    def get_markdown_files(self) -> list[VaultFile]:
        files: list[VaultFile] = []
        for directory, dirnames, filenames in os.walk(self.root):
            current = Path(directory)
            dirnames[:] = sorted(
                name
                for name in dirnames
                if not name.startswith(".") and not (current / name).is_symlink()
            )
            for filename in filenames:
                candidate = current / filename
                if candidate.suffix.lower() != MARKDOWN_EXTENSION or candidate.is_symlink():
                    continue
                if not candidate.is_file():
                    continue
                relative = candidate.relative_to(self.root).as_posix()
                files.append(VaultFile(path=relative, name=filename))

        files.sort(key=lambda file: file.path)
        logger.debug("Found %d markdown files in %s", len(files), self.root)
        return files

    def read(self, file: VaultFile) -> str:
        target = self.resolve(file.path)
        try:
            with open(target, "r", encoding="UTF-8") as handle:
                return handle.read()
        except UnicodeDecodeError as error:
            raise VaultError(f"Invalid UTF-8 sequence in {file.path}: {error}") from error
        except (
            FileNotFoundError,
            PermissionError,
            IsADirectoryError,
            NotADirectoryError,
        ) as error:
            raise VaultError(f"Error accessing {file.path}: {error}") from error

    def get_entry(self, path: str) -> VaultEntry:
        if path == "":
            return VaultFolder(path="", name="")

        target = self.resolve(path)
        try:
            stat_result = os.stat(target, follow_symlinks=False)
        except FileNotFoundError:
            return None
        except OSError as error:
            raise VaultError(f"Error accessing {path}: {error}") from error

        if stat.S_ISDIR(stat_result.st_mode):
            return VaultFolder(path=path, name=target.name)
        if stat.S_ISREG(stat_result.st_mode):
            return VaultFile(path=path, name=target.name)
        raise VaultError(f"{path} is neither a regular file nor a folder.")

    def create(self, path: str, content: str) -> VaultFile:
        target = self.resolve(path)
        if not target.parent.is_dir():
            raise VaultError(f"Parent folder of {path} does not exist.")

        _exclusive_write(target, content, path)
        logger.debug("Created %s", path)
        return VaultFile(path=path, name=target.name)

    def modify(self, file: VaultFile, content: str) -> None:
        target = self.resolve(file.path)
        try:
            stat_result = os.stat(target, follow_symlinks=False)
        except OSError as error:
            raise VaultError(f"Error accessing {file.path}: {error}") from error
        if not stat.S_ISREG(stat_result.st_mode):
            raise VaultError(f"{file.path} is not a regular file.")

        _atomic_write(target, content, permissions=stat.S_IMODE(stat_result.st_mode))
        logger.debug("Modified %s", file.path)


def _exclusive_write(target: Path, content: str, path: str) -> None:
    """Write `content` to a file that must not exist yet.

    The file is opened in exclusive mode, so the process umask applies to its
    permissions and a concurrent creation is refused instead of overwritten.
    A partially written file is removed.

    Raises:
        VaultError: If the file exists or cannot be written.
    """
    try:
        handle = open(target, "x", encoding="UTF-8", newline="")
    except FileExistsError as error:
        raise VaultError(f"{path} already exists.") from error
    except OSError as error:
        raise VaultError(f"Error writing {target}: {error}") from error

    try:
        with handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
    except OSError as error:
        target.unlink(missing_ok=True)
        raise VaultError(f"Error writing {target}: {error}") from error


def _atomic_write(target: Path, content: str, permissions: int) -> None:
    """Write `content` to `target` through a temporary file and an atomic rename.

    Args:
        target: Destination file.
        content: Text to write, encoded as UTF-8.
        permissions: Mode bits of the file being replaced.

    Raises:
        VaultError: If writing or renaming fails.
    """
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w", encoding="UTF-8", delete=False, dir=target.parent, newline=""
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            tmp_file.write(content)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())

        os.chmod(temp_path, permissions)
        os.replace(temp_path, target)
        temp_path = None
    except OSError as error:
        raise VaultError(f"Error writing {target}: {error}") from error
    finally:
        if temp_path is not None:
            try:
                temp_path.unlink(missing_ok=True)
            except OSError:
                pass
