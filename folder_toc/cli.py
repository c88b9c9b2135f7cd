"""
Generates a table of contents note for a folder of a markdown vault.
The note lists every markdown file under the folder with its headings.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from . import __version__
from .actions import generate_for_active_file, generate_for_folder_path
from .config import ConfigError, SortMode, build_settings, save_settings
from .constants import MAX_HEADING_LEVEL, MIN_HEADING_LEVEL, SETTINGS_FILENAME
from .exceptions import VaultError
from .vault import FilesystemVault

__all__ = ["cli"]


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


@click.command()
@click.version_option(version=__version__, prog_name="folder-toc")
@click.option("--title", "note_title", help="Title and file name of the TOC note")
@click.option(
    "--max-depth",
    "max_heading_depth",
    type=click.IntRange(MIN_HEADING_LEVEL, MAX_HEADING_LEVEL),
    help="Deepest heading level listed under each note",
)
@click.option("--exclude", "exclude_patterns", help="Comma-separated path substrings to skip")
@click.option(
    "--show-primary-folder/--no-show-primary-folder",
    "show_primary_folder_name",
    default=None,
    help="Prefix notes in subfolders with their parent folder name",
)
@click.option(
    "--sort",
    "sort_mode",
    type=click.Choice([mode.value for mode in SortMode], case_sensitive=False),
    help="Ordering of the listed notes",
)
@click.option(
    "--ignore-code-blocks/--include-code-blocks",
    default=None,
    help="Skip heading-like lines inside fenced code blocks",
)
@click.option(
    "--active-file",
    help="Vault path of the active note; its folder receives the TOC",
)
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Settings file (default: <vault>/{SETTINGS_FILENAME})",
)
@click.option(
    "--save-settings", "save_settings_flag", is_flag=True, help="Persist the effective settings"
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose logging")
@click.argument("vault_dir", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument("folder", required=False)
def cli(
    vault_dir: Path,
    folder: str | None = None,
    note_title: str | None = None,
    max_heading_depth: int | None = None,
    exclude_patterns: str | None = None,
    show_primary_folder_name: bool | None = None,
    sort_mode: str | None = None,
    ignore_code_blocks: bool | None = None,
    active_file: str | None = None,
    settings_path: Path | None = None,
    save_settings_flag: bool = False,
    verbose: bool = False,
):
    """
    Entry point for generating a folder table of contents.

    Args:
        vault_dir: Root directory of the vault.
        folder: Vault path of the folder to index; defaults to the vault root.
        note_title: Override for the TOC title.
        max_heading_depth: Override for the deepest listed heading level.
        exclude_patterns: Override for the comma-separated exclusion patterns.
        show_primary_folder_name: Override for the parent folder prefix.
        sort_mode: Override for the sort mode.
        ignore_code_blocks: Override for skipping fenced code blocks.
        active_file: Vault path of the active note, used instead of `folder`.
        settings_path: Settings file to load instead of the vault default.
        save_settings_flag: Persist the effective settings before generating.
        verbose: Enable debug logging.

    Raises:
        click.BadParameter: If the vault, the settings, or the folder
            arguments are invalid.
        click.ClickException: If the TOC could not be generated.

    Examples:
        folder-toc ~/notes Projects --sort numeric --max-depth 2
    """
    _setup_logging(verbose)

    if folder is not None and active_file is not None:
        raise click.BadParameter("Pass either FOLDER or --active-file, not both.")

    try:
        vault = FilesystemVault(vault_dir)
    except VaultError as error:
        raise click.BadParameter(str(error)) from error

    settings_file = settings_path or vault.root / SETTINGS_FILENAME
    try:
        settings = build_settings(
            settings_file,
            note_title=note_title,
            max_heading_depth=max_heading_depth,
            exclude_patterns=exclude_patterns,
            show_primary_folder_name=show_primary_folder_name,
            sort_mode=sort_mode,
            ignore_code_blocks=ignore_code_blocks,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    if save_settings_flag:
        try:
            save_settings(settings_file, settings)
        except OSError as error:
            raise click.ClickException(f"Could not save settings: {error}") from error
        click.echo(f"Saved settings to {settings_file}", err=True)

    if active_file is not None:
        result = generate_for_active_file(vault, active_file, settings)
    else:
        result = generate_for_folder_path(vault, folder or "", settings)

    if not result.succeeded:
        raise click.ClickException(result.message)

    click.echo(f"{result.message} ({result.toc_path}, {result.file_count} notes)")


if __name__ == "__main__":
    cli()
