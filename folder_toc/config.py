"""Settings loading, persistence and validation."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path

from .constants import DEFAULT_MAX_HEADING_DEPTH, DEFAULT_TOC_TITLE, MAX_HEADING_LEVEL
from .headings import clamp_heading_depth

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Exception raised when settings values are invalid.

    Examples:
        raise ConfigError("`sort_mode` must be one of: numeric, alphabetic, mixed")
    """


class SortMode(str, Enum):
    """Ordering policies for the notes listed in a TOC."""

    NUMERIC = "numeric"
    ALPHABETIC = "alphabetic"
    MIXED = "mixed"

    @classmethod
    def parse(cls, value: object) -> SortMode:
        """Convert a raw value into a `SortMode`.

        Args:
            value: A `SortMode` or its name, compared case-insensitively.

        Returns:
            SortMode: The matching sort mode.

        Raises:
            ConfigError: If the value does not name a sort mode.

        Examples:
            SortMode.parse("Numeric")  # SortMode.NUMERIC
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        choices = ", ".join(mode.value for mode in cls)
        raise ConfigError(f"`sort_mode` must be one of: {choices} (got {value!r})")


@dataclass
class TocSettings:
    """Settings for generating folder tables of contents.

    Attributes:
        note_title: Title of the TOC note, also used as its file name.
        max_heading_depth: Deepest heading level listed under each note.
        exclude_patterns: Comma-separated substrings; notes whose path contains
            any of them (case-insensitively) are skipped.
        show_primary_folder_name: Whether to prefix notes in subfolders with
            the name of their parent folder.
        sort_mode: Ordering policy for the listed notes.
        ignore_code_blocks: Whether to skip heading-like lines inside fenced
            code blocks.

    Examples:
        TocSettings(max_heading_depth=2, sort_mode=SortMode.NUMERIC)
    """

    note_title: str = DEFAULT_TOC_TITLE
    max_heading_depth: int = DEFAULT_MAX_HEADING_DEPTH
    exclude_patterns: str = ""
    show_primary_folder_name: bool = True
    sort_mode: SortMode = SortMode.MIXED
    ignore_code_blocks: bool = False


# Settings are persisted with the camelCase keys used by the plugin data file.
_PERSISTED_KEYS = {
    "note_title": "noteTitle",
    "max_heading_depth": "maxHeadingDepth",
    "exclude_patterns": "excludePatterns",
    "show_primary_folder_name": "showPrimaryFolderName",
    "sort_mode": "sortMode",
    "ignore_code_blocks": "ignoreCodeBlocks",
}
_FIELD_NAMES = {persisted: name for name, persisted in _PERSISTED_KEYS.items()}


def settings_from_mapping(raw: object, source: str = "settings") -> TocSettings:
    """Build settings from a partial mapping, defaulting missing fields.

    Keys may use either the persisted camelCase names or the attribute names.

    Args:
        raw: Decoded settings object.
        source: Description of where the mapping came from, used in errors.

    Returns:
        TocSettings: Normalized settings.

    Raises:
        ConfigError: If the mapping is not a dict or contains unsupported keys.

    Examples:
        settings_from_mapping({"noteTitle": "Index", "sortMode": "numeric"})
    """
    if raw is None:
        return TocSettings()

    if not isinstance(raw, dict):
        raise ConfigError(f"Invalid settings in {source}: expected an object")

    values = {}
    for key, value in raw.items():
        name = _FIELD_NAMES.get(key, key)
        if name not in _PERSISTED_KEYS:
            raise ConfigError(f"Invalid settings in {source}: unknown key `{key}`")
        values[name] = value

    return normalize_settings(TocSettings(**values))


def settings_to_mapping(settings: TocSettings) -> dict[str, object]:
    """Serialize settings to the persisted camelCase mapping."""
    mapping: dict[str, object] = {}
    for field in fields(TocSettings):
        value = getattr(settings, field.name)
        if isinstance(value, SortMode):
            value = value.value
        mapping[_PERSISTED_KEYS[field.name]] = value
    return mapping


def load_settings(settings_file: Path) -> TocSettings:
    """Load settings from a JSON data file.

    A missing file yields default settings. Files that cannot be read or
    decoded are skipped with a warning, also yielding defaults.

    Args:
        settings_file: Path of the JSON data file.

    Returns:
        TocSettings: Loaded settings with defaults applied for missing fields.

    Raises:
        ConfigError: If the file holds something other than an object, or
            contains unsupported keys.

    Examples:
        load_settings(Path("vault/.folder-toc.json"))
    """
    if not settings_file.exists():
        logger.debug("No settings file at %s, using defaults", settings_file)
        return TocSettings()

    try:
        with open(settings_file, encoding="UTF-8") as stream:
            data = json.load(stream)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as error:
        logger.warning("Ignoring unreadable settings file %s: %s", settings_file, error)
        return TocSettings()

    return settings_from_mapping(data, str(settings_file))


def save_settings(settings_file: Path, settings: TocSettings) -> None:
    """Persist the full settings object as JSON.

    Args:
        settings_file: Destination of the JSON data file.
        settings: Settings to persist.

    Raises:
        ConfigError: If the settings fail validation.
        OSError: If the file cannot be written.
    """
    settings = normalize_settings(settings)
    validate_settings(settings)
    payload = json.dumps(settings_to_mapping(settings), indent=2, ensure_ascii=False)
    settings_file.write_text(payload + "\n", encoding="UTF-8")
    logger.debug("Saved settings to %s", settings_file)


def normalize_settings(settings: TocSettings) -> TocSettings:
    """Coerce loosely typed settings values into their canonical form.

    The sort mode is parsed from its name and the heading depth is clamped to
    the 1-6 range.

    Raises:
        ConfigError: If the sort mode is unknown.
    """
    return replace(
        settings,
        max_heading_depth=clamp_heading_depth(settings.max_heading_depth),
        sort_mode=SortMode.parse(settings.sort_mode),
    )


def validate_settings(settings: TocSettings) -> None:
    """Validate a `TocSettings` instance.

    Args:
        settings: Settings to validate.

    Returns:
        None.

    Raises:
        ConfigError: If a field has the wrong type or an unknown sort mode.

    Examples:
        validate_settings(TocSettings(max_heading_depth=4))
    """
    settings = normalize_settings(settings)

    if not isinstance(settings.note_title, str):
        raise ConfigError("`note_title` must be a string")
    if not isinstance(settings.exclude_patterns, str):
        raise ConfigError("`exclude_patterns` must be a comma-separated string")
    if not 1 <= settings.max_heading_depth <= MAX_HEADING_LEVEL:
        raise ConfigError(f"`max_heading_depth` must be between 1 and {MAX_HEADING_LEVEL}")

    for name in ("show_primary_folder_name", "ignore_code_blocks"):
        if not isinstance(getattr(settings, name), bool):
            raise ConfigError(f"`{name}` must be a boolean")


def apply_overrides(settings: TocSettings, **overrides: object) -> TocSettings:
    """Apply override values to `TocSettings`.

    Args:
        settings: Base settings to update.
        overrides: Override values keyed by settings field name; values set to
            None are ignored.

    Returns:
        TocSettings: New settings with the overrides applied. The original
        settings are returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `TocSettings`.

    Examples:
        updated = apply_overrides(settings, note_title="Index", sort_mode="numeric")
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return settings
    return replace(settings, **changes)


def build_settings(settings_file: Path, **overrides: object) -> TocSettings:
    """Load, override, and validate settings.

    Args:
        settings_file: JSON data file holding the persisted settings.
        overrides: Override values keyed by settings attributes; None values
            are ignored.

    Returns:
        TocSettings: Validated settings ready for a generation run.

    Raises:
        ConfigError: If loading or validation fails.

    Examples:
        settings = build_settings(Path("vault/.folder-toc.json"), max_heading_depth=2)
    """
    settings = load_settings(settings_file)
    settings = apply_overrides(settings, **overrides)
    settings = normalize_settings(settings)
    validate_settings(settings)
    return settings
