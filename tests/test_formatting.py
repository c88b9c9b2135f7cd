from __future__ import annotations

from folder_toc.formatting import (
    format_display_label,
    link_path,
    note_title,
    primary_folder_name,
    strip_markdown_extension,
)
from folder_toc.models import VaultFile, VaultFolder

ROOT = VaultFolder(path="", name="")
PROJECTS = VaultFolder(path="Projects", name="Projects")


def _file(path: str) -> VaultFile:
    return VaultFile(path=path, name=path.rsplit("/", 1)[-1])


def test_label_includes_primary_folder_for_subfolder_notes():
    note = _file("Projects/Sub/Note.md")

    assert format_display_label(PROJECTS, note, True) == "Sub -> Note"
    assert format_display_label(PROJECTS, note, False) == "Note"


def test_label_uses_immediate_parent_for_deep_notes():
    note = _file("Projects/A/B/Note.md")

    assert format_display_label(PROJECTS, note, True) == "B -> Note"


def test_label_of_note_directly_in_root_has_no_prefix():
    assert format_display_label(PROJECTS, _file("Projects/Note.md"), True) == "Note"
    assert format_display_label(ROOT, _file("Note.md"), True) == "Note"


def test_label_under_vault_root():
    assert format_display_label(ROOT, _file("Sub/Note.md"), True) == "Sub -> Note"


def test_primary_folder_name():
    assert primary_folder_name(PROJECTS, _file("Projects/Sub/Note.md")) == "Sub"
    assert primary_folder_name(PROJECTS, _file("Projects/Note.md")) == "Projects"


def test_note_title_strips_one_markdown_suffix_case_insensitively():
    assert note_title(_file("Projects/Plan.MD")) == "Plan"
    assert note_title(_file("Projects/archive.md.md")) == "archive.md"
    assert note_title(_file("Projects/notes.markdown.txt")) == "notes.markdown.txt"


def test_link_path_strips_extension_from_full_path():
    assert link_path(_file("Projects/Sub/Note.md")) == "Projects/Sub/Note"
    assert link_path(_file("v1.md/Note.Md")) == "v1.md/Note"


def test_strip_markdown_extension_only_touches_the_end():
    assert strip_markdown_extension("a.md-draft") == "a.md-draft"
