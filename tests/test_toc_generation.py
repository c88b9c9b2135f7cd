from __future__ import annotations

from pathlib import Path

import pytest

from folder_toc.config import TocSettings
from folder_toc.exceptions import ReadFailureError, VaultError
from folder_toc.generator import build_toc_entries, render_toc
from folder_toc.models import Heading, TocEntry, VaultFile, VaultFolder
from folder_toc.vault import FilesystemVault


def test_render_single_note_with_nested_headings():
    entries = [TocEntry("A", "A", [Heading(1, "H1"), Heading(2, "H2")])]

    assert render_toc("Table of content", entries) == (
        "# Table of content\n\n- [[A|A]]\n\t- [[A#H1|H1]]\n\t\t- [[A#H2|H2]]"
    )


def test_render_indents_one_tab_per_level():
    entries = [TocEntry("Docs/Guide", "Guide", [Heading(3, "Deep"), Heading(6, "Deepest")])]

    lines = render_toc("Index", entries).split("\n")

    assert lines[3] == "\t\t\t- [[Docs/Guide#Deep|Deep]]"
    assert lines[4] == "\t" * 6 + "- [[Docs/Guide#Deepest|Deepest]]"


def test_render_multiple_notes_in_given_order():
    entries = [
        TocEntry("Projects/Sub/B", "Sub -> B"),
        TocEntry("Projects/A", "A", [Heading(2, "Goals")]),
    ]

    assert render_toc("Index", entries) == "\n".join(
        [
            "# Index",
            "",
            "- [[Projects/Sub/B|Sub -> B]]",
            "- [[Projects/A|A]]",
            "\t\t- [[Projects/A#Goals|Goals]]",
        ]
    )


def test_render_without_entries():
    assert render_toc("Index", []) == "# Index\n"


def test_build_toc_entries_reads_each_note(make_vault):
    root = make_vault(
        {
            "Projects/Plan.md": "# Plan\n## Goals\n### Detail\n",
            "Projects/Sub/Task.md": "Just text\n",
        }
    )
    vault = FilesystemVault(root)
    folder = VaultFolder("Projects", "Projects")
    files = [
        VaultFile("Projects/Plan.md", "Plan.md"),
        VaultFile("Projects/Sub/Task.md", "Task.md"),
    ]

    entries = build_toc_entries(vault, folder, files, TocSettings(max_heading_depth=2))

    assert entries == [
        TocEntry("Projects/Plan", "Plan", [Heading(1, "Plan"), Heading(2, "Goals")]),
        TocEntry("Projects/Sub/Task", "Sub -> Task", []),
    ]


def test_build_toc_entries_honours_label_and_code_settings(make_vault):
    root = make_vault({"Projects/Sub/Task.md": "```\n# code\n```\n# Real\n"})
    vault = FilesystemVault(root)
    settings = TocSettings(show_primary_folder_name=False, ignore_code_blocks=True)

    (entry,) = build_toc_entries(
        vault,
        VaultFolder("Projects", "Projects"),
        [VaultFile("Projects/Sub/Task.md", "Task.md")],
        settings,
    )

    assert entry.label == "Task"
    assert entry.headings == [Heading(1, "Real")]


def test_build_toc_entries_wraps_read_errors(tmp_path: Path):
    class UnreadableVault(FilesystemVault):
        def read(self, file: VaultFile) -> str:
            raise VaultError(f"Error accessing {file.path}")

    vault = UnreadableVault(tmp_path)

    with pytest.raises(ReadFailureError) as excinfo:
        build_toc_entries(
            vault, VaultFolder("", ""), [VaultFile("Gone.md", "Gone.md")], TocSettings()
        )

    assert excinfo.value.path == "Gone.md"
    assert isinstance(excinfo.value.__cause__, VaultError)
