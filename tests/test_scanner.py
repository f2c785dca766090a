# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for update package scanning."""

from __future__ import annotations

from pathlib import Path

import pytest

from updatecheck.config import ValidationConfig
from updatecheck.context import ValidationContext
from updatecheck.errors import (
    IncompleteReadError,
    LayoutError,
    ManifestParseError,
    MissingResourceError,
    NamingError,
    StructureError,
)
from updatecheck.progress import ProgressEvent, ProgressPhase
from updatecheck.scanner import check_package_name, scan_update, scan_update_archive
from updatecheck.sources import MemoryEntrySource

DESCRIPTOR = b"file_changes:\n  added_files:\n    - app/new.jar\n"


def _entries(*extra: tuple[str, bytes | None]) -> list[tuple[str, bytes | None]]:
    return [
        ("upd-1/", None),
        ("upd-1/LICENSE.txt", b"license"),
        ("upd-1/README.txt", b"readme"),
        ("upd-1/update-descriptor.yaml", DESCRIPTOR),
        ("upd-1/instructions.txt", b"restart"),
        ("upd-1/NOT_A_CONTRIBUTION.txt", b"nac"),
        ("upd-1/contentroot/", None),
        ("upd-1/contentroot/app/plugin.jar", b"jar"),
        *extra,
    ]


def test_check_package_name_requires_prefix(conventions: ValidationConfig) -> None:
    check_package_name("upd-1", conventions)
    with pytest.raises(NamingError, match="'upd'"):
        check_package_name("patch-1", conventions)


def test_scan_update_collects_content_and_added_files(conventions: ValidationConfig) -> None:
    context = ValidationContext(config=conventions)

    scan_update(MemoryEntrySource.of(_entries(("upd-1/contentroot/app/new.jar", b"new"))), "upd-1", context)

    assert context.update_files == {"app/plugin.jar", "app/new.jar"}
    assert context.added_files == {"app/new.jar"}
    assert context.notices == []
    assert context.manifest.pending == {}


def test_scan_update_skips_directory_entries(conventions: ValidationConfig) -> None:
    context = ValidationContext(config=conventions)

    scan_update(MemoryEntrySource.of(_entries(("upd-1/contentroot/lib/", None))), "upd-1", context)

    assert context.update_files == {"app/plugin.jar"}


def test_scan_update_reports_missing_optional_resources(conventions: ValidationConfig) -> None:
    entries = [entry for entry in _entries() if not entry[0].endswith("instructions.txt")]
    context = ValidationContext(config=conventions)

    scan_update(MemoryEntrySource.of(entries), "upd-1", context)

    assert context.notices == ["instructions.txt was not found in the zip file."]


def test_scan_update_rejects_missing_mandatory_resources(conventions: ValidationConfig) -> None:
    entries = [entry for entry in _entries() if not entry[0].endswith(("README.txt", "LICENSE.txt"))]
    context = ValidationContext(config=conventions)

    with pytest.raises(MissingResourceError) as excinfo:
        scan_update(MemoryEntrySource.of(entries), "upd-1", context)

    assert excinfo.value.missing == ("LICENSE.txt", "README.txt")
    assert "\t- README.txt" in excinfo.value.message


def test_scan_update_rejects_entries_outside_package_root(conventions: ValidationConfig) -> None:
    context = ValidationContext(config=conventions)

    with pytest.raises(StructureError) as excinfo:
        scan_update(MemoryEntrySource.of(_entries(("other/contentroot/x.jar", b"x"))), "upd-1", context)

    assert excinfo.value.actual_root == "other"


def test_scan_update_rejects_rootless_entries(conventions: ValidationConfig) -> None:
    context = ValidationContext(config=conventions)

    with pytest.raises(StructureError, match="root folder called 'upd-1'"):
        scan_update(MemoryEntrySource.of([("LICENSE.txt", b"license")]), "upd-1", context)


@pytest.mark.parametrize("name", ["upd-1/stray.jar", "upd-1/contentrootx/app.jar", "upd-1/lib/contentroot/a.jar"])
def test_scan_update_rejects_files_outside_content_root(conventions: ValidationConfig, name: str) -> None:
    context = ValidationContext(config=conventions)

    with pytest.raises(LayoutError) as excinfo:
        scan_update(MemoryEntrySource.of(_entries((name, b"x"))), "upd-1", context)

    assert excinfo.value.path == name
    assert excinfo.value.expected_folder == "upd-1/contentroot"


def test_scan_update_rejects_bad_descriptor(conventions: ValidationConfig) -> None:
    entries = [
        (name, b"file_changes: [" if name.endswith("update-descriptor.yaml") else content)
        for name, content in _entries()
    ]
    context = ValidationContext(config=conventions)

    with pytest.raises(ManifestParseError):
        scan_update(MemoryEntrySource.of(entries), "upd-1", context)


def test_scan_update_detects_incomplete_read(conventions: ValidationConfig) -> None:
    entries = _entries()
    context = ValidationContext(config=conventions)

    with pytest.raises(IncompleteReadError) as excinfo:
        scan_update(MemoryEntrySource.of(entries, declared=len(entries) + 1), "upd-1", context)

    assert excinfo.value.processed == len(entries)


def test_scan_update_reports_progress(conventions: ValidationConfig) -> None:
    events: list[ProgressEvent] = []
    context = ValidationContext(config=conventions, observer=events.append)
    entries = _entries()

    scan_update(MemoryEntrySource.of(entries), "upd-1", context)

    assert len(events) == len(entries)
    assert events[-1] == ProgressEvent(ProgressPhase.UPDATE_ARCHIVE, len(entries), len(entries))


def test_scan_update_archive_checks_name_before_opening(conventions: ValidationConfig, tmp_path: Path) -> None:
    context = ValidationContext(config=conventions)

    with pytest.raises(NamingError):
        scan_update_archive(tmp_path / "patch-1.zip", context)


def test_scan_update_archive_reads_zip(conventions, make_zip, update_entries) -> None:
    archive = make_zip("upd-1.zip", update_entries(content=("app/plugin.jar", "lib/a.jar")))
    context = ValidationContext(config=conventions)

    scan_update_archive(archive, context)

    assert context.update_files == {"app/plugin.jar", "lib/a.jar"}
