# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for path normalisation helpers."""

from __future__ import annotations

from pathlib import Path, PureWindowsPath

import pytest

from updatecheck.errors import StructureError
from updatecheck.paths import (
    archive_base_name,
    canonicalize,
    is_archive_location,
    leaf_name,
    normalize,
    relative_key,
    split_root,
    strip_prefix,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("app/plugin.jar", "app/plugin.jar"),
        ("/app/plugin.jar", "app/plugin.jar"),
        ("app\\lib\\plugin.jar", "app/lib/plugin.jar"),
        ("./app//lib/./plugin.jar/", "app/lib/plugin.jar"),
        ("", ""),
    ],
)
def test_canonicalize_normalises_separators(raw: str, expected: str) -> None:
    assert canonicalize(raw) == expected


@pytest.mark.parametrize("raw", ["app/plugin.jar", "/a//b\\c/", "./x/./y", "dir\\file.txt", ""])
def test_canonicalize_is_idempotent(raw: str) -> None:
    once = canonicalize(raw)
    assert canonicalize(once) == once


def test_normalize_strips_expected_root() -> None:
    assert normalize("upd-1/contentroot/app/plugin.jar", "upd-1") == "contentroot/app/plugin.jar"


def test_normalize_accepts_windows_separators() -> None:
    raw = str(PureWindowsPath("upd-1", "contentroot", "app", "plugin.jar"))
    assert normalize(raw, "upd-1") == "contentroot/app/plugin.jar"


def test_normalize_result_is_stable_under_canonicalize() -> None:
    key = normalize("upd-1//contentroot/app/", "upd-1")
    assert canonicalize(key) == key


def test_normalize_root_directory_entry_is_empty_key() -> None:
    assert normalize("upd-1/", "upd-1") == ""


def test_normalize_rejects_missing_root() -> None:
    with pytest.raises(StructureError) as excinfo:
        normalize("README.txt", "upd-1")
    assert excinfo.value.actual_root is None
    assert "upd-1" in str(excinfo.value)


def test_normalize_rejects_mismatched_root() -> None:
    with pytest.raises(StructureError) as excinfo:
        normalize("wrong/README.txt", "upd-1")
    assert excinfo.value.actual_root == "wrong"
    assert excinfo.value.expected_root == "upd-1"


def test_split_root_without_separator() -> None:
    assert split_root("file.txt") == ("file.txt", None)
    assert split_root("root/a/b") == ("root", "a/b")


def test_strip_prefix_matches_whole_segments() -> None:
    assert strip_prefix("contentroot/app/plugin.jar", "contentroot") == "app/plugin.jar"
    assert strip_prefix("contentroot2/app.jar", "contentroot") is None
    assert strip_prefix("docs/contentroot/app.jar", "contentroot") is None
    assert strip_prefix("contentroot", "contentroot") == ""


def test_leaf_name() -> None:
    assert leaf_name("upd-1/contentroot/app/plugin.jar") == "plugin.jar"
    assert leaf_name("README.txt") == "README.txt"


def test_archive_base_name() -> None:
    assert archive_base_name(Path("/tmp/builds/upd-1.zip")) == "upd-1"
    assert archive_base_name("upd-1.ZIP") == "upd-1"
    assert archive_base_name("dist") == "dist"
    assert is_archive_location("upd-1.zip")
    assert not is_archive_location("dist")


def test_relative_key_matches_archive_form(tmp_path: Path) -> None:
    root = tmp_path / "dist"
    target = root / "app" / "plugin.jar"
    target.parent.mkdir(parents=True)
    target.touch()

    directory_key = relative_key(target, root)
    archive_key = normalize("dist/app/plugin.jar", "dist")
    update_key = strip_prefix(normalize("upd-1/contentroot/app/plugin.jar", "upd-1"), "contentroot")

    assert directory_key == archive_key == update_key == "app/plugin.jar"
    assert not directory_key.startswith("/")
