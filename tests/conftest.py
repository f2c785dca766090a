# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import struct
import zipfile
from collections.abc import Callable, Iterator, Mapping, Sequence
from pathlib import Path

import pytest
import yaml

from updatecheck.config import ResourceNames, ValidationConfig
from updatecheck.logging import configure_logging

ZipFactory = Callable[[str, Mapping[str, bytes | str | None]], Path]
EntriesFactory = Callable[..., dict[str, bytes | str | None]]

PACKAGE_NAME = "upd-1"
CONTENT_ROOT = "contentroot"


def descriptor_document(added_files: Sequence[str] = ()) -> str:
    """Return an update descriptor declaring ``added_files``."""

    payload = {
        "update_number": "0001",
        "platform_version": "4.4.0",
        "description": "Sample update",
        "file_changes": {
            "added_files": list(added_files),
            "removed_files": [],
            "modified_files": [],
        },
    }
    return yaml.safe_dump(payload, sort_keys=False)


@pytest.fixture(autouse=True)
def _quiet_logging() -> Iterator[None]:
    """Restore the default package log level and stream after each test."""

    yield
    configure_logging()


@pytest.fixture
def conventions() -> ValidationConfig:
    """Return conventions matching the ``upd-1`` sample packages."""

    return ValidationConfig(name_prefix="upd", content_root=CONTENT_ROOT, resources=ResourceNames())


@pytest.fixture
def make_zip(tmp_path: Path) -> ZipFactory:
    """Return a factory writing zip archives below ``tmp_path``.

    Entry values of ``None`` become directory entries.
    """

    def _make(name: str, entries: Mapping[str, bytes | str | None]) -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for entry_name, content in entries.items():
                if content is None:
                    archive.writestr(zipfile.ZipInfo(entry_name.rstrip("/") + "/"), b"")
                else:
                    archive.writestr(entry_name, content)
        return path

    return _make


@pytest.fixture
def update_entries(conventions: ValidationConfig) -> EntriesFactory:
    """Return a builder for well-formed ``upd-1`` package entries."""

    def _build(
        *,
        root: str = PACKAGE_NAME,
        added_files: Sequence[str] = (),
        content: Sequence[str] = ("app/plugin.jar",),
        omit: Sequence[str] = (),
        include_optional: bool = True,
    ) -> dict[str, bytes | str | None]:
        names = conventions.resources
        entries: dict[str, bytes | str | None] = {
            f"{root}/": None,
            f"{root}/{names.license}": "Apache License 2.0",
            f"{root}/{names.readme}": "Sample update readme",
            f"{root}/{names.descriptor}": descriptor_document(added_files),
        }
        if include_optional:
            entries[f"{root}/{names.instructions}"] = "Restart the server."
            entries[f"{root}/{names.not_a_contribution}"] = "Not a contribution."
        entries[f"{root}/{CONTENT_ROOT}/"] = None
        for relative in content:
            entries[f"{root}/{CONTENT_ROOT}/{relative}"] = f"payload of {relative}"
        for name in omit:
            entries.pop(f"{root}/{name}", None)
        return entries

    return _build


@pytest.fixture
def distribution_dir(tmp_path: Path) -> Path:
    """Return a distribution directory containing ``app/plugin.jar``."""

    root = tmp_path / "dist"
    (root / "app").mkdir(parents=True)
    (root / "app" / "plugin.jar").write_text("jar", encoding="utf-8")
    (root / "bin").mkdir()
    (root / "bin" / "server.sh").write_text("#!/bin/sh", encoding="utf-8")
    return root


@pytest.fixture
def corrupt_member() -> Callable[[Path, str], None]:
    """Return a helper overwriting a deflated member's data with ``0xFF`` bytes.

    The local header stays intact, so the archive opens and lists normally
    and the failure only surfaces when the member is decompressed.
    """

    def _corrupt(archive: Path, member: str) -> None:
        with zipfile.ZipFile(archive) as handle:
            info = handle.getinfo(member)
        raw = bytearray(archive.read_bytes())
        name_length, extra_length = struct.unpack("<HH", raw[info.header_offset + 26 : info.header_offset + 30])
        start = info.header_offset + 30 + name_length + extra_length
        raw[start : start + info.compress_size] = b"\xff" * info.compress_size
        archive.write_bytes(bytes(raw))

    return _corrupt
