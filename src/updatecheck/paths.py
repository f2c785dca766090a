# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for turning archive and filesystem paths into comparable keys.

Keys produced here are POSIX-style relative strings with the package or
distribution root removed. Archive entries and directory walk results that
point at the same installed file always map to the same key, regardless of
the host separator convention.
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path, PurePosixPath
from typing import Final

from .errors import StructureError

_Pathish = str | PathLike[str] | Path

SEPARATOR: Final[str] = "/"
ARCHIVE_SUFFIX: Final[str] = ".zip"
_IGNORED_SEGMENTS: Final[frozenset[str]] = frozenset({"", "."})


def _to_posix(raw_path: _Pathish) -> str:
    """Return ``raw_path`` with backslashes replaced by forward slashes.

    Args:
        raw_path: Path drawn from an archive entry or filesystem walk.

    Returns:
        str: Slash-separated text with leading ``/`` and ``./`` removed.
    """

    text = str(raw_path).replace("\\", SEPARATOR)
    while text.startswith(("./", SEPARATOR)):
        text = text[2:] if text.startswith("./") else text[1:]
    return text


def canonicalize(path: _Pathish) -> str:
    """Return the canonical key form of ``path``.

    Separators are normalised to ``/``, empty and ``.`` segments are dropped,
    and no leading or trailing separator survives. The function is idempotent.

    Args:
        path: Relative path to canonicalise.

    Returns:
        str: Canonical relative path, empty for the root itself.
    """

    segments = str(path).replace("\\", SEPARATOR).split(SEPARATOR)
    return SEPARATOR.join(segment for segment in segments if segment not in _IGNORED_SEGMENTS)


def split_root(raw_path: _Pathish) -> tuple[str, str | None]:
    """Split ``raw_path`` on its first separator.

    Args:
        raw_path: Path whose leading segment names its root folder.

    Returns:
        tuple[str, str | None]: The first segment and the canonical remainder,
        or ``None`` as the remainder when the path has no separator at all.
    """

    head, separator, tail = _to_posix(raw_path).partition(SEPARATOR)
    if not separator:
        return head, None
    return head, canonicalize(tail)


def normalize(raw_path: _Pathish, expected_root: str) -> str:
    """Return ``raw_path`` relative to ``expected_root`` as a canonical key.

    Args:
        raw_path: Raw source path whose first segment must be ``expected_root``.
        expected_root: Name of the folder every entry must live under.

    Returns:
        str: Canonical key with the root folder stripped.

    Raises:
        StructureError: If the path has no root folder or a different one.
    """

    root, remainder = split_root(raw_path)
    if remainder is None:
        raise StructureError(str(raw_path), expected_root)
    if root != expected_root:
        raise StructureError(str(raw_path), expected_root, root)
    return remainder


def strip_prefix(path: _Pathish, prefix: _Pathish) -> str | None:
    """Remove the leading ``prefix`` segments from ``path``.

    Args:
        path: Canonical or raw relative path.
        prefix: One or more leading segments to remove.

    Returns:
        str | None: Canonical remainder, or ``None`` when ``path`` does not
        start with every segment of ``prefix``.
    """

    path_parts = PurePosixPath(canonicalize(path)).parts
    prefix_parts = PurePosixPath(canonicalize(prefix)).parts
    if path_parts[: len(prefix_parts)] != prefix_parts:
        return None
    return SEPARATOR.join(path_parts[len(prefix_parts) :])


def leaf_name(path: _Pathish) -> str:
    """Return the final segment of ``path``."""

    return canonicalize(path).rpartition(SEPARATOR)[2]


def relative_key(path: Path, root: Path) -> str:
    """Return the canonical key of filesystem ``path`` below ``root``.

    Args:
        path: File discovered while walking ``root``.
        root: Directory supplied as the distribution location.

    Returns:
        str: Canonical POSIX key without a leading separator.
    """

    return canonicalize(path.relative_to(root).as_posix())


def archive_base_name(location: _Pathish) -> str:
    """Return the file name of ``location`` without its ``.zip`` suffix.

    Args:
        location: Path to an archive on disk.

    Returns:
        str: Base name used as the archive's expected root folder.
    """

    name = Path(location).name
    if name.lower().endswith(ARCHIVE_SUFFIX):
        return name[: -len(ARCHIVE_SUFFIX)]
    return name


def is_archive_location(location: _Pathish) -> bool:
    """Return ``True`` when ``location`` names a zip archive."""

    return str(location).lower().endswith(ARCHIVE_SUFFIX)


__all__ = [
    "ARCHIVE_SUFFIX",
    "SEPARATOR",
    "archive_base_name",
    "canonicalize",
    "is_archive_location",
    "leaf_name",
    "normalize",
    "relative_key",
    "split_root",
    "strip_prefix",
]
