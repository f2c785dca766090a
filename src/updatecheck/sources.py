# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Entry sources backed by zip archives and directory trees."""

from __future__ import annotations

import io
import logging
import os
import zipfile
import zlib
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import IO, Protocol

from .errors import SourceReadError
from .logging import TRACE

LOGGER = logging.getLogger(__name__)

# zipfile raises these for corrupt, encrypted, or unsupported members.
_ENTRY_READ_ERRORS = (OSError, zipfile.BadZipFile, zlib.error, RuntimeError, NotImplementedError)


@dataclass(frozen=True, slots=True)
class SourceEntry:
    """A single path yielded by an entry source."""

    name: str
    is_dir: bool
    opener: Callable[[], IO[bytes]] | None = None

    def read_bytes(self) -> bytes:
        """Return the full content of the entry.

        Returns:
            bytes: Raw entry payload.

        Raises:
            SourceReadError: If the entry is a directory or cannot be read.
        """

        if self.opener is None:
            raise SourceReadError(self.name, "entry has no readable content")
        try:
            with self.opener() as handle:
                return handle.read()
        except _ENTRY_READ_ERRORS as exc:
            raise SourceReadError(self.name, str(exc)) from exc


class EntrySource(Protocol):
    """Iterable of archive entries that reports its own entry count."""

    @property
    def location(self) -> str:
        """Return the location the entries are read from."""

    @property
    def declared_count(self) -> int:
        """Return the number of entries the source claims to hold."""

    def __iter__(self) -> Iterator[SourceEntry]:
        """Yield every entry in source order."""


class ZipEntrySource:
    """Read entries from a zip archive's central directory."""

    def __init__(self, path: Path) -> None:
        self._path = path
        try:
            self._archive = zipfile.ZipFile(path)
        except (OSError, zipfile.BadZipFile) as exc:
            raise SourceReadError(path, f"not a readable zip archive ({exc})") from exc
        self._infos = self._archive.infolist()
        LOGGER.debug("File count in %s: %d", path, len(self._infos))

    @property
    def location(self) -> str:
        return str(self._path)

    @property
    def declared_count(self) -> int:
        return len(self._infos)

    def __iter__(self) -> Iterator[SourceEntry]:
        for info in self._infos:
            if info.is_dir():
                yield SourceEntry(name=info.filename, is_dir=True)
                continue
            yield SourceEntry(name=info.filename, is_dir=False, opener=self._opener(info))

    def _opener(self, info: zipfile.ZipInfo) -> Callable[[], IO[bytes]]:
        archive = self._archive

        def _open() -> IO[bytes]:
            return archive.open(info)

        return _open

    def close(self) -> None:
        """Release the underlying archive handle."""

        self._archive.close()

    def __enter__(self) -> ZipEntrySource:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


@dataclass(frozen=True, slots=True)
class MemoryEntrySource:
    """Entry source over in-memory ``(name, content)`` pairs.

    A ``None`` content marks a directory entry. ``declared`` overrides the
    reported entry count, which lets callers describe a truncated listing.
    """

    entries: tuple[tuple[str, bytes | None], ...]
    declared: int | None = None
    location: str = "<memory>"

    @classmethod
    def of(
        cls,
        entries: Iterable[tuple[str, bytes | None]],
        *,
        declared: int | None = None,
        location: str = "<memory>",
    ) -> MemoryEntrySource:
        """Build a source from any iterable of ``(name, content)`` pairs."""

        return cls(tuple(entries), declared=declared, location=location)

    @property
    def declared_count(self) -> int:
        return len(self.entries) if self.declared is None else self.declared

    def __iter__(self) -> Iterator[SourceEntry]:
        for name, content in self.entries:
            if content is None:
                yield SourceEntry(name=name, is_dir=True)
            else:
                yield SourceEntry(name=name, is_dir=False, opener=_bytes_opener(content))


def _bytes_opener(content: bytes) -> Callable[[], IO[bytes]]:
    return lambda: io.BytesIO(content)


def iter_directory_files(root: Path) -> Iterator[Path]:
    """Yield every file below ``root`` in walk order.

    Args:
        root: Directory to traverse recursively.

    Returns:
        Iterator[Path]: Iterator over file paths under ``root``.

    Raises:
        SourceReadError: If any directory in the tree cannot be listed.
    """

    def _raise(error: OSError) -> None:
        raise SourceReadError(error.filename or root, error.strerror or str(error)) from error

    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise):
        directory = Path(dirpath)
        LOGGER.log(TRACE, "Walking: %s", directory)
        for filename in filenames:
            yield directory / filename


__all__ = [
    "EntrySource",
    "MemoryEntrySource",
    "SourceEntry",
    "ZipEntrySource",
    "iter_directory_files",
]
