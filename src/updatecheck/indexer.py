# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Index the files of a baseline distribution (zip archive or directory)."""

from __future__ import annotations

import logging
from pathlib import Path

from .context import ValidationContext
from .errors import IncompleteReadError, LocationError
from .logging import TRACE
from .paths import is_archive_location, normalize, relative_key, split_root
from .progress import ProgressEvent, ProgressPhase, notify
from .sources import EntrySource, ZipEntrySource, iter_directory_files

LOGGER = logging.getLogger(__name__)


def index_archive(source: EntrySource, context: ValidationContext) -> None:
    """Populate ``context.distribution_files`` from archive entries.

    The archive's own root folder is taken from its first entry and stripped
    from every key.

    Args:
        source: Entries of the distribution archive.
        context: Run state receiving the distribution set.

    Raises:
        StructureError: If entries do not share a single root folder.
        IncompleteReadError: If fewer entries were read than declared.
    """

    files: set[str] = set()
    root: str | None = None
    total = source.declared_count
    processed = 0
    for entry in source:
        processed += 1
        LOGGER.log(TRACE, "Checking file: %s", entry.name)
        if root is None:
            root = split_root(entry.name)[0]
            LOGGER.debug("Distribution root folder: %s", root)
        key = normalize(entry.name, root)
        if not entry.is_dir and key:
            LOGGER.log(TRACE, "Entry: %s", key)
            files.add(key)
        notify(context.observer, ProgressEvent(ProgressPhase.DISTRIBUTION_ARCHIVE, processed, total))

    context.distribution_files = frozenset(files)
    LOGGER.debug("Total files read: %d", processed)
    if processed != total:
        raise IncompleteReadError(source.location, processed, total)


def index_directory(root: Path, context: ValidationContext) -> None:
    """Populate ``context.distribution_files`` by walking ``root``.

    Args:
        root: Distribution directory; keys are relative to it.
        context: Run state receiving the distribution set.

    Raises:
        SourceReadError: If part of the tree cannot be read.
    """

    files: set[str] = set()
    for processed, path in enumerate(iter_directory_files(root), start=1):
        key = relative_key(path, root)
        LOGGER.log(TRACE, "Entry: %s", key)
        files.add(key)
        notify(context.observer, ProgressEvent(ProgressPhase.DISTRIBUTION_DIRECTORY, processed))
    context.distribution_files = frozenset(files)
    LOGGER.debug("Total files read: %d", len(files))


def index_distribution(location: Path, context: ValidationContext) -> None:
    """Index ``location`` using the archive or directory strategy.

    Args:
        location: Distribution zip file or directory.
        context: Run state receiving the distribution set.

    Raises:
        LocationError: If ``location`` does not exist as the expected kind.
    """

    if is_archive_location(location):
        if not location.is_file():
            raise LocationError("Distribution zip does not exist. Enter a valid location.")
        with ZipEntrySource(location) as source:
            index_archive(source, context)
        return
    if not location.is_dir():
        raise LocationError("Distribution location does not exist. Enter a valid location.")
    index_directory(location, context)


__all__ = ["index_archive", "index_directory", "index_distribution"]
