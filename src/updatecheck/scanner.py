# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Scan an update package and collect the files it introduces.

Every entry must live under a single root folder named after the package.
Reserved resource files (license, readme, descriptor, and the optional
extras) are ticked off the run's resource manifest; everything else must sit
below the content root and becomes a key in the update file set.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import ValidationConfig
from .context import ValidationContext
from .descriptor import parse_descriptor
from .errors import IncompleteReadError, LayoutError, MissingResourceError, NamingError
from .logging import TRACE
from .paths import SEPARATOR, archive_base_name, leaf_name, normalize, strip_prefix
from .progress import ProgressEvent, ProgressPhase, notify
from .sources import EntrySource, SourceEntry, ZipEntrySource

LOGGER = logging.getLogger(__name__)


def check_package_name(package_name: str, config: ValidationConfig) -> None:
    """Ensure ``package_name`` carries the configured naming prefix.

    Args:
        package_name: Archive file name without its extension.
        config: Conventions providing the required prefix.

    Raises:
        NamingError: If the prefix is missing.
    """

    if not package_name.startswith(config.name_prefix):
        raise NamingError(package_name, config.name_prefix)
    LOGGER.debug("Update file does have %s prefix", config.name_prefix)


def scan_update(source: EntrySource, package_name: str, context: ValidationContext) -> None:
    """Populate the update and declared-added sets of ``context`` from ``source``.

    Args:
        source: Entries of the update package.
        package_name: Expected root folder of every entry.
        context: Run state receiving the collected sets and notices.

    Raises:
        NamingError: If ``package_name`` lacks the required prefix.
        StructureError: If an entry is not rooted under ``package_name``.
        LayoutError: If a non-resource file lies outside the content root.
        ManifestParseError: If the descriptor cannot be parsed.
        MissingResourceError: If mandatory resource files are absent.
        IncompleteReadError: If fewer entries were read than declared.
    """

    config = context.config
    check_package_name(package_name, config)
    reserved = frozenset((*config.resources.mandatory, *config.resources.optional))
    content_folder = f"{package_name}{SEPARATOR}{config.content_root}"

    update_files: set[str] = set()
    added_files: set[str] = set()
    total = source.declared_count
    processed = 0
    for entry in source:
        processed += 1
        LOGGER.log(TRACE, "Checking file: %s", entry.name)
        relative = normalize(entry.name, package_name)
        if not entry.is_dir:
            name = leaf_name(relative)
            if name in reserved:
                context.manifest.consume(name)
                if name == config.resources.descriptor:
                    added_files |= _read_added_files(entry)
            else:
                update_files.add(_content_key(entry, relative, config.content_root, content_folder))
        notify(context.observer, ProgressEvent(ProgressPhase.UPDATE_ARCHIVE, processed, total))

    context.update_files = frozenset(update_files)
    context.added_files = frozenset(added_files)
    LOGGER.debug("Entries in update zip: %s", sorted(context.update_files))

    for name in context.manifest.drain_optional():
        context.notices.append(f"{name} was not found in the zip file.")
    missing = context.manifest.finalize()
    if missing:
        raise MissingResourceError(missing)

    LOGGER.debug("Total files read: %d", processed)
    if processed != total:
        raise IncompleteReadError(source.location, processed, total)


def _content_key(entry: SourceEntry, relative: str, content_root: str, content_folder: str) -> str:
    key = strip_prefix(relative, content_root)
    if not key:
        raise LayoutError(entry.name, content_folder)
    LOGGER.log(TRACE, "Entry: %s", key)
    return key


def _read_added_files(entry: SourceEntry) -> set[str]:
    descriptor = parse_descriptor(entry.read_bytes(), source=entry.name)
    LOGGER.debug("descriptor: %s", descriptor.file_changes)
    return descriptor.added_files


def scan_update_archive(path: Path, context: ValidationContext) -> None:
    """Scan the update zip at ``path`` into ``context``.

    The naming prefix is checked before the archive is opened.
    """

    package_name = archive_base_name(path)
    LOGGER.debug("Update name: %s", package_name)
    check_package_name(package_name, context.config)
    with ZipEntrySource(path) as source:
        scan_update(source, package_name, context)


__all__ = ["check_package_name", "scan_update", "scan_update_archive"]
