# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Bookkeeping for the reserved resource files of an update package."""

from __future__ import annotations

import logging
from enum import StrEnum

from .config import ResourceNames

LOGGER = logging.getLogger(__name__)


class ResourceKind(StrEnum):
    """Whether a reserved resource file must be present."""

    MANDATORY = "mandatory"
    OPTIONAL = "optional"


class ResourceManifest:
    """Track which reserved resource files have not been seen yet.

    Entries are removed as the scanner consumes matching files. Whatever is
    left after the scan is either informational (optional entries) or fatal
    (mandatory entries).
    """

    def __init__(self) -> None:
        self._pending: dict[str, ResourceKind] = {}

    @classmethod
    def from_names(cls, names: ResourceNames) -> ResourceManifest:
        """Return a manifest initialised from ``names``."""

        manifest = cls()
        manifest.initialize(names)
        return manifest

    def initialize(self, names: ResourceNames) -> None:
        """Populate the manifest with the fixed mandatory and optional names.

        Args:
            names: Reserved resource file names for the run.
        """

        self._pending = {name: ResourceKind.OPTIONAL for name in names.optional}
        self._pending.update({name: ResourceKind.MANDATORY for name in names.mandatory})

    def __contains__(self, name: object) -> bool:
        return name in self._pending

    @property
    def pending(self) -> dict[str, ResourceKind]:
        """Return a snapshot of resource names not consumed yet.

        Returns:
            dict[str, ResourceKind]: Remaining names mapped to their kind.
        """

        return dict(self._pending)

    def consume(self, name: str) -> bool:
        """Remove ``name`` from the manifest when present.

        Args:
            name: Leaf file name encountered in the update package.

        Returns:
            bool: ``True`` if ``name`` was still pending, ``False`` otherwise.
        """

        removed = self._pending.pop(name, None) is not None
        if removed:
            LOGGER.debug("%s was removed from the resource manifest", name)
        return removed

    def drain_optional(self) -> list[str]:
        """Discard optional entries that were never consumed.

        Returns:
            list[str]: Sorted optional resource names absent from the package.
        """

        absent = sorted(name for name, kind in self._pending.items() if kind is ResourceKind.OPTIONAL)
        for name in absent:
            del self._pending[name]
            LOGGER.debug("%s was not found in the update package", name)
        return absent

    def finalize(self) -> list[str]:
        """Return the mandatory resource names still missing.

        Returns:
            list[str]: Sorted mandatory names; empty after a successful scan.
        """

        return sorted(name for name, kind in self._pending.items() if kind is ResourceKind.MANDATORY)


__all__ = ["ResourceKind", "ResourceManifest"]
