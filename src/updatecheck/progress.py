# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Progress notifications emitted while reading update and distribution entries."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum


class ProgressPhase(StrEnum):
    """Which input is currently being read."""

    UPDATE_ARCHIVE = "update zip"
    DISTRIBUTION_ARCHIVE = "distribution zip"
    DISTRIBUTION_DIRECTORY = "distribution directory"


@dataclass(frozen=True, slots=True)
class ProgressEvent:
    """Snapshot of how many entries of a phase have been processed.

    ``total`` is ``None`` for directory walks, which have no up-front count.
    """

    phase: ProgressPhase
    processed: int
    total: int | None = None

    @property
    def description(self) -> str:
        """Return a short label suitable for a progress bar."""

        return f"Reading files from {self.phase.value}"


ProgressCallback = Callable[[ProgressEvent], None]


def notify(observer: ProgressCallback | None, event: ProgressEvent) -> None:
    """Forward ``event`` to ``observer`` when one is subscribed."""

    if observer is not None:
        observer(event)


__all__ = ["ProgressCallback", "ProgressEvent", "ProgressPhase", "notify"]
