# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-run state shared by the scanner, indexer, and reconciliation engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from .config import ValidationConfig
from .progress import ProgressCallback
from .resources import ResourceManifest


@dataclass(slots=True)
class ValidationContext:
    """Own every set and the resource manifest for a single validation run.

    The scanner and indexer each assign their sets once, as frozensets.

    A fresh context is created for each run; nothing here is shared across
    runs, so independent validations never observe each other's state.
    """

    config: ValidationConfig = field(default_factory=ValidationConfig)
    observer: ProgressCallback | None = None
    manifest: ResourceManifest = field(init=False)
    update_files: frozenset[str] = frozenset()
    distribution_files: frozenset[str] = frozenset()
    added_files: frozenset[str] = frozenset()
    notices: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.manifest = ResourceManifest.from_names(self.config.resources)


__all__ = ["ValidationContext"]
