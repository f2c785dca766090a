# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Run a complete validation of an update package against a distribution."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import ValidationConfig
from .context import ValidationContext
from .errors import LocationError, ValidationError
from .indexer import index_distribution
from .paths import is_archive_location
from .progress import ProgressCallback
from .reconcile import ValidationVerdict, reconcile
from .scanner import scan_update_archive

LOGGER = logging.getLogger(__name__)


def check_update_location(location: Path) -> None:
    """Ensure the update location is an existing zip file.

    Raises:
        LocationError: If the location is not a zip or does not exist.
    """

    LOGGER.debug("Update Loc: %s", location)
    if not is_archive_location(location):
        raise LocationError("Update file should be a zip file.")
    if not location.is_file():
        raise LocationError("Update location does not exist. Enter a valid file location.")
    LOGGER.debug("Update location exists.")


def validate_update(
    update_location: Path,
    distribution_location: Path,
    *,
    config: ValidationConfig | None = None,
    observer: ProgressCallback | None = None,
    fail_fast: bool = True,
) -> ValidationVerdict:
    """Validate ``update_location`` against ``distribution_location``.

    Args:
        update_location: Update package zip file.
        distribution_location: Distribution zip file or directory.
        config: Naming and layout conventions; defaults when omitted.
        observer: Optional progress callback; it never affects the verdict.
        fail_fast: Stop at the first reconciliation violation.

    Returns:
        ValidationVerdict: Passing verdict with informational notices.

    Raises:
        ValidationError: Any fatal condition found during the run.
    """

    context = ValidationContext(config=config or ValidationConfig(), observer=observer)
    return _run(update_location, distribution_location, context, fail_fast=fail_fast)


def _run(
    update_location: Path,
    distribution_location: Path,
    context: ValidationContext,
    *,
    fail_fast: bool,
) -> ValidationVerdict:
    check_update_location(update_location)

    LOGGER.debug("Reading update zip...")
    scan_update_archive(update_location, context)
    LOGGER.debug("Update zip successfully read.")

    LOGGER.debug("Distribution Loc: %s", distribution_location)
    index_distribution(distribution_location, context)
    return reconcile(context, fail_fast=fail_fast)


def evaluate(
    update_location: Path,
    distribution_location: Path,
    *,
    config: ValidationConfig | None = None,
    observer: ProgressCallback | None = None,
    fail_fast: bool = True,
) -> ValidationVerdict:
    """Return the verdict of a run, converting fatal errors into a failed verdict.

    Args:
        update_location: Update package zip file.
        distribution_location: Distribution zip file or directory.
        config: Naming and layout conventions; defaults when omitted.
        observer: Optional progress callback.
        fail_fast: Stop at the first reconciliation violation.

    Returns:
        ValidationVerdict: Passing or failing verdict; never raises
        :class:`ValidationError`.
    """

    context = ValidationContext(config=config or ValidationConfig(), observer=observer)
    try:
        return _run(update_location, distribution_location, context, fail_fast=fail_fast)
    except ValidationError as exc:
        LOGGER.debug("Validation failed: %s", exc)
        return ValidationVerdict.failure(exc, tuple(context.notices))


__all__ = ["check_update_location", "evaluate", "validate_update"]
