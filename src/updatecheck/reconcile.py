# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Decide whether every update file is accounted for."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from .context import ValidationContext
from .errors import MissingResourceError, ReconciliationError, ValidationError, Violation
from .logging import TRACE

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValidationVerdict:
    """Outcome of a validation run."""

    passed: bool
    violations: tuple[Violation, ...] = ()
    notices: tuple[str, ...] = ()
    error: ValidationError | None = field(default=None, compare=False)

    @classmethod
    def success(cls, notices: tuple[str, ...] = ()) -> ValidationVerdict:
        """Return a passing verdict carrying informational ``notices``."""

        return cls(passed=True, notices=notices)

    @classmethod
    def failure(cls, error: ValidationError, notices: tuple[str, ...] = ()) -> ValidationVerdict:
        """Return a failing verdict for ``error``.

        Args:
            error: Fatal condition that ended the run.
            notices: Informational notices gathered before the failure.

        Returns:
            ValidationVerdict: Verdict with violations copied from
            reconciliation errors.
        """

        violations = error.violations if isinstance(error, ReconciliationError) else ()
        return cls(passed=False, violations=violations, notices=notices, error=error)


def iter_violations(context: ValidationContext) -> Iterator[Violation]:
    """Yield update files with no distribution or declared counterpart.

    Paths are evaluated in sorted order so the result is deterministic.

    Args:
        context: Run state holding the three path sets.

    Yields:
        Violation: Each unsatisfied update path, in sorted order.
    """

    for path in sorted(context.update_files):
        LOGGER.log(TRACE, "Checking location: %s", path)
        if path in context.distribution_files:
            LOGGER.log(TRACE, "%s found in distribution", path)
            continue
        if path in context.added_files:
            LOGGER.log(TRACE, "%s found in added files", path)
            continue
        LOGGER.log(TRACE, "%s not found in distribution or added files", path)
        yield Violation(path)


def find_violations(context: ValidationContext) -> list[Violation]:
    """Return every unsatisfied update path, sorted."""

    return list(iter_violations(context))


def reconcile(context: ValidationContext, *, fail_fast: bool = True) -> ValidationVerdict:
    """Compare the update set against distribution and declared-added files.

    Args:
        context: Run state populated by the scanner and indexer.
        fail_fast: Report only the first violation when ``True``; otherwise
            report every violation in a single error.

    Returns:
        ValidationVerdict: Passing verdict with the run's notices.

    Raises:
        MissingResourceError: If mandatory resources are still pending.
        ReconciliationError: If any update file is unaccounted for.
    """

    missing = context.manifest.finalize()
    if missing:
        raise MissingResourceError(missing)
    if fail_fast:
        first = next(iter_violations(context), None)
        violations = [first] if first is not None else []
    else:
        violations = find_violations(context)
    if violations:
        raise ReconciliationError(violations)
    return ValidationVerdict.success(tuple(context.notices))


__all__ = ["ValidationVerdict", "find_violations", "iter_violations", "reconcile"]
