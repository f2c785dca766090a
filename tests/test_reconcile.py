# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for three-way path reconciliation."""

from __future__ import annotations

import pytest

from updatecheck.context import ValidationContext
from updatecheck.errors import MissingResourceError, ReconciliationError, Violation
from updatecheck.reconcile import ValidationVerdict, find_violations, reconcile


def _context(update: set[str], distribution: set[str] = frozenset(), added: set[str] = frozenset()) -> ValidationContext:
    context = ValidationContext()
    for name in context.config.resources.mandatory:
        context.manifest.consume(name)
    context.update_files = frozenset(update)
    context.distribution_files = frozenset(distribution)
    context.added_files = frozenset(added)
    return context


def test_reconcile_passes_when_every_path_is_accounted_for() -> None:
    context = _context({"app/a.jar", "app/b.jar"}, {"app/a.jar"}, {"app/b.jar"})
    context.notices.append("instructions.txt was not found in the zip file.")

    verdict = reconcile(context)

    assert verdict == ValidationVerdict.success(("instructions.txt was not found in the zip file.",))


def test_reconcile_fail_fast_reports_first_sorted_violation() -> None:
    context = _context({"z/late.jar", "a/early.jar", "m/ok.jar"}, {"m/ok.jar"})

    with pytest.raises(ReconciliationError) as excinfo:
        reconcile(context)

    assert excinfo.value.violations == (Violation("a/early.jar"),)
    assert excinfo.value.path == "a/early.jar"
    assert excinfo.value.message == "/a/early.jar not found in distribution and it is not a newly added file."


def test_reconcile_aggregates_violations() -> None:
    context = _context({"z/late.jar", "a/early.jar", "m/ok.jar"}, {"m/ok.jar"})

    with pytest.raises(ReconciliationError) as excinfo:
        reconcile(context, fail_fast=False)

    assert [violation.path for violation in excinfo.value.violations] == ["a/early.jar", "z/late.jar"]


def test_find_violations_is_deterministic() -> None:
    paths = {f"dir/{index}.jar" for index in range(20)}

    assert find_violations(_context(paths)) == find_violations(_context(set(sorted(paths, reverse=True))))


def test_reconcile_requires_mandatory_resources() -> None:
    context = ValidationContext()
    context.update_files = frozenset({"app/a.jar"})
    context.distribution_files = frozenset({"app/a.jar"})

    with pytest.raises(MissingResourceError):
        reconcile(context)


def test_failure_verdict_copies_violations() -> None:
    error = ReconciliationError([Violation("app/a.jar")])

    verdict = ValidationVerdict.failure(error, ("note",))

    assert not verdict.passed
    assert verdict.violations == (Violation("app/a.jar"),)
    assert verdict.error is error


def test_reconciliation_error_requires_violations() -> None:
    with pytest.raises(ValueError):
        ReconciliationError([])
