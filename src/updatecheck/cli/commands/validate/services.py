# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helper services for the validate CLI."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TaskID, TextColumn

from ....config import ConfigError, ValidationConfig
from ....config_loader import load_config
from ....console import detect_tty
from ....errors import ReconciliationError
from ....progress import ProgressCallback, ProgressEvent, ProgressPhase
from ....reconcile import ValidationVerdict
from ...shared import CLIError, CLILogger
from .models import ValidateCLIOptions

SUCCESS_BANNER = "Validation SUCCESSFUL"
FAILURE_BANNER = "Validation FAILED"


def load_validation_config(options: ValidateCLIOptions, *, logger: CLILogger) -> ValidationConfig:
    """Return the conventions for this run, reporting configuration failures.

    Args:
        options: Parsed CLI options, including an optional ``--config`` file.
        logger: Logger used for user-facing failure messages.

    Returns:
        ValidationConfig: Merged configuration for the current directory.

    Raises:
        CLIError: If configuration files are missing or invalid.
    """

    try:
        return load_config(Path.cwd(), explicit=options.config)
    except ConfigError as exc:
        logger.fail(f"Invalid configuration: {exc}")
        logger.fail(FAILURE_BANNER)
        raise CLIError(str(exc)) from exc


def progress_enabled(options: ValidateCLIOptions) -> bool:
    """Return ``True`` when a live progress display should be rendered.

    Progress is suppressed whenever diagnostic logging is on, so log lines are
    not interleaved with the live display.
    """

    return detect_tty() and not options.loggers_enabled


@contextmanager
def progress_observer(options: ValidateCLIOptions, *, logger: CLILogger) -> Iterator[ProgressCallback | None]:
    """Yield a progress callback backed by a Rich progress bar, or ``None``.

    Args:
        options: Parsed CLI options deciding whether progress is shown.
        logger: Logger whose console renders the progress display.

    Yields:
        ProgressCallback | None: Callback to pass to the validation run.
    """

    if not progress_enabled(options):
        yield None
        return

    progress = Progress(
        SpinnerColumn(),
        TextColumn("{task.description}"),
        BarColumn(bar_width=None),
        MofNCompleteColumn(),
        console=logger.console,
        transient=True,
    )
    tasks: dict[ProgressPhase, TaskID] = {}

    def _on_progress(event: ProgressEvent) -> None:
        task_id = tasks.get(event.phase)
        if task_id is None:
            task_id = progress.add_task(event.description, total=event.total)
            tasks[event.phase] = task_id
        progress.update(task_id, completed=event.processed, total=event.total)

    with progress:
        yield _on_progress


def emit_notices(verdict: ValidationVerdict, *, logger: CLILogger) -> None:
    """Print informational notices gathered during the run."""

    for notice in verdict.notices:
        logger.info(notice)


def emit_verdict(verdict: ValidationVerdict, config: ValidationConfig, *, logger: CLILogger) -> int:
    """Print the pass or failure banner for ``verdict``.

    Args:
        verdict: Outcome of the validation run.
        config: Conventions used for the run (names the descriptor file).
        logger: Logger used to emit messages.

    Returns:
        int: Exit status for the command.
    """

    if verdict.passed:
        logger.ok(SUCCESS_BANNER)
        return 0

    error = verdict.error
    if isinstance(error, ReconciliationError):
        for violation in error.violations:
            logger.fail(violation.describe())
        logger.echo(f"If it is a new file, please add an entry in {config.resources.descriptor} file.")
    elif error is not None:
        logger.fail(error.message)
    logger.fail(FAILURE_BANNER)
    return error.exit_code if error is not None else 1


__all__ = [
    "FAILURE_BANNER",
    "SUCCESS_BANNER",
    "emit_notices",
    "emit_verdict",
    "load_validation_config",
    "progress_enabled",
    "progress_observer",
]
