# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command validating an update package against a distribution."""

from __future__ import annotations

import typer

from ....logging import configure_logging
from ....validate import evaluate
from ...shared import CLIError, build_cli_logger
from .models import (
    ALL_VIOLATIONS_OPTION,
    COLOR_OPTION,
    CONFIG_OPTION,
    DEBUG_OPTION,
    DISTRIBUTION_ARGUMENT,
    EMOJI_OPTION,
    TRACE_OPTION,
    UPDATE_ARGUMENT,
    build_validate_options,
)
from .services import emit_notices, emit_verdict, load_validation_config, progress_observer


def validate_command(
    update: UPDATE_ARGUMENT,
    distribution: DISTRIBUTION_ARGUMENT,
    debug: DEBUG_OPTION = False,
    trace: TRACE_OPTION = False,
    config: CONFIG_OPTION = None,
    all_violations: ALL_VIOLATIONS_OPTION = False,
    emoji: EMOJI_OPTION = True,
    color: COLOR_OPTION = True,
) -> None:
    """Validate that every file in an update package is accounted for.

    Args:
        update: Update package zip file.
        distribution: Distribution zip file or directory.
        debug: Enable debug logs.
        trace: Enable trace logs.
        config: Optional TOML configuration file.
        all_violations: Report every violation instead of the first.
        emoji: Toggle emoji output.
        color: Toggle coloured output.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    options = build_validate_options(
        update,
        distribution,
        debug=debug,
        trace=trace,
        config=config,
        all_violations=all_violations,
        emoji=emoji,
        color=color,
    )
    configure_logging(debug=options.debug, trace=options.trace)
    logger = build_cli_logger(emoji=options.emoji, no_color=not options.color)
    try:
        validation_config = load_validation_config(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    with progress_observer(options, logger=logger) as observer:
        verdict = evaluate(
            options.update,
            options.distribution,
            config=validation_config,
            observer=observer,
            fail_fast=not options.all_violations,
        )

    emit_notices(verdict, logger=logger)
    raise typer.Exit(code=emit_verdict(verdict, validation_config, logger=logger))


__all__ = ["validate_command"]
