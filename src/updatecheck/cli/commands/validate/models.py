# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared data structures for the validate CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

UPDATE_ARGUMENT = Annotated[
    Path,
    typer.Argument(help="Update package zip file to validate.", show_default=False),
]
DISTRIBUTION_ARGUMENT = Annotated[
    Path,
    typer.Argument(help="Distribution zip file or directory to validate against.", show_default=False),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", "-d", help="Enable debug logs."),
]
TRACE_OPTION = Annotated[
    bool,
    typer.Option("--trace", help="Enable trace logs (per-entry detail)."),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="TOML file overriding package conventions."),
]
ALL_VIOLATIONS_OPTION = Annotated[
    bool,
    typer.Option(
        "--all-violations",
        help="Report every unaccounted update file instead of stopping at the first.",
    ),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
COLOR_OPTION = Annotated[
    bool,
    typer.Option("--color/--no-color", help="Toggle coloured output."),
]


@dataclass(slots=True)
class ValidateCLIOptions:
    """Capture CLI values supplied to the validate command."""

    update: Path
    distribution: Path
    debug: bool
    trace: bool
    config: Path | None
    all_violations: bool
    emoji: bool
    color: bool

    @property
    def loggers_enabled(self) -> bool:
        """Return ``True`` when debug or trace diagnostics are requested."""

        return self.debug or self.trace


def build_validate_options(
    update: Path,
    distribution: Path,
    *,
    debug: bool = False,
    trace: bool = False,
    config: Path | None = None,
    all_violations: bool = False,
    emoji: bool = True,
    color: bool = True,
) -> ValidateCLIOptions:
    """Construct ``ValidateCLIOptions`` from Typer callback parameters."""

    return ValidateCLIOptions(
        update=update.expanduser(),
        distribution=distribution.expanduser(),
        debug=debug,
        trace=trace,
        config=config.expanduser() if config is not None else None,
        all_violations=all_violations,
        emoji=emoji,
        color=color,
    )


__all__ = [
    "ALL_VIOLATIONS_OPTION",
    "COLOR_OPTION",
    "CONFIG_OPTION",
    "DEBUG_OPTION",
    "DISTRIBUTION_ARGUMENT",
    "EMOJI_OPTION",
    "TRACE_OPTION",
    "UPDATE_ARGUMENT",
    "ValidateCLIOptions",
    "build_validate_options",
]
