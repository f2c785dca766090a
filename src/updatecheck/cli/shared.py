# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Pieces shared by CLI commands: the error type and the output adapter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

import typer
from rich.console import Console

from .. import logging as output
from ..console import console_for


class CLIError(RuntimeError):
    """A command failure that should end the process with ``exit_code``."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(frozen=True, slots=True)
class CLILogger:
    """Bind the ``--emoji`` and ``--color`` choices to the output helpers.

    ``use_color=True`` still defers to TTY detection; only ``False`` forces
    plain output.
    """

    use_emoji: bool
    use_color: bool = True

    @property
    def console(self) -> Console:
        """Return the console the helpers print through (used for progress)."""

        return console_for(color=self.use_color, emoji=self.use_emoji)

    def _color(self) -> bool | None:
        return None if self.use_color else False

    def info(self, message: str) -> None:
        output.info(message, use_emoji=self.use_emoji, use_color=self._color())

    def ok(self, message: str) -> None:
        output.ok(message, use_emoji=self.use_emoji, use_color=self._color())

    def fail(self, message: str) -> None:
        output.fail(message, use_emoji=self.use_emoji, use_color=self._color())

    def echo(self, message: str) -> None:
        """Write ``message`` unstyled to stdout."""

        typer.echo(message)


def build_cli_logger(*, emoji: bool, no_color: bool = False) -> CLILogger:
    """Return a :class:`CLILogger` for the command's presentation flags."""

    return CLILogger(use_emoji=emoji, use_color=not no_color)


__all__: Final = ["CLIError", "CLILogger", "build_cli_logger"]
