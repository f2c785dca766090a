# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""The ``validate`` command."""

from __future__ import annotations

import typer

from ...typer_ext import SortedHelpCommand
from .command import validate_command

COMMAND_NAME = "validate"
COMMAND_HELP = "Check an update zip against a distribution zip or directory."


def register(app: typer.Typer) -> None:
    """Attach ``validate`` to ``app``."""

    app.command(name=COMMAND_NAME, help=COMMAND_HELP, cls=SortedHelpCommand)(validate_command)


__all__ = ["COMMAND_HELP", "COMMAND_NAME", "register"]
