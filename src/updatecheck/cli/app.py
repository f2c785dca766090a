# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

from typing import Annotated

import typer

from .. import __version__
from .commands import register_commands
from .typer_ext import TyperAppConfig, create_typer

app = create_typer(
    config=TyperAppConfig(
        help_text="Validate update packages against a product distribution.",
        invoke_without_command=True,
    ),
)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(f"updatecheck {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_show_version,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Validate update packages against a product distribution."""


register_commands(app)


def main() -> None:
    """Run the ``updatecheck`` console script."""

    app()


__all__ = ["app", "main"]
