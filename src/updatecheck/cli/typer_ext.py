# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer application factory with predictable help output.

Help screens list positional arguments first and then every option in
alphabetical order of its long name, independent of declaration order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import click
import typer
from typer.core import TyperCommand, TyperGroup

HelpRecord = tuple[str, str]


@dataclass(frozen=True, slots=True)
class TyperAppConfig:
    """Top-level settings of a Typer application."""

    help_text: str
    name: str | None = None
    invoke_without_command: bool = False
    no_args_is_help: bool = True


class SortedHelpCommand(TyperCommand):
    """Command rendering arguments, then alphabetically sorted options."""

    def format_options(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        arguments, options = _partition_help(self.get_params(ctx), ctx)
        for title, records in (("Arguments", arguments), ("Options", options)):
            if records:
                with formatter.section(title):
                    formatter.write_dl(records)


class SortedHelpGroup(TyperGroup):
    """Group whose subcommands default to :class:`SortedHelpCommand`."""

    command_class = SortedHelpCommand


def _partition_help(params: Iterable[click.Parameter], ctx: click.Context) -> tuple[list[HelpRecord], list[HelpRecord]]:
    arguments: list[HelpRecord] = []
    keyed: list[tuple[str, HelpRecord]] = []
    for param in params:
        record = param.get_help_record(ctx)
        if record is None:
            continue
        if param.param_type_name == "argument":
            arguments.append(record)
        else:
            keyed.append((_sort_key(param), record))
    keyed.sort(key=lambda item: item[0])
    return arguments, [record for _, record in keyed]


def _sort_key(param: click.Parameter) -> str:
    names = [*param.opts, *param.secondary_opts]
    preferred = next((name for name in names if name.startswith("--")), names[0] if names else param.name or "")
    return preferred.lstrip("-").lower()


def create_typer(*, config: TyperAppConfig) -> typer.Typer:
    """Build a Typer application from ``config``.

    Rich help rendering is disabled so :class:`SortedHelpCommand` controls the
    layout; shell completion installation is not offered.

    Args:
        config: Application name, help text, and invocation behaviour.

    Returns:
        typer.Typer: Application whose commands should be registered with
        ``cls=SortedHelpCommand``.
    """

    return typer.Typer(
        cls=SortedHelpGroup,
        name=config.name,
        help=config.help_text,
        invoke_without_command=config.invoke_without_command,
        no_args_is_help=config.no_args_is_help,
        rich_markup_mode=None,
        add_completion=False,
    )


__all__ = ["SortedHelpCommand", "SortedHelpGroup", "TyperAppConfig", "create_typer"]
