# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Cached Rich consoles for user-facing output."""

from __future__ import annotations

import sys
from functools import lru_cache

from rich.console import Console


def detect_tty() -> bool:
    """Return ``True`` when ``sys.stdout`` is an interactive terminal."""

    isatty = getattr(sys.stdout, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


@lru_cache(maxsize=8)
def _build_console(styled: bool, emoji: bool, terminal: bool) -> Console:
    return Console(
        color_system="auto" if styled else None,
        force_terminal=terminal,
        no_color=not styled,
        emoji=emoji,
        highlight=False,
        soft_wrap=True,
    )


def console_for(*, color: bool, emoji: bool) -> Console:
    """Return the shared console for a colour and emoji combination.

    Colour is only honoured on a terminal. The console resolves ``sys.stdout``
    on every write, so output redirected by test runners is still captured.

    Args:
        color: Whether ANSI styling was requested.
        emoji: Whether emoji glyphs may be rendered.

    Returns:
        Console: Console shared by every caller with the same settings.
    """

    terminal = detect_tty()
    return _build_console(color and terminal, emoji, terminal)


__all__ = ["console_for", "detect_tty"]
