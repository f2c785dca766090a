# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostic logging setup and the styled lines shown to users.

Diagnostics from the validation core go through the standard :mod:`logging`
hierarchy rooted at ``updatecheck``; :func:`configure_logging` maps the CLI's
``--debug``/``--trace`` flags onto it. Outcome lines (notices, the pass and
failure banners) are printed separately through Rich.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Final

from rich.text import Text

from .console import console_for, detect_tty

TRACE: Final[int] = 5
ROOT_LOGGER_NAME: Final[str] = "updatecheck"
LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s: %(message)s"
_HANDLER_ATTR: Final[str] = "_updatecheck_handler"

logging.addLevelName(TRACE, "TRACE")


def _level_for(*, debug: bool, trace: bool) -> int:
    if debug:
        return logging.DEBUG
    if trace:
        return TRACE
    return logging.WARNING


def configure_logging(*, debug: bool = False, trace: bool = False) -> int:
    """Point the ``updatecheck`` logger at stderr with the requested level.

    ``debug`` wins over ``trace``; with neither flag only warnings and errors
    are emitted. Repeated calls reuse one handler and re-bind it to the
    current ``sys.stderr``.

    Returns:
        int: The level applied to the package logger.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handler: logging.StreamHandler | None = getattr(logger, _HANDLER_ATTR, None)
    if handler is None:
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
        setattr(logger, _HANDLER_ATTR, handler)
    else:
        handler.stream = sys.stderr
    level = _level_for(debug=debug, trace=trace)
    logger.setLevel(level)
    logger.debug("loggers enabled at %s", logging.getLevelName(level))
    return level


@dataclass(frozen=True, slots=True)
class _LineStyle:
    glyph: str
    style: str
    label: str = ""


_INFO: Final = _LineStyle(glyph="ℹ️ ", style="yellow", label="[INFO] ")
_OK: Final = _LineStyle(glyph="✅ ", style="green")
_FAIL: Final = _LineStyle(glyph="❌ ", style="red")


def _emit(kind: _LineStyle, msg: str, *, use_emoji: bool, use_color: bool | None) -> None:
    color = detect_tty() if use_color is None else use_color
    prefix = kind.glyph if use_emoji else ""
    line = Text(f"{prefix}{kind.label}{msg}", style=kind.style if color else "")
    console_for(color=color, emoji=use_emoji).print(line)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print an informational notice prefixed with ``[INFO]``."""

    _emit(_INFO, msg, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print a success line."""

    _emit(_OK, msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print a failure line.

    Args:
        msg: Text to display.
        use_emoji: Whether to prefix the line with a glyph.
        use_color: Explicit colour choice; ``None`` follows TTY detection.
    """

    _emit(_FAIL, msg, use_emoji=use_emoji, use_color=use_color)


__all__ = [
    "LOG_FORMAT",
    "ROOT_LOGGER_NAME",
    "TRACE",
    "configure_logging",
    "fail",
    "info",
    "ok",
]
