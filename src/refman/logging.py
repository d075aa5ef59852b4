# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

import logging
from functools import lru_cache

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

_PACKAGE_LOGGER = "refman"


@lru_cache(maxsize=4)
def get_console(*, color: bool, emoji: bool) -> Console:
    """Return the shared console for one colour/emoji combination.

    The console writes to whatever ``sys.stdout`` is at print time. With
    ``color`` enabled Rich still emits ANSI codes only when stdout is a terminal.

    Args:
        color: Whether styled output may be rendered.
        emoji: Whether Rich may substitute ``:emoji:`` codes.

    Returns:
        Console: Console cached per ``(color, emoji)``.
    """

    return Console(
        color_system="auto" if color else None,
        no_color=not color,
        emoji=emoji,
        soft_wrap=True,
        highlight=False,
    )


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(msg: str, *, style: str, use_emoji: bool, use_color: bool) -> None:
    text = Text(msg)
    if use_color:
        text.stylize(style)
    get_console(color=use_color, emoji=use_emoji).print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool = True) -> None:
    """Emit an informational message."""

    _print_line(f"{emoji('ℹ️ ', use_emoji)}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool = True) -> None:
    """Emit a success message."""

    _print_line(f"{emoji('✅ ', use_emoji)}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool = True) -> None:
    """Emit a warning message."""

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool = True) -> None:
    """Emit an error message."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


def configure_logging(*, debug: bool, use_color: bool = True) -> None:
    """Route ``refman`` library log records to a Rich handler.

    Any handler installed by an earlier call is replaced.

    Args:
        debug: Emit debug records when ``True``; only warnings otherwise.
        use_color: Whether the handler console may use colour.
    """

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
    handler = RichHandler(console=get_console(color=use_color, emoji=False), show_path=False, markup=False)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if debug else logging.WARNING)


__all__ = [
    "configure_logging",
    "emoji",
    "fail",
    "get_console",
    "info",
    "ok",
    "warn",
]
