# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging and errors)."""

from __future__ import annotations

from dataclasses import dataclass

import typer

from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import ok as core_ok
from ..logging import warn as core_warn


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI presentation flags."""

    use_emoji: bool
    use_color: bool

    def fail(self, message: str) -> None:
        """Log a failure message."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Log a warning message."""

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        """Log a success message."""

        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def info(self, message: str) -> None:
        """Log an informational message."""

        core_info(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def echo(self, message: str) -> None:
        """Write ``message`` verbatim to stdout."""

        typer.echo(message)


def build_cli_logger(*, emoji: bool, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided presentation flags.

    Args:
        emoji: Whether log output may include emoji glyphs.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger bound to the shared Rich console.
    """

    return CLILogger(use_emoji=emoji, use_color=not no_color)


__all__ = ["CLIError", "CLILogger", "build_cli_logger"]
