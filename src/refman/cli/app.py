# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

from typing import Annotated

import typer

from .. import __version__
from .hash import hash_command
from .scan import scan_command
from .typer_ext import TyperAppConfig, create_typer

app = create_typer(config=TyperAppConfig(name="refman", help_text="Reference directory scanner."))
app.command("scan")(scan_command)
app.command("hash")(hash_command)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"refman {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_print_version, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Scan reference directories and fingerprint their descriptors."""


__all__ = ["app"]
