# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command listing the reference assets under the base directory."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..logging import configure_logging
from ._scan_services import OutputFormat, emit_summary, resolve_scan_root, run_scan
from .shared import CLIError, build_cli_logger


def scan_command(
    ref_dir: Annotated[
        Path | None,
        typer.Argument(
            metavar="REF_DIR",
            help="Reference directory to scan; defaults to base_path from the configuration.",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Read base_path from this TOML file only."),
    ] = None,
    output: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", case_sensitive=False, help="Report format."),
    ] = OutputFormat.TEXT,
    include_hidden: Annotated[
        bool,
        typer.Option("--include-hidden", help="Also consider dot-prefixed directories."),
    ] = False,
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji output.")] = True,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Log every visited entry.")] = False,
) -> None:
    """Scan the base directory and print each reference asset with its content hash.

    Every descriptor is reported as it is found. A broken descriptor is printed
    as an error and the scan continues; the exit status is 1 if any entry
    failed.
    """

    logger = build_cli_logger(emoji=emoji, no_color=no_color)
    configure_logging(debug=debug, use_color=not no_color)
    try:
        root = resolve_scan_root(ref_dir, config_path=config)
        report = run_scan(root, logger=logger, output=output, include_hidden=include_hidden)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    emit_summary(report, logger=logger, output=output)
    raise typer.Exit(code=1 if report.error_count else 0)


__all__ = ["scan_command"]
