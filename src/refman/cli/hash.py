# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command printing content hashes of arbitrary files."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..errors import ContentHashError
from ..hashing import DEFAULT_CHUNK_SIZE, format_hash, hash_file
from .shared import build_cli_logger


def hash_command(
    files: Annotated[list[Path], typer.Argument(metavar="FILE...", help="Files to hash.")],
    chunk_size: Annotated[
        int,
        typer.Option("--chunk-size", min=1, help="Bytes read per chunk; does not change the hash."),
    ] = DEFAULT_CHUNK_SIZE,
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji output.")] = True,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")] = False,
) -> None:
    """Print the 64-bit content hash of each FILE."""

    logger = build_cli_logger(emoji=emoji, no_color=no_color)
    failures = 0
    for path in files:
        try:
            value = hash_file(path, chunk_size=chunk_size)
        except ContentHashError as exc:
            failures += 1
            logger.fail(str(exc))
            continue
        logger.echo(f"{format_hash(value)}  {path}")
    raise typer.Exit(code=1 if failures else 0)


__all__ = ["hash_command"]
