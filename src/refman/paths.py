# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for resolving and displaying filesystem paths."""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path

from .errors import ConfigError

_Pathish = str | PathLike[str] | Path


def resolve_base_path(raw: _Pathish) -> Path:
    """Return the canonical absolute form of the base directory ``raw``.

    Args:
        raw: Base directory as configured or supplied on the command line.

    Returns:
        Path: Resolved directory path with symlinks expanded.

    Raises:
        ConfigError: If ``raw`` is empty, missing, or not a directory.
    """

    if not str(raw):
        raise ConfigError("base directory is not configured (empty base_path)")
    candidate = Path(raw).expanduser()
    try:
        resolved = candidate.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise ConfigError(
            f"unable to canonicalize {candidate}; the base directory is most likely missing: {exc}",
            path=candidate,
        ) from exc
    if not resolved.is_dir():
        raise ConfigError(f"base path {resolved} is not a directory", path=resolved)
    return resolved


def display_relative_path(path: _Pathish, root: _Pathish) -> str:
    """Return ``path`` relative to ``root`` in POSIX form when possible.

    Args:
        path: Path to present to the user.
        root: Directory used for relativisation.

    Returns:
        str: Relative POSIX path, or ``path`` unchanged when the two do not
        share a lineage.
    """

    candidate = Path(path)
    try:
        return candidate.relative_to(Path(root)).as_posix()
    except ValueError:
        pass
    try:
        relative = os.path.relpath(candidate, Path(root))
    except ValueError:
        return str(candidate)
    if relative.startswith(os.pardir):
        return str(candidate)
    return Path(relative).as_posix()


__all__ = ["display_relative_path", "resolve_base_path"]
