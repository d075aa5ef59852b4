# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration discovery and loading for refman."""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR: Final[str] = "REFMAN_CONFIG"
PROJECT_CONFIG_FILENAME: Final[str] = ".refman.toml"
SYSTEM_CONFIG_PATH: Final[Path] = Path("/etc/refman.toml")


class Config(BaseModel):
    """Process-wide settings read once before scanning starts."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    base_path: StrictStr


def parse_config(contents: str) -> Config:
    """Parse TOML ``contents`` into a :class:`Config`.

    Args:
        contents: Raw TOML document.

    Returns:
        Config: Validated configuration.

    Raises:
        ConfigError: If the document is not valid TOML, or ``base_path`` is
            missing or not a string.
    """

    try:
        data = tomllib.loads(contents)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML: {exc}") from exc
    try:
        config = Config.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration: {exc.errors()[0]['msg']}") from exc
    return config.model_copy(update={"base_path": _expand(config.base_path)})


def config_search_paths(env: Mapping[str, str] | None = None) -> tuple[Path, ...]:
    """Return candidate configuration files in precedence order.

    The order is the ``REFMAN_CONFIG`` override (when set), ``.refman.toml`` in
    the working directory, ``~/.config/refman/config.toml`` and finally
    ``/etc/refman.toml``.

    Args:
        env: Environment mapping; defaults to :data:`os.environ`.

    Returns:
        tuple[Path, ...]: Candidate paths, first match wins.
    """

    environ = os.environ if env is None else env
    paths: list[Path] = []
    override = environ.get(CONFIG_ENV_VAR)
    if override:
        paths.append(Path(override).expanduser())
    paths.append(Path(PROJECT_CONFIG_FILENAME))
    paths.append(Path.home() / ".config" / "refman" / "config.toml")
    paths.append(SYSTEM_CONFIG_PATH)
    return tuple(paths)


def load_config(paths: Sequence[Path] | None = None) -> Config:
    """Load the first readable and valid configuration file.

    Args:
        paths: Candidate files to try in order; defaults to
            :func:`config_search_paths`.

    Returns:
        Config: Configuration from the first usable candidate.

    Raises:
        ConfigError: If no candidate can be read and parsed.
    """

    candidates = tuple(paths) if paths is not None else config_search_paths()
    for candidate in candidates:
        try:
            contents = candidate.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("skipping config %s: %s", candidate, exc)
            continue
        try:
            config = parse_config(contents)
        except ConfigError as exc:
            logger.debug("skipping config %s: %s", candidate, exc)
            continue
        logger.debug("loaded config from %s", candidate)
        return config
    searched = ", ".join(str(path) for path in candidates) or "<none>"
    raise ConfigError(f"No configuration file found (searched: {searched})")


def _expand(value: str) -> str:
    return os.path.expandvars(os.path.expanduser(value)) if value else value


__all__ = [
    "CONFIG_ENV_VAR",
    "Config",
    "ConfigError",
    "config_search_paths",
    "load_config",
    "parse_config",
]
