# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Service helpers backing the ``refman scan`` command."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..config import load_config
from ..errors import BaseDirectoryError, ConfigError, RefmanError
from ..paths import display_relative_path, resolve_base_path
from ..scanner import ReferenceScanner, ScanOutcome
from ..types import JSONValue
from .shared import CLIError, CLILogger


class OutputFormat(str, Enum):
    """Report formats supported by ``refman scan``."""

    TEXT = "text"
    JSON = "json"


@dataclass(slots=True)
class ScanReport:
    """Aggregate of the outcomes yielded by one scan."""

    base_path: Path
    outcomes: list[ScanOutcome] = field(default_factory=list)

    @property
    def asset_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.ok)

    @property
    def error_count(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.ok)

    def to_dict(self) -> dict[str, JSONValue]:
        """Return a JSON-compatible view of the report."""

        assets: list[JSONValue] = []
        errors: list[JSONValue] = []
        for outcome in self.outcomes:
            if outcome.asset is not None:
                asset = outcome.asset
                assets.append(
                    {
                        **asset.to_dict(),
                        "origin": str(asset.origin),
                        "content_hash": asset.hex_hash,
                    },
                )
            elif outcome.error is not None:
                errors.append(
                    {
                        "path": str(outcome.path),
                        "kind": type(outcome.error).__name__,
                        "message": str(outcome.error),
                    },
                )
        return {"base_path": str(self.base_path), "assets": assets, "errors": errors}


def resolve_scan_root(ref_dir: Path | None, *, config_path: Path | None) -> Path:
    """Determine the directory to scan.

    ``ref_dir`` wins when given; otherwise ``base_path`` is read from
    ``config_path`` or from the default configuration search path.

    Args:
        ref_dir: Directory passed on the command line.
        config_path: Explicit configuration file, if any.

    Returns:
        Path: Canonical base directory.

    Raises:
        CLIError: If configuration cannot be loaded or the directory is unusable.
    """

    try:
        if ref_dir is not None:
            return resolve_base_path(ref_dir)
        config = load_config([config_path] if config_path is not None else None)
        return resolve_base_path(config.base_path)
    except ConfigError as exc:
        raise CLIError(f"Failed to load configuration: {exc}") from exc


def run_scan(
    base_path: Path,
    *,
    logger: CLILogger,
    output: OutputFormat,
    include_hidden: bool = False,
) -> ScanReport:
    """Scan ``base_path`` and report each outcome as soon as it is yielded.

    Args:
        base_path: Canonical directory to scan.
        logger: CLI logger used for text output.
        output: Report format.
        include_hidden: Whether dot-prefixed directories are considered.

    Returns:
        ScanReport: All outcomes in yield order.

    Raises:
        CLIError: If the base directory cannot be opened.
    """

    report = ScanReport(base_path=base_path)
    try:
        scanner = ReferenceScanner(base_path, include_hidden=include_hidden)
    except BaseDirectoryError as exc:
        raise CLIError(str(exc)) from exc
    if output is OutputFormat.TEXT:
        logger.info(f"Scanning {base_path}")
    with scanner:
        for outcome in scanner:
            report.outcomes.append(outcome)
            if output is OutputFormat.TEXT:
                _emit_outcome(outcome, base_path=base_path, logger=logger)
    return report


def emit_summary(report: ScanReport, *, logger: CLILogger, output: OutputFormat) -> None:
    """Emit the closing summary (text) or the full document (JSON)."""

    if output is OutputFormat.JSON:
        logger.echo(json.dumps(report.to_dict(), indent=2))
        return
    summary = f"{report.asset_count} reference asset(s), {report.error_count} error(s) in {report.base_path}"
    if report.error_count:
        logger.warn(summary)
    else:
        logger.ok(summary)


def _emit_outcome(outcome: ScanOutcome, *, base_path: Path, logger: CLILogger) -> None:
    if outcome.asset is not None:
        asset = outcome.asset
        origin = display_relative_path(asset.origin, base_path)
        logger.echo(f"{asset.hex_hash}  {asset.name}  ({origin})")
        return
    error: RefmanError | None = outcome.error
    logger.fail(str(error))


__all__ = [
    "OutputFormat",
    "ScanReport",
    "emit_summary",
    "resolve_scan_root",
    "run_scan",
]
