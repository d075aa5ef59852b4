# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while hashing, loading, and scanning references."""

from __future__ import annotations

from pathlib import Path


class RefmanError(Exception):
    """Base class for every error surfaced by refman."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Create the error with a ``message`` and the offending ``path``.

        Args:
            message: Human-readable description of the failure.
            path: Filesystem path involved in the failure, when known.
        """

        super().__init__(message)
        self.path = path


class AssetIOError(RefmanError):
    """Raised when a filesystem operation on a descriptor fails."""


class ContentHashError(AssetIOError):
    """Raised when reading a file for hashing fails."""


class DescriptorParseError(RefmanError):
    """Raised when a descriptor is empty or not well-formed JSON."""


class DescriptorSchemaError(DescriptorParseError):
    """Raised when a descriptor lacks required fields or has the wrong types."""


class ScanEntryError(RefmanError):
    """Raised for a single unreadable entry encountered mid-scan."""


class BaseDirectoryError(RefmanError):
    """Raised when the base directory cannot be opened for listing."""


class ConfigError(RefmanError):
    """Raised when configuration input is missing or invalid."""


__all__ = (
    "AssetIOError",
    "BaseDirectoryError",
    "ConfigError",
    "ContentHashError",
    "DescriptorParseError",
    "DescriptorSchemaError",
    "RefmanError",
    "ScanEntryError",
)
