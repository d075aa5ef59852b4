# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reference directory scanner with streaming content hashes."""

from __future__ import annotations

from importlib import metadata

from .asset import DESCRIPTOR_FILENAME, ReferenceAsset, load_reference_asset
from .errors import (
    AssetIOError,
    BaseDirectoryError,
    ConfigError,
    ContentHashError,
    DescriptorParseError,
    DescriptorSchemaError,
    RefmanError,
    ScanEntryError,
)
from .hashing import EMPTY_CONTENT_HASH, hash_file, hash_stream
from .scanner import ReferenceScanner, ScanOutcome, ScanState, collect_reference_assets

__all__ = [
    "DESCRIPTOR_FILENAME",
    "EMPTY_CONTENT_HASH",
    "AssetIOError",
    "BaseDirectoryError",
    "ConfigError",
    "ContentHashError",
    "DescriptorParseError",
    "DescriptorSchemaError",
    "ReferenceAsset",
    "ReferenceScanner",
    "RefmanError",
    "ScanEntryError",
    "ScanOutcome",
    "ScanState",
    "__version__",
    "collect_reference_assets",
    "hash_file",
    "hash_stream",
    "load_reference_asset",
]

try:
    __version__ = metadata.version("refman")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
