# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Lazy single-level traversal pairing reference descriptors with their hashes."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path
from types import TracebackType
from typing import cast

from .asset import DESCRIPTOR_FILENAME, ReferenceAsset, load_reference_asset
from .errors import BaseDirectoryError, RefmanError, ScanEntryError

logger = logging.getLogger(__name__)

AssetLoader = Callable[[Path], ReferenceAsset]


class ScanState(str, Enum):
    """Lifecycle of a :class:`ReferenceScanner`."""

    INITIALIZED = "initialized"
    ACTIVE = "active"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True, slots=True)
class ScanOutcome:
    """Result of one scan step: either an asset or the error that replaced it.

    Attributes:
        path: Descriptor path for load results, or the entry/base path for
            listing errors.
        asset: Loaded asset when the step succeeded.
        error: Failure reported for this step.
    """

    path: Path
    asset: ReferenceAsset | None = None
    error: RefmanError | None = None

    def __post_init__(self) -> None:
        if (self.asset is None) == (self.error is None):
            raise ValueError("ScanOutcome requires exactly one of 'asset' or 'error'")

    @property
    def ok(self) -> bool:
        """Return ``True`` when the step produced an asset."""

        return self.error is None

    def unwrap(self) -> ReferenceAsset:
        """Return the asset or raise the stored error.

        Returns:
            ReferenceAsset: Asset produced by the step.

        Raises:
            RefmanError: The error recorded for the step.
        """

        if self.error is not None:
            raise self.error
        return cast(ReferenceAsset, self.asset)


class ReferenceScanner(Iterator[ScanOutcome]):
    """Iterate the immediate subdirectories of ``base_path`` holding a descriptor.

    The directory handle is opened on construction, but no entry is read and
    no file is hashed until :meth:`__next__` is called. Each qualifying
    subdirectory yields exactly one :class:`ScanOutcome`; entries that do not
    qualify are skipped. A failing entry yields an error outcome and the scan
    carries on with the next entry.
    """

    def __init__(
        self,
        base_path: str | PathLike[str],
        *,
        descriptor_name: str = DESCRIPTOR_FILENAME,
        include_hidden: bool = False,
        loader: AssetLoader = load_reference_asset,
    ) -> None:
        """Open ``base_path`` for listing.

        Args:
            base_path: Directory whose immediate children are scanned.
            descriptor_name: File name marking a directory as a reference asset.
            include_hidden: Whether dot-prefixed entries are considered.
            loader: Callable turning a descriptor path into an asset.

        Raises:
            BaseDirectoryError: If the directory cannot be opened for listing.
        """

        self._base_path = Path(base_path)
        self._descriptor_name = descriptor_name
        self._include_hidden = include_hidden
        self._loader = loader
        try:
            self._entries = os.scandir(self._base_path)
        except OSError as exc:
            raise BaseDirectoryError(
                f"{self._base_path}: cannot open base directory: {exc}",
                path=self._base_path,
            ) from exc
        self._state = ScanState.INITIALIZED

    @property
    def base_path(self) -> Path:
        """Return the directory being scanned."""

        return self._base_path

    @property
    def state(self) -> ScanState:
        """Return the current lifecycle state."""

        return self._state

    def __next__(self) -> ScanOutcome:
        if self._state is ScanState.EXHAUSTED:
            raise StopIteration
        self._state = ScanState.ACTIVE
        while True:
            try:
                entry = next(self._entries)
            except StopIteration:
                self.close()
                raise
            except OSError as exc:
                logger.debug("listing error under %s: %s", self._base_path, exc)
                return ScanOutcome(
                    path=self._base_path,
                    error=ScanEntryError(f"{self._base_path}: failed to read entry: {exc}", path=self._base_path),
                )

            entry_path = Path(entry.path)
            try:
                descriptor = self._descriptor_for(entry)
            except OSError as exc:
                logger.debug("cannot inspect %s: %s", entry_path, exc)
                return ScanOutcome(
                    path=entry_path,
                    error=ScanEntryError(f"{entry_path}: failed to inspect entry: {exc}", path=entry_path),
                )
            if descriptor is None:
                logger.debug("skipping %s", entry_path)
                continue

            logger.debug("loading descriptor %s", descriptor)
            try:
                asset = self._loader(descriptor)
            except RefmanError as exc:
                return ScanOutcome(path=descriptor, error=exc)
            return ScanOutcome(path=descriptor, asset=asset)

    def _descriptor_for(self, entry: os.DirEntry[str]) -> Path | None:
        """Return the descriptor path when ``entry`` qualifies, else ``None``.

        Raises:
            OSError: If the entry cannot be inspected.
        """

        if not self._include_hidden and entry.name.startswith("."):
            return None
        if not entry.is_dir():
            return None
        descriptor = Path(entry.path) / self._descriptor_name
        if not descriptor.is_file():
            return None
        return descriptor

    def close(self) -> None:
        """Release the directory handle; further iteration yields nothing."""

        entries = getattr(self, "_entries", None)
        if entries is not None:
            entries.close()
        self._state = ScanState.EXHAUSTED

    def __enter__(self) -> ReferenceScanner:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def __del__(self) -> None:
        self.close()


def collect_reference_assets(
    base_path: str | PathLike[str],
    *,
    include_hidden: bool = False,
) -> ReferenceScanner:
    """Return a lazy scanner over the reference assets under ``base_path``.

    Args:
        base_path: Resolved directory to scan.
        include_hidden: Whether dot-prefixed subdirectories are considered.

    Returns:
        ReferenceScanner: Iterator yielding one :class:`ScanOutcome` per
        qualifying subdirectory.

    Raises:
        BaseDirectoryError: If ``base_path`` cannot be opened for listing.
    """

    return ReferenceScanner(base_path, include_hidden=include_hidden)


__all__ = [
    "AssetLoader",
    "ReferenceScanner",
    "ScanOutcome",
    "ScanState",
    "collect_reference_assets",
]
