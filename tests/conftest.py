# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from refman.asset import DESCRIPTOR_FILENAME

DescriptorWriter = Callable[[Path, object], Path]


def _write_descriptor(directory: Path, payload: object) -> Path:
    """Create ``directory`` and write ``payload`` as its descriptor.

    ``str`` payloads are written verbatim; anything else is JSON encoded.
    """

    directory.mkdir(parents=True, exist_ok=True)
    descriptor = directory / DESCRIPTOR_FILENAME
    text = payload if isinstance(payload, str) else json.dumps(payload)
    descriptor.write_text(text, encoding="utf-8")
    return descriptor


@pytest.fixture
def write_descriptor() -> DescriptorWriter:
    """Return the descriptor writing helper."""

    return _write_descriptor


@pytest.fixture
def reference_tree(tmp_path: Path) -> Path:
    """Build a base directory with one valid, one empty, and one broken entry.

    Layout::

        refs/a/reference-info.json   valid
        refs/b/                      no descriptor
        refs/c/reference-info.json   malformed JSON
        refs/d.txt                   plain file
    """

    root = tmp_path / "refs"
    root.mkdir()
    _write_descriptor(root / "a", {"name": "alpha", "tags": ["x"]})
    (root / "b").mkdir()
    _write_descriptor(root / "c", '{"name": "gamma"')
    (root / "d.txt").write_text("not a reference", encoding="utf-8")
    return root
