# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the descriptor loader."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from refman.asset import DESCRIPTOR_FILENAME, ReferenceAsset, load_reference_asset
from refman.errors import (
    AssetIOError,
    ContentHashError,
    DescriptorParseError,
    DescriptorSchemaError,
    RefmanError,
)
from refman.hashing import hash_file


def test_load_valid_descriptor(tmp_path: Path) -> None:
    descriptor = tmp_path / DESCRIPTOR_FILENAME
    descriptor.write_text('{"name": "test"}\n', encoding="utf-8")

    asset = load_reference_asset(descriptor)

    assert asset.name == "test"
    assert asset.origin == descriptor
    assert asset.content_hash == hash_file(descriptor)


def test_hash_covers_raw_bytes_not_normalised_json(tmp_path: Path) -> None:
    compact = tmp_path / "compact" / DESCRIPTOR_FILENAME
    spaced = tmp_path / "spaced" / DESCRIPTOR_FILENAME
    compact.parent.mkdir()
    spaced.parent.mkdir()
    compact.write_text('{"name":"test"}', encoding="utf-8")
    spaced.write_text('{ "name" : "test" }\n', encoding="utf-8")

    first = load_reference_asset(compact)
    second = load_reference_asset(spaced)

    assert first.name == second.name
    assert first.content_hash != second.content_hash


def test_unknown_fields_are_ignored(tmp_path: Path) -> None:
    descriptor = tmp_path / DESCRIPTOR_FILENAME
    descriptor.write_text('{"name": "test", "version": 3, "extra": {"nested": [1, 2]}}', encoding="utf-8")

    asset = load_reference_asset(descriptor)

    assert asset.name == "test"
    assert asset.to_dict() == {"name": "test"}


def test_from_descriptor_delegates_to_loader(tmp_path: Path) -> None:
    descriptor = tmp_path / DESCRIPTOR_FILENAME
    descriptor.write_text('{"name": "via-classmethod"}', encoding="utf-8")

    assert ReferenceAsset.from_descriptor(descriptor) == load_reference_asset(descriptor)


def test_accepts_string_paths(tmp_path: Path) -> None:
    descriptor = tmp_path / DESCRIPTOR_FILENAME
    descriptor.write_text('{"name": "test"}', encoding="utf-8")

    asset = load_reference_asset(str(descriptor))

    assert asset.origin == descriptor


def test_utf8_bom_is_tolerated(tmp_path: Path) -> None:
    descriptor = tmp_path / DESCRIPTOR_FILENAME
    descriptor.write_bytes(b'\xef\xbb\xbf{"name": "bom"}')

    assert load_reference_asset(descriptor).name == "bom"


def test_asset_is_immutable(tmp_path: Path) -> None:
    descriptor = tmp_path / DESCRIPTOR_FILENAME
    descriptor.write_text('{"name": "test"}', encoding="utf-8")
    asset = load_reference_asset(descriptor)

    with pytest.raises(dataclasses.FrozenInstanceError):
        asset.name = "other"  # type: ignore[misc]


def test_hex_hash_renders_sixteen_digits(tmp_path: Path) -> None:
    descriptor = tmp_path / DESCRIPTOR_FILENAME
    descriptor.write_text('{"name": "test"}', encoding="utf-8")
    asset = load_reference_asset(descriptor)

    assert len(asset.hex_hash) == 16
    assert int(asset.hex_hash, 16) == asset.content_hash


def test_missing_file_raises_io_error(tmp_path: Path) -> None:
    missing = tmp_path / "nowhere" / DESCRIPTOR_FILENAME

    with pytest.raises(AssetIOError) as excinfo:
        load_reference_asset(missing)

    assert not isinstance(excinfo.value, ContentHashError)
    assert excinfo.value.path == missing


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        pytest.param('{"name": 123}', DescriptorSchemaError, id="wrong-type"),
        pytest.param('{"title": "no name"}', DescriptorSchemaError, id="missing-name"),
        pytest.param('{"name": ""}', DescriptorSchemaError, id="empty-name"),
        pytest.param('["name", "test"]', DescriptorSchemaError, id="array-root"),
        pytest.param("", DescriptorParseError, id="empty-file"),
        pytest.param("   \n", DescriptorParseError, id="whitespace-only"),
        pytest.param("This is not a JSON file.\n", DescriptorParseError, id="plain-text"),
        pytest.param('{"name": "test"', DescriptorParseError, id="truncated"),
        pytest.param('{"name": "x", "size": ' + "1" * 5000 + "}", DescriptorParseError, id="long-integer"),
        pytest.param(
            '{"name": "x", "extra": ' + "[" * 100_000 + "]" * 100_000 + "}",
            DescriptorParseError,
            id="deep-nesting",
        ),
    ],
)
def test_invalid_descriptors_raise_parse_errors(tmp_path: Path, content: str, expected: type[RefmanError]) -> None:
    descriptor = tmp_path / DESCRIPTOR_FILENAME
    descriptor.write_text(content, encoding="utf-8")

    with pytest.raises(expected) as excinfo:
        load_reference_asset(descriptor)

    assert isinstance(excinfo.value, DescriptorParseError)
    assert excinfo.value.path == descriptor
    assert str(descriptor) in str(excinfo.value)


def test_plain_text_is_not_reported_as_schema_error(tmp_path: Path) -> None:
    descriptor = tmp_path / DESCRIPTOR_FILENAME
    descriptor.write_text("This is not a JSON file.", encoding="utf-8")

    with pytest.raises(DescriptorParseError) as excinfo:
        load_reference_asset(descriptor)

    assert not isinstance(excinfo.value, DescriptorSchemaError)


def test_invalid_utf8_raises_parse_error(tmp_path: Path) -> None:
    descriptor = tmp_path / DESCRIPTOR_FILENAME
    descriptor.write_bytes(b'{"name": "\xff\xfe"}')

    with pytest.raises(DescriptorParseError):
        load_reference_asset(descriptor)


def test_hash_failure_is_reported_as_content_hash_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    descriptor = tmp_path / DESCRIPTOR_FILENAME
    descriptor.write_text('{"name": "test"}', encoding="utf-8")

    def _failing_hash(path: Path) -> int:
        raise ContentHashError(f"{path}: failed to hash file", path=Path(path))

    monkeypatch.setattr("refman.asset.hash_file", _failing_hash)

    with pytest.raises(ContentHashError):
        load_reference_asset(descriptor)


@pytest.mark.parametrize(
    ("content", "location"),
    [
        pytest.param('{"name": 123}', "name: ", id="field"),
        pytest.param('["name", "test"]', "<root>: ", id="root"),
    ],
)
def test_schema_errors_name_the_failing_location(tmp_path: Path, content: str, location: str) -> None:
    descriptor = tmp_path / DESCRIPTOR_FILENAME
    descriptor.write_text(content, encoding="utf-8")

    with pytest.raises(DescriptorSchemaError) as excinfo:
        load_reference_asset(descriptor)

    assert f"invalid descriptor: {location}" in str(excinfo.value)
