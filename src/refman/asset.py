# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Reference asset records and the descriptor loader that builds them."""

from __future__ import annotations

import json
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError
from pydantic_core import ErrorDetails

from .errors import AssetIOError, DescriptorParseError, DescriptorSchemaError
from .hashing import format_hash, hash_file
from .types import JSONValue

DESCRIPTOR_FILENAME: Final[str] = "reference-info.json"


class ReferenceDescriptor(BaseModel):
    """Schema of a ``reference-info.json`` document.

    Only ``name`` is required. Unknown keys are dropped so newer descriptors
    keep loading with older releases.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: StrictStr = Field(min_length=1)


@dataclass(frozen=True, slots=True)
class ReferenceAsset:
    """Validated descriptor paired with the hash of the file it came from."""

    origin: Path
    name: str
    content_hash: int

    @classmethod
    def from_descriptor(cls, path: str | PathLike[str]) -> ReferenceAsset:
        """Load the descriptor at ``path``; see :func:`load_reference_asset`."""

        return load_reference_asset(path)

    @property
    def hex_hash(self) -> str:
        """Return the content hash rendered as 16 hexadecimal digits."""

        return format_hash(self.content_hash)

    def to_dict(self) -> dict[str, JSONValue]:
        """Return the descriptor view of the asset.

        Returns:
            dict[str, JSONValue]: Mapping holding the descriptor fields only;
            ``origin`` and ``content_hash`` are load-time metadata.
        """

        return {"name": self.name}


def load_reference_asset(path: str | PathLike[str]) -> ReferenceAsset:
    """Parse the descriptor at ``path`` and hash its raw bytes.

    The file is read twice: once to parse, once by the hasher. The hash always
    covers the exact bytes on disk, never a re-serialised form.

    Args:
        path: Filesystem path of the descriptor document.

    Returns:
        ReferenceAsset: Record whose ``origin`` is ``path``.

    Raises:
        AssetIOError: If the descriptor cannot be opened or read.
        DescriptorParseError: If the descriptor is empty, not UTF-8, or not JSON.
        DescriptorSchemaError: If ``name`` is missing, empty, or not a string.
        ContentHashError: If the hashing pass fails to read the file.
    """

    descriptor_path = Path(path)
    descriptor = _parse_descriptor(_read_descriptor(descriptor_path), path=descriptor_path)
    content_hash = hash_file(descriptor_path)
    return ReferenceAsset(origin=descriptor_path, name=descriptor.name, content_hash=content_hash)


def _read_descriptor(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise AssetIOError(f"{path}: failed to read descriptor: {exc}", path=path) from exc


def _parse_descriptor(raw: bytes, *, path: Path) -> ReferenceDescriptor:
    """Decode ``raw`` and validate it against :class:`ReferenceDescriptor`.

    Args:
        raw: Descriptor bytes exactly as read from disk.
        path: Descriptor path used in error messages.

    Returns:
        ReferenceDescriptor: Validated descriptor fields.

    Raises:
        DescriptorParseError: If the payload is empty, undecodable, or invalid JSON.
        DescriptorSchemaError: If the payload does not satisfy the schema.
    """

    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise DescriptorParseError(f"{path}: descriptor is not valid UTF-8", path=path) from exc
    if not text.strip():
        raise DescriptorParseError(f"{path}: descriptor is empty", path=path)
    try:
        payload = json.loads(text)
    # JSONDecodeError, over-long integers and excessive nesting.
    except (ValueError, RecursionError) as exc:
        raise DescriptorParseError(f"{path}: failed to parse descriptor JSON: {exc}", path=path) from exc
    try:
        return ReferenceDescriptor.model_validate(payload)
    except ValidationError as exc:
        problems = "; ".join(_describe_problem(error) for error in exc.errors())
        raise DescriptorSchemaError(f"{path}: invalid descriptor: {problems}", path=path) from exc


def _describe_problem(error: ErrorDetails) -> str:
    location = ".".join(str(part) for part in error["loc"]) or "<root>"
    return f"{location}: {error['msg']}"


__all__ = [
    "DESCRIPTOR_FILENAME",
    "ReferenceAsset",
    "ReferenceDescriptor",
    "load_reference_asset",
]
