# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Streaming content hashes used to fingerprint descriptor files."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import BinaryIO, Final

import xxhash

from .errors import ContentHashError

HASH_SEED: Final[int] = 0
DEFAULT_CHUNK_SIZE: Final[int] = 4
EMPTY_CONTENT_HASH: Final[int] = 0


def hash_stream(stream: BinaryIO, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Return the 64-bit content hash of everything readable from ``stream``.

    The stream is consumed in ``chunk_size`` reads so memory use does not grow
    with the input. The result does not depend on ``chunk_size``.

    Args:
        stream: Binary file-like object positioned where hashing should start.
        chunk_size: Number of bytes requested per read.

    Returns:
        int: Unsigned 64-bit XXH3 digest seeded with :data:`HASH_SEED`, or
        :data:`EMPTY_CONTENT_HASH` when the stream yields no bytes.

    Raises:
        ValueError: If ``chunk_size`` is smaller than one byte.
        OSError: Propagated from ``stream.read``.
    """

    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    hasher = xxhash.xxh3_64(seed=HASH_SEED)
    consumed = 0
    for chunk in iter(lambda: stream.read(chunk_size), b""):
        hasher.update(chunk)
        consumed += len(chunk)
    if consumed == 0:
        return EMPTY_CONTENT_HASH
    return hasher.intdigest()


def hash_file(path: str | PathLike[str], *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Return the content hash of the file at ``path``.

    Args:
        path: File to hash byte-for-byte.
        chunk_size: Number of bytes requested per read.

    Returns:
        int: Content hash as computed by :func:`hash_stream`.

    Raises:
        ContentHashError: If the file cannot be opened or read.
    """

    file_path = Path(path)
    try:
        with file_path.open("rb") as handle:
            return hash_stream(handle, chunk_size=chunk_size)
    except OSError as exc:
        raise ContentHashError(f"{file_path}: failed to hash file: {exc}", path=file_path) from exc


def format_hash(value: int) -> str:
    """Return ``value`` as a zero-padded 16 digit hexadecimal string."""

    return f"{value:016x}"


__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "EMPTY_CONTENT_HASH",
    "HASH_SEED",
    "format_hash",
    "hash_file",
    "hash_stream",
]
