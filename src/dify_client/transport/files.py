# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Chunked file reading for multipart uploads.

The whole file is accumulated in memory before it is attached to the
request. No upper bound is enforced here; large files are limited only by
available memory and the server's own body-size limits.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Union

from ..exceptions import FileUnavailableError

logger = logging.getLogger(__name__)

FILE_CHUNK_SIZE = 1024
"""Bytes read per chunk."""

FilePath = Union[str, "os.PathLike[str]"]


async def read_file_chunked(file_path: FilePath, chunk_size: int = FILE_CHUNK_SIZE) -> bytes:
    """
    Read a local file into memory in fixed-size chunks.

    Each blocking read runs in a worker thread, so only the calling task
    is suspended. The file handle is closed on every exit path.

    Args:
        file_path: Path of the file to read
        chunk_size: Bytes per read

    Returns:
        The complete file contents.

    Raises:
        FileUnavailableError: If the file cannot be opened or a read fails.
    """
    path = os.fspath(file_path)
    try:
        handle = await asyncio.to_thread(open, path, "rb")
    except OSError as e:
        raise FileUnavailableError(
            f"Cannot open {path}: {type(e).__name__}: {e}", file_path=path
        ) from e

    content = bytearray()
    with handle:
        while True:
            try:
                chunk = await asyncio.to_thread(handle.read, chunk_size)
            except OSError as e:
                raise FileUnavailableError(
                    f"Read failed for {path} after {len(content)} bytes: "
                    f"{type(e).__name__}: {e}",
                    file_path=path,
                ) from e
            if not chunk:
                break
            content.extend(chunk)

    logger.debug(f"Read {len(content)} bytes from {path}")
    return bytes(content)


__all__ = ["FILE_CHUNK_SIZE", "FilePath", "read_file_chunked"]
