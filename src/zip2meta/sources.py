"""Effects that load archive bytes from the filesystem."""

from __future__ import annotations

import logging
from pathlib import Path

import aiofiles

from .effect import Effect, bind, lift

logger = logging.getLogger(__name__)


def read_file_bytes(path: str | Path) -> Effect[bytes]:
    """
    Return an effect reading the whole content of a file.

    Args:
        path: The path of the file to be read.

    Returns:
        An effect resolving to the file content. Invoking it raises
        ``OSError`` if the file is missing or unreadable.

    """

    async def read() -> bytes:
        async with aiofiles.open(path, "rb") as f:
            content = await f.read()
        logger.debug("Read %d bytes from %s", len(content), path)
        return content

    return read


async def bytes_to_buffer(raw: bytes) -> memoryview:
    """Expose raw bytes as a zero-copy binary buffer."""
    return memoryview(raw)


def filename_to_buffer(path: str | Path) -> Effect[memoryview]:
    """Return an effect resolving to the content of a file as a buffer."""
    return bind(read_file_bytes(path), lift(bytes_to_buffer))
