"""Composes the read, parse and print stages into one effect."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from .effect import Effect, bind, of
from .models import ArchiveInfo
from .parser import parse_archive_metadata
from .sources import filename_to_buffer
from .writers import ArchiveWriter, archive_to_console

logger = logging.getLogger(__name__)


def read_archive(path: str | Path) -> Effect[ArchiveInfo]:
    """Return an effect reading the metadata of the archive at ``path``."""
    source_path = str(path)
    buffer = bind(of(Path(path)), filename_to_buffer)
    return bind(buffer, lambda buf: parse_archive_metadata(buf, source_path=source_path))


def describe_archive(path: str | Path, writer: ArchiveWriter = archive_to_console) -> Effect[None]:
    """
    Return an effect printing the metadata of the archive at ``path``.

    Nothing is read until the returned effect is invoked.

    Args:
        path: The archive to describe.
        writer: The writer receiving the archive metadata.

    Returns:
        The composed effect.

    """
    return bind(read_archive(path), writer)


def run(path: str | Path, writer: ArchiveWriter = archive_to_console) -> None:
    """Describe the archive at ``path`` in a new event loop."""
    logger.info("Describing archive %s", path)
    asyncio.run(describe_archive(path, writer)())
