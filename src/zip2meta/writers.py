"""Writers printing archive metadata as JSON lines."""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Callable
from typing import TextIO

from .effect import Effect, fmap, gather
from .models import ArchiveEntryInfo, ArchiveInfo

logger = logging.getLogger(__name__)

EntryWriter = Callable[[ArchiveEntryInfo], Effect[None]]
ArchiveWriter = Callable[[ArchiveInfo], Effect[None]]


def _write_line(stream: TextIO, line: str) -> None:
    # One write per line so concurrent writers never split a line.
    stream.write(line + "\n")
    stream.flush()


def entry_writer_new(stream: TextIO | None = None) -> EntryWriter:
    """
    Create a writer printing each entry as one line of JSON.

    Args:
        stream: The text stream to write to. Defaults to the ``sys.stdout``
            current at write time.

    Returns:
        The entry writer.

    """

    def writer(entry: ArchiveEntryInfo) -> Effect[None]:
        async def write() -> None:
            target = stream if stream is not None else sys.stdout
            await asyncio.to_thread(_write_line, target, entry.to_json())

        return write

    return writer


def archive_writer_new(entry_writer: EntryWriter) -> ArchiveWriter:
    """Create an archive writer that writes all entries concurrently."""

    def writer(archive: ArchiveInfo) -> Effect[None]:
        logger.debug("Writing %d entries of %s", len(archive.entries), archive.source_path or "<buffer>")
        return fmap(gather(entry_writer(entry) for entry in archive.entries), lambda _: None)

    return writer


archive_to_console: ArchiveWriter = archive_writer_new(entry_writer_new())
