"""Reads archive metadata through the ``zipfile`` module."""

from __future__ import annotations

import asyncio
import io
import logging
import zipfile
from datetime import datetime, timezone

from .effect import Effect
from .exceptions import InvalidArchiveError
from .models import ArchiveEntryInfo, ArchiveInfo, CompressionMethod

logger = logging.getLogger(__name__)

ZIP_FILENAME_UTF8_FLAG = 0x800
MSDOS_DIRECTORY_ATTR = 0x10

_COMPRESSION_METHODS: dict[int, CompressionMethod] = {
    zipfile.ZIP_STORED: CompressionMethod.STORE,
    zipfile.ZIP_DEFLATED: CompressionMethod.DEFLATE,
}


def compression_to_method(compress_type: int) -> CompressionMethod:
    """Translate a ``zipfile`` compression code into a CompressionMethod."""
    return _COMPRESSION_METHODS.get(compress_type, CompressionMethod.UNSPECIFIED)


def decode_filename(info: zipfile.ZipInfo) -> str:
    """
    Return the filename of a zip entry.

    ``zipfile`` decodes names without the UTF-8 flag as cp437. Such names are
    re-encoded to their original bytes and decoded as UTF-8, then GBK, which
    covers archives written by tools that ignore the flag.
    """
    filename = info.filename
    if info.flag_bits & ZIP_FILENAME_UTF8_FLAG:
        return filename
    try:
        filename_bytes = filename.encode("cp437")
    except UnicodeEncodeError:
        return filename
    try:
        return filename_bytes.decode("utf-8")
    except UnicodeDecodeError:
        pass
    try:
        return filename_bytes.decode("gbk")
    except UnicodeDecodeError:
        return filename


def decode_comment(comment: bytes) -> str:
    """Decode a raw zip comment, empty if there is none."""
    if not comment:
        return ""
    try:
        return comment.decode("utf-8")
    except UnicodeDecodeError:
        try:
            return comment.decode("gbk")
        except UnicodeDecodeError:
            return comment.decode("cp437")


def modified_epoch_seconds(info: zipfile.ZipInfo) -> int:
    """Return the DOS timestamp of an entry, read as UTC, in whole seconds."""
    try:
        modified_at = datetime(*info.date_time, tzinfo=timezone.utc)
    except ValueError:
        logger.warning("Invalid timestamp %r for entry %s", info.date_time, info.filename)
        return 0
    return int(modified_at.timestamp())


def entry_info(info: zipfile.ZipInfo) -> ArchiveEntryInfo:
    """Build the metadata of one entry from its central-directory record."""
    return ArchiveEntryInfo(
        name=decode_filename(info),
        comment=decode_comment(info.comment),
        modified_epoch_seconds=modified_epoch_seconds(info),
        size=0,
        method=compression_to_method(info.compress_type),
        is_directory=info.is_dir() or bool(info.external_attr & MSDOS_DIRECTORY_ATTR),
    )


def read_archive_info(buffer: bytes | memoryview, source_path: str = "") -> ArchiveInfo:
    """
    Read the metadata of a zip archive held in memory.

    Args:
        buffer: The archive bytes.
        source_path: Where the bytes came from, if known.

    Returns:
        The archive metadata, entries in central-directory order.

    Raises:
        InvalidArchiveError: If the buffer is not a readable zip archive.

    """
    try:
        with zipfile.ZipFile(io.BytesIO(buffer), "r") as zip_file:
            entries = tuple(entry_info(info) for info in zip_file.infolist())
            comment = decode_comment(zip_file.comment)
    except (zipfile.BadZipFile, UnicodeDecodeError) as e:
        raise InvalidArchiveError(f"Failed to read zip archive {source_path or '<buffer>'}: {e}") from e

    logger.debug("Parsed %d entries from %s", len(entries), source_path or "<buffer>")
    return ArchiveInfo(comment=comment, source_path=source_path, entries=entries)


def parse_archive_metadata(buffer: bytes | memoryview, source_path: str = "") -> Effect[ArchiveInfo]:
    """Return an effect reading archive metadata in a worker thread."""

    async def parse() -> ArchiveInfo:
        return await asyncio.to_thread(read_archive_info, buffer, source_path)

    return parse
