"""
zip2meta package.

Reads the central-directory metadata of zip archives and prints it as
JSON lines, built from composable deferred effects.
"""

from .effect import Effect, bind, fmap, gather, lift, of
from .exceptions import ArchiveError, InvalidArchiveError
from .models import ArchiveEntryInfo, ArchiveInfo, CompressionMethod
from .parser import parse_archive_metadata
from .pipeline import describe_archive, read_archive
from .sources import bytes_to_buffer, filename_to_buffer, read_file_bytes
from .writers import archive_to_console, archive_writer_new, entry_writer_new

__all__ = [
    "ArchiveEntryInfo",
    "ArchiveError",
    "ArchiveInfo",
    "CompressionMethod",
    "Effect",
    "InvalidArchiveError",
    "archive_to_console",
    "archive_writer_new",
    "bind",
    "bytes_to_buffer",
    "describe_archive",
    "entry_writer_new",
    "filename_to_buffer",
    "fmap",
    "gather",
    "lift",
    "of",
    "parse_archive_metadata",
    "read_archive",
    "read_file_bytes",
]
