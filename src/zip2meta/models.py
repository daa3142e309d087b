"""Value objects describing an archive and its entries."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import IntEnum


class CompressionMethod(IntEnum):
    """The method used to store a zip entry."""

    UNSPECIFIED = 0
    STORE = 1
    DEFLATE = 2


@dataclass(frozen=True)
class ArchiveEntryInfo:
    """Metadata of a single entry in an archive."""

    name: str
    comment: str
    modified_epoch_seconds: int
    # Sizes are not read from the central directory.
    size: int
    method: CompressionMethod
    is_directory: bool

    def to_dict(self) -> dict[str, object]:
        """Return the entry as a JSON-ready mapping in field order."""
        return {
            "name": self.name,
            "comment": self.comment,
            "modifiedEpochSeconds": self.modified_epoch_seconds,
            "size": self.size,
            "method": int(self.method),
            "isDirectory": self.is_directory,
        }

    def to_json(self) -> str:
        """Serialize the entry to a single line of compact JSON."""
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))


@dataclass(frozen=True)
class ArchiveInfo:
    """Metadata of an archive, entries in central-directory order."""

    comment: str
    source_path: str
    entries: tuple[ArchiveEntryInfo, ...]
