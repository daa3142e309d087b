"""Custom exceptions for reading archive metadata."""


class ArchiveError(Exception):
    """Base class for archive-related errors."""

    pass


class InvalidArchiveError(ArchiveError):
    """Raised when a buffer cannot be read as a zip archive."""

    pass
