"""Custom exceptions for the split and join services."""

from __future__ import annotations


class FileSplitError(RuntimeError):
    """Base exception for split/join errors."""


class UsageError(FileSplitError):
    """Raised when command line arguments are missing or conflicting."""


class InvalidSizeError(FileSplitError):
    """Raised when the requested chunk size is rejected."""


class FileAccessError(FileSplitError):
    """Raised when a file or folder cannot be opened, read, written or created."""


class NoMatchingFilesError(FileAccessError):
    """Raised when a join finds no files carrying the suffix."""
