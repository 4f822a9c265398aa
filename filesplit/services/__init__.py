"""Service layer exports."""
from .exceptions import (
    FileAccessError,
    FileSplitError,
    InvalidSizeError,
    NoMatchingFilesError,
    UsageError,
)
from .joiner import FileJoiner, JoinResult, default_output_name, unsplit_files
from .naming import (
    DEFAULT_EXTENSION,
    DEFAULT_SUFFIX,
    JoinOrder,
    chunk_count,
    chunk_filename,
    chunk_index,
    normalize_extension,
    normalize_suffix,
    sort_chunk_paths,
)
from .splitter import FileSplitter, SplitResult, split_file, validate_byte_limit

__all__ = [
    # Errors
    "FileAccessError",
    "FileSplitError",
    "InvalidSizeError",
    "NoMatchingFilesError",
    "UsageError",
    # Naming
    "DEFAULT_EXTENSION",
    "DEFAULT_SUFFIX",
    "JoinOrder",
    "chunk_count",
    "chunk_filename",
    "chunk_index",
    "normalize_extension",
    "normalize_suffix",
    "sort_chunk_paths",
    # Splitter
    "FileSplitter",
    "SplitResult",
    "split_file",
    "validate_byte_limit",
    # Joiner
    "FileJoiner",
    "JoinResult",
    "default_output_name",
    "unsplit_files",
]
