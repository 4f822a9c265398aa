"""Chunk file naming and ordering helpers."""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional

DEFAULT_SUFFIX = "_part"
DEFAULT_EXTENSION = ".bin"


class JoinOrder(str, Enum):
    """How matched chunk files are ordered before joining."""

    LEXICAL = "lexical"
    NUMERIC = "numeric"


def normalize_suffix(suffix: Optional[str]) -> str:
    """Return *suffix*, or the default ``_part`` when it is empty."""

    return suffix or DEFAULT_SUFFIX


def normalize_extension(extension: Optional[str]) -> str:
    """Return *extension* with a leading dot, or ``""`` when none was given."""

    if not extension:
        return ""
    if extension.startswith("."):
        return extension
    return f".{extension}"


def chunk_count(total_size: int, byte_limit: int) -> int:
    """Number of chunks needed to hold *total_size* bytes."""

    if byte_limit < 1:
        raise ValueError(f"byte_limit must be positive, got {byte_limit}")
    return (total_size + byte_limit - 1) // byte_limit


def chunk_filename(
    base: str,
    suffix: str,
    index: int,
    extension: str = "",
    index_width: int = 0,
) -> str:
    """Build ``{base}{suffix}{index}{extension}``.

    ``index_width`` zero-pads the index so that names sort in numeric order.
    The default of ``0`` leaves the index unpadded.
    """

    return f"{base}{suffix}{str(index).zfill(index_width)}{extension}"


def chunk_index(name: str, suffix: str) -> Optional[int]:
    """Return the index following the last *suffix* in *name*, if any.

    Only occurrences of *suffix* followed by digits count, so a suffix that
    also appears in the extension (``.p`` in ``data.p3.pdf``) is skipped.
    """

    indices = re.findall(re.escape(suffix) + r"(\d+)", name)
    if not indices:
        return None
    return int(indices[-1])


def sort_chunk_paths(
    paths: Iterable[Path],
    suffix: str,
    order: JoinOrder = JoinOrder.LEXICAL,
) -> List[Path]:
    """Sort chunk paths for joining.

    Lexical order compares full paths as strings. Numeric order compares the
    parsed chunk index; names without one go last in lexical order.
    """

    if JoinOrder(order) is JoinOrder.LEXICAL:
        return sorted(paths, key=str)

    def _numeric_key(path: Path):
        index = chunk_index(path.name, suffix)
        return (index is None, index if index is not None else 0, str(path))

    return sorted(paths, key=_numeric_key)
