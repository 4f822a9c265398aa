"""Join chunk files from a folder back into a single file."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, TYPE_CHECKING, List, Optional, Union

from .exceptions import FileAccessError, NoMatchingFilesError
from .naming import JoinOrder, normalize_suffix, sort_chunk_paths

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from filesplit.config import Settings

logger = logging.getLogger(__name__)

COPY_BUFFER_SIZE = 1024 * 1024


@dataclass
class JoinResult:
    """Outcome of a join operation."""
    output_path: Path
    folder: Path
    part_paths: List[Path] = field(default_factory=list)
    total_bytes: int = 0


def default_output_name(folder_name: Optional[str] = None) -> str:
    """Return ``"{folder} - unsplit"`` for *folder_name* or the current directory."""

    folder = str(folder_name or "").rstrip("/\\")
    if not folder:
        folder = Path.cwd().name
    return f"{folder} - unsplit"


class FileJoiner:
    """Concatenate every file in a folder whose name contains a suffix."""

    def __init__(
        self,
        suffix: Optional[str] = None,
        order: JoinOrder = JoinOrder.LEXICAL,
        exclude_output: bool = True,
        buffer_size: int = COPY_BUFFER_SIZE,
    ):
        """
        Initialize the joiner.

        Args:
            suffix: Substring a file name must contain to be joined
            order: Lexical (full path) or numeric (chunk index) ordering
            exclude_output: Leave the output file out of the join set
            buffer_size: Bytes copied per read
        """
        self.suffix = normalize_suffix(suffix)
        self.order = JoinOrder(order)
        self.exclude_output = exclude_output
        self.buffer_size = buffer_size

    def collect(self, folder: Path, output_path: Optional[Path] = None) -> List[Path]:
        """Return the regular files in *folder* matching the suffix, sorted."""
        matches = [
            entry
            for entry in folder.iterdir()
            if entry.is_file() and self.suffix in entry.name
        ]

        if output_path is not None and self.exclude_output:
            target = output_path.resolve()
            kept = [entry for entry in matches if entry.resolve() != target]
            if len(kept) != len(matches):
                logger.warning(f"Output file {output_path} matches the suffix; excluded from the join")
            matches = kept

        ordered = sort_chunk_paths(matches, self.suffix, self.order)
        if self.order is JoinOrder.LEXICAL:
            numeric = sort_chunk_paths(matches, self.suffix, JoinOrder.NUMERIC)
            if numeric != ordered:
                logger.warning(
                    "Lexical order of %d parts differs from their numeric order; "
                    "the joined file may be out of sequence",
                    len(ordered),
                )
        return ordered

    def process(
        self,
        folder: Optional[Union[str, Path]],
        output_path: Union[str, Path],
    ) -> JoinResult:
        """
        Join the matching files in *folder* into *output_path*.

        The output file is opened (and truncated) before the folder is checked.
        A failure part-way through leaves a partially written output file.

        Args:
            folder: Folder to scan; empty means the current directory
            output_path: File the parts are written to

        Returns:
            JoinResult listing the parts in the order they were written
        """
        folder_path = Path(folder) if folder else Path.cwd()
        output_path = Path(output_path)

        try:
            out = output_path.open("wb")
        except OSError as exc:
            raise FileAccessError(f"Failed to create or open file {output_path}.") from exc

        with out:
            if not folder_path.is_dir():
                raise FileAccessError(f"Folder {folder_path} does not exist.")

            part_paths = self.collect(folder_path, output_path)
            if not part_paths:
                raise NoMatchingFilesError(
                    f"No files found with suffix {self.suffix} in folder {folder_path}."
                )

            result = JoinResult(output_path=output_path, folder=folder_path)
            for part_path in part_paths:
                result.total_bytes += self._append(part_path, out)
                result.part_paths.append(part_path)

        logger.info(f"merged into {output_path} (parts: {len(result.part_paths)})")
        return result

    def _append(self, part_path: Path, out: IO[bytes]) -> int:
        """Copy *part_path* onto the end of *out* and return the bytes copied."""
        try:
            part = part_path.open("rb")
        except OSError as exc:
            raise FileAccessError(f"Failed to open file {part_path}.") from exc

        copied = 0
        with part:
            while True:
                chunk = part.read(self.buffer_size)
                if not chunk:
                    break
                out.write(chunk)
                copied += len(chunk)
        logger.debug(f"read {part_path} ({copied} bytes)")
        return copied


def unsplit_files(
    folder_name: Optional[Union[str, Path]] = None,
    suffix: Optional[str] = None,
    output_filename: Optional[Union[str, Path]] = None,
    order: Optional[JoinOrder] = None,
    settings: Optional["Settings"] = None,
) -> JoinResult:
    """Join the parts in *folder_name* whose names contain *suffix*.

    ``output_filename`` defaults to ``"{folder_name} - unsplit"``.
    """

    options = {}
    if settings is not None:
        suffix = suffix or settings.default_suffix
        order = order or settings.join_order
        options = dict(
            exclude_output=settings.exclude_output_from_join,
            buffer_size=settings.copy_buffer_size,
        )
    joiner = FileJoiner(suffix=suffix, order=order or JoinOrder.LEXICAL, **options)
    output_filename = output_filename or default_output_name(
        str(folder_name) if folder_name else None
    )
    return joiner.process(folder_name, output_filename)
