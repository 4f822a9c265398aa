"""Split a file into fixed-size sequential chunk files."""
from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Union

from .exceptions import FileAccessError, InvalidSizeError
from .naming import chunk_count, chunk_filename, normalize_extension, normalize_suffix

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from filesplit.config import Settings

logger = logging.getLogger(__name__)

MIN_CHUNK_SIZE = 1000
OUTPUT_FOLDER = "output"
OUTPUT_FOLDER_THRESHOLD = 10


@dataclass
class SplitResult:
    """Outcome of a split operation."""
    source: Path
    output_dir: Path
    chunk_paths: List[Path] = field(default_factory=list)
    total_bytes: int = 0

    @property
    def num_chunks(self) -> int:
        return len(self.chunk_paths)


def validate_byte_limit(size: int, minimum: int = MIN_CHUNK_SIZE) -> int:
    """Reject chunk sizes below one byte or below *minimum*."""

    if size < 1:
        raise InvalidSizeError(
            f"Size cannot be less than 1 byte. Given size was {size} byte(s)."
        )
    if size < minimum:
        raise InvalidSizeError(
            f"Splitting a file into sizes less than {minimum:,} bytes is impractical. "
            "The file was not split."
        )
    return size


class FileSplitter:
    """Split a file into ``{base}{suffix}{index}{extension}`` chunk files."""

    def __init__(
        self,
        byte_limit: int,
        suffix: Optional[str] = None,
        extension: Optional[str] = None,
        output_folder: str = OUTPUT_FOLDER,
        folder_threshold: int = OUTPUT_FOLDER_THRESHOLD,
        index_width: int = 0,
        min_chunk_size: int = MIN_CHUNK_SIZE,
    ):
        """
        Initialize the splitter.

        Args:
            byte_limit: Maximum size of every chunk but the last
            suffix: Text placed between the base name and the index
            extension: Extension for chunk files; ``None`` means no extension
            output_folder: Sub-folder used when there are many chunks
            folder_threshold: Chunk count above which the sub-folder is used
            index_width: Zero-pad indices to this width (0 disables padding)
            min_chunk_size: Smallest accepted ``byte_limit``
        """
        self.byte_limit = validate_byte_limit(byte_limit, min_chunk_size)
        self.suffix = normalize_suffix(suffix)
        self.extension = normalize_extension(extension)
        self.output_folder = output_folder
        self.folder_threshold = folder_threshold
        self.index_width = index_width

    def process(
        self,
        source_path: Union[str, Path],
        workdir: Optional[Union[str, Path]] = None,
    ) -> SplitResult:
        """
        Split *source_path* into chunk files under *workdir*.

        Args:
            source_path: File to split
            workdir: Base directory for chunk files (default: current directory)

        Returns:
            SplitResult listing the chunk files in index order
        """
        source_path = Path(source_path)
        base_dir = Path(workdir) if workdir is not None else Path.cwd()

        if not source_path.is_file():
            raise FileAccessError(f"File {source_path} does not exist.")
        total_size = source_path.stat().st_size
        num_splits = chunk_count(total_size, self.byte_limit)

        output_dir = base_dir
        if num_splits > self.folder_threshold:
            output_dir = base_dir / self.output_folder
            try:
                output_dir.mkdir(exist_ok=True)
            except OSError as exc:
                raise FileAccessError(
                    f"Failed to create directory {self.output_folder}."
                ) from exc

        result = SplitResult(source=source_path, output_dir=output_dir, total_bytes=total_size)
        if num_splits == 0:
            logger.warning(f"{source_path} is empty; no chunk files were written")
            return result

        chunk_paths = [
            output_dir / chunk_filename(
                source_path.stem, self.suffix, index, self.extension, self.index_width
            )
            for index in range(num_splits)
        ]
        try:
            src = source_path.open("rb")
        except OSError as exc:
            raise FileAccessError(f"File {source_path} does not exist.") from exc

        with src:
            # A chunk that overwrites the source must not truncate unread bytes.
            source_key = source_path.resolve()
            if any(path.resolve() == source_key for path in chunk_paths):
                logger.debug(f"{source_path} is also a chunk name; reading it whole")
                src = io.BytesIO(src.read())

            remaining = total_size
            for chunk_path in chunk_paths:
                size = min(self.byte_limit, remaining)
                chunk = src.read(size)
                if len(chunk) != size:
                    raise FileAccessError(
                        f"File {source_path} changed while it was being split."
                    )
                self._write_chunk(chunk_path, chunk)
                result.chunk_paths.append(chunk_path)
                remaining -= size

        logger.info(f"Split {source_path} into {result.num_chunks} files in {output_dir}")
        return result

    def _write_chunk(self, chunk_path: Path, chunk: bytes) -> None:
        """Create *chunk_path* and write *chunk* to it."""
        try:
            with chunk_path.open("wb") as part:
                part.write(chunk)
        except OSError as exc:
            raise FileAccessError(f"Failed to create file {chunk_path}.") from exc
        logger.debug(f"write {chunk_path} ({len(chunk)} bytes)")


def split_file(
    filename: Union[str, Path],
    byte_limit: int,
    suffix: Optional[str] = None,
    extension: Optional[str] = None,
    workdir: Optional[Union[str, Path]] = None,
    settings: Optional["Settings"] = None,
) -> SplitResult:
    """Split *filename* into chunks of at most *byte_limit* bytes.

    Values that *settings* provides (sub-folder name and threshold, index
    padding, minimum size) replace the module defaults when given.
    """

    options = {}
    if settings is not None:
        suffix = suffix or settings.default_suffix
        options = dict(
            output_folder=settings.output_folder,
            folder_threshold=settings.output_folder_threshold,
            index_width=settings.index_width,
            min_chunk_size=settings.min_chunk_size,
        )
    splitter = FileSplitter(byte_limit, suffix=suffix, extension=extension, **options)
    return splitter.process(filename, workdir=workdir)
