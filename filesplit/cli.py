"""Command line entry point: ``filesplit -split|-unsplit [options]``."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from filesplit.config import Settings, SettingsError, get_settings
from filesplit.services import (
    FileSplitError,
    JoinOrder,
    UsageError,
    split_file,
    unsplit_files,
)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

USAGE = """\
-split\t\tThe opposite of "-unsplit". Required to split files.

-unsplit\tThe opposite of "-split". Required to join files.

-filename\tRequired if splitting. Specifies the file to be split.
\t\tOptional if unsplitting. Specifies the joined file; the default is "[foldername] - unsplit".

-foldername\tUsed when unsplitting. Specifies the folder whose contents will be unsplit.
\t\tThe default is the current directory.

-size\t\tRequired if splitting. Specifies the target size (in bytes) of the parts of the file.

-suffix\t\tOptional. Specifies the suffix of each file. The default is "_part"[number]; e.g. MyFile_part1.bin

-extension\tOptional. Can be used to specify *if* the split files will have an extension, and *what* it will be.
\t\tIf the flag is present but no extension is specified, the default is ".bin".
\t\tIf unsplitting a file, this field is ALWAYS ignored.

-order\t\tOptional. "lexical" (default) or "numeric"; the order parts are joined in when unsplitting.
"""

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises :class:`UsageError` instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="filesplit", add_help=False, allow_abbrev=False)
    parser.add_argument("-split", action="store_true")
    parser.add_argument("-unsplit", action="store_true")
    parser.add_argument("-filename", default="")
    parser.add_argument("-foldername", default="")
    parser.add_argument("-size", default="")
    parser.add_argument("-suffix", default="")
    parser.add_argument("-extension", nargs="?", const="", default=None)
    parser.add_argument("-order", choices=[order.value for order in JoinOrder], default=None)
    return parser


def print_usage(message: Optional[str] = None) -> int:
    if message:
        print(message)
    print(USAGE)
    return EXIT_FAILURE


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.logging_level,
        format=settings.log_format,
        stream=sys.stdout,
    )


def _parse_size(raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise UsageError(f"Size must be a whole number of bytes, got '{raw}'.") from exc


def run_split(args: argparse.Namespace, settings: Settings) -> int:
    if not args.filename:
        return print_usage("Need to specify filename.")
    if not args.size:
        return print_usage("Need to specify size limit.")

    size = _parse_size(args.size)

    extension = args.extension
    if extension == "":
        extension = settings.default_extension

    split_file(args.filename, size, suffix=args.suffix, extension=extension, settings=settings)
    print(f"Successfully split file {args.filename}.")
    return EXIT_SUCCESS


def run_unsplit(args: argparse.Namespace, settings: Settings) -> int:
    order = JoinOrder(args.order) if args.order else None
    result = unsplit_files(
        args.foldername,
        suffix=args.suffix,
        output_filename=args.filename,
        order=order,
        settings=settings,
    )
    print(f"Successfully combined files into {result.output_path}.")
    return EXIT_SUCCESS


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the tool and return its exit code."""
    try:
        settings = get_settings()
    except SettingsError as exc:
        print(f"CRITICAL ERROR: Failed to load configuration: {exc}")
        return EXIT_FAILURE
    configure_logging(settings)

    arguments: List[str] = list(sys.argv[1:] if argv is None else argv)
    try:
        args = build_parser().parse_args(arguments)
    except UsageError as exc:
        return print_usage(str(exc))

    if args.split == args.unsplit:
        return print_usage("Need to use exactly one usage argument.")

    try:
        if args.split:
            return run_split(args, settings)
        return run_unsplit(args, settings)
    except UsageError as exc:
        return print_usage(str(exc))
    except FileSplitError as exc:
        logger.debug("Operation failed", exc_info=True)
        print(exc)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
